"""Rule records, load results with source locations, statistics and YAML configuration access for runtime security rules."""

__version__ = "0.1.0"