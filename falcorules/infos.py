"""Records describing the items read from rules content, and event sources."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from falcorules.context import Context
from falcorules.indexed import IndexedVector
from falcorules.load_result import LoadResult
from falcorules.rule import FalcoRule, Priority

_UNARY_OPERATORS = ("exists",)
_NUMERIC_OPERATORS = ("<=", "<", ">=", ">")
_STRING_OPERATORS = (
    "==",
    "=",
    "!=",
    "glob",
    "contains",
    "icontains",
    "bcontains",
    "startswith",
    "bstartswith",
    "endswith",
)
_LIST_OPERATORS = ("intersects", "in", "pmatch")

_ALL_OPERATORS = frozenset(
    _UNARY_OPERATORS + _NUMERIC_OPERATORS + _STRING_OPERATORS + _LIST_OPERATORS
)

_VERSION_RE = re.compile(r"\s*\d+\.\d+\.\d+")


def is_operator_defined(op: str) -> bool:
    """True if ``op`` is a comparison operator of the filter language."""
    return op in _ALL_OPERATORS


def is_operator_for_list(op: str) -> bool:
    """True if ``op`` compares a field with a list of values."""
    return op in _LIST_OPERATORS


def is_valid_version(text: str) -> bool:
    """True if ``text`` starts with a ``major.minor.patch`` version."""
    return _VERSION_RE.match(text) is not None


@dataclass
class Source:
    """An event source: its ruleset and the factories that serve it.

    ``filter_factory`` must offer ``new_filtercheck(name)``, returning None
    for fields it does not know.
    """

    name: str
    ruleset: Any = None
    ruleset_factory: Any = None
    filter_factory: Any = None
    formatter_factory: Any = None
    # Filled in by the ruleset when a rule matches an event.
    rule: FalcoRule = field(default_factory=FalcoRule)

    def is_field_defined(self, field: str) -> bool:
        """True if the source's filter factory knows ``field``."""
        if self.filter_factory is None:
            return False
        return self.filter_factory.new_filtercheck(field) is not None


@dataclass
class Configuration:
    """What is needed to load one rules content."""

    content: str
    sources: IndexedVector[Source]
    name: str
    output_extra: str = ""
    default_ruleset_id: int = 0
    replace_output_container_info: bool = False
    min_priority: Priority = Priority.DEBUG
    res: LoadResult = field(init=False)

    def __post_init__(self) -> None:
        self.res = LoadResult(self.name)


@dataclass
class EngineVersionInfo:
    """A required engine version."""

    ctx: Context
    version: int = 0


@dataclass
class PluginRequirement:
    """A plugin name and the version it is required at."""

    name: str = ""
    version: str = ""


@dataclass
class PluginVersionInfo:
    """A plugin version requirement with its accepted alternatives."""

    ctx: Context = field(default_factory=lambda: Context("no-filename-given"))
    alternatives: list[PluginRequirement] = field(default_factory=list)


@dataclass
class ListInfo:
    """A list definition."""

    ctx: Context
    used: bool = False
    index: int = 0
    visibility: int = 0
    name: str = ""
    items: list[str] = field(default_factory=list)


@dataclass
class MacroInfo:
    """A macro definition; ``cond_ctx`` defaults to ``ctx``."""

    ctx: Context
    cond_ctx: Optional[Context] = None
    used: bool = False
    index: int = 0
    visibility: int = 0
    name: str = ""
    cond: str = ""
    cond_ast: Any = None

    def __post_init__(self) -> None:
        if self.cond_ctx is None:
            self.cond_ctx = self.ctx


@dataclass
class ExceptionEntry:
    """A single string or a (possibly nested) list of entries."""

    is_list: bool = False
    item: str = ""
    items: list[ExceptionEntry] = field(default_factory=list)

    def is_valid(self) -> bool:
        """True for a non-empty list or a non-empty string."""
        if self.is_list:
            return bool(self.items)
        return bool(self.item)


@dataclass
class RuleExceptionInfo:
    """One exception of a rule: fields, comparisons and values."""

    ctx: Context
    name: str = ""
    fields: ExceptionEntry = field(default_factory=ExceptionEntry)
    comps: ExceptionEntry = field(default_factory=ExceptionEntry)
    values: list[ExceptionEntry] = field(default_factory=list)


@dataclass
class RuleInfo:
    """A rule definition; the condition and output contexts default to ``ctx``."""

    ctx: Context
    cond_ctx: Optional[Context] = None
    output_ctx: Optional[Context] = None
    index: int = 0
    visibility: int = 0
    name: str = ""
    cond: str = ""
    source: str = ""
    desc: str = ""
    output: str = ""
    tags: set[str] = field(default_factory=set)
    exceptions: list[RuleExceptionInfo] = field(default_factory=list)
    priority: Priority = Priority.DEBUG
    enabled: bool = True
    warn_evttypes: bool = True
    skip_if_unknown_filter: bool = False

    def __post_init__(self) -> None:
        if self.cond_ctx is None:
            self.cond_ctx = self.ctx
        if self.output_ctx is None:
            self.output_ctx = self.ctx