# falcorules

Building blocks for working with runtime security rules. A rules file is a
YAML document that holds lists, macros and rules. Each rule has a filter
condition, an output format, a priority and optional exceptions. This
package provides the records that describe those items. It also reports
loading problems together with where they occur, counts matched events,
and reads YAML configuration documents.

## Installation

```
pip install falcorules
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "falcorules[test]"
pytest
```

## Modules

- `falcorules.rule`: `FalcoRule`, the `Priority` enumeration (from
  `EMERGENCY` = 0 to `DEBUG` = 7), `parse_priority` (case-insensitive; it
  also accepts `info` and raises `ValueError` for unknown names),
  `format_priority` (with a short form that gives `Info`), and
  `engine_version`.
- `falcorules.indexed.IndexedVector`: a sequence whose entries can be
  looked up by position or by a unique name with `at()`. If `insert()` is
  given a name that already exists, it replaces that entry and keeps its
  position.
- `falcorules.context`: `Context`, a chain of `Location`s (each an
  `ItemType`, an item name and a `Position`). It describes where an item
  sits in rules content. `child()`, `for_value()` and `for_condition()`
  build nested contexts. `snippet()` returns the line at the position with
  a `^` marker. `as_string()` and `as_json()` describe the chain.
- `falcorules.load_result`: the `ErrorCode` and `WarningCode` enumerations,
  `LoadError`, `LoadWarning`, the `RuleLoadError` exception, and
  `LoadResult`. `LoadResult` collects errors and warnings. It renders them
  as a summary, as a verbose report with snippets, or as JSON.
- `falcorules.infos`: records for the items of a rules file (`ListInfo`,
  `MacroInfo`, `RuleInfo`, `RuleExceptionInfo`, `ExceptionEntry`,
  `EngineVersionInfo`, `PluginVersionInfo`, `PluginRequirement`). It also
  holds the event `Source` record and the `Configuration` for one load,
  which owns a `LoadResult` in `res`. It provides `is_operator_defined`,
  `is_operator_for_list` and `is_valid_version`.
- `falcorules.stats.StatsManager`: counts matched events per rule and per
  priority from many threads. `format()` renders a text report.
- `falcorules.outputs`: `OutputConfig`, `Message` and `AbstractOutput`, the
  base class for output channels.
- `falcorules.sync`: a counting `Semaphore`, and an `AtomicSignalHandler`
  that runs a handling action exactly once per triggered signal across
  threads.
- `falcorules.yaml_helper`: `YamlHelper` reads and edits a YAML document
  using dotted and indexed keys such as `outputs[0].options.path`.
  `yaml_to_json` converts a composed YAML node to plain Python data.

## Example

```python
from falcorules.context import Context, ItemType, Position
from falcorules.load_result import ErrorCode, LoadResult

content = "- rule: r\n  priority: bogus\n"
ctx = Context("rules.yaml").child(Position(pos=22, line=1, column=12),
                                  ItemType.RULE_PRIORITY)

result = LoadResult("rules.yaml")
result.add_error(ErrorCode.LOAD_ERR_YAML_VALIDATE, "Invalid priority", ctx)
print(result.as_string(True, {"rules.yaml": content}))
```

```python
from falcorules.yaml_helper import YamlHelper

config = YamlHelper()
config.load_from_string("outputs:\n  - name: file\n    options: {path: /tmp/x}\n")
print(config.get_scalar("outputs[0].options.path", ""))
config.set_scalar("json_output", True)
print(config.is_defined("json_output"))
```

## What this package does not do

The package does not read a rules file into these records. It does not
merge `append` or `enabled` overrides, expand lists and macros into
conditions, or compile conditions into filters. There is no rule
evaluation against events, no concrete output channel, and no
command-line program. Event sources, filter factories and rulesets are
supplied by the caller through `Source`.