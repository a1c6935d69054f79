"""Locations inside rules content, used to report where problems occur."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_SNIPPET_WIDTH = 160


class ItemType(enum.IntEnum):
    """Kinds of items that can appear in rules content."""

    VALUE_FOR = 0
    EXCEPTIONS = 1
    EXCEPTION = 2
    EXCEPTION_VALUES = 3
    EXCEPTION_VALUE = 4
    RULES_CONTENT = 5
    RULES_CONTENT_ITEM = 6
    REQUIRED_ENGINE_VERSION = 7
    REQUIRED_PLUGIN_VERSIONS = 8
    REQUIRED_PLUGIN_VERSIONS_ENTRY = 9
    REQUIRED_PLUGIN_VERSIONS_ALTERNATIVE = 10
    LIST = 11
    LIST_ITEM = 12
    MACRO = 13
    MACRO_CONDITION = 14
    RULE = 15
    RULE_CONDITION = 16
    CONDITION_EXPRESSION = 17
    RULE_OUTPUT = 18
    RULE_OUTPUT_EXPRESSION = 19
    RULE_PRIORITY = 20

    @property
    def label(self) -> str:
        """Human-readable description of the item kind."""
        return _ITEM_LABELS[self]


_ITEM_LABELS = {
    ItemType.VALUE_FOR: "value for",
    ItemType.EXCEPTIONS: "exceptions",
    ItemType.EXCEPTION: "exception",
    ItemType.EXCEPTION_VALUES: "exception values",
    ItemType.EXCEPTION_VALUE: "exception value",
    ItemType.RULES_CONTENT: "rules content",
    ItemType.RULES_CONTENT_ITEM: "rules content item",
    ItemType.REQUIRED_ENGINE_VERSION: "required_engine_version",
    ItemType.REQUIRED_PLUGIN_VERSIONS: "required plugin versions",
    ItemType.REQUIRED_PLUGIN_VERSIONS_ENTRY: "required plugin versions entry",
    ItemType.REQUIRED_PLUGIN_VERSIONS_ALTERNATIVE: "required plugin versions alternative",
    ItemType.LIST: "list",
    ItemType.LIST_ITEM: "list item",
    ItemType.MACRO: "macro",
    ItemType.MACRO_CONDITION: "macro condition",
    ItemType.RULE: "rule",
    ItemType.RULE_CONDITION: "rule condition",
    ItemType.CONDITION_EXPRESSION: "condition expression",
    ItemType.RULE_OUTPUT: "rule output",
    ItemType.RULE_OUTPUT_EXPRESSION: "rule output expression",
    ItemType.RULE_PRIORITY: "rule priority",
}


@dataclass(frozen=True)
class Position:
    """Offset, line and column within some content."""

    pos: int = 0
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class Location:
    """One step in a context chain: where an item is and what it is."""

    name: str
    pos: Position
    item_type: ItemType
    item_name: str = ""


def _position_of(mark: Any) -> Position:
    """Convert a Position, a YAML mark or a YAML node into a Position."""
    if isinstance(mark, Position):
        return mark
    if hasattr(mark, "start_mark"):
        mark = mark.start_mark
    if hasattr(mark, "index"):
        offset = mark.index
    elif hasattr(mark, "idx"):
        offset = mark.idx
    else:
        offset = mark.pos
    column = mark.column if hasattr(mark, "column") else mark.col
    return Position(int(offset), int(mark.line), int(column))


class Context:
    """A chain of locations from the whole document down to one item."""

    def __init__(self, name: str) -> None:
        self._locations: tuple[Location, ...] = (
            Location(name, Position(), ItemType.RULES_CONTENT, ""),
        )
        self._alt_content = ""

    @classmethod
    def _extend(
        cls, parent: Context, location: Location, alt_content: str = ""
    ) -> Context:
        ctx = cls.__new__(cls)
        ctx._locations = parent._locations + (location,)
        ctx._alt_content = alt_content
        return ctx

    @property
    def locations(self) -> tuple[Location, ...]:
        """The locations, outermost first."""
        return self._locations

    @property
    def alt_content(self) -> str:
        """Content used for snippets instead of the named rules content."""
        return self._alt_content

    def child(self, mark: Any, item_type: ItemType, item_name: str = "") -> Context:
        """Return a context for an item nested in this one."""
        location = Location(self.name(), _position_of(mark), ItemType(item_type), item_name)
        return Context._extend(self, location)

    def for_value(self, mark: Any) -> Context:
        """Return a context pointing at a value (e.g. a YAML parse error)."""
        return self.child(mark, ItemType.VALUE_FOR, "")

    def for_condition(self, pos: Any, condition: str) -> Context:
        """Return a context pointing into a condition expression.

        ``pos`` is relative to the condition; it is added to the position of
        this context's innermost location. Snippets come from ``condition``.
        """
        if len(condition) > 20:
            name = '"' + condition[: 20 - 3] + '..."'
        else:
            name = '"' + condition + '"'
        name = name.replace("\n", " ").replace("\r", " ")
        rel = _position_of(pos)
        last = self._locations[-1].pos
        condpos = Position(
            rel.pos + last.pos, rel.line + last.line, rel.column + last.column
        )
        location = Location(name, condpos, ItemType.CONDITION_EXPRESSION, "")
        return Context._extend(self, location, alt_content=condition)

    def name(self) -> str:
        """The content name (usually a file name) of this context."""
        return self._locations[0].name

    def snippet(
        self,
        rules_contents: Mapping[str, str],
        snippet_width: int = DEFAULT_SNIPPET_WIDTH,
    ) -> str:
        """Return the line of content at this context, with a marker line."""
        loc = self._locations[-1]
        if self._alt_content:
            content = self._alt_content
        elif loc.name in rules_contents:
            content = rules_contents[loc.name]
        else:
            return f"<No context for file + {loc.name}>\n"

        if not content:
            return "<No context available>\n"

        half = snippet_width // 2
        size = len(content)

        # The position may lie past the end, e.g. after a dangling key.
        pos = loc.pos.pos
        while pos > 0 and (pos >= size or content[pos] == "\n"):
            pos -= 1

        start = pos
        while start > 0 and content[start] != "\n" and (pos - start) < half:
            start -= 1
        end = pos
        while end < size - 1 and content[end] != "\n" and (end - pos) < half:
            end += 1

        if start < size and content[start] == "\n":
            start += 1
        if end < size and content[end] == "\n":
            end -= 1

        text = content[start : end + 1] if end >= start else ""
        if not text:
            return "<No context available>\n"

        if pos - start >= half:
            text = "..." + text[3:]
        if end - pos >= half:
            text = text[: max(len(text) - 3, 0)] + "..."

        text += "\n"
        offset = pos - start
        if 0 <= offset <= len(text) - 1:
            text += " " * offset + "^\n"
        return text

    def as_string(self) -> str:
        """Describe every location, one per line."""
        lines = []
        for i, loc in enumerate(self._locations):
            prefix = "In " if i == 0 else "    "
            label = loc.item_type.label
            if loc.item_name:
                label += f" '{loc.item_name}'"
            lines.append(
                f"{prefix}{label}: ({loc.name}:{loc.pos.line}:{loc.pos.column})\n"
            )
        return "".join(lines)

    def as_json(self) -> dict[str, Any]:
        """Describe every location as JSON-compatible data."""
        return {
            "locations": [
                {
                    "item_type": loc.item_type.label,
                    "item_name": loc.item_name,
                    "position": {
                        "name": loc.name,
                        "line": loc.pos.line,
                        "column": loc.pos.column,
                        "offset": loc.pos.pos,
                    },
                }
                for loc in self._locations
            ]
        }

    def __repr__(self) -> str:
        return f"Context({list(self._locations)!r})"