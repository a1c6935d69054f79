"""Errors, warnings and the overall result of loading rules content."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping

from falcorules.context import Context


class ErrorCode(enum.Enum):
    """Kinds of errors that stop rules from loading."""

    LOAD_ERR_FILE_READ = "LOAD_ERR_FILE_READ"
    LOAD_ERR_YAML_PARSE = "LOAD_ERR_YAML_PARSE"
    LOAD_ERR_YAML_VALIDATE = "LOAD_ERR_YAML_VALIDATE"
    LOAD_ERR_COMPILE_CONDITION = "LOAD_ERR_COMPILE_CONDITION"
    LOAD_ERR_COMPILE_OUTPUT = "LOAD_ERR_COMPILE_OUTPUT"
    LOAD_ERR_VALIDATE = "LOAD_ERR_VALIDATE"

    @property
    def brief(self) -> str:
        """Short description of the error kind."""
        return _ERROR_TEXT[self][0]

    @property
    def description(self) -> str:
        """Longer description of the error kind."""
        return _ERROR_TEXT[self][1]


_ERROR_TEXT = {
    ErrorCode.LOAD_ERR_FILE_READ: (
        "Could not read file",
        "The rules content could not be read.",
    ),
    ErrorCode.LOAD_ERR_YAML_PARSE: (
        "Invalid yaml",
        "The rules content is not valid YAML.",
    ),
    ErrorCode.LOAD_ERR_YAML_VALIDATE: (
        "Invalid rules content",
        "The rules content is valid YAML but does not have the expected structure.",
    ),
    ErrorCode.LOAD_ERR_COMPILE_CONDITION: (
        "Invalid condition",
        "A rule or macro condition could not be parsed or compiled.",
    ),
    ErrorCode.LOAD_ERR_COMPILE_OUTPUT: (
        "Invalid output format",
        "A rule output could not be used as a format string.",
    ),
    ErrorCode.LOAD_ERR_VALIDATE: (
        "Error validating rule/macro/list/exception objects",
        "The rules content refers to objects or properties that are not valid.",
    ),
}


class WarningCode(enum.Enum):
    """Kinds of problems that do not stop rules from loading."""

    LOAD_UNKNOWN_SOURCE = "LOAD_UNKNOWN_SOURCE"
    LOAD_NO_EVTTYPE = "LOAD_NO_EVTTYPE"
    LOAD_UNUSED_MACRO = "LOAD_UNUSED_MACRO"
    LOAD_UNUSED_LIST = "LOAD_UNUSED_LIST"
    LOAD_UNKNOWN_ITEM = "LOAD_UNKNOWN_ITEM"
    LOAD_UNKNOWN_FIELD = "LOAD_UNKNOWN_FIELD"

    @property
    def brief(self) -> str:
        """Short description of the warning kind."""
        return _WARNING_TEXT[self][0]

    @property
    def description(self) -> str:
        """Longer description of the warning kind."""
        return _WARNING_TEXT[self][1]


_WARNING_TEXT = {
    WarningCode.LOAD_UNKNOWN_SOURCE: (
        "Unknown event source",
        "A rule refers to an event source that is not loaded; it was skipped.",
    ),
    WarningCode.LOAD_NO_EVTTYPE: (
        "Condition has no event-type restriction",
        "A rule matches too many event types, which has a performance cost.",
    ),
    WarningCode.LOAD_UNUSED_MACRO: (
        "Unused macro",
        "A macro is not referred to by any rule or macro.",
    ),
    WarningCode.LOAD_UNUSED_LIST: (
        "Unused list",
        "A list is not referred to by any rule, macro or list.",
    ),
    WarningCode.LOAD_UNKNOWN_ITEM: (
        "Unknown rules file item",
        "A top-level item of the rules content is not a known kind; it was ignored.",
    ),
    WarningCode.LOAD_UNKNOWN_FIELD: (
        "Unknown field in condition",
        "A rule condition uses a field that does not exist; the rule was skipped.",
    ),
}


@dataclass
class LoadError:
    """An error found while loading, with where it was found."""

    code: ErrorCode
    msg: str
    ctx: Context


@dataclass
class LoadWarning:
    """A warning found while loading, with where it was found."""

    code: WarningCode
    msg: str
    ctx: Context


class RuleLoadError(Exception):
    """Raised when rules content cannot be loaded."""

    def __init__(self, code: ErrorCode, msg: str, ctx: Context) -> None:
        super().__init__(f"{code.value}: {msg}")
        self.code = code
        self.msg = msg
        self.ctx = ctx


@dataclass
class LoadResult:
    """Collects the errors and warnings of loading one rules content."""

    name: str
    success: bool = True
    errors: list[LoadError] = field(default_factory=list)
    warnings: list[LoadWarning] = field(default_factory=list)

    def successful(self) -> bool:
        """True if no error was recorded."""
        return self.success

    def has_warnings(self) -> bool:
        """True if at least one warning was recorded."""
        return bool(self.warnings)

    def add_error(self, code: ErrorCode, msg: str, ctx: Context) -> None:
        """Record an error; the result is then unsuccessful."""
        self.success = False
        self.errors.append(LoadError(code, msg, ctx))

    def add_warning(self, code: WarningCode, msg: str, ctx: Context) -> None:
        """Record a warning."""
        self.warnings.append(LoadWarning(code, msg, ctx))

    def _header(self) -> str:
        text = f"{self.name}: " if self.name else ""
        if self.success:
            text += "Ok"
            if self.warnings:
                text += ", with warnings"
        else:
            text += "Invalid"
        return text

    def _summary(self) -> str:
        text = self._header()
        if self.errors:
            items = " ".join(f"{e.code.value} ({e.code.brief})" for e in self.errors)
            text += f"\n {len(self.errors)} errors: [{items}]"
        if self.warnings:
            items = " ".join(
                f"{w.code.value} ({w.code.brief})" for w in self.warnings
            )
            text += f"\n {len(self.warnings)} warnings: [{items}]"
        return text

    def _verbose(self, contents: Mapping[str, str]) -> str:
        parts = [self._header()]
        if self.errors:
            parts.append(f"\n{len(self.errors)} Errors:\n")
            for err in self.errors:
                parts.append(err.ctx.as_string())
                parts.append("------\n")
                parts.append(err.ctx.snippet(contents))
                parts.append("------\n")
                parts.append(f"{err.code.value} ({err.code.brief}): {err.msg}\n")
        if self.warnings:
            parts.append(f"\n{len(self.warnings)} Warnings:\n")
            for warn in self.warnings:
                parts.append(warn.ctx.as_string())
                parts.append("------\n")
                parts.append(warn.ctx.snippet(contents))
                parts.append("------\n")
                parts.append(f"{warn.code.value} ({warn.code.brief}): {warn.msg}\n")
        return "".join(parts)

    def as_string(self, verbose: bool, contents: Mapping[str, str]) -> str:
        """Describe the result, briefly or with locations and snippets."""
        return self._verbose(contents) if verbose else self._summary()

    def as_json(self, contents: Mapping[str, str]) -> dict[str, Any]:
        """Describe the result as JSON-compatible data."""

        def entry(item: LoadError | LoadWarning) -> dict[str, Any]:
            context = item.ctx.as_json()
            context["snippet"] = item.ctx.snippet(contents)
            return {
                "context": context,
                "code": item.code.value,
                "codedesc": item.code.description,
                "message": item.msg,
            }

        return {
            "name": self.name,
            "successful": self.success,
            "errors": [entry(e) for e in self.errors],
            "warnings": [entry(w) for w in self.warnings],
        }