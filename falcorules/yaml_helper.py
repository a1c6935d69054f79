"""Reading and editing YAML documents addressed by dotted keys."""

from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

import yaml
from yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

_NULL_TAG = "tag:yaml.org,2002:null"
_STR_TAG = "tag:yaml.org,2002:str"
_INT_TAG = "tag:yaml.org,2002:int"
_FLOAT_TAG = "tag:yaml.org,2002:float"
_BOOL_TAG = "tag:yaml.org,2002:bool"
_MAP_TAG = "tag:yaml.org,2002:map"
_SEQ_TAG = "tag:yaml.org,2002:seq"

_TRUE_WORDS = frozenset("y Y yes Yes YES true True TRUE on On ON".split())
_FALSE_WORDS = frozenset("n N no No NO false False FALSE off Off OFF".split())
_INT_RE = re.compile(r"[-+]?\d+")
_FLOAT_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_INF_WORDS = frozenset(".inf .Inf .INF".split())
_NAN_WORDS = frozenset(".nan .NaN .NAN".split())
_STOI_RE = re.compile(r"\s*[-+]?\d+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

Step = Union[str, int]


def _is_null(node: Optional[Node]) -> bool:
    return isinstance(node, ScalarNode) and node.tag == _NULL_TAG


def _is_scalar(node: Optional[Node]) -> bool:
    return isinstance(node, ScalarNode) and node.tag != _NULL_TAG


def _decode_int(text: str) -> Optional[int]:
    return int(text) if _INT_RE.fullmatch(text) else None


def _decode_float(text: str) -> Optional[float]:
    sign = -1.0 if text.startswith("-") else 1.0
    bare = text[1:] if text[:1] in "+-" else text
    if bare in _INF_WORDS:
        return sign * math.inf
    if text in _NAN_WORDS:
        return math.nan
    return float(text) if _FLOAT_RE.fullmatch(text) else None


def _decode_bool(text: str) -> Optional[bool]:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    return None


def yaml_to_json(node: Optional[Node]) -> Any:
    """Convert a composed YAML node into JSON-compatible Python data.

    Scalars become an int (if they fit 32 bits), a float, a bool or a
    string, tried in that order; null nodes become None.
    """
    if isinstance(node, MappingNode):
        return {key.value: yaml_to_json(value) for key, value in node.value}
    if isinstance(node, SequenceNode):
        return [yaml_to_json(item) for item in node.value]
    if _is_scalar(node):
        text = node.value
        as_int = _decode_int(text)
        if as_int is not None and _INT32_MIN <= as_int <= _INT32_MAX:
            return as_int
        as_float = _decode_float(text)
        if as_float is not None:
            return as_float
        as_bool = _decode_bool(text)
        if as_bool is not None:
            return as_bool
        return text
    return None


def _convert(node: Node, like: Any) -> Any:
    """Convert ``node`` to the type of ``like``."""
    if like is None or isinstance(like, (dict, list)):
        return yaml_to_json(node)
    if not _is_scalar(node):
        raise ValueError("bad conversion: node is not a scalar")
    text = node.value
    if isinstance(like, bool):
        value: Any = _decode_bool(text)
    elif isinstance(like, int):
        value = _decode_int(text)
    elif isinstance(like, float):
        value = _decode_float(text)
    elif isinstance(like, str):
        value = text
    else:
        raise TypeError(f"unsupported value type {type(like).__name__}")
    if value is None:
        raise ValueError(f"bad conversion of {text!r} to {type(like).__name__}")
    return value


def _scalar_node(value: Any) -> ScalarNode:
    if value is None:
        return ScalarNode(_NULL_TAG, "null")
    if isinstance(value, bool):
        return ScalarNode(_BOOL_TAG, "true" if value else "false")
    if isinstance(value, int):
        return ScalarNode(_INT_TAG, str(value))
    if isinstance(value, float):
        return ScalarNode(_FLOAT_TAG, repr(value))
    return ScalarNode(_STR_TAG, str(value))


def _parse_key(key: str) -> list[Step]:
    """Split a key such as ``a.b[2].c`` into mapping keys and indexes."""
    steps: list[Step] = []
    node_key = ""
    size = len(key)
    i = 0
    while i < size:
        c = key[i]
        should_shift = c in ".[" or i == size - 1
        if c not in ".[":
            if i > 0 and not node_key and key[i - 1] != ".":
                raise ValueError(f"Parsing error: expected '.' character at pos {i - 1}")
            node_key += c
        if should_shift:
            if not node_key:
                raise ValueError(f"Parsing error: unexpected character at pos {i}")
            steps.append(node_key)
            node_key = ""
        if c == "[":
            close = key.find("]", i)
            if close == -1:
                raise ValueError(f"Parsing error: missing ']' after pos {i}")
            match = _STOI_RE.match(key, i + 1, close)
            if match is None:
                raise ValueError(f"Parsing error: invalid index at pos {i + 1}")
            steps.append(int(match.group()))
            i = close
            if i < size - 1 and key[i + 1] == ".":
                i += 1
        i += 1
    return steps


def _child(node: Optional[Node], step: Step) -> Optional[Node]:
    if isinstance(step, str):
        if isinstance(node, MappingNode):
            for key_node, value_node in node.value:
                if _is_scalar(key_node) and key_node.value == step:
                    return value_node
        return None
    if isinstance(node, SequenceNode) and 0 <= step < len(node.value):
        return node.value[step]
    return None


def _assign(node: Optional[Node], steps: list[Step], value: Any) -> Node:
    """Return ``node`` with ``value`` stored at the path ``steps``."""
    if not steps:
        return _scalar_node(value)
    step, rest = steps[0], steps[1:]
    if isinstance(step, str):
        if node is None or _is_null(node):
            node = MappingNode(_MAP_TAG, [])
        if not isinstance(node, MappingNode):
            raise ValueError(f"cannot look up key '{step}' in a non-mapping node")
        for pos, (key_node, value_node) in enumerate(node.value):
            if _is_scalar(key_node) and key_node.value == step:
                node.value[pos] = (key_node, _assign(value_node, rest, value))
                return node
        node.value.append((ScalarNode(_STR_TAG, step), _assign(None, rest, value)))
        return node
    if node is None or _is_null(node):
        node = SequenceNode(_SEQ_TAG, [])
    if not isinstance(node, SequenceNode):
        raise ValueError(f"cannot index [{step}] in a non-sequence node")
    if 0 <= step < len(node.value):
        node.value[step] = _assign(node.value[step], rest, value)
    elif step == len(node.value):
        node.value.append(_assign(None, rest, value))
    else:
        raise ValueError(f"index [{step}] is out of range")
    return node


class YamlHelper:
    """Holds one YAML document and reads or edits values by key.

    Keys navigate nested nodes: ``name``, ``list[3].sub``, ``a.b.c``.
    """

    def __init__(self) -> None:
        self._root: Optional[Node] = None

    def load_from_string(self, text: str) -> None:
        """Load the document held in ``text``."""
        self._root = yaml.compose(text, Loader=yaml.SafeLoader)

    def load_from_file(self, path: str) -> None:
        """Load the document stored at ``path``."""
        with open(path, encoding="utf-8") as handle:
            self._root = yaml.compose(handle, Loader=yaml.SafeLoader)

    def clear(self) -> None:
        """Forget the loaded document."""
        self._root = None

    def _node(self, key: str) -> Optional[Node]:
        try:
            steps = _parse_key(key)
        except ValueError as err:
            raise ValueError(f'Config error at key "{key}": {err}') from None
        node = self._root
        for step in steps:
            node = _child(node, step)
            if node is None:
                return None
        return node

    def get_scalar(self, key: str, default: Any) -> Any:
        """Return the value at ``key`` converted to the type of ``default``.

        Returns ``default`` if the key is not defined; raises ValueError if
        the value cannot be converted.
        """
        node = self._node(key)
        if node is None:
            return default
        return _convert(node, default)

    def set_scalar(self, key: str, value: Any) -> None:
        """Store ``value`` at ``key``, creating mappings along the way."""
        try:
            steps = _parse_key(key)
            self._root = _assign(self._root, steps, value)
        except ValueError as err:
            raise ValueError(f'Config error at key "{key}": {err}') from None

    def get_sequence(self, key: str) -> list[Any]:
        """Return the items of the sequence at ``key``.

        A scalar gives a one-item list; a missing key or other node an
        empty one.
        """
        node = self._node(key)
        if isinstance(node, SequenceNode):
            return [yaml_to_json(item) for item in node.value]
        if _is_scalar(node):
            return [yaml_to_json(node)]
        return []

    def is_defined(self, key: str) -> bool:
        """True if ``key`` names a node of the document."""
        return self._node(key) is not None