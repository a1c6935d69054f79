import yaml
import pytest

from falcorules.context import Context, ItemType, Location, Position


def test_root_context_as_string():
    ctx = Context("rules.yaml")
    assert ctx.as_string() == "In rules content: (rules.yaml:0:0)\n"
    assert ctx.name() == "rules.yaml"


def test_child_keeps_root_name_and_adds_location():
    root = Context("rules.yaml")
    ctx = root.child(Position(5, 1, 2), ItemType.RULE, "my rule")
    assert ctx.name() == "rules.yaml"
    assert len(ctx.locations) == 2
    assert len(root.locations) == 1
    assert ctx.locations[-1] == Location(
        "rules.yaml", Position(5, 1, 2), ItemType.RULE, "my rule"
    )
    lines = ctx.as_string().splitlines()
    assert lines[0].startswith("In rules content")
    assert lines[1] == "    rule 'my rule': (rules.yaml:1:2)"


def test_for_value_uses_value_for_type():
    ctx = Context("f").for_value(Position(3, 0, 3))
    assert ctx.locations[-1].item_type is ItemType.VALUE_FOR
    assert ctx.locations[-1].item_name == ""


def test_child_accepts_yaml_mark():
    node = yaml.compose("a: 1\nb: 2\n")
    value_node = node.value[1][1]
    ctx = Context("f").child(value_node.start_mark, ItemType.LIST, "")
    pos = ctx.locations[-1].pos
    assert pos == Position(
        value_node.start_mark.index,
        value_node.start_mark.line,
        value_node.start_mark.column,
    )


def test_as_json_structure():
    ctx = Context("f").child(Position(7, 2, 4), ItemType.MACRO, "m")
    data = ctx.as_json()
    assert len(data["locations"]) == 2
    last = data["locations"][1]
    assert last["item_type"] == "macro"
    assert last["item_name"] == "m"
    assert last["position"] == {"name": "f", "line": 2, "column": 4, "offset": 7}


def test_for_condition_truncates_name_and_offsets_position():
    cond = "evt.type = open and proc.name = cat"
    parent = Context("f").child(Position(10, 3, 4), ItemType.RULE_CONDITION)
    ctx = parent.for_condition(Position(2, 1, 2), cond)
    loc = ctx.locations[-1]
    assert loc.name == '"' + cond[:17] + '..."'
    assert loc.item_type is ItemType.CONDITION_EXPRESSION
    assert loc.pos == Position(12, 4, 6)
    assert ctx.alt_content == cond


def test_for_condition_short_name_replaces_newlines():
    ctx = Context("f").for_condition(Position(0, 0, 0), "a\nb\rc")
    assert ctx.locations[-1].name == '"a b c"'


def test_snippet_marks_position_in_line():
    content = "- rule: a\n  desc: b\n"
    ctx = Context("f").child(Position(12, 1, 2), ItemType.RULE)
    assert ctx.snippet({"f": content}) == "  desc: b\n  ^\n"


def test_snippet_position_past_end():
    ctx = Context("f").child(Position(10, 1, 0), ItemType.RULE)
    assert ctx.snippet({"f": "abc\n"}) == "abc\n  ^\n"


def test_snippet_unknown_file():
    ctx = Context("missing.yaml")
    assert ctx.snippet({}) == "<No context for file + missing.yaml>\n"


def test_snippet_empty_content():
    ctx = Context("f")
    assert ctx.snippet({"f": ""}) == "<No context available>\n"


def test_snippet_long_line_is_elided_on_both_sides():
    content = "x" * 400
    ctx = Context("f").child(Position(200, 0, 200), ItemType.RULE)
    first, marker = ctx.snippet({"f": content}).splitlines()
    assert first.startswith("...")
    assert first.endswith("...")
    assert len(first) == 161
    assert marker == " " * 80 + "^"


def test_snippet_uses_condition_content():
    cond = "proc.name = cat"
    ctx = Context("f").for_condition(Position(5, 0, 5), cond)
    text = ctx.snippet({})
    first, marker = text.splitlines()
    assert first == cond
    assert marker.index("^") == 5


@pytest.mark.parametrize("item_type", list(ItemType))
def test_every_item_type_has_label(item_type):
    ctx = Context("f").child(Position(), item_type)
    assert ctx.as_json()["locations"][1]["item_type"] == item_type.label
    assert item_type.label