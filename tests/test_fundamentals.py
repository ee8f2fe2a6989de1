import pytest

from falconast.blockly import Signature
from falconast.fundamentals import (
    Boolean,
    Color,
    Component,
    Dictionary,
    HelperDropdown,
    ListLiteral,
    Not,
    Number,
    Pair,
    Text,
    WalkAll,
)


@pytest.mark.parametrize("value, word, text", [(True, "TRUE", "true"), (False, "FALSE", "false")])
def test_boolean(value, word, text):
    expr = Boolean(value)
    block = expr.blockly()
    assert block.type == "logic_boolean"
    assert block.single_field() == word
    assert block.fields[0].name == "BOOL"
    assert str(expr) == text
    assert expr.signature() == [Signature.BOOL]


def test_not_wraps_operand():
    expr = Not(Boolean(True))
    block = expr.blockly()
    assert block.type == "logic_negate"
    assert block.values[0].name == "BOOL"
    assert block.single_value().type == "logic_boolean"
    assert str(expr) == "!" + str(Boolean(True))
    assert not expr.continuous()
    assert expr.consumable()


def test_number():
    expr = Number("42")
    block = expr.blockly()
    assert block.type == "math_number"
    assert block.single_field() == "42"
    assert str(expr) == "42"
    assert expr.signature() == [Signature.NUMB]


def test_text_blockly_keeps_raw_content():
    content = 'say "hi" \\ now'
    block = Text(content).blockly()
    assert block.type == "text"
    assert block.fields[0].name == "TEXT"
    assert block.single_field() == content


def test_text_string_escapes():
    assert str(Text('a"b\\c')) == '"a\\"b\\\\c"'
    assert str(Text("plain")) == '"plain"'


def test_color():
    expr = Color("#FF0000")
    block = expr.blockly()
    assert block.type == "color_black"
    assert block.single_field() == "#FF0000"
    assert str(expr) == "#FF0000"
    assert expr.signature() == [Signature.NUMB]


def test_component():
    expr = Component("Button1", "Button")
    block = expr.blockly()
    assert block.type == "component_component_block"
    assert block.mutation.instance_name == "Button1"
    assert block.mutation.component_type == "Button"
    assert block.single_field() == "Button1"
    assert str(expr) == "Button1"
    assert expr.signature() == [Signature.COMPONENT]


def test_list_literal():
    expr = ListLiteral([Number("1"), Number("2"), Number("3")])
    block = expr.blockly()
    assert block.type == "lists_create_with"
    assert block.mutation.item_count == 3
    assert [v.name for v in block.values] == ["ADD0", "ADD1", "ADD2"]
    assert str(expr) == "[1, 2, 3]"
    assert str(ListLiteral()) == "[]"


def test_dictionary_with_pairs():
    pair = Pair(Text("k"), Number("1"))
    expr = Dictionary([pair])
    block = expr.blockly()
    assert block.type == "dictionaries_create_with"
    assert block.mutation.item_count == 1
    pair_block = block.single_value()
    assert pair_block.type == "pair"
    assert [v.name for v in pair_block.values] == ["KEY", "VALUE"]
    assert str(pair) == f"{Text('k')} : 1"
    assert str(expr) == "{ " + str(pair) + " }"
    assert expr.signature() == [Signature.DICT]
    assert pair.signature() == [Signature.LIST]


def test_walk_all():
    expr = WalkAll()
    assert expr.blockly().type == "dictionaries_walk_all"
    assert str(expr) == "walkAll"
    assert expr.signature() == [Signature.TEXT]


def test_helper_dropdown():
    expr = HelperDropdown("Color", "Red")
    block = expr.blockly()
    assert block.type == "helpers_dropdown"
    assert block.mutation.key == "Color"
    assert block.single_field() == "Red"
    assert str(expr) == "Color@Red"
    assert expr.signature() == [Signature.HELPER]


@pytest.mark.parametrize(
    "expr",
    [Boolean(True), Number("1"), Text("t"), Color("#000000"), Component("a", "B"), ListLiteral(), Dictionary()],
)
def test_literals_are_continuous_and_consumable(expr):
    assert expr.continuous() is True
    assert expr.consumable(True) is True


def test_pair_not_continuous():
    assert Pair(Number("1"), Number("2")).continuous() is False