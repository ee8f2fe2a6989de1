import pytest

from falconast.blockly import Signature
from falconast.context import CompileError
from falconast.fundamentals import Not, Number
from falconast.lists import ListGet, ListSet, Transformer, TransformerSignature, check_signature
from falconast.variables import Get


def test_check_signature_known():
    assert check_signature("reduce", 1, 2) == TransformerSignature(1, 2)
    assert check_signature("map", 0, 1) == TransformerSignature(0, 1)


def test_check_signature_unknown():
    with pytest.raises(CompileError, match="Unknown list lambda"):
        check_signature("zip", 0, 1)


def test_check_signature_wrong_args():
    with pytest.raises(CompileError, match="args but got"):
        check_signature("map", 1, 1)


def test_check_signature_wrong_names():
    with pytest.raises(CompileError, match="names but got"):
        check_signature("sort", 0, 1)


@pytest.mark.parametrize(
    "name,block_type,body_socket,names",
    [
        ("map", "lists_map", "TO", ["x"]),
        ("filter", "lists_filter", "TEST", ["x"]),
        ("sort", "lists_sort_comparator", "COMPARE", ["a", "b"]),
        ("sortByKey", "lists_sort_key", "KEY", ["x"]),
        ("min", "lists_minimum_value", "COMPARE", ["a", "b"]),
        ("max", "lists_maximum_value", "COMPARE", ["a", "b"]),
    ],
)
def test_transformer_blocks(name, block_type, body_socket, names):
    expr = Transformer(Get("xs"), name, [], names, Get(names[0]))
    block = expr.blockly()
    assert block.type == block_type
    assert [v.name for v in block.values] == ["LIST", body_socket]
    assert [f.value for f in block.fields] == names


def test_reduce_block_has_initial_answer():
    expr = Transformer(Get("xs"), "reduce", [Number("0")], ["acc", "x"], Get("acc"))
    block = expr.blockly()
    assert block.type == "lists_reduce"
    assert [v.name for v in block.values] == ["LIST", "INITANSWER", "COMBINE"]
    assert [f.name for f in block.fields] == ["VAR1", "VAR2"]


def test_transformer_blockly_rejects_bad_counts():
    with pytest.raises(CompileError):
        Transformer(Get("xs"), "map", [], ["a", "b"], Get("a")).blockly()


@pytest.mark.parametrize(
    "name,args,names,expected",
    [
        ("min", [], ["a", "b"], [Signature.ANY]),
        ("reduce", [Number("0")], ["a", "b"], [Signature.ANY]),
        ("filter", [], ["x"], [Signature.LIST]),
    ],
)
def test_transformer_signature(name, args, names, expected):
    assert Transformer(Get("xs"), name, args, names, Get("x")).signature() == expected


def test_transformer_string():
    expr = Transformer(Get("xs"), "map", [], ["x"], Get("x"))
    assert str(expr) == "xs\n  .map { x -> x }"


def test_transformer_string_with_args_wraps_discontinuous_list():
    expr = Transformer(Not(Get("xs")), "reduce", [Number("0")], ["a", "b"], Get("a"))
    assert str(expr).startswith("(!xs)\n  .reduce(0) { a, b -> a }")


def test_list_get_block_and_string():
    expr = ListGet(Get("xs"), Number("1"))
    block = expr.blockly()
    assert block.type == "lists_select_item"
    assert [v.name for v in block.values] == ["LIST", "NUM"]
    assert str(ListGet(Not(Get("xs")), Number("1"))).startswith("(")
    assert expr.consumable() is True


def test_list_set_block():
    expr = ListSet(Get("xs"), Number("1"), Number("2"))
    block = expr.blockly()
    assert block.type == "lists_replace_item"
    assert [v.name for v in block.values] == ["LIST", "NUM", "ITEM"]
    assert expr.signature() == [Signature.VOID]
    assert expr.consumable() is False