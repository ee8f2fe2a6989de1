import pytest

from falconast.binary import BinaryExpr, Operator
from falconast.blockly import Signature
from falconast.calls import FuncCall, Question, check_signature, make_func_call
from falconast.context import CompileError
from falconast.fundamentals import Number, Text
from falconast.variables import Get


def value_names(block):
    return [value.name for value in block.values]


def field_pairs(block):
    return [(f.name, f.value) for f in block.fields]


def test_check_signature_unknown_function():
    with pytest.raises(CompileError, match=r"Cannot find function \.nope\(\)"):
        check_signature("nope", 1)


def test_check_signature_exact_count_mismatch():
    with pytest.raises(CompileError, match="Expected 1 args but got 2 for function sqrt"):
        check_signature("sqrt", 2)


def test_check_signature_needs_positive_count():
    with pytest.raises(CompileError, match="positive number of args"):
        check_signature("min", 0)


def test_check_signature_minimum_for_call():
    with pytest.raises(CompileError, match="at least 3 args but got only 2"):
        check_signature("call", 2)
    assert check_signature("call", 3).signature == Signature.VOID
    assert check_signature("vcall", 5).signature == Signature.ANY


def test_check_signature_returns_entry():
    sig = check_signature("randInt", 2)
    assert sig.name == "randInt"
    assert sig.param_count == 2
    assert sig.signature == Signature.NUMB


def test_make_func_call_collects_args():
    call = make_func_call("max", Number("1"), Number("2"))
    assert call.name == "max"
    assert len(call.args) == 2
    assert str(call) == "max(1, 2)"


@pytest.mark.parametrize(
    "name,block_type,op",
    [
        ("sqrt", "math_single", "ROOT"),
        ("floor", "math_single", "FLOOR"),
        ("sin", "math_trig", "SIN"),
        ("degrees", "math_convert_angles", "RADIANS_TO_DEGREES"),
        ("decToHex", "math_convert_number", "DEC_TO_HEX"),
    ],
)
def test_math_conversions(name, block_type, op):
    block = FuncCall(name, [Number("4")]).blockly(False)
    assert block.type == block_type
    assert field_pairs(block) == [("OP", op)]
    assert value_names(block) == ["NUM"]
    assert block.values[0].block.type == "math_number"


def test_min_with_several_args():
    block = FuncCall("min", [Number("1"), Number("2"), Number("3")]).blockly(False)
    assert block.type == "math_on_list"
    assert field_pairs(block) == [("OP", "MIN")]
    assert block.mutation.item_count == 3
    assert value_names(block) == ["NUM0", "NUM1", "NUM2"]


def test_rand_int_sockets():
    block = FuncCall("randInt", [Number("1"), Number("6")]).blockly(False)
    assert block.type == "math_random_int"
    assert value_names(block) == ["FROM", "TO"]


def test_list_statistics():
    block = FuncCall("stdDevOf", [Get("xs")]).blockly(False)
    assert block.type == "math_on_list2"
    assert field_pairs(block) == [("OP", "SD")]
    assert value_names(block) == ["LIST"]


def test_radix_number():
    block = FuncCall("bin", [Text("101")]).blockly(False)
    assert block.type == "math_number_radix"
    assert field_pairs(block) == [("OP", "BIN"), ("NUM", "101")]


def test_radix_requires_text():
    with pytest.raises(CompileError, match="numeric string"):
        FuncCall("hexa", [Number("5")]).blockly(False)


def test_statement_call_as_value_is_rejected():
    with pytest.raises(CompileError, match="Expected a consumable"):
        FuncCall("println", [Text("hi")]).blockly(False)


def test_println_as_statement():
    block = FuncCall("println", [Text("hi")]).blockly(True)
    assert block.type == "controls_eval_but_ignore"
    assert value_names(block) == ["VALUE"]


def test_simple_control_block_has_no_values():
    block = FuncCall("closeApp").blockly(True)
    assert block.type == "controls_closeApplication"
    assert not block.values


def test_open_screen_with_value():
    block = FuncCall("openScreenWithValue", [Text("Main"), Number("1")]).blockly(True)
    assert block.type == "controls_openAnotherScreenWithStartValue"
    assert value_names(block) == ["SCREENNAME", "STARTVALUE"]


def test_every_component():
    block = FuncCall("every", [Get("Button")]).blockly(False)
    assert block.type == "component_all_component_block"
    assert block.mutation.component_type == "Button"
    assert field_pairs(block) == [("COMPONENT_SELECTOR", "Button")]


def test_every_rejects_global():
    with pytest.raises(CompileError, match="every"):
        FuncCall("every", [Get("Button", is_global=True)]).blockly(False)


@pytest.mark.parametrize("name,shape", [("call", "statement"), ("vcall", "value")])
def test_generic_call(name, shape):
    call = FuncCall(name, [Text("Button"), Get("b"), Text("Click"), Number("1"), Number("2")])
    block = call.blockly(True)
    assert block.type == "component_method"
    assert block.mutation.method_name == "Click"
    assert block.mutation.component_type == "Button"
    assert block.mutation.is_generic is True
    assert block.mutation.shape == shape
    assert value_names(block) == ["COMPONENT", "ARG0", "ARG1"]


def test_generic_call_requires_method_text():
    with pytest.raises(CompileError, match="method name"):
        FuncCall("call", [Text("Button"), Get("b"), Number("1")]).blockly(True)


def test_generic_get_and_set():
    get_block = FuncCall("get", [Text("Label"), Get("l"), Text("Text")]).blockly(False)
    assert get_block.type == "component_set_get"
    assert get_block.mutation.set_or_get == "get"
    assert field_pairs(get_block) == [("PROP", "Text")]
    assert value_names(get_block) == ["COMPONENT"]

    set_block = FuncCall("set", [Text("Label"), Get("l"), Text("Text"), Text("hi")]).blockly(True)
    assert set_block.mutation.set_or_get == "set"
    assert set_block.mutation.property_name == "Text"
    assert value_names(set_block) == ["COMPONENT", "VALUE"]


def test_unknown_function_blockly_raises():
    with pytest.raises(CompileError):
        FuncCall("frobnicate", [Number("1")]).blockly(False)


def test_str_neg_continuous_and_not():
    assert str(FuncCall("neg", [Number("5")])) == "-5"
    inner = BinaryExpr(Operator.PLUS, [Number("1"), Number("2")], symbol="+")
    assert str(FuncCall("neg", [inner])) == "-(1 + 2)"


def test_str_rem():
    assert str(FuncCall("rem", [Get("a"), Get("b")])) == "a % b"


def test_consumable():
    assert FuncCall("sqrt", [Number("1")]).consumable() is True
    assert FuncCall("println", [Number("1")]).consumable() is False
    assert FuncCall("set", []).consumable() is False
    assert FuncCall("vcall", []).consumable() is True


def test_func_signature():
    assert FuncCall("copyDict", [Get("d")]).signature() == [Signature.DICT]
    assert FuncCall("getStartValue").signature() == [Signature.TEXT]
    with pytest.raises(CompileError):
        FuncCall("copyDict").signature()


@pytest.mark.parametrize(
    "question,op",
    [("number", "NUMBER"), ("base10", "BASE10"), ("hexa", "HEXADECIMAL"), ("bin", "BINARY")],
)
def test_math_questions(question, op):
    block = Question(Get("x"), question).blockly(False)
    assert block.type == "math_is_a_number"
    assert field_pairs(block) == [("OP", op)]
    assert value_names(block) == ["NUM"]


@pytest.mark.parametrize(
    "question,block_type,socket",
    [
        ("text", "text_is_string", "ITEM"),
        ("list", "lists_is_list", "ITEM"),
        ("dict", "dictionaries_is_dict", "THING"),
        ("emptyText", "text_isEmpty", "VALUE"),
        ("emptyList", "lists_is_empty", "LIST"),
    ],
)
def test_simple_questions(question, block_type, socket):
    block = Question(Get("x"), question).blockly(False)
    assert block.type == block_type
    assert value_names(block) == [socket]
    assert block.values[0].block.single_field() == "x"


def test_unknown_question():
    with pytest.raises(CompileError, match="Unknown question"):
        Question(Get("x"), "prime").blockly(False)


def test_question_str_and_signature():
    assert str(Question(Get("x"), "number")) == "x ? number"
    inner = BinaryExpr(Operator.PLUS, [Number("1"), Number("2")], symbol="+")
    assert str(Question(inner, "odd")) == "(1 + 2) ? odd"
    assert Question(Get("x"), "text").signature() == [Signature.BOOL]
    assert Question(Get("x"), "text").continuous() is False