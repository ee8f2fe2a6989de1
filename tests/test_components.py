import pytest

from falconast.blockly import Block, Field, Signature, Value
from falconast.components import (
    Event,
    EveryComponent,
    GenericEvent,
    GenericMethodCall,
    GenericPropertyGet,
    GenericPropertySet,
    MethodCall,
    PropertyGet,
    PropertySet,
)
from falconast.fundamentals import Component, Number, Text
from falconast.loops import Break


def test_event_blockly_with_body():
    event = Event("Button1", "Button", "Click", ["x"], [Break()])
    block = event.blockly()
    assert block.type == "component_event"
    assert block.mutation.instance_name == "Button1"
    assert block.mutation.event_name == "Click"
    assert block.mutation.component_type == "Button"
    assert block.mutation.args == ["x"]
    assert block.mutation.is_generic is False
    assert block.fields == [Field("COMPONENT_SELECTOR", "Button1")]
    assert block.single_statement().name == "DO"
    assert block.single_statement().block == Block(type="controls_break")


def test_event_without_body_has_no_statement():
    block = Event("Button1", "Button", "Click").blockly()
    assert block.statements == []


def test_event_string():
    event = Event("Button1", "Button", "Click", ["a", "b"], [Break()])
    assert str(event) == "when Button1.Click(a, b) {\n  break\n}"


def test_every_component():
    every = EveryComponent("Button")
    assert str(every) == "every(Button)"
    block = every.blockly()
    assert block.type == "component_all_component_block"
    assert block.mutation.component_type == "Button"
    assert block.single_field() == "Button"
    assert every.signature() == [Signature.LIST]


def test_generic_event():
    event = GenericEvent("Button", "Click", ["component", "notAlreadyHandled"])
    assert str(event) == "when any Button.Click(component, notAlreadyHandled) {\n}"
    block = event.blockly()
    assert block.mutation.is_generic is True
    assert block.mutation.instance_name == ""
    assert block.fields == []
    assert block.mutation.args == ["component", "notAlreadyHandled"]


def test_generic_method_call():
    comp = Component("Button1", "Button")
    call = GenericMethodCall(comp, "Button", "Foo", [Number("1"), Number("2")], returning=True)
    assert str(call).startswith('vcall("Button", Button1, "Foo", ')
    block = call.blockly()
    assert block.type == "component_method"
    assert [v.name for v in block.values] == ["COMPONENT", "ARG0", "ARG1"]
    assert block.values[0].block == comp.blockly()
    assert block.mutation.method_name == "Foo"
    assert block.mutation.is_generic is True
    assert call.consumable() is False


def test_generic_method_call_string_non_returning():
    call = GenericMethodCall(Component("B", "Button"), "Button", "Foo", [Number("1")])
    assert str(call).startswith("call(")


def test_generic_property_get():
    comp = Component("Label1", "Label")
    get = GenericPropertyGet(comp, "Label", "Text")
    assert str(get) == 'get("Label", Label1, "Text")'
    block = get.blockly()
    assert block.mutation.set_or_get == "get"
    assert block.fields == [Field("PROP", "Text")]
    assert block.values == [Value("COMPONENT", comp.blockly())]


def test_generic_property_set():
    comp = Component("Label1", "Label")
    prop_set = GenericPropertySet(comp, "Label", "Text", Text("hi"))
    assert str(prop_set) == 'set("Label", Label1, "Text", "hi")'
    block = prop_set.blockly()
    assert block.mutation.set_or_get == "set"
    assert [v.name for v in block.values] == ["COMPONENT", "VALUE"]
    assert block.values[1].block == Text("hi").blockly()


def test_method_call():
    call = MethodCall("Sound1", "Sound", "Play", [Number("3")])
    assert str(call) == "Sound1.Play(3)"
    block = call.blockly()
    assert block.mutation.instance_name == "Sound1"
    assert block.fields == [Field("COMPONENT_SELECTOR", "Sound1")]
    assert block.values == [Value("ARG0", Number("3").blockly())]


def test_property_get():
    get = PropertyGet("Label1", "Label", "Text")
    assert str(get) == "Label1.Text"
    block = get.blockly()
    assert block.fields == [Field("COMPONENT_SELECTOR", "Label1"), Field("PROP", "Text")]
    assert get.consumable() is True


def test_property_set_marks_value_shape():
    prop_set = PropertySet("Label1", "Label", "Parent", Component("Arr1", "HorizontalArrangement"))
    block = prop_set.blockly()
    assert block.single_value().mutation.shape == "value"
    assert {f.name: f.value for f in block.fields} == {"COMPONENT_SELECTOR": "Label1", "PROP": "Parent"}
    assert str(prop_set) == "Label1.Parent = Arr1"


def test_property_set_plain_value():
    block = PropertySet("Label1", "Label", "Text", Text("x")).blockly()
    assert block.single_value() == Text("x").blockly()


def test_generic_property_set_requires_value():
    with pytest.raises(TypeError):
        GenericPropertySet(Component("a", "b"), "b", "c")