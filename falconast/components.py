"""Component events, methods and properties, both specific and generic."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .blockly import (
    Block,
    Expr,
    Field,
    Mutation,
    Signature,
    Value,
    fields_from_map,
    join_exprs,
    make_values,
    optional_statement,
    pad_body,
    value_args_by_prefix,
    values_by_prefix,
)


@dataclass
class Event(Expr):
    """Handler of an event raised by one named component."""

    component_name: str
    component_type: str
    event: str
    parameters: list[str] = field(default_factory=list)
    body: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"when {self.component_name}.{self.event}({', '.join(self.parameters)}) "
            f"{{\n{pad_body(self.body)}}}"
        )

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="component_event",
            mutation=Mutation(
                is_generic=False,
                instance_name=self.component_name,
                event_name=self.event,
                component_type=self.component_type,
                args=list(self.parameters),
            ),
            fields=[Field("COMPONENT_SELECTOR", self.component_name)],
            statements=optional_statement("DO", self.body),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass
class EveryComponent(Expr):
    """The list of all components of one type."""

    type: str

    def __str__(self) -> str:
        return f"every({self.type})"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="component_all_component_block",
            mutation=Mutation(component_type=self.type),
            fields=[Field("COMPONENT_SELECTOR", self.type)],
        )

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.LIST]


@dataclass
class GenericEvent(Expr):
    """Handler of an event raised by any component of a type."""

    component_type: str
    event: str
    parameters: list[str] = field(default_factory=list)
    body: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"when any {self.component_type}.{self.event}({', '.join(self.parameters)}) "
            f"{{\n{pad_body(self.body)}}}"
        )

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="component_event",
            mutation=Mutation(
                is_generic=True,
                event_name=self.event,
                component_type=self.component_type,
                args=list(self.parameters),
            ),
            statements=optional_statement("DO", self.body),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass
class GenericMethodCall(Expr):
    """A method call on a component given as a value."""

    component: Expr
    component_type: str
    method: str
    args: list[Expr] = field(default_factory=list)
    returning: bool = False

    def __str__(self) -> str:
        call_type = "vcall" if self.returning else "call"
        return (
            f'{call_type}("{self.component_type}", {self.component}, '
            f'"{self.method}", {join_exprs(", ", self.args)})'
        )

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="component_method",
            mutation=Mutation(
                method_name=self.method,
                is_generic=True,
                component_type=self.component_type,
            ),
            values=value_args_by_prefix(self.component, "COMPONENT", "ARG", self.args),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.ANY]


@dataclass
class GenericPropertyGet(Expr):
    """Read of a property of a component given as a value."""

    component: Expr
    component_type: str
    property: str

    def __str__(self) -> str:
        return f'get("{self.component_type}", {self.component}, "{self.property}")'

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="component_set_get",
            mutation=Mutation(
                set_or_get="get",
                property_name=self.property,
                is_generic=True,
                component_type=self.component_type,
            ),
            fields=[Field("PROP", self.property)],
            values=[Value("COMPONENT", self.component.blockly(False))],
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.ANY]


@dataclass
class GenericPropertySet(Expr):
    """Write of a property of a component given as a value."""

    component: Expr
    component_type: str
    property: str
    value: Expr

    def __str__(self) -> str:
        return f'set("{self.component_type}", {self.component}, "{self.property}", {self.value})'

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="component_set_get",
            mutation=Mutation(
                set_or_get="set",
                property_name=self.property,
                is_generic=True,
                component_type=self.component_type,
            ),
            fields=[Field("PROP", self.property)],
            values=make_values([self.component, self.value], "COMPONENT", "VALUE"),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass
class MethodCall(Expr):
    """A method call on one named component."""

    component_name: str
    component_type: str
    method: str
    args: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.component_name}.{self.method}({join_exprs(', ', self.args)})"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="component_method",
            mutation=Mutation(
                method_name=self.method,
                is_generic=False,
                instance_name=self.component_name,
                component_type=self.component_type,
            ),
            fields=[Field("COMPONENT_SELECTOR", self.component_name)],
            values=values_by_prefix("ARG", self.args),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.ANY]


@dataclass
class PropertyGet(Expr):
    """Read of a property of one named component."""

    component_name: str
    component_type: str
    property: str

    def __str__(self) -> str:
        return f"{self.component_name}.{self.property}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="component_set_get",
            mutation=Mutation(
                set_or_get="get",
                property_name=self.property,
                is_generic=False,
                instance_name=self.component_name,
                component_type=self.component_type,
            ),
            fields=[
                Field("COMPONENT_SELECTOR", self.component_name),
                Field("PROP", self.property),
            ],
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.ANY]


@dataclass
class PropertySet(Expr):
    """Write of a property of one named component."""

    component_name: str
    component_type: str
    property: str
    value: Expr

    def __str__(self) -> str:
        return f"{self.component_name}.{self.property} = {self.value}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        new_value = self.value.blockly(False)
        # The value is consumed here, so mark it as a value block.
        if new_value.mutation is not None:
            new_value.mutation.shape = "value"
        return Block(
            type="component_set_get",
            mutation=Mutation(
                set_or_get="set",
                property_name=self.property,
                is_generic=False,
                instance_name=self.component_name,
                component_type=self.component_type,
            ),
            fields=fields_from_map(
                {"COMPONENT_SELECTOR": self.component_name, "PROP": self.property}
            ),
            values=[Value("VALUE", new_value)],
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]