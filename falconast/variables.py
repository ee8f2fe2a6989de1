"""Variable reads, writes and declarations."""

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
    join_exprs,
    optional_statement,
    pad_direct,
    to_fields,
    values_by_prefix,
)


@dataclass
class Get(Expr):
    """Read of a local, global or event-parameter variable."""

    name: str
    is_global: bool = False
    value_signature: list[Signature] = field(default_factory=list)
    where: object = None

    def __str__(self) -> str:
        return f"this.{self.name}" if self.is_global else self.name

    def blockly(self, statement: Optional[bool] = None) -> Block:
        if self.value_signature and self.value_signature[0] == Signature.OF_EVENT:
            return Block(
                type="lexical_variable_get",
                mutation=Mutation(event_params=[self.name]),
                fields=[Field("VAR", self.name)],
            )
        name = f"global {self.name}" if self.is_global else self.name
        return Block(type="lexical_variable_get", fields=[Field("VAR", name)])

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.ANY]


@dataclass
class Global(Expr):
    """Declaration of a global variable."""

    name: str
    value: Expr

    def __str__(self) -> str:
        return f"global {self.name} = {self.value}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="global_declaration",
            fields=[Field("NAME", self.name)],
            values=[Value("VALUE", self.value.blockly(False))],
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


def _local_lines(names: list[str], values: list[Expr]) -> str:
    return "\n".join(f"local {name} = {value}" for name, value in zip(names, values))


@dataclass
class Var(Expr):
    """Several local declarations scoping a statement body."""

    names: list[str]
    values: list[Expr]
    body: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return _local_lines(self.names, self.values) + "\n" + join_exprs("\n", self.body)

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="local_declaration_statement",
            mutation=Mutation(local_names=list(self.names)),
            fields=to_fields("VAR", self.names),
            values=values_by_prefix("DECL", self.values),
            statements=optional_statement("STACK", self.body),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass
class VarResult(Expr):
    """Local declarations scoping a single result expression."""

    names: list[str]
    values: list[Expr]
    result: Expr

    def __str__(self) -> str:
        names = list(self.names)
        values = list(self.values)
        result = self.result
        while isinstance(result, VarResult):
            names.extend(result.names)
            values.extend(result.values)
            result = result.result
        return (
            "{\n"
            + pad_direct(_local_lines(names, values))
            + "\n"
            + pad_direct(str(result))
            + "\n}"
        )

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="local_declaration_expression",
            mutation=Mutation(local_names=list(self.names)),
            fields=to_fields("VAR", self.names),
            values=[
                *values_by_prefix("DECL", self.values),
                Value("RETURN", self.result.blockly(False)),
            ],
        )

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return self.result.signature()


@dataclass
class SimpleVar(Expr):
    """A single local declaration scoping a statement body."""

    name: str
    value: Expr
    body: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return f"local {self.name} = {self.value}\n" + join_exprs("\n", self.body)

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="local_declaration_statement",
            mutation=Mutation(local_names=[self.name]),
            fields=[Field("VAR0", self.name)],
            values=[Value("DECL0", self.value.blockly(False))],
            statements=optional_statement("STACK", self.body),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass
class Set(Expr):
    """Assignment to a local or global variable."""

    name: str
    expr: Expr
    is_global: bool = False

    def __str__(self) -> str:
        target = f"this.{self.name}" if self.is_global else self.name
        return f"{target} = {self.expr}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        name = f"global {self.name}" if self.is_global else self.name
        return Block(
            type="lexical_variable_set",
            fields=[Field("VAR", name)],
            values=[Value("VALUE", self.expr.blockly(False))],
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]