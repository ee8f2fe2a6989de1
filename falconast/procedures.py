"""Procedure definitions and calls."""

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
    pad,
    pad_body,
    to_fields,
    values_by_prefix,
)
from .loops import Do


@dataclass
class ProcedureCall(Expr):
    """A call of a user-defined procedure."""

    name: str
    parameters: list[str] = field(default_factory=list)
    arguments: list[Expr] = field(default_factory=list)
    returning: bool = False

    def __str__(self) -> str:
        return f"{self.name}({join_exprs(', ', self.arguments)})"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="procedures_callreturn" if self.returning else "procedures_callnoreturn",
            mutation=Mutation(name=self.name, args=list(self.parameters)),
            fields=[Field("PROCNAME", self.name)],
            values=values_by_prefix("ARG", self.arguments),
        )

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return self.returning

    def signature(self) -> list[Signature]:
        return [Signature.ANY]


@dataclass
class ReturningProcedure(Expr):
    """A procedure whose body is a single result expression."""

    name: str
    parameters: list[str]
    result: Expr

    def __str__(self) -> str:
        if isinstance(self.result, Do):
            body = pad("{\n" + pad(str(self.result)) + "}")
        else:
            body = pad(str(self.result))
        return f"func {self.name}({', '.join(self.parameters)}) =\n{body}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="procedures_defreturn",
            mutation=Mutation(args=list(self.parameters)),
            fields=[*to_fields("VAR", self.parameters), Field("NAME", self.name)],
            values=[Value("RETURN", self.result.blockly(False))],
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return self.result.signature()


@dataclass
class VoidProcedure(Expr):
    """A procedure with a statement body and no result."""

    name: str
    parameters: list[str] = field(default_factory=list)
    body: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return f"func {self.name}({', '.join(self.parameters)}) {{\n{pad_body(self.body)}}}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="procedures_defnoreturn",
            mutation=Mutation(args=list(self.parameters)),
            fields=[*to_fields("VAR", self.parameters), Field("NAME", self.name)],
            statements=optional_statement("STACK", self.body),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]