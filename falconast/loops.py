"""Loops and other statement-level control nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .blockly import (
    Block,
    Expr,
    Field,
    Signature,
    Value,
    join_exprs,
    make_values,
    optional_statement,
    pad_body,
)


@dataclass
class Break(Expr):
    def __str__(self) -> str:
        return "break"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(type="controls_break")

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass
class Do(Expr):
    """Run statements, then yield a result."""

    body: list[Expr]
    result: Expr

    def __str__(self) -> str:
        return join_exprs("\n", self.body) + "\n" + str(self.result)

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="controls_do_then_return",
            statements=optional_statement("STM", self.body),
            values=[Value("VALUE", self.result.blockly(False))],
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass
class Each(Expr):
    """Loop over the items of a list."""

    name: str
    iterable: Expr
    body: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return f"for ({self.name} in {self.iterable}) {{\n{pad_body(self.body)}}}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="controls_forEach",
            fields=[Field("VAR", self.name)],
            values=[Value("LIST", self.iterable.blockly(False))],
            statements=optional_statement("DO", self.body),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass
class EachPair(Expr):
    """Loop over the key/value pairs of a dictionary."""

    key_name: str
    value_name: str
    iterable: Expr
    body: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"for ({self.key_name}, {self.value_name} in {self.iterable}) "
            f"{{\n{pad_body(self.body)}}}"
        )

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="controls_for_each_dict",
            fields=[Field("KEY", self.key_name), Field("VALUE", self.value_name)],
            values=[Value("DICT", self.iterable.blockly(False))],
            statements=optional_statement("DO", self.body),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass
class For(Expr):
    """Counting loop over a numeric range."""

    name: str
    start: Expr
    end: Expr
    step: Expr
    body: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"for ({self.name}: {self.start} .. {self.end} step {self.step}) "
            f"{{\n{pad_body(self.body)}}}"
        )

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="controls_forRange",
            fields=[Field("VAR", self.name)],
            values=make_values([self.start, self.end, self.step], "START", "END", "STEP"),
            statements=optional_statement("DO", self.body),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass
class While(Expr):
    """Loop while a condition holds."""

    condition: Expr
    body: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return f"while ({self.condition}) {{\n{pad_body(self.body)}}}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="controls_while",
            values=[Value("TEST", self.condition.blockly(False))],
            statements=optional_statement("DO", self.body),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]