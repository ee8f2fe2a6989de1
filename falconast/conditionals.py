"""Conditional statements and conditional expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .blockly import (
    Block,
    Expr,
    Mutation,
    Signature,
    combine_signatures,
    create_statement,
    make_values,
    pad_body,
    to_statements,
    values_by_prefix,
)
from .smart_body import SmartBody


@dataclass
class If(Expr):
    """An if / else-if / else chain.

    ``else_body`` is ``None`` when there is no else branch.
    """

    conditions: list[Expr]
    bodies: list[list[Expr]]
    else_body: Optional[list[Expr]] = None

    def __str__(self) -> str:
        branches = " else if ".join(
            f"({condition}) {{\n{pad_body(body)}}}"
            for condition, body in zip(self.conditions, self.bodies)
        )
        text = "if " + branches
        if self.else_body is not None:
            text += f" else {{\n{pad_body(self.else_body)}}}"
        return text

    def blockly(self, statement: Optional[bool] = None) -> Block:
        if statement is False:
            return self._simple_if()
        conditions = values_by_prefix("IF", self.conditions)
        bodies = to_statements("DO", self.bodies)
        else_count = 0
        if self.else_body is not None:
            bodies.append(create_statement("ELSE", self.else_body))
            else_count = 1
        return Block(
            type="controls_if",
            mutation=Mutation(else_if_count=len(conditions) - 1, else_count=else_count),
            values=conditions,
            statements=bodies,
        )

    def _simple_if(self) -> Block:
        otherwise: list[Expr] = list(self.else_body) if self.else_body is not None else []
        for condition, then in zip(reversed(self.conditions), reversed(self.bodies)):
            otherwise = [make_simple_if(condition, then, otherwise)]
        return otherwise[0].blockly()

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass
class SimpleIf(Expr):
    """A two-way conditional that yields a value, or acts as a statement."""

    condition: Expr
    then: list[Expr]
    otherwise: list[Expr] = field(default_factory=list)

    def __post_init__(self) -> None:
        # The smart bodies share the branch lists, so rewrites they make are seen here too.
        self.smart_then = SmartBody(self.then)
        self.smart_else = SmartBody(self.otherwise)

    def __str__(self) -> str:
        branches: list[str] = []
        current = self
        discontinuous = False
        while True:
            if not current.then[0].continuous() or not current.otherwise[0].continuous():
                discontinuous = True
            prefix = "else " if current is not self else ""
            if len(current.then) == 1:
                branches.append(f"{prefix}if ({current.condition}) {current.then[0]} ")
            else:
                branches.append(f"{prefix}if ({current.condition}) {{\n{pad_body(current.then)}}} ")
            nested = current.otherwise[0]
            if len(current.otherwise) == 1 and isinstance(nested, SimpleIf):
                current = nested
                continue
            if len(current.otherwise) == 1:
                branches.append(f"else {current.otherwise[0]}")
            else:
                branches.append(f"else {{\n{pad_body(current.otherwise)}}}")
            break
        separator = "\n" if len(branches) > 2 or discontinuous else ""
        return separator.join(branches)

    def blockly(self, statement: Optional[bool] = None) -> Block:
        if statement:
            # A statement is wanted: become a full if statement.
            return If([self.condition], [self.then], self.otherwise).blockly()
        return Block(
            type="controls_choose",
            values=make_values(
                [self.condition, self.smart_then, self.smart_else],
                "TEST",
                "THENRETURN",
                "ELSERETURN",
            ),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return not statement

    def signature(self) -> list[Signature]:
        return combine_signatures(self.smart_then.signature(), self.smart_else.signature())


def make_simple_if(condition: Expr, then: Sequence[Expr], otherwise: Optional[Sequence[Expr]]) -> SimpleIf:
    """Build a conditional expression from a condition and two branch bodies."""
    return SimpleIf(condition, list(then), list(otherwise) if otherwise is not None else [])