"""Binary operator expressions over two or more operands."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from .blockly import (
    Block,
    Expr,
    Field,
    Mutation,
    Signature,
    Value,
    make_values,
    values_by_prefix,
)


class Operator(enum.Enum):
    """The binary operators the language knows."""

    BITWISE_AND = enum.auto()
    BITWISE_OR = enum.auto()
    BITWISE_XOR = enum.auto()
    EQUALS = enum.auto()
    NOT_EQUALS = enum.auto()
    LOGIC_AND = enum.auto()
    LOGIC_OR = enum.auto()
    PLUS = enum.auto()
    TIMES = enum.auto()
    DASH = enum.auto()
    SLASH = enum.auto()
    POWER = enum.auto()
    UNDERSCORE = enum.auto()
    LESS_THAN = enum.auto()
    LESS_THAN_EQUAL = enum.auto()
    GREAT_THAN = enum.auto()
    GREATER_THAN_EQUAL = enum.auto()
    TEXT_EQUALS = enum.auto()
    TEXT_NOT_EQUALS = enum.auto()
    TEXT_LESS_THAN = enum.auto()
    TEXT_GREATER_THAN = enum.auto()


_BITWISE = {
    Operator.BITWISE_AND: "BITAND",
    Operator.BITWISE_OR: "BITIOR",
    Operator.BITWISE_XOR: "BITXOR",
}
_RELATIONAL = {
    Operator.LESS_THAN: "LT",
    Operator.LESS_THAN_EQUAL: "LT",
    Operator.GREAT_THAN: "GT",
    Operator.GREATER_THAN_EQUAL: "GTE",
}
_TEXT_COMPARE = {
    Operator.TEXT_EQUALS: "EQUAL",
    Operator.TEXT_NOT_EQUALS: "NEQ",
    Operator.TEXT_LESS_THAN: "LT",
    Operator.TEXT_GREATER_THAN: "GT",
}
_SIMPLE_MATH = {
    Operator.DASH: "math_subtract",
    Operator.SLASH: "math_division",
    Operator.POWER: "math_power",
}
_NOT_REPEATABLE = frozenset({Operator.POWER, Operator.DASH, Operator.SLASH})

_SIGNATURES = {
    **dict.fromkeys(_BITWISE, Signature.NUMB),
    Operator.EQUALS: Signature.BOOL,
    Operator.NOT_EQUALS: Signature.BOOL,
    Operator.LOGIC_AND: Signature.BOOL,
    Operator.LOGIC_OR: Signature.BOOL,
    Operator.PLUS: Signature.NUMB,
    Operator.TIMES: Signature.NUMB,
    **dict.fromkeys(_SIMPLE_MATH, Signature.NUMB),
    Operator.UNDERSCORE: Signature.TEXT,
    **dict.fromkeys(_RELATIONAL, Signature.BOOL),
    **dict.fromkeys(_TEXT_COMPARE, Signature.BOOL),
}


@dataclass
class BinaryExpr(Expr):
    """An operator applied to its operands.

    ``symbol`` is the operator as written in source and ``precedence`` its
    binding strength; both are used only when printing.
    """

    operator: Operator
    operands: list[Expr] = field(default_factory=list)
    symbol: str = ""
    precedence: int = 0
    where: object = None

    def __str__(self) -> str:
        parts = []
        for operand in self.operands:
            text = str(operand)
            if isinstance(operand, BinaryExpr) and operand.precedence < self.precedence:
                text = f"({text})"
            parts.append(text)
        return f" {self.symbol} ".join(parts)

    def can_repeat(self, operator: Operator) -> bool:
        """Whether another operand with this operator can join this node."""
        return self.operator == operator and self.operator not in _NOT_REPEATABLE

    def blockly(self, statement: Optional[bool] = None) -> Block:
        op = self.operator
        if op in _BITWISE:
            return Block(
                type="math_bitwise",
                values=values_by_prefix("NUM", self.operands),
                mutation=Mutation(item_count=len(self.operands)),
                fields=[Field("OP", _BITWISE[op])],
            )
        if op in (Operator.EQUALS, Operator.NOT_EQUALS):
            return Block(
                type="logic_compare",
                values=make_values(self.operands, "A", "B"),
                fields=[Field("OP", "EQ" if op == Operator.EQUALS else "NEQ")],
            )
        if op in (Operator.LOGIC_AND, Operator.LOGIC_OR):
            return self._bool_expr()
        if op in (Operator.PLUS, Operator.TIMES):
            return Block(
                type="math_add" if op == Operator.PLUS else "math_multiply",
                values=values_by_prefix("NUM", self.operands),
                mutation=Mutation(item_count=len(self.operands)),
            )
        if op in _SIMPLE_MATH:
            return Block(type=_SIMPLE_MATH[op], values=make_values(self.operands, "A", "B"))
        if op == Operator.UNDERSCORE:
            return Block(
                type="text_join",
                mutation=Mutation(item_count=len(self.operands)),
                values=values_by_prefix("ADD", self.operands),
            )
        if op in _RELATIONAL:
            return Block(
                type="math_compare",
                fields=[Field("OP", _RELATIONAL[op])],
                values=make_values(self.operands, "A", "B"),
            )
        return Block(
            type="text_compare",
            fields=[Field("OP", _TEXT_COMPARE[op])],
            values=make_values(self.operands, "TEXT1", "TEXT2"),
        )

    def _bool_expr(self) -> Block:
        first, second, *rest = self.operands
        values = [
            Value("A", first.blockly(False)),
            Value("B", second.blockly(False)),
            *(Value(f"BOOL{index}", operand.blockly(False)) for index, operand in enumerate(rest, start=2)),
        ]
        return Block(
            type="logic_operation",
            mutation=Mutation(item_count=len(self.operands)),
            values=values,
            fields=[Field("OP", "AND" if self.operator == Operator.LOGIC_AND else "OR")],
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [_SIGNATURES[self.operator]]