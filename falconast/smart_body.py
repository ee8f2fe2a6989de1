"""A body of expressions that yields the value of its last expression."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .blockly import (
    Block,
    Expr,
    Field,
    Mutation,
    Signature,
    Value,
    optional_statement,
    pad_body,
    to_fields,
    values_by_prefix,
)
from .variables import Set, SimpleVar, Var


def _local_result(names: Sequence[str], values: Sequence[Expr], do_block: Block) -> Block:
    return Block(
        type="local_declaration_expression",
        mutation=Mutation(local_names=list(names)),
        fields=to_fields("VAR", names),
        values=[*values_by_prefix("DECL", values), Value("RETURN", do_block)],
    )


def _empty_do(var: Var) -> Block:
    return Block(type="lexical_variable_get", fields=[Field("VAR", var.names[-1])])


def _var_result(var: Var) -> Block:
    if var.body:
        do_block = _do_block(var.body[-1], var.body[:-1])
    else:
        do_block = _empty_do(var)
    return _local_result(var.names, var.values, do_block)


def _do_block(result: Expr, body: Sequence[Expr]) -> Block:
    if not body:
        if isinstance(result, Var):
            return _var_result(result)
        return result.blockly(False)
    if not result.consumable():
        raise ValueError("Cannot include a statement for the required variable result")
    return Block(
        type="controls_do_then_return",
        statements=optional_statement("STM", body),
        values=[Value("VALUE", result.blockly(False))],
    )


@dataclass
class SmartBody(Expr):
    """Statements followed by a result, rendered as one value block."""

    body: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return "{\n" + pad_body(self.body) + "}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        first = self.body[0]
        if isinstance(first, Var):
            return _var_result(first)
        if len(self.body) == 1:
            return first.blockly(statement)
        do_block = _do_block(self.body[-1], self.body[:-1])
        names = self._mutate_vars()
        if not names:
            return do_block
        return _local_result(names, [], do_block)

    def _mutate_vars(self) -> list[str]:
        """Turn simple declarations into assignments and return their names."""
        names = []
        for index, expr in enumerate(self.body):
            if isinstance(expr, SimpleVar):
                names.append(expr.name)
                self.body[index] = Set(expr.name, expr.value)
        return names

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return self.body[-1].signature()