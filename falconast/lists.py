"""List indexing and list transformers with lambda bodies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .blockly import Block, Expr, Field, Signature, Value, join_exprs, make_values
from .context import CompileError


@dataclass
class ListGet(Expr):
    """Read of a list item by index."""

    items: Expr
    index: Expr

    def __str__(self) -> str:
        target = str(self.items) if self.items.continuous() else f"({self.items})"
        return f"{target}[{self.index}]"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(type="lists_select_item", values=make_values([self.items, self.index], "LIST", "NUM"))

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.ANY]


@dataclass
class ListSet(Expr):
    """Replacement of a list item by index."""

    items: Expr
    index: Expr
    value: Expr

    def __str__(self) -> str:
        target = str(self.items) if self.items.continuous() else f"({self.items})"
        return f"{target}[{self.index}] = {self.value}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="lists_replace_item",
            values=make_values([self.items, self.index, self.value], "LIST", "NUM", "ITEM"),
        )

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.VOID]


@dataclass(frozen=True)
class TransformerSignature:
    """How many arguments and lambda names a transformer takes."""

    arg_size: int
    name_size: int


_TRANSFORMERS = {
    "map": TransformerSignature(0, 1),
    "filter": TransformerSignature(0, 1),
    "reduce": TransformerSignature(1, 2),
    "sort": TransformerSignature(0, 2),
    "sortByKey": TransformerSignature(0, 1),
    "min": TransformerSignature(0, 2),
    "max": TransformerSignature(0, 2),
}


def check_signature(name: str, args_count: int, names_count: int) -> TransformerSignature:
    """Look up a transformer and check its argument and name counts."""
    signature = _TRANSFORMERS.get(name)
    if signature is None:
        raise CompileError(f"Unknown list lambda! .{name} {{ }}")
    if signature.arg_size != args_count:
        raise CompileError(
            f"Expected {signature.arg_size} args but got {args_count} for transformer .{name} {{"
        )
    if signature.name_size != names_count:
        raise CompileError(
            f"Expected {signature.name_size} names but got {names_count} for transformer .{name} {{"
        )
    return signature


# name -> (block type, lambda field names, socket name of the lambda body)
_BLOCKS = {
    "map": ("lists_map", ("VAR",), "TO"),
    "filter": ("lists_filter", ("VAR",), "TEST"),
    "reduce": ("lists_reduce", ("VAR1", "VAR2"), "COMBINE"),
    "sort": ("lists_sort_comparator", ("VAR1", "VAR2"), "COMPARE"),
    "sortByKey": ("lists_sort_key", ("VAR",), "KEY"),
    "min": ("lists_minimum_value", ("VAR1", "VAR2"), "COMPARE"),
    "max": ("lists_maximum_value", ("VAR1", "VAR2"), "COMPARE"),
}


@dataclass
class Transformer(Expr):
    """A list operation taking a lambda, such as ``.map { x -> ... }``."""

    items: Expr
    name: str
    args: list[Expr] = field(default_factory=list)
    names: list[str] = field(default_factory=list)
    transformer: Optional[Expr] = None
    where: object = None

    def __str__(self) -> str:
        continuous = self.items.continuous()
        names = ", ".join(self.names)
        if not self.args:
            if continuous:
                return f"{self.items}\n  .{self.name} {{ {names} -> {self.transformer} }}"
            return f"({self.items})\n  .{self.name} {{ {names} -> {self.transformer}}} "
        args = join_exprs(", ", self.args)
        target = str(self.items) if continuous else f"({self.items})"
        return f"{target}\n  .{self.name}({args}) {{ {names} -> {self.transformer} }}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        check_signature(self.name, len(self.args), len(self.names))
        block_type, field_names, body_socket = _BLOCKS[self.name]
        values = [Value("LIST", self.items.blockly(False))]
        if self.name == "reduce":
            values.append(Value("INITANSWER", self.args[0].blockly(False)))
        values.append(Value(body_socket, self.transformer.blockly(False)))
        return Block(
            type=block_type,
            fields=[Field(field_name, name) for field_name, name in zip(field_names, self.names)],
            values=values,
        )

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        check_signature(self.name, len(self.args), len(self.names))
        if self.name in ("min", "max", "reduce"):
            return [Signature.ANY]
        return [Signature.LIST]