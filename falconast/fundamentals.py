"""Literal and basic value expressions."""

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
    values_by_prefix,
)


@dataclass
class Boolean(Expr):
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="logic_boolean",
            fields=fields_from_map({"BOOL": "TRUE" if self.value else "FALSE"}),
        )

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.BOOL]


@dataclass
class Not(Expr):
    expr: Expr

    def __str__(self) -> str:
        return f"!{self.expr}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(type="logic_negate", values=[Value("BOOL", self.expr.blockly(False))])

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.BOOL]


@dataclass
class Color(Expr):
    hex: str

    def __str__(self) -> str:
        return self.hex

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(type="color_black", fields=[Field("COLOR", self.hex)])

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.NUMB]


@dataclass
class Component(Expr):
    name: str
    type: str

    def __str__(self) -> str:
        return self.name

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="component_component_block",
            mutation=Mutation(instance_name=self.name, component_type=self.type),
            fields=[Field("COMPONENT_SELECTOR", self.name)],
        )

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.COMPONENT]


@dataclass
class Dictionary(Expr):
    elements: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{{ {join_exprs(', ', self.elements)} }}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="dictionaries_create_with",
            mutation=Mutation(item_count=len(self.elements)),
            values=values_by_prefix("ADD", self.elements),
        )

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.DICT]


@dataclass
class Pair(Expr):
    key: Expr
    value: Expr

    def __str__(self) -> str:
        return f"{self.key} : {self.value}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(type="pair", values=make_values([self.key, self.value], "KEY", "VALUE"))

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.LIST]


@dataclass
class WalkAll(Expr):
    def __str__(self) -> str:
        return "walkAll"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(type="dictionaries_walk_all")

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.TEXT]


@dataclass
class HelperDropdown(Expr):
    key: str
    option: str

    def __str__(self) -> str:
        return f"{self.key}@{self.option}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="helpers_dropdown",
            mutation=Mutation(key=self.key),
            fields=[Field("OPTION", self.option)],
        )

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.HELPER]


@dataclass
class ListLiteral(Expr):
    elements: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return f"[{join_exprs(', ', self.elements)}]"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(
            type="lists_create_with",
            mutation=Mutation(item_count=len(self.elements)),
            values=values_by_prefix("ADD", self.elements),
        )

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.LIST]


@dataclass
class Number(Expr):
    content: str

    def __str__(self) -> str:
        return self.content

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(type="math_number", fields=fields_from_map({"NUM": self.content}))

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.NUMB]


@dataclass
class Text(Expr):
    content: str

    def __str__(self) -> str:
        escaped = self.content.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(type="text", fields=fields_from_map({"TEXT": self.content}))

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.TEXT]