"""Placeholders for missing operands and constant transforms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .blockly import Block, Expr, Field, Mutation, Signature, fields_from_map
from .context import CompileError
from .fundamentals import Text


@dataclass
class EmptySocket(Expr):
    """A missing operand, rendered as the number zero."""

    def __str__(self) -> str:
        return "undefined"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        return Block(type="math_number", fields=fields_from_map({"NUM": "0"}))

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.TEXT]


@dataclass
class Transform(Expr):
    """A constant transform such as ``"text"::obfuscate``."""

    on: Expr
    name: str
    where: object = None

    def __str__(self) -> str:
        return f"{self.on}::{self.name}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        if self.name != "obfuscate":
            raise CompileError(f"Unknown constant transform call ::{self.name}")
        if not isinstance(self.on, Text):
            raise CompileError("Cannot obfuscate a non string object!")
        return Block(
            type="obfuscated_text",
            mutation=Mutation(confounder="Falcon"),
            fields=[Field("TEXT", self.on.content)],
        )

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return False

    def signature(self) -> list[Signature]:
        return [Signature.TEXT]