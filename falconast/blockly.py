"""Blockly block trees, their XML form, and helpers shared by expression nodes."""

from __future__ import annotations

import enum
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping, Optional, Sequence


class Signature(enum.IntEnum):
    """The kind of value an expression produces."""

    BOOL = 0
    NUMB = 1
    TEXT = 2
    LIST = 3
    DICT = 4
    COMPONENT = 5
    HELPER = 6
    ANY = 7
    OF_EVENT = 8
    VOID = 9


@dataclass
class Field:
    """A named field holding a literal value."""

    name: str
    value: str


@dataclass
class Value:
    """A named value socket holding a block."""

    name: str
    block: "Block"


@dataclass
class Statement:
    """A named statement socket holding the head of a block chain."""

    name: str
    block: "Block"


@dataclass
class Mutation:
    """Extra attributes and children that shape a block."""

    item_count: int = 0
    else_if_count: int = 0
    else_count: int = 0
    local_names: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)
    event_params: list[str] = field(default_factory=list)
    key: str = ""
    set_or_get: str = ""
    property_name: str = ""
    is_generic: bool = False
    component_type: str = ""
    instance_name: str = ""
    event_name: str = ""
    method_name: str = ""
    shape: str = ""
    param_count: int = 0
    mode: str = ""
    confounder: str = ""
    inline: bool = False
    name: str = ""

    def to_element(self) -> ET.Element:
        """Render this mutation as a ``<mutation>`` element."""
        attributes = {
            "items": str(self.item_count),
            "elseif": str(self.else_if_count),
            "else": str(self.else_count),
        }
        optional = (
            ("key", self.key),
            ("set_or_get", self.set_or_get),
            ("property_name", self.property_name),
            ("is_generic", "true" if self.is_generic else ""),
            ("component_type", self.component_type),
            ("instance_name", self.instance_name),
            ("event_name", self.event_name),
            ("method_name", self.method_name),
            ("shape", self.shape),
            ("param_count", str(self.param_count) if self.param_count else ""),
            ("mode", self.mode),
            ("confounder", self.confounder),
            ("inline", "true" if self.inline else ""),
            ("name", self.name),
        )
        attributes.update((key, value) for key, value in optional if value)
        element = ET.Element("mutation", attributes)
        for tag, names in (
            ("localname", self.local_names),
            ("arg", self.args),
            ("eventparam", self.event_params),
        ):
            for name in names:
                ET.SubElement(element, tag, {"name": name})
        return element


@dataclass
class Block:
    """A single Blockly block and everything plugged into it."""

    type: str
    mutation: Optional[Mutation] = None
    fields: list[Field] = field(default_factory=list)
    values: list[Value] = field(default_factory=list)
    statements: list[Statement] = field(default_factory=list)
    next: Optional["Block"] = None

    def __str__(self) -> str:
        return f"<{self.type}>"

    def single_value(self) -> "Block":
        """The block plugged into the first value socket."""
        return self.values[0].block

    def single_field(self) -> str:
        """The value of the first field."""
        return self.fields[0].value

    def single_statement(self) -> Statement:
        """The first statement socket."""
        return self.statements[0]

    def to_element(self) -> ET.Element:
        """Render this block, recursively, as a ``<block>`` element."""
        element = ET.Element("block", {"type": self.type})
        if self.mutation is not None:
            element.append(self.mutation.to_element())
        for fld in self.fields:
            ET.SubElement(element, "field", {"name": fld.name}).text = fld.value
        for value in self.values:
            ET.SubElement(element, "value", {"name": value.name}).append(value.block.to_element())
        for statement in self.statements:
            ET.SubElement(element, "statement", {"name": statement.name}).append(
                statement.block.to_element()
            )
        if self.next is not None:
            ET.SubElement(element, "next").append(self.next.to_element())
        return element


class Expr(ABC):
    """A node of the source language that can be turned into blocks.

    ``statement`` is ``None`` when the caller has no expectation, ``True`` when a
    statement is wanted and ``False`` when a value is wanted.
    """

    @abstractmethod
    def __str__(self) -> str: ...

    @abstractmethod
    def blockly(self, statement: Optional[bool] = None) -> Block: ...

    @abstractmethod
    def continuous(self) -> bool: ...

    @abstractmethod
    def consumable(self, statement: Optional[bool] = None) -> bool: ...

    @abstractmethod
    def signature(self) -> list[Signature]: ...


def xml_document(blocks: Iterable[Block], xmlns: str) -> str:
    """Serialise top-level blocks into an ``<xml>`` document."""
    root = ET.Element("xml", {"xmlns": xmlns})
    for block in blocks:
        root.append(block.to_element())
    return ET.tostring(root, encoding="unicode")


def fields_from_map(mapping: Mapping[str, str]) -> list[Field]:
    return [Field(name, value) for name, value in mapping.items()]


def to_fields(prefix: str, values: Sequence[str]) -> list[Field]:
    return [Field(f"{prefix}{index}", value) for index, value in enumerate(values)]


def values_by_prefix(prefix: str, operands: Sequence[Expr]) -> list[Value]:
    return [Value(f"{prefix}{index}", operand.blockly(False)) for index, operand in enumerate(operands)]


def value_args_by_prefix(on: Expr, on_name: str, prefix: str, operands: Sequence[Expr]) -> list[Value]:
    return [Value(on_name, on.blockly()), *values_by_prefix(prefix, operands)]


def make_values(operands: Sequence[Expr], *names: str) -> list[Value]:
    if len(operands) != len(names):
        raise ValueError("len(operands) != len(names)")
    return [Value(name, operand.blockly(False)) for operand, name in zip(operands, names)]


def make_value_args(on: Expr, on_name: str, operands: Sequence[Expr], *names: str) -> list[Value]:
    if len(operands) != len(names):
        raise ValueError("len(operands) != len(names)")
    return [Value(on_name, on.blockly()), *make_values(operands, *names)]


def optional_statement(name: str, body: Sequence[Expr]) -> list[Statement]:
    """A one-element statement list for a non-empty body, otherwise empty."""
    return [create_statement(name, body)] if body else []


def _ensure_statement(expr: Expr) -> Block:
    # Render first: an expression may change shape when asked for a statement.
    block = expr.blockly(True)
    if expr.consumable(True):
        return Block(type="controls_eval_but_ignore", values=[Value("", block)])
    return block


def create_statement(name: str, body: Sequence[Expr]) -> Statement:
    """Chain the body's blocks through ``next`` under a named statement."""
    if not body:
        raise ValueError("cannot create a statement from an empty body")
    head = _ensure_statement(body[0])
    current = head
    for expr in body[1:]:
        block = _ensure_statement(expr)
        current.next = block
        current = block
    return Statement(name, head)


def to_statements(prefix: str, bodies: Sequence[Sequence[Expr]]) -> list[Statement]:
    return [create_statement(f"{prefix}{index}", body) for index, body in enumerate(bodies) if body]


def join_exprs(separator: str, expressions: Iterable[Expr]) -> str:
    return separator.join(str(expr) for expr in expressions)


def _referenced_variables(block: Block) -> Iterator[str]:
    if block.type == "lexical_variable_get":
        yield block.single_field()
    for value in block.values:
        yield from _referenced_variables(value.block)
    for statement in block.statements:
        yield from _referenced_variables(statement.block)


def depends_on_variables(expr: Expr, variables: Iterable[str]) -> bool:
    """Whether the expression reads any of the named variables."""
    wanted = set(variables)
    return any(reference in wanted for reference in _referenced_variables(expr.blockly()))


def combine_signatures(first: Iterable[Signature], second: Iterable[Signature]) -> list[Signature]:
    """Signatures of both lists, duplicates dropped, first occurrence kept."""
    return list(dict.fromkeys([*first, *second]))


def pad_direct(code: str) -> str:
    return "  " + code.replace("\n", "\n  ")


def pad(code: str) -> str:
    return pad_direct(code) + "\n"


def pad_body(blocks: Iterable[Expr]) -> str:
    return "".join(pad(str(block)) for block in blocks)