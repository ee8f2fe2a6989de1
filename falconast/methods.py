"""Method calls on text, list and dictionary values, such as ``x.trim()``."""

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
    make_value_args,
    value_args_by_prefix,
)
from .context import CompileError


@dataclass(frozen=True)
class CallSignature:
    """What a method is called in blocks, how many arguments it takes and what it yields.

    A negative ``param_count`` means "at least ``-param_count`` arguments".
    """

    module: str
    blockly_name: str
    param_count: int
    consumable: bool
    signature: Signature


def _sig(module: str, blockly_name: str, param_count: int, consumable: bool, signature: Signature) -> CallSignature:
    return CallSignature(module, blockly_name, param_count, consumable, signature)


_SIGNATURES: dict[str, CallSignature] = {
    "textLen": _sig("text", "text_length", 0, True, Signature.NUMB),
    "trim": _sig("text", "text_trim", 0, True, Signature.TEXT),
    "uppercase": _sig("text", "text_changeCase", 0, True, Signature.TEXT),
    "lowercase": _sig("text", "text_changeCase", 0, True, Signature.TEXT),
    "startsWith": _sig("text", "text_starts_at", 1, True, Signature.BOOL),
    "contains": _sig("text", "text_contains", 1, True, Signature.BOOL),
    "containsAny": _sig("text", "text_contains", 1, True, Signature.BOOL),
    "containsAll": _sig("text", "text_contains", 1, True, Signature.BOOL),
    "split": _sig("text", "text_split", 1, True, Signature.LIST),
    "splitAtFirst": _sig("text", "text_split", 1, True, Signature.LIST),
    "splitAtAny": _sig("text", "text_split", 1, True, Signature.LIST),
    "splitAtFirstOfAny": _sig("text", "text_split", 1, True, Signature.LIST),
    "splitAtSpaces": _sig("text", "text_split_at_spaces", 0, True, Signature.LIST),
    "reverse": _sig("text", "text_reverse", 0, True, Signature.TEXT),
    "csvRowToList": _sig("text", "lists_from_csv_row", 0, True, Signature.LIST),
    "csvTableToList": _sig("text", "lists_from_csv_table", 0, True, Signature.LIST),
    "segment": _sig("text", "text_segment", 2, True, Signature.TEXT),
    "replace": _sig("text", "text_replace_all", 2, True, Signature.TEXT),
    "replaceFrom": _sig("text", "text_replace_mappings", 1, True, Signature.TEXT),
    "replaceFromLongestFirst": _sig("text", "text_replace_mappings", 1, True, Signature.TEXT),
    "listLen": _sig("list", "lists_length", 0, True, Signature.NUMB),
    "add": _sig("list", "lists_add_items", -1, False, Signature.VOID),
    "containsItem": _sig("list", "lists_is_in", 1, True, Signature.BOOL),
    "indexOf": _sig("list", "lists_position_in", 1, True, Signature.NUMB),
    "insert": _sig("list", "lists_insert_item", 2, False, Signature.VOID),
    "remove": _sig("list", "lists_remove_item", 1, False, Signature.VOID),
    "appendList": _sig("list", "lists_append_list", 1, False, Signature.VOID),
    "lookupInPairs": _sig("list", "lists_lookup_in_pairs", 2, True, Signature.ANY),
    "join": _sig("list", "lists_join_with_separator", 1, True, Signature.TEXT),
    "slice": _sig("list", "lists_slice", 2, True, Signature.LIST),
    "random": _sig("list", "lists_pick_random_item", 0, True, Signature.ANY),
    "reverseList": _sig("list", "lists_reverse", 0, True, Signature.LIST),
    "toCsvRow": _sig("list", "lists_to_csv_row", 0, True, Signature.TEXT),
    "toCsvTable": _sig("list", "lists_to_csv_table", 0, True, Signature.TEXT),
    "sort": _sig("list", "lists_sort", 0, True, Signature.LIST),
    "allButFirst": _sig("list", "lists_but_first", 0, True, Signature.ANY),
    "allButLast": _sig("list", "lists_but_last", 0, True, Signature.ANY),
    "pairsToDict": _sig("list", "dictionaries_alist_to_dict", 0, True, Signature.DICT),
    "dictLen": _sig("dict", "dictionaries_length", 0, True, Signature.NUMB),
    "get": _sig("dict", "dictionaries_lookup", 2, True, Signature.ANY),
    "set": _sig("dict", "dictionaries_set_pair", 2, False, Signature.VOID),
    "delete": _sig("dict", "dictionaries_delete_pair", 1, False, Signature.VOID),
    "getAtPath": _sig("dict", "dictionaries_recursive_lookup", 2, True, Signature.ANY),
    "setAtPath": _sig("dict", "dictionaries_recursive_set", 2, False, Signature.VOID),
    "containsKey": _sig("dict", "dictionaries_is_key_in", 1, True, Signature.BOOL),
    "mergeInto": _sig("dict", "dictionaries_combine_dicts", 1, False, Signature.DICT),
    "walkTree": _sig("dict", "dictionaries_walk_tree", 1, True, Signature.ANY),
    "keys": _sig("dict", "dictionaries_getters", 0, True, Signature.LIST),
    "values": _sig("dict", "dictionaries_getters", 0, True, Signature.LIST),
    "toPairs": _sig("dict", "dictionaries_dict_to_alist", 0, True, Signature.LIST),
}


def check_signature(method_name: str, args_count: int) -> CallSignature:
    """Look up a method and check the number of arguments it is given."""
    signature = _SIGNATURES.get(method_name)
    if signature is None:
        raise CompileError(f"Cannot find method .{method_name}()")
    if signature.param_count >= 0:
        if signature.param_count != args_count:
            raise CompileError(
                f"Expected {signature.param_count} args but got {args_count} for method .{method_name}()"
            )
    else:
        min_args = -signature.param_count
        if args_count < min_args:
            raise CompileError(
                f"Expected at least {min_args} args but got only {args_count} for method .{method_name}()"
            )
    return signature


# Blocks with one socket for the receiver: block type -> socket name.
_SIMPLE_OPERAND = {
    "text_length": "VALUE",
    "text_trim": "TEXT",
    "text_split_at_spaces": "TEXT",
    "text_reverse": "VALUE",
    "lists_from_csv_row": "TEXT",
    "lists_from_csv_table": "TEXT",
    "lists_length": "LIST",
    "lists_pick_random_item": "LIST",
    "lists_reverse": "LIST",
    "lists_to_csv_row": "LIST",
    "lists_to_csv_table": "LIST",
    "lists_sort": "LIST",
    "lists_but_first": "LIST",
    "lists_but_last": "LIST",
    "dictionaries_alist_to_dict": "PAIRS",
    "dictionaries_length": "DICT",
    "dictionaries_dict_to_alist": "DICT",
}

# Blocks with a receiver socket followed by named argument sockets.
_RECEIVER_AND_ARGS = {
    "lists_is_in": ("LIST", ("ITEM",)),
    "lists_position_in": ("LIST", ("ITEM",)),
    "lists_insert_item": ("LIST", ("INDEX", "ITEM")),
    "lists_remove_item": ("LIST", ("INDEX",)),
    "lists_append_list": ("LIST0", ("LIST1",)),
    "lists_lookup_in_pairs": ("LIST", ("KEY", "NOTFOUND")),
    "lists_join_with_separator": ("LIST", ("SEPARATOR",)),
    "lists_slice": ("LIST", ("INDEX1", "INDEX2")),
    "dictionaries_lookup": ("DICT", ("KEY", "NOTFOUND")),
    "dictionaries_set_pair": ("DICT", ("KEY", "VALUE")),
    "dictionaries_delete_pair": ("DICT", ("KEY",)),
    "dictionaries_recursive_lookup": ("DICT", ("KEYS", "NOTFOUND")),
    "dictionaries_recursive_set": ("DICT", ("KEYS", "VALUE")),
    "dictionaries_is_key_in": ("DICT", ("KEY",)),
    "dictionaries_walk_tree": ("DICT", ("PATH",)),
}

# Text blocks whose receiver and arguments are rendered without a value/statement hint.
_TEXT_PLAIN = {
    "text_starts_at": ("TEXT", "PIECE"),
    "text_replace_all": ("TEXT", "SEGMENT", "REPLACEMENT"),
    "text_segment": ("TEXT", "START", "LENGTH"),
}

_SPLIT_MODES = {
    "split": "SPLIT",
    "splitAtFirst": "SPLITATFIRST",
    "splitAtAny": "SPLITATANY",
    "splitAtFirstOfAny": "SPLITATFIRSTOFANY",
}

_CONTAINS_MODES = {
    "contains": "CONTAINS",
    "containsAny": "CONTAINS_ANY",
    "containsAll": "CONTAINS_ALL",
}


@dataclass
class Call(Expr):
    """A method called on a text, list or dictionary value."""

    on: Expr
    name: str
    args: list[Expr] = field(default_factory=list)
    where: object = None

    def __str__(self) -> str:
        target = str(self.on) if self.on.continuous() else f"({self.on})"
        return f"{target}.{self.name}({join_exprs(', ', self.args)})"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        block_type = check_signature(self.name, len(self.args)).blockly_name

        if block_type in _SIMPLE_OPERAND:
            return Block(type=block_type, values=[Value(_SIMPLE_OPERAND[block_type], self.on.blockly(False))])
        if block_type in _RECEIVER_AND_ARGS:
            on_name, arg_names = _RECEIVER_AND_ARGS[block_type]
            return Block(type=block_type, values=make_value_args(self.on, on_name, self.args, *arg_names))
        if block_type in _TEXT_PLAIN:
            sockets = _TEXT_PLAIN[block_type]
            operands = [self.on, *self.args]
            return Block(
                type=block_type,
                values=[Value(socket, operand.blockly()) for socket, operand in zip(sockets, operands)],
            )
        if block_type in ("text_split", "text_contains"):
            modes, arg_socket = (
                (_SPLIT_MODES, "AT") if block_type == "text_split" else (_CONTAINS_MODES, "PIECE")
            )
            mode = modes[self.name]
            return Block(
                type=block_type,
                mutation=Mutation(mode=mode),
                fields=[Field("OP", mode)],
                values=[Value("TEXT", self.on.blockly()), Value(arg_socket, self.args[0].blockly())],
            )
        if block_type == "text_changeCase":
            return Block(
                type=block_type,
                fields=[Field("OP", "UPCASE" if self.name == "uppercase" else "DOWNCASE")],
                values=[Value("TEXT", self.on.blockly(False))],
            )
        if block_type == "text_replace_mappings":
            order = "DICTIONARY_ORDER" if self.name == "replaceFrom" else "LONGEST_STRING_FIRST"
            return Block(
                type=block_type,
                fields=[Field("OP", order)],
                values=[
                    Value("MAPPINGS", self.args[0].blockly(False)),
                    Value("TEXT", self.on.blockly(False)),
                ],
            )
        if block_type == "lists_add_items":
            return Block(
                type=block_type,
                mutation=Mutation(item_count=len(self.args)),
                values=value_args_by_prefix(self.on, "LIST", "ITEM", self.args),
            )
        if block_type == "dictionaries_combine_dicts":
            return Block(
                type=block_type,
                values=[
                    Value("DICT1", self.args[0].blockly(False)),
                    Value("DICT2", self.on.blockly(False)),
                ],
            )
        if block_type == "dictionaries_getters":
            return Block(
                type=block_type,
                fields=[Field("OP", "VALUES" if self.name == "values" else "KEYS")],
                values=[Value("DICT", self.on.blockly(False))],
            )
        raise CompileError(f"Unknown method block {block_type}")

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        signature = _SIGNATURES.get(self.name)
        if signature is None:
            raise CompileError(f"Cannot find method .{self.name}()")
        return signature.consumable

    def signature(self) -> list[Signature]:
        return [check_signature(self.name, len(self.args)).signature]