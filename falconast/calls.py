"""Built-in function calls and type questions such as ``x ? number``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .binary import BinaryExpr, Operator
from .blockly import (
    Block,
    Expr,
    Field,
    Mutation,
    Signature,
    Value,
    join_exprs,
    make_values,
    value_args_by_prefix,
    values_by_prefix,
)
from .context import CompileError
from .fundamentals import Number, Text
from .variables import Get


@dataclass(frozen=True)
class FuncCallSignature:
    """How many arguments a built-in function takes and what it yields.

    ``param_count`` is exact when zero or more, ``-1`` means "at least one",
    and ``-1 - n`` means "at least ``n``".
    """

    name: str
    param_count: int
    signature: Signature


def _sig(name: str, param_count: int, signature: Signature) -> tuple[str, FuncCallSignature]:
    return name, FuncCallSignature(name, param_count, signature)


_SIGNATURES: dict[str, FuncCallSignature] = dict(
    [
        *(
            _sig(name, 1, Signature.NUMB)
            for name in (
                "sqrt", "abs", "neg", "log", "exp", "round", "ceil", "floor",
                "sin", "cos", "tan", "asin", "acos", "atan", "degrees", "radians",
                "decToHex", "decToBin", "hexToDec", "binToDec",
                "dec", "bin", "octal", "hexa",
            )
        ),
        _sig("randInt", 2, Signature.NUMB),
        _sig("randFloat", 0, Signature.NUMB),
        _sig("setRandSeed", 1, Signature.VOID),
        _sig("min", -1, Signature.NUMB),
        _sig("max", -1, Signature.NUMB),
        *(
            _sig(name, 1, Signature.NUMB)
            for name in ("avgOf", "maxOf", "minOf", "geoMeanOf", "stdDevOf", "stdErrOf")
        ),
        _sig("println", 1, Signature.VOID),
        _sig("openScreen", 1, Signature.VOID),
        _sig("openScreenWithValue", 2, Signature.VOID),
        _sig("closeScreenWithValue", 1, Signature.VOID),
        _sig("getStartValue", 0, Signature.TEXT),
        _sig("closeScreen", 0, Signature.VOID),
        _sig("closeApp", 0, Signature.VOID),
        _sig("getPlainStartText", 0, Signature.TEXT),
        _sig("closeScreenWithPlainText", 1, Signature.VOID),
        _sig("copyList", 1, Signature.LIST),
        _sig("copyDict", 1, Signature.DICT),
        _sig("makeColor", 1, Signature.NUMB),
        _sig("splitColor", 1, Signature.LIST),
        _sig("set", 4, Signature.VOID),
        _sig("get", 3, Signature.ANY),
        _sig("call", -1 - 3, Signature.VOID),
        _sig("vcall", -1 - 3, Signature.ANY),
        _sig("every", 1, Signature.ANY),
    ]
)


def check_signature(func_name: str, args_count: int) -> FuncCallSignature:
    """Look up a built-in function and check the number of arguments it is given."""
    signature = _SIGNATURES.get(func_name)
    if signature is None:
        raise CompileError(f"Cannot find function .{func_name}()")
    if signature.param_count == -1:
        if args_count == 0:
            raise CompileError(f"Expected a positive number of args for function {func_name}()")
    elif signature.param_count >= 0:
        if args_count != signature.param_count:
            raise CompileError(
                f"Expected {signature.param_count} args but got {args_count} for function {func_name}()"
            )
    else:
        min_args = -signature.param_count - 1
        if args_count < min_args:
            raise CompileError(
                f"Expected at least {min_args} args but got only {args_count} for function {func_name}()"
            )
    return signature


_NOT_CONSUMABLE = frozenset(
    {
        "setRandSeed", "println", "openScreen", "openScreenWithValue", "closeScreen",
        "closeScreenWithValue", "closeApp", "closeScreenWithPlainText", "set", "call",
    }
)

_MATH_OPS = {
    "sqrt": "ROOT",
    "abs": "ABS",
    "neg": "NEG",
    "log": "LN",
    "exp": "EXP",
    "round": "ROUND",
    "ceil": "CEILING",
    "floor": "FLOOR",
    "sin": "SIN",
    "cos": "COS",
    "tan": "TAN",
    "asin": "ASIN",
    "acos": "ACOS",
    "atan": "ATAN",
    "degrees": "RADIANS_TO_DEGREES",
    "radians": "DEGREES_TO_RADIANS",
    "decToHex": "DEC_TO_HEX",
    "decToBin": "DEC_TO_BIN",
    "hexToDec": "HEX_TO_DEC",
    "binToDec": "BIN_TO_DEC",
}
_TRIG = frozenset({"SIN", "COS", "TAN", "ASIN", "ACOS", "ATAN"})
_ANGLES = frozenset({"RADIANS_TO_DEGREES", "DEGREES_TO_RADIANS"})
_NUMBER_CONVERSIONS = frozenset({"DEC_TO_HEX", "HEX_TO_DEC", "DEC_TO_BIN", "BIN_TO_DEC"})

_RADIX = {"dec": "DEC", "bin": "BIN", "octal": "OCT", "hexa": "HEX"}
_LIST_STATS = {
    "avgOf": "AVG",
    "maxOf": "MAX",
    "minOf": "MIN",
    "geoMeanOf": "GM",
    "stdDevOf": "SD",
    "stdErrOf": "SE",
}
_DIVIDE = {"mod": "MODULO", "rem": "REMAINDER", "quot": "QUOTIENT"}

# name -> (block type, socket names) for calls that only place their arguments.
_PLAIN_BLOCKS = {
    "randInt": ("math_random_int", ("FROM", "TO")),
    "randFloat": ("math_random_float", ()),
    "setRandSeed": ("math_random_set_seed", ("NUM",)),
    "modeOf": ("math_mode_of_list", ("LIST",)),
    "aTan2": ("math_atan2", ("Y", "X")),
    "formatDecimal": ("math_format_as_decimal", ("NUM", "PLACES")),
    "println": ("controls_eval_but_ignore", ("VALUE",)),
    "openScreen": ("controls_openAnotherScreen", ("SCREEN",)),
    "openScreenWithValue": ("controls_openAnotherScreenWithStartValue", ("SCREENNAME", "STARTVALUE")),
    "closeScreenWithValue": ("controls_closeScreenWithValue", ("SCREEN",)),
    "getStartValue": ("controls_getStartValue", ()),
    "closeScreen": ("controls_closeScreen", ()),
    "closeApp": ("controls_closeApplication", ()),
    "getPlainStartText": ("controls_getPlainStartText", ()),
    "closeScreenWithPlainText": ("controls_closeScreenWithPlainText", ("TEXT",)),
    "copyList": ("lists_copy", ("LIST",)),
    "copyDict": ("dictionaries_copy", ("DICT",)),
    "makeColor": ("color_make_color", ("COLORLIST",)),
    "splitColor": ("color_make_color", ("COLOR",)),
}


@dataclass
class FuncCall(Expr):
    """A call of a built-in function such as ``sqrt(x)`` or ``println(x)``."""

    name: str
    args: list[Expr] = field(default_factory=list)
    where: object = None

    def __str__(self) -> str:
        if self.name == "rem":
            return f"{self.args[0]} % {self.args[1]}"
        if self.name == "neg":
            operand = self.args[0]
            return f"-{operand}" if operand.continuous() else f"-({operand})"
        return f"{self.name}({join_exprs(', ', self.args)})"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        check_signature(self.name, len(self.args))
        if statement is False and not self.consumable():
            raise CompileError("Expected a consumable but got a statement")
        name = self.name
        if name in _MATH_OPS:
            return self._math_conversion()
        if name in _RADIX:
            return self._math_radix()
        if name in ("min", "max"):
            return self._min_or_max()
        if name in _LIST_STATS:
            return Block(
                type="math_on_list2",
                fields=[Field("OP", _LIST_STATS[name])],
                values=make_values(self.args, "LIST"),
            )
        if name in _DIVIDE:
            return Block(
                type="math_divide",
                fields=[Field("OP", _DIVIDE[name])],
                values=make_values(self.args, "DIVIDEND", "DIVISOR"),
            )
        if name in _PLAIN_BLOCKS:
            block_type, sockets = _PLAIN_BLOCKS[name]
            if not sockets:
                return Block(type=block_type)
            return Block(type=block_type, values=make_values(self.args, *sockets))
        handlers: dict[str, Callable[[], Block]] = {
            "set": self._generic_set,
            "get": self._generic_get,
            "call": lambda: self._generic_call(False),
            "vcall": lambda: self._generic_call(True),
            "every": self._every_component,
        }
        handler = handlers.get(name)
        if handler is None:
            raise CompileError(f"Cannot find {name}()")
        return handler()

    def _math_conversion(self) -> Block:
        op = _MATH_OPS[self.name]
        if op in _TRIG:
            block_type = "math_trig"
        elif op in _ANGLES:
            block_type = "math_convert_angles"
        elif op in _NUMBER_CONVERSIONS:
            block_type = "math_convert_number"
        else:
            block_type = "math_single"
        return Block(
            type=block_type,
            fields=[Field("OP", op)],
            values=[Value("NUM", self.args[0].blockly(False))],
        )

    def _math_radix(self) -> Block:
        text = self.args[0]
        if not isinstance(text, Text):
            raise CompileError(f"Expected a numeric string argument for {self.name}()")
        return Block(
            type="math_number_radix",
            fields=[Field("OP", _RADIX[self.name]), Field("NUM", text.content)],
        )

    def _min_or_max(self) -> Block:
        if not self.args:
            raise CompileError(f"No arguments provided for {self.name}()")
        return Block(
            type="math_on_list",
            fields=[Field("OP", self.name.upper())],
            mutation=Mutation(item_count=len(self.args)),
            values=values_by_prefix("NUM", self.args),
        )

    def _text_arg(self, index: int, message: str) -> str:
        arg = self.args[index]
        if not isinstance(arg, Text):
            raise CompileError(message)
        return arg.content

    def _every_component(self) -> Block:
        comp_type = self.args[0]
        if not isinstance(comp_type, Get) or comp_type.is_global:
            raise CompileError("Expected a component type for every() 1st argument!")
        return Block(
            type="component_all_component_block",
            mutation=Mutation(component_type=comp_type.name),
            fields=[Field("COMPONENT_SELECTOR", comp_type.name)],
        )

    def _generic_call(self, returning: bool) -> Block:
        comp_type = self._text_arg(0, "Expected a component type for call() 1st argument!")
        method = self._text_arg(2, "Expected a method name for call() 3rd argument!")
        return Block(
            type="component_method",
            mutation=Mutation(
                method_name=method,
                is_generic=True,
                component_type=comp_type,
                shape="value" if returning else "statement",
            ),
            values=value_args_by_prefix(self.args[1], "COMPONENT", "ARG", self.args[3:]),
        )

    def _generic_get(self) -> Block:
        comp_type = self._text_arg(0, "Expected a component type for get() 1st argument!")
        prop = self._text_arg(2, "Expected a property type for get() 3rd argument!")
        return Block(
            type="component_set_get",
            mutation=Mutation(
                set_or_get="get",
                property_name=prop,
                is_generic=True,
                component_type=comp_type,
            ),
            fields=[Field("PROP", prop)],
            values=[Value("COMPONENT", self.args[1].blockly(False))],
        )

    def _generic_set(self) -> Block:
        comp_type = self._text_arg(0, "Expected a component type for set() 1st argument!")
        prop = self._text_arg(2, "Expected a property type for set() 3rd argument!")
        return Block(
            type="component_set_get",
            mutation=Mutation(
                set_or_get="set",
                property_name=prop,
                is_generic=True,
                component_type=comp_type,
            ),
            fields=[Field("PROP", prop)],
            values=make_values([self.args[1], self.args[3]], "COMPONENT", "VALUE"),
        )

    def continuous(self) -> bool:
        return True

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return self.name not in _NOT_CONSUMABLE

    def signature(self) -> list[Signature]:
        return [check_signature(self.name, len(self.args)).signature]


def make_func_call(name: str, *args: Expr) -> FuncCall:
    """Build a built-in function call with no source position."""
    return FuncCall(name, list(args))


_MATH_QUESTIONS = {"number": "NUMBER", "base10": "BASE10", "hexa": "HEXADECIMAL", "bin": "BINARY"}

# question -> (block type, socket name)
_SIMPLE_QUESTIONS = {
    "text": ("text_is_string", "ITEM"),
    "list": ("lists_is_list", "ITEM"),
    "dict": ("dictionaries_is_dict", "THING"),
    "emptyText": ("text_isEmpty", "VALUE"),
    "emptyList": ("lists_is_empty", "LIST"),
}


@dataclass
class Question(Expr):
    """A type or property test on a value, such as ``x ? number``."""

    on: Expr
    question: str
    where: object = None

    def __str__(self) -> str:
        target = str(self.on) if self.on.continuous() else f"({self.on})"
        return f"{target} ? {self.question}"

    def blockly(self, statement: Optional[bool] = None) -> Block:
        if self.question in _MATH_QUESTIONS:
            return Block(
                type="math_is_a_number",
                fields=[Field("OP", _MATH_QUESTIONS[self.question])],
                values=[Value("NUM", self.on.blockly(False))],
            )
        if self.question in _SIMPLE_QUESTIONS:
            block_type, socket = _SIMPLE_QUESTIONS[self.question]
            return Block(type=block_type, values=[Value(socket, self.on.blockly(False))])
        if self.question in ("even", "odd"):
            remainder = "0" if self.question == "even" else "1"
            remainder_call = FuncCall("rem", [self.on, Number("2")], self.where)
            comparison = BinaryExpr(
                Operator.EQUALS,
                [remainder_call, Number(remainder)],
                symbol="==",
                where=self.where,
            )
            return comparison.blockly(False)
        raise CompileError(f"Unknown question ? {self.question}")

    def continuous(self) -> bool:
        return False

    def consumable(self, statement: Optional[bool] = None) -> bool:
        return True

    def signature(self) -> list[Signature]:
        return [Signature.BOOL]