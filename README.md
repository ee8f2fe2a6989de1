# falconast

`falconast` is the syntax tree of a small, text-based language for visual
block programs. Every node can:

* print itself back as source text (`str(node)`),
* turn itself into a Blockly block tree (`node.blockly(statement)`), where
  `statement` is `True` when a statement is wanted, `False` when a value is
  wanted and `None` when the caller has no expectation,
* say whether it reads as one unbroken piece (`continuous()`), whether its
  result can be consumed as a value (`consumable(statement)`), and what kind
  of value it yields (`signature()`, a list of `Signature` members).

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Building nodes

Nodes are dataclasses in the package's modules:

* `falconast.fundamentals`: `Number`, `Text`, `Boolean`, `Not`, `Color`,
  `Component`, `ListLiteral`, `Dictionary`, `Pair`, `WalkAll`, `HelperDropdown`
* `falconast.variables`: `Get`, `Set`, `Global`, `Var`, `SimpleVar`, `VarResult`
* `falconast.smart_body`: `SmartBody`, a run of expressions rendered as one
  value block that yields its last expression
* `falconast.loops`: `For`, `Each`, `EachPair`, `While`, `Do`, `Break`
* `falconast.conditionals`: `If`, `SimpleIf`, `make_simple_if`
* `falconast.lists`: `ListGet`, `ListSet`, `Transformer` (`map`, `filter`,
  `reduce`, `sort`, `sortByKey`, `min`, `max`) and `check_signature`
* `falconast.methods`: `Call` for text, list and dictionary methods,
  `CallSignature` and `check_signature`
* `falconast.procedures`: `ProcedureCall`, `ReturningProcedure`, `VoidProcedure`
* `falconast.components`: `Event`, `GenericEvent`, `EveryComponent`,
  `MethodCall`, `GenericMethodCall`, `PropertyGet`, `PropertySet`,
  `GenericPropertyGet`, `GenericPropertySet`
* `falconast.binary`: `BinaryExpr` and the `Operator` enum
* `falconast.calls`: built-in functions (`FuncCall`, `make_func_call`,
  `FuncCallSignature`, `check_signature`) and type tests (`Question`)
* `falconast.specials`: `EmptySocket` and `Transform`

```python
from falconast.binary import BinaryExpr, Operator
from falconast.blockly import xml_document
from falconast.fundamentals import Number
from falconast.variables import Global

total = Global("total", BinaryExpr(Operator.PLUS, [Number("1"), Number("2")], symbol="+"))
print(total)                      # global total = 1 + 2

block = total.blockly(True)
print(block.type)                 # global_declaration
print(block.single_value().type)  # math_add
print(xml_document([block], "urn:example:blocks"))
```

`BinaryExpr` takes the operator as written (`symbol`) and its `precedence`
only for printing; an operand with lower precedence than its parent is put in
parentheses.

## Errors

Unknown functions, methods, transformers, questions and transforms, and
calls with the wrong number of arguments, raise
`falconast.context.CompileError` when the node is rendered. Helpers given
mismatched operand and socket counts, or an empty body where a statement is
required, raise `ValueError`.

`falconast.context.CodeContext` holds a file's source text and builds
diagnostics that underline the offending word of a line
(`build_error`), or raises them as `CompileError` (`report_error`).

## Helpers

`falconast.blockly` holds the block data model (`Block`, `Field`, `Value`,
`Statement`, `Mutation`), the `Expr` base class, the `Signature` enum,
`Block.to_element()` and `xml_document()` for XML output, and helpers such as
`create_statement`, `optional_statement`, `to_statements`, `make_values`,
`values_by_prefix`, `depends_on_variables`, `combine_signatures` and the
`pad`, `pad_direct` and `pad_body` functions used for pretty-printing.

## What it does not do

There is no lexer or parser: trees are built in Python code, not read from
source text. There is also no command-line tool; the package is a library
only.