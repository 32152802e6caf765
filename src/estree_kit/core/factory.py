"""
Node Factory.

Canonical constructors for synthesizing ESTree nodes inside transformation
passes. Each constructor takes only the semantically required arguments and
fills the remaining structural fields with the defaults a parser would
produce for the simplest source form.

Every node returned here carries ``metadata.ignored_node == False`` and no
``parent``. Callers (or a later `parentize_ast` pass) must link parents
before the node enters a tree that other passes traverse.
"""

import math
from decimal import Decimal
from typing import List, Optional, Union

from estree_kit.core.nodes import (
  ArrayExpression,
  AssignmentExpression,
  BinaryExpression,
  BlockStatement,
  BreakStatement,
  CallExpression,
  ConditionalExpression,
  ContinueStatement,
  EmptyStatement,
  Expression,
  ExpressionStatement,
  FunctionDeclaration,
  FunctionExpression,
  Identifier,
  IfStatement,
  Literal,
  LogicalExpression,
  MemberExpression,
  MethodDefinition,
  NewExpression,
  NodeMetadata,
  ObjectExpression,
  Pattern,
  Program,
  Property,
  ReturnStatement,
  SequenceExpression,
  SpreadElement,
  Statement,
  Super,
  SwitchCase,
  SwitchStatement,
  ThisExpression,
  UnaryExpression,
  UpdateExpression,
  VariableDeclaration,
  VariableDeclarator,
  Verbatim,
  WhileStatement,
)
from estree_kit.enums import MethodKind, Precedence, PropertyKind, VariableKind

_RAW_ESCAPES = {
  "\\": "\\\\",
  "'": "\\'",
  "\n": "\\n",
  "\r": "\\r",
  "\u2028": "\\u2028",
  "\u2029": "\\u2029",
}


def _metadata() -> NodeMetadata:
  return NodeMetadata(ignored_node=False)


def number_to_string(value: Union[int, float]) -> str:
  """
  Spells a number the way JavaScript's ``Number.prototype.toString`` does.

  Examples:
      ``2.0 -> "2"``, ``1e21 -> "1e+21"``, ``1e-7 -> "1e-7"``,
      ``float("nan") -> "NaN"``, ``float("-inf") -> "-Infinity"``.

  Args:
      value: An int or float.

  Returns:
      str: The shortest round-tripping decimal text in JavaScript notation.
  """
  if isinstance(value, int) and abs(value) < 10**21:
    return str(value)
  value = float(value)
  if math.isnan(value):
    return "NaN"
  if math.isinf(value):
    return "Infinity" if value > 0 else "-Infinity"
  if value == 0:
    return "0"

  sign = "-" if value < 0 else ""
  decimal_value = Decimal(repr(abs(value))).as_tuple()
  digits = "".join(str(d) for d in decimal_value.digits)
  # Decimal point position relative to the start of the digit string
  point = decimal_value.exponent + len(digits)
  digits = digits.rstrip("0")
  k = len(digits)

  if k <= point <= 21:
    return sign + digits + "0" * (point - k)
  if 0 < point <= 21:
    return sign + digits[:point] + "." + digits[point:]
  if -6 < point <= 0:
    return sign + "0." + "0" * -point + digits
  exponent = point - 1
  mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
  return f"{sign}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def quoted_raw(value: Union[bool, int, float, str]) -> str:
  """
  Renders a value as a single-quoted JavaScript string literal.

  Booleans and numbers use their JavaScript spelling, so
  ``quoted_raw(True) == "'true'"``, ``quoted_raw(2.0) == "'2'"`` and
  ``quoted_raw(float("inf")) == "'Infinity'"``.
  """
  if isinstance(value, bool):
    text = "true" if value else "false"
  elif isinstance(value, (int, float)):
    text = number_to_string(value)
  else:
    text = str(value)
  return "'" + "".join(_RAW_ESCAPES.get(ch, ch) for ch in text) + "'"


class NodeFactory:
  """
  Static constructors, one per supported node kind.
  """

  @staticmethod
  def program_node(body: Optional[List[Statement]] = None) -> Program:
    """
    Builds a script program.

    Args:
        body: Top-level statements. Defaults to an empty list.

    Returns:
        Program: A program with ``source_type == "script"``.
    """
    return Program(body=body if body is not None else [], source_type="script", metadata=_metadata())

  @staticmethod
  def array_expression_node(
    elements: Optional[List[Union[Expression, SpreadElement]]] = None,
  ) -> ArrayExpression:
    """
    Builds an array literal.

    Args:
        elements: Element expressions; ``None`` entries are holes.

    Returns:
        ArrayExpression: The array node.
    """
    return ArrayExpression(elements=elements if elements is not None else [], metadata=_metadata())

  @staticmethod
  def assignment_expression_node(
    operator: str,
    left: Union[Pattern, MemberExpression],
    right: Expression,
  ) -> AssignmentExpression:
    """
    Builds ``<left> <operator> <right>``.

    Args:
        operator: ``=`` or a compound operator such as ``+=``.
        left: Assignment target.
        right: Assigned value.

    Returns:
        AssignmentExpression: The assignment node.
    """
    return AssignmentExpression(operator=operator, left=left, right=right, metadata=_metadata())

  @staticmethod
  def binary_expression_node(operator: str, left: Expression, right: Expression) -> BinaryExpression:
    """
    Builds a binary operation.

    Args:
        operator: Arithmetic, comparison, bitwise, ``in`` or ``instanceof``.
        left: Left operand.
        right: Right operand.

    Returns:
        BinaryExpression: The operation node.
    """
    return BinaryExpression(operator=operator, left=left, right=right, metadata=_metadata())

  @staticmethod
  def block_statement_node(body: Optional[List[Statement]] = None) -> BlockStatement:
    """
    Builds a braced block.

    Args:
        body: Statements inside the block. Defaults to an empty list.

    Returns:
        BlockStatement: The block node.
    """
    return BlockStatement(body=body if body is not None else [], metadata=_metadata())

  @staticmethod
  def break_statement(label: Optional[Identifier] = None) -> BreakStatement:
    """Builds ``break`` or ``break <label>``."""
    return BreakStatement(label=label, metadata=_metadata())

  @staticmethod
  def call_expression_node(
    callee: Union[Expression, Super],
    args: Optional[List[Union[Expression, SpreadElement]]] = None,
  ) -> CallExpression:
    """
    Builds ``<callee>(<args>)``.

    Args:
        callee: The called expression.
        args: Argument expressions. Defaults to no arguments.

    Returns:
        CallExpression: The call node.
    """
    return CallExpression(callee=callee, arguments=args if args is not None else [], metadata=_metadata())

  @staticmethod
  def conditional_expression_node(
    test: Expression,
    consequent: Expression,
    alternate: Expression,
  ) -> ConditionalExpression:
    """
    Builds ``<test> ? <consequent> : <alternate>``.

    Args:
        test: The condition.
        consequent: Value when the condition holds.
        alternate: Value otherwise.

    Returns:
        ConditionalExpression: The ternary node.
    """
    return ConditionalExpression(test=test, consequent=consequent, alternate=alternate, metadata=_metadata())

  @staticmethod
  def continue_statement(label: Optional[Identifier] = None) -> ContinueStatement:
    """Builds ``continue`` or ``continue <label>``."""
    return ContinueStatement(label=label, metadata=_metadata())

  @staticmethod
  def empty_statement_node() -> EmptyStatement:
    """Builds a lone ``;``."""
    return EmptyStatement(metadata=_metadata())

  @staticmethod
  def expression_statement_node(expression: Expression) -> ExpressionStatement:
    """
    Wraps an expression as a statement.

    Args:
        expression: The evaluated expression.

    Returns:
        ExpressionStatement: The statement node.
    """
    return ExpressionStatement(expression=expression, metadata=_metadata())

  @staticmethod
  def function_declaration_node(
    function_name: str,
    params: List[Identifier],
    body: BlockStatement,
  ) -> FunctionDeclaration:
    """
    Builds ``function <function_name>(<params>) <body>``.

    The name is given as a string; its `Identifier` is created here.

    Args:
        function_name: Name of the declared function.
        params: Parameter identifiers.
        body: Function body.

    Returns:
        FunctionDeclaration: A plain (non-async, non-generator) declaration.
    """
    return FunctionDeclaration(
      id=NodeFactory.identifier_node(function_name),
      params=params,
      body=body,
      generator=False,
      metadata=_metadata(),
    )

  @staticmethod
  def function_expression_node(params: List[Identifier], body: BlockStatement) -> FunctionExpression:
    """
    Builds an anonymous ``function (<params>) <body>``.

    Args:
        params: Parameter identifiers.
        body: Function body.

    Returns:
        FunctionExpression: A plain (non-async, non-generator) function.
    """
    return FunctionExpression(params=params, body=body, generator=False, metadata=_metadata())

  @staticmethod
  def if_statement_node(
    test: Expression,
    consequent: BlockStatement,
    alternate: Optional[BlockStatement] = None,
  ) -> IfStatement:
    """
    Builds ``if (<test>) <consequent> else <alternate>``.

    Args:
        test: The condition.
        consequent: Block run when the condition holds.
        alternate: Optional ``else`` block.

    Returns:
        IfStatement: The conditional node.
    """
    return IfStatement(test=test, consequent=consequent, alternate=alternate, metadata=_metadata())

  @staticmethod
  def identifier_node(name: str) -> Identifier:
    """
    Builds a name reference.

    Args:
        name: The identifier text.

    Returns:
        Identifier: The identifier node.
    """
    return Identifier(name=name, metadata=_metadata())

  @staticmethod
  def literal_node(value: Union[bool, int, float, str], raw: Optional[str] = None) -> Literal:
    """
    Builds a literal whose text is pinned by a verbatim annotation.

    Args:
        value: The literal's semantic value.
        raw: Exact source text to emit. Defaults to the value rendered as a
            single-quoted string (see `quoted_raw`).

    Returns:
        Literal: A literal with ``raw`` set and
        ``verbatim == Verbatim(raw, Precedence.PRIMARY)``.
    """
    raw = raw if raw is not None else quoted_raw(value)

    return Literal(
      value=value,
      raw=raw,
      verbatim=Verbatim(content=raw, precedence=Precedence.PRIMARY),
      metadata=_metadata(),
    )

  @staticmethod
  def logical_expression_node(operator: str, left: Expression, right: Expression) -> LogicalExpression:
    """
    Builds a short-circuit operation.

    Args:
        operator: ``&&``, ``||`` or ``??``.
        left: Left operand.
        right: Right operand.

    Returns:
        LogicalExpression: The operation node.
    """
    return LogicalExpression(operator=operator, left=left, right=right, metadata=_metadata())

  @staticmethod
  def member_expression_node(
    object_: Union[Expression, Super],
    property_: Expression,
    computed: bool = False,
  ) -> MemberExpression:
    """
    Builds ``<object>.<property>`` or ``<object>[<property>]``.

    Args:
        object_: The accessed object.
        property_: Property name or key expression.
        computed: Whether the property is written in brackets.

    Returns:
        MemberExpression: The member access node.
    """
    return MemberExpression(object=object_, property=property_, computed=computed, metadata=_metadata())

  @staticmethod
  def method_definition_node(
    key: Expression,
    value: FunctionExpression,
    kind: str,
    computed: bool,
  ) -> MethodDefinition:
    """
    Builds a non-static class member.

    Args:
        key: Member name expression.
        value: The function implementing the member.
        kind: One of ``constructor``, ``method``, ``get``, ``set`` (`MethodKind`).
        computed: Whether ``key`` is written in brackets.
    """
    return MethodDefinition(
      key=key,
      value=value,
      kind=MethodKind(kind).value,
      computed=computed,
      static=False,
      metadata=_metadata(),
    )

  @staticmethod
  def new_expression_node(
    callee: Expression,
    args: Optional[List[Union[Expression, SpreadElement]]] = None,
  ) -> NewExpression:
    """
    Builds ``new <callee>(<args>)``.

    Args:
        callee: The constructor expression.
        args: Argument expressions. Defaults to no arguments.

    Returns:
        NewExpression: The construction node.
    """
    return NewExpression(callee=callee, arguments=args if args is not None else [], metadata=_metadata())

  @staticmethod
  def object_expression_node(properties: List[Property]) -> ObjectExpression:
    """
    Builds an object literal.

    Args:
        properties: The literal's properties, in order.

    Returns:
        ObjectExpression: The object node.
    """
    return ObjectExpression(properties=properties, metadata=_metadata())

  @staticmethod
  def property_node(
    key: Expression,
    value: Union[Expression, Pattern],
    computed: bool = False,
  ) -> Property:
    """
    Builds a plain ``key: value`` object property.

    Args:
        key: Property name expression.
        value: Property value.
        computed: Whether ``key`` is written in brackets.

    Returns:
        Property: An ``init`` property that is neither a method nor shorthand.
    """
    return Property(
      key=key,
      value=value,
      kind=PropertyKind.INIT.value,
      method=False,
      shorthand=False,
      computed=computed,
      metadata=_metadata(),
    )

  @staticmethod
  def return_statement_node(argument: Optional[Expression] = None) -> ReturnStatement:
    """Builds ``return`` or ``return <argument>``."""
    return ReturnStatement(argument=argument, metadata=_metadata())

  @staticmethod
  def sequence_expression_node(expressions: List[Expression]) -> SequenceExpression:
    """
    Builds a comma expression.

    Args:
        expressions: The evaluated expressions, in order.

    Returns:
        SequenceExpression: The sequence node.
    """
    return SequenceExpression(expressions=expressions, metadata=_metadata())

  @staticmethod
  def switch_statement_node(discriminant: Expression, cases: List[SwitchCase]) -> SwitchStatement:
    """
    Builds ``switch (<discriminant>) { <cases> }``.

    Args:
        discriminant: The switched-on expression.
        cases: Case clauses, in order.

    Returns:
        SwitchStatement: The switch node.
    """
    return SwitchStatement(discriminant=discriminant, cases=cases, metadata=_metadata())

  @staticmethod
  def switch_case_node(test: Optional[Expression], consequent: List[Statement]) -> SwitchCase:
    """
    Builds a ``case`` clause, or ``default`` when ``test`` is None.

    Args:
        test: The case value.
        consequent: Statements run for this case.

    Returns:
        SwitchCase: The clause node.
    """
    return SwitchCase(test=test, consequent=consequent, metadata=_metadata())

  @staticmethod
  def this_expression_node() -> ThisExpression:
    """Builds ``this``."""
    return ThisExpression(metadata=_metadata())

  @staticmethod
  def unary_expression_node(operator: str, argument: Expression, prefix: bool = True) -> UnaryExpression:
    """
    Builds a unary operation such as ``!x`` or ``typeof x``.

    Args:
        operator: The unary operator.
        argument: The operand.
        prefix: Always True for valid JavaScript.

    Returns:
        UnaryExpression: The operation node.
    """
    return UnaryExpression(operator=operator, argument=argument, prefix=prefix, metadata=_metadata())

  @staticmethod
  def update_expression_node(operator: str, argument_expr: Expression) -> UpdateExpression:
    """Builds a postfix update (``x++`` / ``x--``)."""
    return UpdateExpression(operator=operator, argument=argument_expr, prefix=False, metadata=_metadata())

  @staticmethod
  def variable_declaration_node(
    declarations: Optional[List[VariableDeclarator]] = None,
    kind: str = VariableKind.VAR.value,
  ) -> VariableDeclaration:
    """
    Builds a ``var`` / ``let`` / ``const`` declaration.

    Args:
        declarations: The declarators. Defaults to an empty list.
        kind: A `VariableKind` value.

    Returns:
        VariableDeclaration: The declaration node.

    Raises:
        ValueError: If ``kind`` is not a `VariableKind` value.
    """
    return VariableDeclaration(
      declarations=declarations if declarations is not None else [],
      kind=VariableKind(kind).value,
      metadata=_metadata(),
    )

  @staticmethod
  def variable_declarator_node(id_: Identifier, init: Optional[Expression] = None) -> VariableDeclarator:
    """
    Builds ``<id> = <init>`` inside a declaration.

    Args:
        id_: The declared name.
        init: Optional initializer.

    Returns:
        VariableDeclarator: The declarator node.
    """
    return VariableDeclarator(id=id_, init=init, metadata=_metadata())

  @staticmethod
  def while_statement_node(test: Expression, body: Statement) -> WhileStatement:
    """
    Builds ``while (<test>) <body>``.

    Args:
        test: The loop condition.
        body: The loop body.

    Returns:
        WhileStatement: The loop node.
    """
    return WhileStatement(test=test, body=body, metadata=_metadata())
