"""
Expression Generation Mixin.

Renders expression, pattern and member nodes (properties, method
definitions, template parts) to JavaScript text.

Every ``_expr_<Type>`` handler receives the precedence its context requires
and the context `Flags`, and is responsible for parenthesizing itself.
"""

import re
from typing import List, Optional, Union

from estree_kit.core.codegen.base import BaseGeneratorMixin, Flags
from estree_kit.core.nodes import (
  ArrayExpression,
  ArrayPattern,
  ArrowFunctionExpression,
  AssignmentExpression,
  AssignmentPattern,
  AwaitExpression,
  BinaryExpression,
  BlockStatement,
  CallExpression,
  ClassBody,
  ClassDeclaration,
  ClassExpression,
  ConditionalExpression,
  FunctionDeclaration,
  FunctionExpression,
  Identifier,
  Literal,
  LogicalExpression,
  MemberExpression,
  MetaProperty,
  MethodDefinition,
  NewExpression,
  Node,
  ObjectExpression,
  ObjectPattern,
  Property,
  RestElement,
  SequenceExpression,
  SpreadElement,
  Super,
  TaggedTemplateExpression,
  TemplateElement,
  TemplateLiteral,
  ThisExpression,
  UnaryExpression,
  UpdateExpression,
  YieldExpression,
)
from estree_kit.enums import BINARY_PRECEDENCE, MethodKind, Precedence, PropertyKind
from estree_kit.exceptions import GenerationError, UnsupportedNodeError

_WORD_OPERATOR = re.compile(r"[a-z]+")

FunctionLike = Union[FunctionExpression, FunctionDeclaration, ArrowFunctionExpression]


class ExpressionGeneratorMixin(BaseGeneratorMixin):
  """
  Mixin for generating expression text.
  Assumes `self.generate_statement` is available on the host class.
  """

  def generate_statement(self, node: Node) -> str:
    """
    Abstract placeholder.
    Must be implemented by the statement mixin to render function and class bodies.
    """
    raise NotImplementedError

  def generate_expression(
    self,
    node: Optional[Node],
    precedence: Precedence = Precedence.SEQUENCE,
    flags: Flags = Flags.DEFAULT,
  ) -> str:
    """
    Renders an expression in a context requiring the given precedence.

    Args:
        node: The expression (or pattern) node.
        precedence: Minimum precedence that avoids parentheses.
        flags: Context restrictions.

    Returns:
        str: The expression text, parenthesized if needed.

    Raises:
        GenerationError: If ``node`` is None.
        UnsupportedNodeError: If no handler exists for the node kind.
    """
    if node is None:
      raise GenerationError("Expected an expression node, got None")
    handler = getattr(self, f"_expr_{node.type.value}", None)
    if handler is None:
      raise UnsupportedNodeError(node.type.value)
    return handler(node, precedence, flags)

  def _generate_list(self, items: List[Optional[Node]]) -> str:
    """Renders comma separated elements, keeping holes (``[a, , b]``)."""
    parts = ["" if item is None else self.generate_expression(item, Precedence.ASSIGNMENT) for item in items]
    text = ", ".join(parts)
    if items and items[-1] is None:
      text += ","
    return text

  def _generate_params(self, params: List[Node]) -> str:
    return "(" + ", ".join(self.generate_expression(p, Precedence.ASSIGNMENT) for p in params) + ")"

  def _generate_property_key(self, key: Node, computed: bool) -> str:
    if computed:
      return "[" + self.generate_expression(key, Precedence.ASSIGNMENT) + "]"
    return self.generate_expression(key, Precedence.SEQUENCE)

  def _generate_function_tail(self, node: FunctionLike) -> str:
    """Renders ``(params) { body }``."""
    return self._generate_params(node.params) + " " + self.generate_statement(node.body)

  def _generate_function(self, node: Union[FunctionExpression, FunctionDeclaration]) -> str:
    prefix = "async " if node.is_async else ""
    keyword = "function*" if node.generator else "function"
    # anonymous functions keep the space: `function (a) {`
    name = " " + node.id.name if node.id is not None else " "
    return f"{prefix}{keyword}{name}{self._generate_function_tail(node)}"

  def _generate_class(self, node: Union[ClassExpression, ClassDeclaration]) -> str:
    text = "class"
    if node.id is not None:
      text += " " + node.id.name
    if node.super_class is not None:
      text += " extends " + self.generate_expression(node.super_class, Precedence.UNARY)
    return text + " " + self._expr_ClassBody(node.body, Precedence.SEQUENCE, Flags.DEFAULT)

  # --- Primary ---

  def _expr_Identifier(self, node: Identifier, precedence: Precedence, flags: Flags) -> str:
    return node.name

  def _expr_Literal(self, node: Literal, precedence: Precedence, flags: Flags) -> str:
    return self._render_literal(node, precedence)

  def _expr_ThisExpression(self, node: ThisExpression, precedence: Precedence, flags: Flags) -> str:
    return "this"

  def _expr_Super(self, node: Super, precedence: Precedence, flags: Flags) -> str:
    return "super"

  def _expr_MetaProperty(self, node: MetaProperty, precedence: Precedence, flags: Flags) -> str:
    return f"{node.meta.name}.{node.property.name}"

  def _expr_ArrayExpression(self, node: ArrayExpression, precedence: Precedence, flags: Flags) -> str:
    return "[" + self._generate_list(node.elements) + "]"

  def _expr_ArrayPattern(self, node: ArrayPattern, precedence: Precedence, flags: Flags) -> str:
    return "[" + self._generate_list(node.elements) + "]"

  def _expr_ObjectExpression(self, node: ObjectExpression, precedence: Precedence, flags: Flags) -> str:
    """Renders an object literal with one property per line."""
    if not node.properties:
      return "{}"
    with self._indented():
      lines = [self._indent() + self.generate_expression(p, Precedence.ASSIGNMENT) for p in node.properties]
    return "{" + self.newline + ("," + self.newline).join(lines) + self.newline + self._indent() + "}"

  def _expr_ObjectPattern(self, node: ObjectPattern, precedence: Precedence, flags: Flags) -> str:
    return "{" + ", ".join(self.generate_expression(p, Precedence.ASSIGNMENT) for p in node.properties) + "}"

  def _expr_Property(self, node: Property, precedence: Precedence, flags: Flags) -> str:
    """
    Renders an object property: ``key: value``, shorthand, method or accessor.
    """
    key = self._generate_property_key(node.key, node.computed)

    if node.kind in (PropertyKind.GET.value, PropertyKind.SET.value):
      return f"{node.kind} {key}{self._generate_function_tail(node.value)}"

    if node.method:
      prefix = "async " if node.value.is_async else ""
      star = "*" if node.value.generator else ""
      return f"{prefix}{star}{key}{self._generate_function_tail(node.value)}"

    if node.shorthand:
      # `{a = 1}` in patterns is a shorthand whose value is an AssignmentPattern
      if isinstance(node.value, AssignmentPattern):
        return self.generate_expression(node.value, Precedence.ASSIGNMENT)
      return key

    return f"{key}: {self.generate_expression(node.value, Precedence.ASSIGNMENT)}"

  def _expr_SpreadElement(self, node: SpreadElement, precedence: Precedence, flags: Flags) -> str:
    return "..." + self.generate_expression(node.argument, Precedence.ASSIGNMENT)

  def _expr_RestElement(self, node: RestElement, precedence: Precedence, flags: Flags) -> str:
    return "..." + self.generate_expression(node.argument, Precedence.ASSIGNMENT)

  def _expr_AssignmentPattern(self, node: AssignmentPattern, precedence: Precedence, flags: Flags) -> str:
    left = self.generate_expression(node.left, Precedence.ASSIGNMENT)
    return f"{left} = {self.generate_expression(node.right, Precedence.ASSIGNMENT)}"

  # --- Functions and classes ---

  def _expr_FunctionExpression(self, node: FunctionExpression, precedence: Precedence, flags: Flags) -> str:
    return self._generate_function(node)

  def _expr_ArrowFunctionExpression(
    self,
    node: ArrowFunctionExpression,
    precedence: Precedence,
    flags: Flags,
  ) -> str:
    """Renders ``(params) => body``; object literal bodies are parenthesized."""
    prefix = "async " if node.is_async else ""
    if isinstance(node.body, BlockStatement):
      body = self.generate_statement(node.body)
    else:
      body = self.generate_expression(node.body, Precedence.ASSIGNMENT)
      if body.startswith("{"):
        body = f"({body})"
    text = f"{prefix}{self._generate_params(node.params)} => {body}"
    return self._parenthesize(text, Precedence.ARROW_FUNCTION, precedence)

  def _expr_ClassExpression(self, node: ClassExpression, precedence: Precedence, flags: Flags) -> str:
    return self._generate_class(node)

  def _expr_ClassBody(self, node: ClassBody, precedence: Precedence, flags: Flags) -> str:
    """Renders class members one per line."""
    with self._indented():
      lines = [self._indent() + self.generate_expression(m) for m in node.body]
    if not lines:
      return "{" + self.newline + self._indent() + "}"
    return "{" + self.newline + self.newline.join(lines) + self.newline + self._indent() + "}"

  def _expr_MethodDefinition(self, node: MethodDefinition, precedence: Precedence, flags: Flags) -> str:
    text = "static " if node.static else ""
    key = self._generate_property_key(node.key, node.computed)
    if node.kind in (MethodKind.GET.value, MethodKind.SET.value):
      return f"{text}{node.kind} {key}{self._generate_function_tail(node.value)}"
    if node.value.is_async:
      text += "async "
    if node.value.generator:
      text += "*"
    return f"{text}{key}{self._generate_function_tail(node.value)}"

  # --- Templates ---

  def _expr_TemplateElement(self, node: TemplateElement, precedence: Precedence, flags: Flags) -> str:
    return node.value.raw

  def _expr_TemplateLiteral(self, node: TemplateLiteral, precedence: Precedence, flags: Flags) -> str:
    parts = ["`"]
    for idx, quasi in enumerate(node.quasis):
      parts.append(quasi.value.raw)
      if idx < len(node.expressions):
        parts.append("${" + self.generate_expression(node.expressions[idx], Precedence.SEQUENCE) + "}")
    parts.append("`")
    return "".join(parts)

  def _expr_TaggedTemplateExpression(
    self,
    node: TaggedTemplateExpression,
    precedence: Precedence,
    flags: Flags,
  ) -> str:
    tag = self.generate_expression(node.tag, Precedence.CALL, Flags.ALLOW_CALL)
    text = tag + self.generate_expression(node.quasi, Precedence.PRIMARY)
    return self._parenthesize(text, Precedence.TAGGED_TEMPLATE, precedence)

  # --- Operators ---

  def _expr_UnaryExpression(self, node: UnaryExpression, precedence: Precedence, flags: Flags) -> str:
    argument = self.generate_expression(node.argument, Precedence.UNARY)
    operator = node.operator
    if _WORD_OPERATOR.fullmatch(operator):
      text = f"{operator} {argument}"
    elif operator in ("+", "-") and argument.startswith(operator):
      # `- -x` and `+ +x` must not fuse into `--x` / `++x`
      text = f"{operator} {argument}"
    else:
      text = operator + argument
    return self._parenthesize(text, Precedence.UNARY, precedence)

  def _expr_UpdateExpression(self, node: UpdateExpression, precedence: Precedence, flags: Flags) -> str:
    if node.prefix:
      text = node.operator + self.generate_expression(node.argument, Precedence.UNARY)
      return self._parenthesize(text, Precedence.UNARY, precedence)
    text = self.generate_expression(node.argument, Precedence.POSTFIX) + node.operator
    return self._parenthesize(text, Precedence.POSTFIX, precedence)

  def _expr_BinaryExpression(self, node: BinaryExpression, precedence: Precedence, flags: Flags) -> str:
    return self._generate_binary(node, precedence, flags)

  def _expr_LogicalExpression(self, node: LogicalExpression, precedence: Precedence, flags: Flags) -> str:
    return self._generate_binary(node, precedence, flags)

  def _generate_binary(
    self,
    node: Union[BinaryExpression, LogicalExpression],
    precedence: Precedence,
    flags: Flags,
  ) -> str:
    """
    Renders a binary or logical operation.

    Operands bind left-associatively except ``**``, which is
    right-associative and rejects an unparenthesized unary left operand.
    ``in`` is wrapped in parentheses where ``Flags.ALLOW_IN`` is unset.

    The left spine of nested operations (``a + b + c + ...``) is walked in a
    loop, so long operator chains render without deep recursion.
    """
    spine = []
    current_node: Node = node
    while isinstance(current_node, (BinaryExpression, LogicalExpression)):
      operator = current_node.operator
      if operator not in BINARY_PRECEDENCE:
        raise GenerationError(f"Unknown binary operator: {operator!r}")
      current = BINARY_PRECEDENCE[operator]
      force_parens = operator == "in" and not flags & Flags.ALLOW_IN
      needs_parens = force_parens or current < precedence
      inner_flags = Flags.DEFAULT if needs_parens else flags | Flags.ALLOW_CALL

      if operator == "**":
        left_prec, right_prec = Precedence.POSTFIX, current
      else:
        left_prec, right_prec = current, Precedence(current + 1)

      spine.append((current_node, needs_parens, inner_flags, left_prec, right_prec))
      current_node, precedence, flags = current_node.left, left_prec, inner_flags

    innermost, _, inner_flags, left_prec, _ = spine[-1]
    text = self.generate_expression(innermost.left, left_prec, inner_flags)
    operand: Node = innermost.left
    for parent, needs_parens, inner_flags, left_prec, right_prec in reversed(spine):
      left = self._group_coalesce_operand(parent, operand, text, left_prec)
      right = self._generate_operand(parent, parent.right, right_prec, inner_flags)
      text = f"{left} {parent.operator} {right}"
      if needs_parens:
        text = f"({text})"
      operand = parent
    return text

  def _generate_operand(
    self,
    parent: Union[BinaryExpression, LogicalExpression],
    operand: Node,
    precedence: Precedence,
    flags: Flags,
  ) -> str:
    text = self.generate_expression(operand, precedence, flags)
    return self._group_coalesce_operand(parent, operand, text, precedence)

  @staticmethod
  def _group_coalesce_operand(
    parent: Union[BinaryExpression, LogicalExpression],
    operand: Node,
    text: str,
    precedence: Precedence,
  ) -> str:
    # `??` cannot be mixed with `||` / `&&` without explicit grouping
    if (
      parent.operator == "??"
      and isinstance(operand, LogicalExpression)
      and operand.operator in ("||", "&&")
      and BINARY_PRECEDENCE[operand.operator] >= precedence
    ):
      return f"({text})"
    return text

  def _expr_AssignmentExpression(self, node: AssignmentExpression, precedence: Precedence, flags: Flags) -> str:
    left = self.generate_expression(node.left, Precedence.CALL, flags | Flags.ALLOW_CALL)
    right = self.generate_expression(node.right, Precedence.ASSIGNMENT, flags)
    return self._parenthesize(f"{left} {node.operator} {right}", Precedence.ASSIGNMENT, precedence)

  def _expr_ConditionalExpression(self, node: ConditionalExpression, precedence: Precedence, flags: Flags) -> str:
    test = self.generate_expression(node.test, Precedence.COALESCE, flags)
    consequent = self.generate_expression(node.consequent, Precedence.ASSIGNMENT, flags | Flags.ALLOW_IN)
    alternate = self.generate_expression(node.alternate, Precedence.ASSIGNMENT, flags)
    return self._parenthesize(f"{test} ? {consequent} : {alternate}", Precedence.CONDITIONAL, precedence)

  def _expr_SequenceExpression(self, node: SequenceExpression, precedence: Precedence, flags: Flags) -> str:
    text = ", ".join(self.generate_expression(e, Precedence.ASSIGNMENT, flags) for e in node.expressions)
    return self._parenthesize(text, Precedence.SEQUENCE, precedence)

  def _expr_YieldExpression(self, node: YieldExpression, precedence: Precedence, flags: Flags) -> str:
    text = "yield*" if node.delegate else "yield"
    if node.argument is not None:
      text += " " + self.generate_expression(node.argument, Precedence.YIELD)
    return self._parenthesize(text, Precedence.YIELD, precedence)

  def _expr_AwaitExpression(self, node: AwaitExpression, precedence: Precedence, flags: Flags) -> str:
    text = "await " + self.generate_expression(node.argument, Precedence.AWAIT)
    return self._parenthesize(text, Precedence.AWAIT, precedence)

  # --- Calls and members ---

  def _expr_CallExpression(self, node: CallExpression, precedence: Precedence, flags: Flags) -> str:
    callee = self.generate_expression(node.callee, Precedence.CALL, Flags.DEFAULT)
    text = callee + "(" + ", ".join(self.generate_expression(a, Precedence.ASSIGNMENT) for a in node.arguments) + ")"
    if not flags & Flags.ALLOW_CALL:
      return f"({text})"
    return self._parenthesize(text, Precedence.CALL, precedence)

  def _expr_NewExpression(self, node: NewExpression, precedence: Precedence, flags: Flags) -> str:
    """Renders ``new callee(args)``; calls inside the callee are parenthesized."""
    callee = self.generate_expression(node.callee, Precedence.NEW, Flags.ALLOW_IN)
    args = ", ".join(self.generate_expression(a, Precedence.ASSIGNMENT) for a in node.arguments)
    return self._parenthesize(f"new {callee}({args})", Precedence.NEW, precedence)

  def _expr_MemberExpression(self, node: MemberExpression, precedence: Precedence, flags: Flags) -> str:
    object_flags = Flags.DEFAULT if flags & Flags.ALLOW_CALL else Flags.ALLOW_IN
    obj = self.generate_expression(node.object, Precedence.CALL, object_flags)

    if node.computed:
      text = f"{obj}[{self.generate_expression(node.property, Precedence.SEQUENCE)}]"
    else:
      if isinstance(node.object, Literal) and self._is_plain_integer(obj):
        obj += "."
      text = f"{obj}.{self.generate_expression(node.property, Precedence.PRIMARY)}"
    return self._parenthesize(text, Precedence.MEMBER, precedence)
