"""
Expression Nodes.

Fields are listed in ESTree visitor-key order; scalar attributes follow the
children they qualify.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from estree_kit.core.nodes.base import (
  Expression,
  LiteralValue,
  Node,
  Pattern,
  RegexInfo,
  TemplateValue,
  Verbatim,
)
from estree_kit.enums import NodeType


@dataclass(kw_only=True)
class Identifier(Expression, Pattern):
  type = NodeType.IDENTIFIER

  name: str


@dataclass(kw_only=True)
class Literal(Expression):
  """
  A primitive or regular-expression literal.

  ``raw`` is the source text captured by the parser (or chosen by the
  factory). ``verbatim``, when set, is what the code generator emits.
  """

  type = NodeType.LITERAL

  value: LiteralValue = None
  raw: Optional[str] = None
  regex: Optional[RegexInfo] = None
  verbatim: Optional[Verbatim] = None


@dataclass(kw_only=True)
class ThisExpression(Expression):
  type = NodeType.THIS_EXPRESSION


@dataclass(kw_only=True)
class Super(Node):
  type = NodeType.SUPER


@dataclass(kw_only=True)
class SpreadElement(Node):
  type = NodeType.SPREAD_ELEMENT

  argument: Expression


@dataclass(kw_only=True)
class ArrayExpression(Expression):
  type = NodeType.ARRAY_EXPRESSION

  # None entries are elisions: [a, , b]
  elements: List[Optional[Union[Expression, SpreadElement]]] = field(default_factory=list)


@dataclass(kw_only=True)
class Property(Node):
  type = NodeType.PROPERTY

  key: Expression
  value: Union[Expression, Pattern]
  kind: str = "init"
  computed: bool = False
  method: bool = False
  shorthand: bool = False


@dataclass(kw_only=True)
class ObjectExpression(Expression):
  type = NodeType.OBJECT_EXPRESSION

  properties: List[Union[Property, SpreadElement]] = field(default_factory=list)


@dataclass(kw_only=True)
class FunctionExpression(Expression):
  type = NodeType.FUNCTION_EXPRESSION

  id: Optional[Identifier] = None
  params: List[Pattern] = field(default_factory=list)
  body: "BlockStatement"
  generator: bool = False
  expression: bool = False
  is_async: bool = False


@dataclass(kw_only=True)
class ArrowFunctionExpression(Expression):
  type = NodeType.ARROW_FUNCTION_EXPRESSION

  params: List[Pattern] = field(default_factory=list)
  body: Union["BlockStatement", Expression]
  expression: bool = False
  generator: bool = False
  is_async: bool = False


@dataclass(kw_only=True)
class ClassExpression(Expression):
  type = NodeType.CLASS_EXPRESSION

  id: Optional[Identifier] = None
  super_class: Optional[Expression] = None
  body: "ClassBody"


@dataclass(kw_only=True)
class TemplateElement(Node):
  type = NodeType.TEMPLATE_ELEMENT

  value: TemplateValue
  tail: bool = False


@dataclass(kw_only=True)
class TemplateLiteral(Expression):
  type = NodeType.TEMPLATE_LITERAL

  quasis: List[TemplateElement] = field(default_factory=list)
  expressions: List[Expression] = field(default_factory=list)


@dataclass(kw_only=True)
class TaggedTemplateExpression(Expression):
  type = NodeType.TAGGED_TEMPLATE_EXPRESSION

  tag: Expression
  quasi: TemplateLiteral


@dataclass(kw_only=True)
class UnaryExpression(Expression):
  type = NodeType.UNARY_EXPRESSION

  operator: str
  argument: Expression
  prefix: bool = True


@dataclass(kw_only=True)
class UpdateExpression(Expression):
  type = NodeType.UPDATE_EXPRESSION

  operator: str
  argument: Expression
  prefix: bool = False


@dataclass(kw_only=True)
class BinaryExpression(Expression):
  type = NodeType.BINARY_EXPRESSION

  operator: str
  left: Expression
  right: Expression


@dataclass(kw_only=True)
class LogicalExpression(Expression):
  type = NodeType.LOGICAL_EXPRESSION

  operator: str
  left: Expression
  right: Expression


@dataclass(kw_only=True)
class AssignmentExpression(Expression):
  type = NodeType.ASSIGNMENT_EXPRESSION

  operator: str
  left: Union[Pattern, Expression]
  right: Expression


@dataclass(kw_only=True)
class ConditionalExpression(Expression):
  type = NodeType.CONDITIONAL_EXPRESSION

  test: Expression
  consequent: Expression
  alternate: Expression


@dataclass(kw_only=True)
class CallExpression(Expression):
  type = NodeType.CALL_EXPRESSION

  callee: Union[Expression, Super]
  arguments: List[Union[Expression, SpreadElement]] = field(default_factory=list)


@dataclass(kw_only=True)
class NewExpression(Expression):
  type = NodeType.NEW_EXPRESSION

  callee: Expression
  arguments: List[Union[Expression, SpreadElement]] = field(default_factory=list)


@dataclass(kw_only=True)
class MemberExpression(Expression, Pattern):
  type = NodeType.MEMBER_EXPRESSION

  object: Union[Expression, Super]
  property: Expression
  computed: bool = False


@dataclass(kw_only=True)
class SequenceExpression(Expression):
  type = NodeType.SEQUENCE_EXPRESSION

  expressions: List[Expression] = field(default_factory=list)


@dataclass(kw_only=True)
class YieldExpression(Expression):
  type = NodeType.YIELD_EXPRESSION

  argument: Optional[Expression] = None
  delegate: bool = False


@dataclass(kw_only=True)
class AwaitExpression(Expression):
  type = NodeType.AWAIT_EXPRESSION

  argument: Expression


@dataclass(kw_only=True)
class MetaProperty(Expression):
  type = NodeType.META_PROPERTY

  meta: Identifier
  property: Identifier
