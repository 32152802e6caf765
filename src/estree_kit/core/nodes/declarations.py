"""
Declaration Nodes (functions, variables, classes).
"""

from dataclasses import dataclass, field
from typing import List, Optional

from estree_kit.core.nodes.base import Declaration, Expression, Node, Pattern
from estree_kit.core.nodes.expressions import FunctionExpression, Identifier
from estree_kit.core.nodes.statements import BlockStatement
from estree_kit.enums import NodeType


@dataclass(kw_only=True)
class FunctionDeclaration(Declaration):
  type = NodeType.FUNCTION_DECLARATION

  id: Optional[Identifier] = None
  params: List[Pattern] = field(default_factory=list)
  body: BlockStatement
  generator: bool = False
  expression: bool = False
  is_async: bool = False


@dataclass(kw_only=True)
class VariableDeclarator(Node):
  type = NodeType.VARIABLE_DECLARATOR

  id: Pattern
  init: Optional[Expression] = None


@dataclass(kw_only=True)
class VariableDeclaration(Declaration):
  type = NodeType.VARIABLE_DECLARATION

  declarations: List[VariableDeclarator] = field(default_factory=list)
  kind: str = "var"


@dataclass(kw_only=True)
class MethodDefinition(Node):
  type = NodeType.METHOD_DEFINITION

  key: Expression
  value: FunctionExpression
  kind: str = "method"
  computed: bool = False
  static: bool = False


@dataclass(kw_only=True)
class ClassBody(Node):
  type = NodeType.CLASS_BODY

  body: List[MethodDefinition] = field(default_factory=list)


@dataclass(kw_only=True)
class ClassDeclaration(Declaration):
  type = NodeType.CLASS_DECLARATION

  id: Optional[Identifier] = None
  super_class: Optional[Expression] = None
  body: ClassBody

