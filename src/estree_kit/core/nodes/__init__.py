"""
ESTree Syntax Node Model.

A closed set of keyword-only dataclasses, one per supported ESTree node kind.
Importing this package populates the type-to-class registry used by the
parser adapter (`node_class_for`).
"""

from estree_kit.core.nodes.base import (
  METADATA_FIELD,
  PARENT_FIELD,
  RESERVED_FIELDS,
  VERBATIM_FIELD,
  Declaration,
  Expression,
  LiteralValue,
  Node,
  NodeMetadata,
  Pattern,
  RegexInfo,
  Statement,
  TemplateValue,
  Verbatim,
  node_class_for,
  registered_node_types,
)
from estree_kit.core.nodes.expressions import (
  ArrayExpression,
  ArrowFunctionExpression,
  AssignmentExpression,
  AwaitExpression,
  BinaryExpression,
  CallExpression,
  ClassExpression,
  ConditionalExpression,
  FunctionExpression,
  Identifier,
  Literal,
  LogicalExpression,
  MemberExpression,
  MetaProperty,
  NewExpression,
  ObjectExpression,
  Property,
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
from estree_kit.core.nodes.statements import (
  BlockStatement,
  BreakStatement,
  CatchClause,
  ContinueStatement,
  DebuggerStatement,
  DoWhileStatement,
  EmptyStatement,
  ExpressionStatement,
  ForInStatement,
  ForOfStatement,
  ForStatement,
  IfStatement,
  LabeledStatement,
  Program,
  ReturnStatement,
  SwitchCase,
  SwitchStatement,
  ThrowStatement,
  TryStatement,
  WhileStatement,
  WithStatement,
)
from estree_kit.core.nodes.declarations import (
  ClassBody,
  ClassDeclaration,
  FunctionDeclaration,
  MethodDefinition,
  VariableDeclaration,
  VariableDeclarator,
)
from estree_kit.core.nodes.patterns import (
  ArrayPattern,
  AssignmentPattern,
  ObjectPattern,
  RestElement,
)

__all__ = [
  "METADATA_FIELD",
  "PARENT_FIELD",
  "RESERVED_FIELDS",
  "VERBATIM_FIELD",
  "ArrayExpression",
  "ArrayPattern",
  "ArrowFunctionExpression",
  "AssignmentExpression",
  "AssignmentPattern",
  "AwaitExpression",
  "BinaryExpression",
  "BlockStatement",
  "BreakStatement",
  "CallExpression",
  "CatchClause",
  "ClassBody",
  "ClassDeclaration",
  "ClassExpression",
  "ConditionalExpression",
  "ContinueStatement",
  "DebuggerStatement",
  "Declaration",
  "DoWhileStatement",
  "EmptyStatement",
  "Expression",
  "ExpressionStatement",
  "ForInStatement",
  "ForOfStatement",
  "ForStatement",
  "FunctionDeclaration",
  "FunctionExpression",
  "Identifier",
  "IfStatement",
  "LabeledStatement",
  "Literal",
  "LiteralValue",
  "LogicalExpression",
  "MemberExpression",
  "MetaProperty",
  "MethodDefinition",
  "NewExpression",
  "Node",
  "NodeMetadata",
  "ObjectExpression",
  "ObjectPattern",
  "Pattern",
  "Program",
  "Property",
  "RegexInfo",
  "RestElement",
  "ReturnStatement",
  "SequenceExpression",
  "SpreadElement",
  "Statement",
  "Super",
  "SwitchCase",
  "SwitchStatement",
  "TaggedTemplateExpression",
  "TemplateElement",
  "TemplateLiteral",
  "TemplateValue",
  "ThisExpression",
  "ThrowStatement",
  "TryStatement",
  "UnaryExpression",
  "UpdateExpression",
  "VariableDeclaration",
  "VariableDeclarator",
  "Verbatim",
  "WhileStatement",
  "WithStatement",
  "YieldExpression",
  "node_class_for",
  "registered_node_types",
]
