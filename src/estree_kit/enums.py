"""
Enumerations for estree-kit.

This module defines the discriminants and small closed vocabularies shared by
the node model, the factory and the code generator.
"""

from enum import Enum, IntEnum


class NodeType(str, Enum):
  """
  ESTree node type names.

  The value of each member is the exact ``type`` string used by ESTree and
  emitted by the parser.
  """

  PROGRAM = "Program"

  # Expressions
  ARRAY_EXPRESSION = "ArrayExpression"
  ARROW_FUNCTION_EXPRESSION = "ArrowFunctionExpression"
  ASSIGNMENT_EXPRESSION = "AssignmentExpression"
  AWAIT_EXPRESSION = "AwaitExpression"
  BINARY_EXPRESSION = "BinaryExpression"
  CALL_EXPRESSION = "CallExpression"
  CLASS_EXPRESSION = "ClassExpression"
  CONDITIONAL_EXPRESSION = "ConditionalExpression"
  FUNCTION_EXPRESSION = "FunctionExpression"
  IDENTIFIER = "Identifier"
  LITERAL = "Literal"
  LOGICAL_EXPRESSION = "LogicalExpression"
  MEMBER_EXPRESSION = "MemberExpression"
  META_PROPERTY = "MetaProperty"
  NEW_EXPRESSION = "NewExpression"
  OBJECT_EXPRESSION = "ObjectExpression"
  PROPERTY = "Property"
  SEQUENCE_EXPRESSION = "SequenceExpression"
  SPREAD_ELEMENT = "SpreadElement"
  SUPER = "Super"
  TAGGED_TEMPLATE_EXPRESSION = "TaggedTemplateExpression"
  TEMPLATE_ELEMENT = "TemplateElement"
  TEMPLATE_LITERAL = "TemplateLiteral"
  THIS_EXPRESSION = "ThisExpression"
  UNARY_EXPRESSION = "UnaryExpression"
  UPDATE_EXPRESSION = "UpdateExpression"
  YIELD_EXPRESSION = "YieldExpression"

  # Statements
  BLOCK_STATEMENT = "BlockStatement"
  BREAK_STATEMENT = "BreakStatement"
  CATCH_CLAUSE = "CatchClause"
  CONTINUE_STATEMENT = "ContinueStatement"
  DEBUGGER_STATEMENT = "DebuggerStatement"
  DO_WHILE_STATEMENT = "DoWhileStatement"
  EMPTY_STATEMENT = "EmptyStatement"
  EXPRESSION_STATEMENT = "ExpressionStatement"
  FOR_IN_STATEMENT = "ForInStatement"
  FOR_OF_STATEMENT = "ForOfStatement"
  FOR_STATEMENT = "ForStatement"
  IF_STATEMENT = "IfStatement"
  LABELED_STATEMENT = "LabeledStatement"
  RETURN_STATEMENT = "ReturnStatement"
  SWITCH_CASE = "SwitchCase"
  SWITCH_STATEMENT = "SwitchStatement"
  THROW_STATEMENT = "ThrowStatement"
  TRY_STATEMENT = "TryStatement"
  WHILE_STATEMENT = "WhileStatement"
  WITH_STATEMENT = "WithStatement"

  # Declarations
  CLASS_BODY = "ClassBody"
  CLASS_DECLARATION = "ClassDeclaration"
  FUNCTION_DECLARATION = "FunctionDeclaration"
  METHOD_DEFINITION = "MethodDefinition"
  VARIABLE_DECLARATION = "VariableDeclaration"
  VARIABLE_DECLARATOR = "VariableDeclarator"

  # Patterns
  ARRAY_PATTERN = "ArrayPattern"
  ASSIGNMENT_PATTERN = "AssignmentPattern"
  OBJECT_PATTERN = "ObjectPattern"
  REST_ELEMENT = "RestElement"


class Precedence(IntEnum):
  """
  Operator precedence levels used by the code generator.

  Mirrors the escodegen table: a sub-expression is parenthesized when its own
  level is lower than the level its context requires.
  """

  SEQUENCE = 0
  YIELD = 1
  ASSIGNMENT = 1
  CONDITIONAL = 2
  ARROW_FUNCTION = 2
  COALESCE = 3
  LOGICAL_OR = 4
  LOGICAL_AND = 5
  BITWISE_OR = 6
  BITWISE_XOR = 7
  BITWISE_AND = 8
  EQUALITY = 9
  RELATIONAL = 10
  BITWISE_SHIFT = 11
  ADDITIVE = 12
  MULTIPLICATIVE = 13
  EXPONENTIATION = 14
  AWAIT = 15
  UNARY = 15
  POSTFIX = 16
  OPTIONAL_CHAINING = 17
  CALL = 18
  NEW = 19
  TAGGED_TEMPLATE = 20
  MEMBER = 21
  PRIMARY = 22


BINARY_PRECEDENCE = {
  "??": Precedence.COALESCE,
  "||": Precedence.LOGICAL_OR,
  "&&": Precedence.LOGICAL_AND,
  "|": Precedence.BITWISE_OR,
  "^": Precedence.BITWISE_XOR,
  "&": Precedence.BITWISE_AND,
  "==": Precedence.EQUALITY,
  "!=": Precedence.EQUALITY,
  "===": Precedence.EQUALITY,
  "!==": Precedence.EQUALITY,
  "<": Precedence.RELATIONAL,
  ">": Precedence.RELATIONAL,
  "<=": Precedence.RELATIONAL,
  ">=": Precedence.RELATIONAL,
  "in": Precedence.RELATIONAL,
  "instanceof": Precedence.RELATIONAL,
  "<<": Precedence.BITWISE_SHIFT,
  ">>": Precedence.BITWISE_SHIFT,
  ">>>": Precedence.BITWISE_SHIFT,
  "+": Precedence.ADDITIVE,
  "-": Precedence.ADDITIVE,
  "*": Precedence.MULTIPLICATIVE,
  "%": Precedence.MULTIPLICATIVE,
  "/": Precedence.MULTIPLICATIVE,
  "**": Precedence.EXPONENTIATION,
}


class VariableKind(str, Enum):
  """Declaration keywords for ``VariableDeclaration.kind``."""

  VAR = "var"
  LET = "let"
  CONST = "const"


class PropertyKind(str, Enum):
  """Kinds of object literal properties."""

  INIT = "init"
  GET = "get"
  SET = "set"


class MethodKind(str, Enum):
  """Kinds of class members for ``MethodDefinition.kind``."""

  CONSTRUCTOR = "constructor"
  METHOD = "method"
  GET = "get"
  SET = "set"


class QuoteStyle(str, Enum):
  """Quote character used when rendering string literals from their value."""

  SINGLE = "single"
  DOUBLE = "double"
