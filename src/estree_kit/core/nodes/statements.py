"""
Program and Statement Nodes.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from estree_kit.core.nodes.base import Expression, Node, Pattern, Statement
from estree_kit.core.nodes.expressions import Identifier
from estree_kit.enums import NodeType


@dataclass(kw_only=True)
class Program(Node):
  """Root of a parsed script: an ordered list of top-level statements."""

  type = NodeType.PROGRAM

  body: List[Statement] = field(default_factory=list)
  source_type: str = "script"


@dataclass(kw_only=True)
class ExpressionStatement(Statement):
  """
  An expression evaluated for its side effects.

  ``directive`` holds the raw directive text (e.g. ``use strict``) when the
  statement is part of a directive prologue.
  """

  type = NodeType.EXPRESSION_STATEMENT

  expression: Expression
  directive: Optional[str] = None


@dataclass(kw_only=True)
class BlockStatement(Statement):
  type = NodeType.BLOCK_STATEMENT

  body: List[Statement] = field(default_factory=list)


@dataclass(kw_only=True)
class EmptyStatement(Statement):
  type = NodeType.EMPTY_STATEMENT


@dataclass(kw_only=True)
class DebuggerStatement(Statement):
  type = NodeType.DEBUGGER_STATEMENT


@dataclass(kw_only=True)
class WithStatement(Statement):
  type = NodeType.WITH_STATEMENT

  object: Expression
  body: Statement


@dataclass(kw_only=True)
class ReturnStatement(Statement):
  type = NodeType.RETURN_STATEMENT

  argument: Optional[Expression] = None


@dataclass(kw_only=True)
class LabeledStatement(Statement):
  type = NodeType.LABELED_STATEMENT

  label: Identifier
  body: Statement


@dataclass(kw_only=True)
class BreakStatement(Statement):
  type = NodeType.BREAK_STATEMENT

  label: Optional[Identifier] = None


@dataclass(kw_only=True)
class ContinueStatement(Statement):
  type = NodeType.CONTINUE_STATEMENT

  label: Optional[Identifier] = None


@dataclass(kw_only=True)
class IfStatement(Statement):
  type = NodeType.IF_STATEMENT

  test: Expression
  consequent: Statement
  alternate: Optional[Statement] = None


@dataclass(kw_only=True)
class SwitchCase(Node):
  """A ``case`` clause; ``test`` is None for ``default``."""

  type = NodeType.SWITCH_CASE

  test: Optional[Expression] = None
  consequent: List[Statement] = field(default_factory=list)


@dataclass(kw_only=True)
class SwitchStatement(Statement):
  type = NodeType.SWITCH_STATEMENT

  discriminant: Expression
  cases: List[SwitchCase] = field(default_factory=list)


@dataclass(kw_only=True)
class ThrowStatement(Statement):
  type = NodeType.THROW_STATEMENT

  argument: Expression


@dataclass(kw_only=True)
class CatchClause(Node):
  type = NodeType.CATCH_CLAUSE

  param: Optional[Pattern] = None
  body: BlockStatement


@dataclass(kw_only=True)
class TryStatement(Statement):
  type = NodeType.TRY_STATEMENT

  block: BlockStatement
  handler: Optional[CatchClause] = None
  finalizer: Optional[BlockStatement] = None


@dataclass(kw_only=True)
class WhileStatement(Statement):
  type = NodeType.WHILE_STATEMENT

  test: Expression
  body: Statement


@dataclass(kw_only=True)
class DoWhileStatement(Statement):
  type = NodeType.DO_WHILE_STATEMENT

  body: Statement
  test: Expression


@dataclass(kw_only=True)
class ForStatement(Statement):
  type = NodeType.FOR_STATEMENT

  init: Optional[Union["VariableDeclaration", Expression]] = None
  test: Optional[Expression] = None
  update: Optional[Expression] = None
  body: Statement


@dataclass(kw_only=True)
class ForInStatement(Statement):
  type = NodeType.FOR_IN_STATEMENT

  left: Union["VariableDeclaration", Pattern]
  right: Expression
  body: Statement


@dataclass(kw_only=True)
class ForOfStatement(Statement):
  type = NodeType.FOR_OF_STATEMENT

  left: Union["VariableDeclaration", Pattern]
  right: Expression
  body: Statement
