"""
Statement Generation Mixin.

Renders statements and declarations. Handlers return text whose first line
carries no indentation; nested lines are indented for the current depth.
"""

import re
from typing import List, Optional

from estree_kit.core.codegen.gen_expressions import ExpressionGeneratorMixin
from estree_kit.core.codegen.base import Flags
from estree_kit.core.nodes import (
  BlockStatement,
  BreakStatement,
  CatchClause,
  ClassDeclaration,
  ContinueStatement,
  DebuggerStatement,
  DoWhileStatement,
  EmptyStatement,
  ExpressionStatement,
  ForInStatement,
  ForOfStatement,
  ForStatement,
  FunctionDeclaration,
  IfStatement,
  LabeledStatement,
  Node,
  Program,
  ReturnStatement,
  Statement,
  SwitchCase,
  SwitchStatement,
  ThrowStatement,
  TryStatement,
  VariableDeclaration,
  VariableDeclarator,
  WhileStatement,
  WithStatement,
)
from estree_kit.enums import Precedence
from estree_kit.exceptions import GenerationError, UnsupportedNodeError

# Expression statements that would otherwise parse as a declaration or block.
_AMBIGUOUS_STATEMENT_START = re.compile(r"(\{|function\b|class\b|let\s*\[|async\s+function\b)")


class StatementGeneratorMixin(ExpressionGeneratorMixin):
  """
  Mixin for generating statement text.
  """

  def generate_statement(self, node: Optional[Node]) -> str:
    """
    Renders one statement at the current depth.

    Raises:
        GenerationError: If ``node`` is None.
        UnsupportedNodeError: If no handler exists for the node kind.
    """
    if node is None:
      raise GenerationError("Expected a statement node, got None")
    handler = getattr(self, f"_stmt_{node.type.value}", None)
    if handler is None:
      raise UnsupportedNodeError(node.type.value)
    return handler(node)

  def _generate_body(self, statements: List[Statement]) -> List[str]:
    """Renders statements one level deeper, each prefixed with its indentation."""
    with self._indented():
      return [self._indent() + self.generate_statement(s) for s in statements]

  def _wrap_block(self, lines: List[str]) -> str:
    if not lines:
      return "{" + self.newline + self._indent() + "}"
    return "{" + self.newline + self.newline.join(lines) + self.newline + self._indent() + "}"

  def _substatement(self, node: Statement) -> str:
    """
    Renders the body of a control statement.

    Blocks stay on the header line; anything else moves to the next line,
    one level deeper.
    """
    if isinstance(node, BlockStatement):
      return " " + self.generate_statement(node)
    if isinstance(node, EmptyStatement):
      return ";"
    return self.newline + self._generate_body([node])[0]

  def _generate_for_left(self, node: Node) -> str:
    if isinstance(node, VariableDeclaration):
      return self._generate_declaration_head(node, Flags.ALLOW_CALL)
    return self.generate_expression(node, Precedence.CALL, Flags.ALLOW_CALL)

  def _generate_declaration_head(self, node: VariableDeclaration, flags: Flags) -> str:
    """Renders ``kind a = 1, b`` without the trailing semicolon."""
    declarators = ", ".join(self._generate_declarator(d, flags) for d in node.declarations)
    return f"{node.kind} {declarators}"

  def _generate_declarator(self, node: VariableDeclarator, flags: Flags) -> str:
    target = self.generate_expression(node.id, Precedence.ASSIGNMENT)
    if node.init is None:
      return target
    return f"{target} = {self.generate_expression(node.init, Precedence.ASSIGNMENT, flags)}"

  # --- Program and blocks ---

  def _stmt_Program(self, node: Program) -> str:
    return self.newline.join(self._indent() + self.generate_statement(s) for s in node.body)

  def _stmt_BlockStatement(self, node: BlockStatement) -> str:
    return self._wrap_block(self._generate_body(node.body))

  def _stmt_EmptyStatement(self, node: EmptyStatement) -> str:
    return ";"

  def _stmt_DebuggerStatement(self, node: DebuggerStatement) -> str:
    return "debugger;"

  def _stmt_ExpressionStatement(self, node: ExpressionStatement) -> str:
    text = self.generate_expression(node.expression, Precedence.SEQUENCE)
    if _AMBIGUOUS_STATEMENT_START.match(text):
      text = f"({text})"
    return text + ";"

  # --- Declarations ---

  def _stmt_VariableDeclaration(self, node: VariableDeclaration) -> str:
    return self._generate_declaration_head(node, Flags.DEFAULT) + ";"

  def _stmt_VariableDeclarator(self, node: VariableDeclarator) -> str:
    return self._generate_declarator(node, Flags.DEFAULT)

  def _stmt_FunctionDeclaration(self, node: FunctionDeclaration) -> str:
    return self._generate_function(node)

  def _stmt_ClassDeclaration(self, node: ClassDeclaration) -> str:
    return self._generate_class(node)

  # --- Control flow ---

  def _stmt_ReturnStatement(self, node: ReturnStatement) -> str:
    if node.argument is None:
      return "return;"
    return f"return {self.generate_expression(node.argument)};"

  def _stmt_ThrowStatement(self, node: ThrowStatement) -> str:
    return f"throw {self.generate_expression(node.argument)};"

  def _stmt_BreakStatement(self, node: BreakStatement) -> str:
    return "break;" if node.label is None else f"break {node.label.name};"

  def _stmt_ContinueStatement(self, node: ContinueStatement) -> str:
    return "continue;" if node.label is None else f"continue {node.label.name};"

  def _stmt_LabeledStatement(self, node: LabeledStatement) -> str:
    return f"{node.label.name}: {self.generate_statement(node.body)}"

  def _stmt_WithStatement(self, node: WithStatement) -> str:
    return f"with ({self.generate_expression(node.object)})" + self._substatement(node.body)

  def _stmt_IfStatement(self, node: IfStatement) -> str:
    """
    Renders an if/else chain.

    When an ``else`` follows a consequent that ends in an ``if`` without
    ``else``, the consequent is emitted as a block so the ``else`` cannot
    attach to the nested ``if``.
    """
    text = f"if ({self.generate_expression(node.test)})"
    if node.alternate is None:
      return text + self._substatement(node.consequent)

    if self._ends_with_open_if(node.consequent):
      text += " " + self._wrap_block(self._generate_body([node.consequent]))
      braced = True
    else:
      text += self._substatement(node.consequent)
      braced = isinstance(node.consequent, BlockStatement)

    text += " else" if braced else self.newline + self._indent() + "else"
    if isinstance(node.alternate, (IfStatement, BlockStatement)):
      return text + " " + self.generate_statement(node.alternate)
    return text + self._substatement(node.alternate)

  @staticmethod
  def _ends_with_open_if(node: Statement) -> bool:
    while True:
      if isinstance(node, IfStatement):
        if node.alternate is None:
          return True
        node = node.alternate
      elif isinstance(node, (WhileStatement, ForStatement, ForInStatement, ForOfStatement, WithStatement, LabeledStatement)):
        node = node.body
      else:
        return False

  def _stmt_SwitchStatement(self, node: SwitchStatement) -> str:
    header = f"switch ({self.generate_expression(node.discriminant)}) "
    return header + self._wrap_block(self._generate_body(node.cases))

  def _stmt_SwitchCase(self, node: SwitchCase) -> str:
    text = "default:" if node.test is None else f"case {self.generate_expression(node.test)}:"
    if len(node.consequent) == 1 and isinstance(node.consequent[0], BlockStatement):
      return text + " " + self.generate_statement(node.consequent[0])
    lines = self._generate_body(node.consequent)
    return self.newline.join([text, *lines])

  def _stmt_TryStatement(self, node: TryStatement) -> str:
    text = "try " + self.generate_statement(node.block)
    if node.handler is not None:
      text += " " + self._stmt_CatchClause(node.handler)
    if node.finalizer is not None:
      text += " finally " + self.generate_statement(node.finalizer)
    return text

  def _stmt_CatchClause(self, node: CatchClause) -> str:
    if node.param is None:
      return "catch " + self.generate_statement(node.body)
    param = self.generate_expression(node.param, Precedence.ASSIGNMENT)
    return f"catch ({param}) " + self.generate_statement(node.body)

  # --- Loops ---

  def _stmt_WhileStatement(self, node: WhileStatement) -> str:
    return f"while ({self.generate_expression(node.test)})" + self._substatement(node.body)

  def _stmt_DoWhileStatement(self, node: DoWhileStatement) -> str:
    body = self._substatement(node.body)
    separator = " " if isinstance(node.body, BlockStatement) else self.newline + self._indent()
    return f"do{body}{separator}while ({self.generate_expression(node.test)});"

  def _stmt_ForStatement(self, node: ForStatement) -> str:
    """Renders ``for (init; test; update)``; ``in`` inside ``init`` is parenthesized."""
    if node.init is None:
      init = ""
    elif isinstance(node.init, VariableDeclaration):
      init = self._generate_declaration_head(node.init, Flags.ALLOW_CALL)
    else:
      init = self.generate_expression(node.init, Precedence.SEQUENCE, Flags.ALLOW_CALL)

    test = "" if node.test is None else " " + self.generate_expression(node.test)
    update = "" if node.update is None else " " + self.generate_expression(node.update)
    return f"for ({init};{test};{update})" + self._substatement(node.body)

  def _stmt_ForInStatement(self, node: ForInStatement) -> str:
    left = self._generate_for_left(node.left)
    right = self.generate_expression(node.right, Precedence.SEQUENCE)
    return f"for ({left} in {right})" + self._substatement(node.body)

  def _stmt_ForOfStatement(self, node: ForOfStatement) -> str:
    left = self._generate_for_left(node.left)
    right = self.generate_expression(node.right, Precedence.ASSIGNMENT)
    return f"for ({left} of {right})" + self._substatement(node.body)
