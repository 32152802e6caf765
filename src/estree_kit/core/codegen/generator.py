"""
ESTree to JavaScript Generator.

This module provides the `CodeGenerator` class, which turns a dataclass
syntax tree back into JavaScript source text.

Behavior follows escodegen's defaults:
1.  **Precedence**: Sub-expressions are parenthesized only when their
    precedence is below what the surrounding operator requires.
2.  **Verbatim Literals**: A `Literal` carrying a `Verbatim` annotation is
    emitted as its exact original text (``0x1F`` stays ``0x1F``).
3.  **Layout**: One statement per line, blocks and object literals spread
    over several lines, arrays and patterns kept on one line.
"""

from typing import Optional

from estree_kit.config import ConversionConfig
from estree_kit.core.codegen.gen_statements import StatementGeneratorMixin
from estree_kit.core.nodes import Node


class CodeGenerator(StatementGeneratorMixin):
  """
  Renders any supported node, statement or expression, to source text.

  Attributes:
      config (ConversionConfig): Layout options.
  """

  def generate(self, node: Node) -> str:
    """
    Renders a node at depth zero.

    Nodes with a statement handler (including `Program`, `SwitchCase` and
    `CatchClause`) are rendered as statements; everything else as an
    expression in a sequence context.

    Args:
        node: Root of the subtree to render.

    Returns:
        str: JavaScript source text.
    """
    self._depth = 0
    if hasattr(self, f"_stmt_{node.type.value}"):
      return self.generate_statement(node)
    return self.generate_expression(node)


def generate(node: Node, config: Optional[ConversionConfig] = None) -> str:
  """
  Convenience wrapper around `CodeGenerator.generate`.

  Args:
      node: Root of the subtree to render.
      config: Layout options; defaults to `ConversionConfig()`.

  Returns:
      str: JavaScript source text.

  Raises:
      UnsupportedNodeError: If the tree contains a node kind with no handler.
      GenerationError: If a required child is missing.
  """
  return CodeGenerator(config).generate(node)
