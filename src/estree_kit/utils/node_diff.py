"""
Node Serialization for Visual Diffs.

Renders detached syntax nodes to JavaScript text so that a pass can capture
the state of a subtree before and after a transformation without generating
the whole program.
"""

from typing import Optional

from estree_kit.config import ConversionConfig
from estree_kit.core.codegen import generate
from estree_kit.core.nodes import Node
from estree_kit.exceptions import GenerationError, UnsupportedNodeError


def capture_node_source(node: Node, config: Optional[ConversionConfig] = None) -> str:
  """
  Renders a node into its JavaScript source representation.

  Works for parsed nodes and for factory-built nodes that are not attached
  to any tree.

  Args:
      node: The node to serialise.
      config: Layout options.

  Returns:
      str: The JavaScript code string.
  """
  try:
    return generate(node, config)
  except (GenerationError, UnsupportedNodeError):
    # Partially built subtrees (e.g. a declarator without its id)
    return f"<Unrepresentable Node: {type(node).__name__}>"


def diff_nodes(original: Node, modified: Node) -> tuple[str, str, bool]:
  """
  Compares two nodes and returns their source strings if they differ.

  Args:
      original: The node before transformation.
      modified: The node after transformation.

  Returns:
      tuple: (source_before, source_after, has_changed)
  """
  src_before = capture_node_source(original)
  src_after = capture_node_source(modified)

  # Layout-only changes are not reported
  is_diff = src_before.strip() != src_after.strip()

  return src_before, src_after, is_diff
