"""
Node Metadata Store.

Small accessors over the fixed-shape `NodeMetadata` record every node
carries. Transformation passes use the ``ignored_node`` flag to mark
subtrees they must leave untouched.
"""

from dataclasses import replace
from typing import Any, TypeVar

from estree_kit.core.nodes import Node, NodeMetadata

N = TypeVar("N", bound=Node)


def set_metadata(node: N, **flags: Any) -> N:
  """
  Merges the given flags into the node's metadata record.

  Args:
      node: The node to annotate.
      **flags: `NodeMetadata` field values, e.g. ``ignored_node=True``.

  Returns:
      The same node, for chaining.

  Raises:
      TypeError: If a flag is not a `NodeMetadata` field.
  """
  current = node.metadata if node.metadata is not None else NodeMetadata()
  node.metadata = replace(current, **flags)
  return node


def get_metadata(node: Node, key: str) -> Any:
  """
  Reads one metadata flag.

  Args:
      node: The node to inspect.
      key: Name of the `NodeMetadata` field.

  Returns:
      The flag value, or None if the node carries no metadata record.
  """
  if node.metadata is None:
    return None
  return getattr(node.metadata, key)


def is_ignored_node(node: Node) -> bool:
  """Returns True when the node is flagged to be skipped by transformations."""
  return get_metadata(node, "ignored_node") is True
