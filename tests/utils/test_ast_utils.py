"""
Tests for structural node comparison.
"""

from estree_kit.core.factory import NodeFactory as F
from estree_kit.core.node_utils import clone
from estree_kit.core.nodes import Literal
from estree_kit.utils.ast_utils import cmp_nodes


def test_equal_trees():
  """Identical structures compare equal."""
  a = F.binary_expression_node("+", F.identifier_node("x"), F.literal_node(1, "1"))
  b = F.binary_expression_node("+", F.identifier_node("x"), F.literal_node(1, "1"))
  assert cmp_nodes(a, b)


def test_parent_links_are_ignored():
  """Different parents do not affect equality."""
  a = F.identifier_node("x")
  b = clone(a)
  a.parent = F.empty_statement_node()
  assert cmp_nodes(a, b)


def test_different_values():
  """Scalar differences are detected."""
  assert not cmp_nodes(F.identifier_node("x"), F.identifier_node("y"))
  assert not cmp_nodes(F.literal_node(1, "1"), F.literal_node(1, "0x1"))


def test_different_types():
  """Different node kinds never compare equal."""
  assert not cmp_nodes(F.identifier_node("x"), F.this_expression_node())


def test_list_lengths():
  """Lists must match element-wise."""
  a = F.array_expression_node([F.identifier_node("x")])
  b = F.array_expression_node([F.identifier_node("x"), None])
  assert not cmp_nodes(a, b)
  assert cmp_nodes([None], [None])


def test_ignore_metadata():
  """Metadata can be excluded from the comparison."""
  a = F.identifier_node("x")
  b = F.identifier_node("x")
  b.metadata.ignored_node = True

  assert not cmp_nodes(a, b)
  assert cmp_nodes(a, b, ignore_metadata=True)


def test_ignore_verbatim():
  """Verbatim annotations can be excluded from the comparison."""
  a = Literal(value=31, raw="0x1F")
  b = F.literal_node(31, "0x1F")

  assert not cmp_nodes(a, b)
  assert cmp_nodes(a, b, ignore_verbatim=True)
