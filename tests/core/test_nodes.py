"""
Tests for the Syntax Node Model.

Verifies:
1. Every NodeType has a registered dataclass.
2. Parent links are excluded from equality and repr.
3. Unknown type names raise UnsupportedNodeError.
"""

import pytest

from estree_kit.core.nodes import (
  RESERVED_FIELDS,
  BinaryExpression,
  Identifier,
  Literal,
  Node,
  NodeMetadata,
  Verbatim,
  node_class_for,
  registered_node_types,
)
from estree_kit.enums import NodeType, Precedence
from estree_kit.exceptions import EstreeKitError, UnsupportedNodeError


def test_registry_covers_every_node_type():
  """Each NodeType member resolves to a class whose discriminant matches."""
  registry = registered_node_types()
  assert set(registry) == set(NodeType)
  for node_type, cls in registry.items():
    assert cls.type is node_type
    assert issubclass(cls, Node)


def test_lookup_accepts_string_names():
  """The ESTree type string resolves like the enum member."""
  assert node_class_for("BinaryExpression") is BinaryExpression
  assert node_class_for(NodeType.IDENTIFIER) is Identifier


def test_lookup_unknown_type():
  """Unsupported kinds raise the package error, which is also a TypeError."""
  with pytest.raises(UnsupportedNodeError) as exc:
    node_class_for("ImportDeclaration")

  assert exc.value.node_type == "ImportDeclaration"
  assert isinstance(exc.value, TypeError)
  assert isinstance(exc.value, EstreeKitError)


def test_parent_is_ignored_by_equality():
  """Two nodes differing only in their parent link compare equal."""
  a = Identifier(name="x")
  b = Identifier(name="x")
  a.parent = Literal(value=1)
  b.parent = b

  assert a == b
  assert "parent" not in repr(a)


def test_metadata_defaults():
  """A fresh node carries a metadata record with ignored_node False."""
  node = Identifier(name="x")
  assert node.metadata == NodeMetadata(ignored_node=False)
  assert node.parent is None


def test_metadata_records_are_not_shared():
  """Default metadata records are distinct per node."""
  a = Identifier(name="a")
  b = Identifier(name="b")
  a.metadata.ignored_node = True
  assert b.metadata.ignored_node is False


def test_literal_verbatim_field():
  """Literals carry an optional verbatim annotation with a precedence."""
  lit = Literal(value=31, raw="0x1F", verbatim=Verbatim("0x1F"))
  assert lit.verbatim.content == "0x1F"
  assert lit.verbatim.precedence is Precedence.PRIMARY
  assert Literal(value=1).verbatim is None


def test_reserved_fields():
  """parent, metadata and verbatim are the reserved non-child fields."""
  assert RESERVED_FIELDS == {"parent", "metadata", "verbatim"}


def test_nodes_are_keyword_only():
  """Node constructors reject positional arguments."""
  with pytest.raises(TypeError):
    Identifier("x")
