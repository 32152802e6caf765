"""
Tests for the Node Metadata Store.
"""

import pytest

from estree_kit.core.metadata import get_metadata, is_ignored_node, set_metadata
from estree_kit.core.nodes import Identifier


def test_set_and_get_flag():
  """Setting ignored_node is visible through both accessors."""
  node = Identifier(name="x")
  returned = set_metadata(node, ignored_node=True)

  assert returned is node
  assert get_metadata(node, "ignored_node") is True
  assert is_ignored_node(node)


def test_set_metadata_replaces_record():
  """The update installs a new record rather than mutating a shared one."""
  node = Identifier(name="x")
  before = node.metadata
  set_metadata(node, ignored_node=True)

  assert before.ignored_node is False
  assert node.metadata is not before


def test_unknown_flag_rejected():
  """Only NodeMetadata fields may be set."""
  with pytest.raises(TypeError):
    set_metadata(Identifier(name="x"), not_a_flag=True)


def test_missing_record():
  """A node whose record was cleared reports no flags."""
  node = Identifier(name="x")
  node.metadata = None

  assert get_metadata(node, "ignored_node") is None
  assert not is_ignored_node(node)

  set_metadata(node, ignored_node=False)
  assert node.metadata.ignored_node is False
