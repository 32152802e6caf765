"""
Syntax Node Base Definitions.

Every concrete node is a keyword-only dataclass with a class-level ``type``
discriminant. Children are declared as ordinary dataclass fields in ESTree
visitor-key order, so the walker can enumerate them generically.

Three field names are reserved and never treated as children:

- ``parent``: non-owning back-reference to the syntactic container. It is
  excluded from equality and ``repr`` and is never followed by copy,
  comparison or traversal routines.
- ``metadata``: the fixed-shape bookkeeping record (`NodeMetadata`).
- ``verbatim``: the optional exact-text annotation carried by literals.
"""

import re
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Optional, Type, Union

from estree_kit.enums import NodeType, Precedence
from estree_kit.exceptions import UnsupportedNodeError

PARENT_FIELD = "parent"
METADATA_FIELD = "metadata"
VERBATIM_FIELD = "verbatim"

RESERVED_FIELDS = frozenset({PARENT_FIELD, METADATA_FIELD, VERBATIM_FIELD})

_NODE_REGISTRY: Dict[NodeType, Type["Node"]] = {}


@dataclass
class NodeMetadata:
  """Bookkeeping flags consumed by transformation passes."""

  ignored_node: bool = False


@dataclass(frozen=True)
class Verbatim:
  """
  Exact-text annotation for a literal.

  When present, the code generator emits ``content`` unchanged instead of
  re-deriving the literal's text from its value.
  """

  content: str
  precedence: Precedence = Precedence.PRIMARY


@dataclass(frozen=True)
class RegexInfo:
  """Pattern and flags of a regular-expression literal."""

  pattern: str
  flags: str = ""


@dataclass(frozen=True)
class TemplateValue:
  """Raw and cooked text of a template element."""

  raw: str
  cooked: Optional[str] = None


LiteralValue = Union[str, bool, int, float, None, re.Pattern]


@dataclass(kw_only=True)
class Node:
  """Abstract base class for all syntax nodes."""

  type: ClassVar[NodeType]

  metadata: NodeMetadata = field(default_factory=NodeMetadata)
  parent: Optional["Node"] = field(default=None, repr=False, compare=False)

  def __init_subclass__(cls, **kwargs):
    super().__init_subclass__(**kwargs)
    node_type = cls.__dict__.get("type")
    if node_type is not None:
      _NODE_REGISTRY[node_type] = cls


class Expression(Node):
  """Marker base for expression nodes."""


class Statement(Node):
  """Marker base for statement nodes."""


class Declaration(Statement):
  """Marker base for declarations that may appear in statement position."""


class Pattern(Node):
  """Marker base for binding and assignment targets."""


def node_class_for(node_type: Union[NodeType, str]) -> Type[Node]:
  """
  Looks up the concrete node class registered for an ESTree type name.

  Args:
      node_type: A `NodeType` member or its string value (e.g. "Literal").

  Returns:
      Type[Node]: The dataclass implementing that node kind.

  Raises:
      UnsupportedNodeError: If no class is registered for the type.
  """
  try:
    return _NODE_REGISTRY[NodeType(node_type)]
  except (ValueError, KeyError):
    raise UnsupportedNodeError(str(getattr(node_type, "value", node_type))) from None


def registered_node_types() -> Dict[NodeType, Type[Node]]:
  """Returns a copy of the type-to-class registry."""
  return dict(_NODE_REGISTRY)
