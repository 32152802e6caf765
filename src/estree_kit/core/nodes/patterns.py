"""
Destructuring and Default-Value Pattern Nodes.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from estree_kit.core.nodes.base import Expression, Pattern
from estree_kit.core.nodes.expressions import Property
from estree_kit.enums import NodeType


@dataclass(kw_only=True)
class RestElement(Pattern):
  type = NodeType.REST_ELEMENT

  argument: Pattern


@dataclass(kw_only=True)
class ArrayPattern(Pattern):
  type = NodeType.ARRAY_PATTERN

  elements: List[Optional[Pattern]] = field(default_factory=list)


@dataclass(kw_only=True)
class ObjectPattern(Pattern):
  type = NodeType.OBJECT_PATTERN

  properties: List[Union[Property, RestElement]] = field(default_factory=list)


@dataclass(kw_only=True)
class AssignmentPattern(Pattern):
  type = NodeType.ASSIGNMENT_PATTERN

  left: Pattern
  right: Expression
