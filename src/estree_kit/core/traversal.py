"""
Tree-Walking Engine.

Depth-first enter/leave traversal over the dataclass node model, with
in-place node replacement. The walk is driven by an explicit work list so
that deeply nested trees (long operator chains, nested callbacks) do not
exhaust the interpreter's recursion limit.

Visitor contract (``visitor(node, parent)``):

- return a `Node` to replace the visited node; the walk continues into the
  replacement,
- return ``None`` to keep the node,
- return `VisitorOption.SKIP` from ``enter`` to skip the node's children,
- return `VisitorOption.BREAK` to stop the whole walk,
- return `VisitorOption.REMOVE` to drop the node from its containing list,
  or to set the owning field to ``None``.

``parent`` is the direct parent node, or ``None`` for the walk's root.
Reserved fields (``parent``, ``metadata``, ``verbatim``) are never walked.
"""

from dataclasses import fields
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from estree_kit.core.nodes import RESERVED_FIELDS, Node


class VisitorOption(Enum):
  """Control values a visitor may return instead of a node."""

  SKIP = "skip"
  BREAK = "break"
  REMOVE = "remove"


VisitResult = Union[Node, VisitorOption, None]
Visitor = Callable[[Node, Optional[Node]], VisitResult]

# Placeholder left in a list slot until its owner is compacted.
_REMOVED = object()


def iter_fields(node: Node) -> Iterator[Tuple[str, Any]]:
  """
  Yields ``(name, value)`` for every non-reserved field of a node.

  Args:
      node: The node to inspect.

  Yields:
      Tuple[str, Any]: Field name and current value, in declaration order.
  """
  for f in fields(node):
    if f.name in RESERVED_FIELDS:
      continue
    yield f.name, getattr(node, f.name)


def iter_child_nodes(node: Node) -> Iterator[Node]:
  """
  Yields the direct child nodes of a node in source order.

  List holes (``None`` entries) are skipped.
  """
  for _, value in iter_fields(node):
    if isinstance(value, Node):
      yield value
    elif isinstance(value, list):
      for item in value:
        if isinstance(item, Node):
          yield item


class _Element:
  """A pending visit: the node, its parent and where it is stored."""

  __slots__ = ("node", "parent", "container", "key")

  def __init__(self, node: Node, parent: Optional[Node], container: Any, key: Any):
    self.node = node
    self.parent = parent
    self.container = container
    self.key = key


class Controller:
  """
  Runs a single enter/leave walk.

  Args:
      enter: Called before a node's children are visited.
      leave: Called after a node's children are visited.
      apply_replacements: When False, node return values are ignored and the
          tree is never mutated (control options still apply).
  """

  _LEAVE_MARKER = object()

  def __init__(
    self,
    enter: Optional[Visitor] = None,
    leave: Optional[Visitor] = None,
    apply_replacements: bool = True,
  ) -> None:
    self.enter = enter
    self.leave = leave
    self.apply_replacements = apply_replacements
    self._root: Optional[Node] = None
    self._dirty: Dict[int, List[Any]] = {}

  def run(self, root: Node) -> Optional[Node]:
    """
    Walks the tree rooted at ``root``.

    Returns:
        The (possibly replaced) root, or None if the root itself was removed.
    """
    self._root = root
    self._dirty = {}
    worklist: List[Any] = [_Element(root, None, None, None)]
    leavelist: List[_Element] = []

    try:
      while worklist:
        item = worklist.pop()

        if item is self._LEAVE_MARKER:
          element = leavelist.pop()
          self._compact_children(element.node)
          if self.leave is not None:
            if self._apply(element, self.leave(element.node, element.parent)):
              return self._root
          continue

        element = item
        skip = False
        if self.enter is not None:
          result = self.enter(element.node, element.parent)
          skip = result is VisitorOption.SKIP
          if self._apply(element, result):
            return self._root

        if element.node is None:
          continue

        worklist.append(self._LEAVE_MARKER)
        leavelist.append(element)

        if not skip:
          worklist.extend(reversed(self._children_of(element.node)))
    finally:
      for owned in self._dirty.values():
        owned[:] = [v for v in owned if v is not _REMOVED]
      self._dirty = {}

    return self._root

  def _apply(self, element: _Element, result: VisitResult) -> bool:
    """Applies a visitor result; returns True when the walk must stop."""
    if result is VisitorOption.BREAK:
      return True
    if result is VisitorOption.REMOVE:
      if not self.apply_replacements:
        return False
      self._store(element, _REMOVED)
      element.node = None
    elif isinstance(result, Node) and self.apply_replacements and result is not element.node:
      self._store(element, result)
      element.node = result
    return False

  def _store(self, element: _Element, value: Any) -> None:
    container = element.container
    if container is None:
      self._root = None if value is _REMOVED else value
    elif isinstance(container, list):
      container[element.key] = value
      if value is _REMOVED:
        self._dirty[id(container)] = container
    else:
      setattr(container, element.key, None if value is _REMOVED else value)

  def _children_of(self, node: Node) -> List[_Element]:
    children: List[_Element] = []
    for name, value in iter_fields(node):
      if isinstance(value, Node):
        children.append(_Element(value, node, node, name))
      elif isinstance(value, list):
        for idx, item in enumerate(value):
          if isinstance(item, Node):
            children.append(_Element(item, node, value, idx))
    return children

  def _compact_children(self, node: Node) -> None:
    if not self._dirty:
      return
    for _, value in iter_fields(node):
      if isinstance(value, list) and id(value) in self._dirty:
        value[:] = [v for v in value if v is not _REMOVED]
        del self._dirty[id(value)]


def replace(root: Node, enter: Optional[Visitor] = None, leave: Optional[Visitor] = None) -> Optional[Node]:
  """
  Walks ``root`` and applies the visitors' replacements in place.

  Args:
      root: The tree to walk.
      enter: Visitor called on the way down.
      leave: Visitor called on the way up.

  Returns:
      The root after replacement (a new object if a visitor replaced it).
  """
  return Controller(enter=enter, leave=leave).run(root)


def traverse(root: Node, enter: Optional[Visitor] = None, leave: Optional[Visitor] = None) -> None:
  """
  Walks ``root`` without mutating it.

  Node return values and `VisitorOption.REMOVE` are ignored;
  `VisitorOption.SKIP` and `VisitorOption.BREAK` are honored.
  """
  Controller(enter=enter, leave=leave, apply_replacements=False).run(root)
