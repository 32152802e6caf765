"""
Esprima Parser Adapter.

Parses JavaScript source with `esprima` (esprima-python) and converts the
resulting ESTree objects into the dataclass node model.

The conversion is driven by the node registry: for each raw node, the class
registered for its ``type`` is looked up and every declared field is read
from the raw object under its ESTree name. The adapter accepts both
esprima's node objects and their plain-dict form (``toDict()``), so trees
serialized as JSON can be loaded through the same path.

The nodes produced here are *raw*: parent links are unset and literals carry
no verbatim annotation. `convert_code_to_structure` applies both.
"""

import re
from collections.abc import Mapping
from dataclasses import MISSING, fields
from functools import lru_cache
from typing import Any, Dict, FrozenSet, List, Type

import esprima
from esprima.error_handler import Error as EsprimaError
from rich.markup import escape

from estree_kit.core.nodes import (
  RESERVED_FIELDS,
  Node,
  Program,
  RegexInfo,
  TemplateValue,
  node_class_for,
)
from estree_kit.exceptions import ParseError, UnsupportedNodeError
from estree_kit.utils.console import log_debug

# Python field name -> candidate ESTree keys, tried in order.
_ESTREE_KEYS: Dict[str, tuple] = {
  "source_type": ("sourceType",),
  "super_class": ("superClass",),
  "is_async": ("async", "isAsync"),
}


def _get(raw: Any, key: str) -> Any:
  if isinstance(raw, Mapping):
    return raw.get(key)
  return getattr(raw, key, None)


def _read_field(raw: Any, name: str) -> Any:
  for key in _ESTREE_KEYS.get(name, (name,)):
    value = _get(raw, key)
    if value is not None:
      return value
  return None


def _is_raw_node(value: Any) -> bool:
  return isinstance(_get(value, "type"), str)


@lru_cache(maxsize=None)
def _optional_fields(cls: Type[Node]) -> FrozenSet[str]:
  """Names of fields that fall back to their default when the raw value is missing."""
  return frozenset(f.name for f in fields(cls) if f.default is not MISSING or f.default_factory is not MISSING)


# Work-list task tags for `EstreeBuilder`.
_VISIT = "visit"
_FINISH = "finish"


class EstreeBuilder:
  """
  Converts raw ESTree objects into dataclass nodes.

  Conversion runs off an explicit work list: each raw node schedules its own
  construction, then its children, so children are built first and nesting
  depth is bounded by memory rather than the interpreter's recursion limit.
  """

  def build(self, raw: Any) -> Node:
    """
    Converts one raw node and its whole subtree.

    Args:
        raw: An esprima node object or an ESTree dictionary.

    Returns:
        Node: The equivalent dataclass node.

    Raises:
        UnsupportedNodeError: If the raw tree contains a node kind outside
            the supported set.
    """
    result: List[Any] = [None]
    stack: List[tuple] = [(_VISIT, raw, result, 0)]
    while stack:
      task = stack.pop()
      if task[0] == _FINISH:
        _, cls, kwargs, container, key = task
        optional = _optional_fields(cls)
        kwargs = {k: v for k, v in kwargs.items() if v is not None or k not in optional}
        container[key] = cls(**kwargs)
        continue

      _, raw_node, container, key = task
      cls = node_class_for(_get(raw_node, "type"))
      kwargs: Dict[str, Any] = {}
      stack.append((_FINISH, cls, kwargs, container, key))
      for f in fields(cls):
        if f.name in RESERVED_FIELDS:
          continue
        self._schedule_field(f.name, _read_field(raw_node, f.name), kwargs, stack)

    return result[0]

  def _schedule_field(self, name: str, value: Any, kwargs: Dict[str, Any], stack: List[tuple]) -> None:
    if value is None:
      kwargs[name] = None
    elif name == "regex":
      kwargs[name] = RegexInfo(pattern=_get(value, "pattern") or "", flags=_get(value, "flags") or "")
    elif name == "value" and _get(value, "raw") is not None and not _is_raw_node(value):
      kwargs[name] = TemplateValue(raw=_get(value, "raw"), cooked=_get(value, "cooked"))
    elif isinstance(value, (list, tuple)):
      items: List[Any] = [None] * len(value)
      kwargs[name] = items
      for i, item in enumerate(value):
        self._schedule_value(item, items, i, stack)
    else:
      self._schedule_value(value, kwargs, name, stack)

  @staticmethod
  def _schedule_value(value: Any, container: Any, key: Any, stack: List[tuple]) -> None:
    if isinstance(value, (str, bool, int, float, re.Pattern)):
      container[key] = value
    elif value is not None and _is_raw_node(value):
      container[key] = None
      stack.append((_VISIT, value, container, key))
    else:
      # Holes and non-node helper objects (e.g. a regex literal's untranslatable value)
      container[key] = None


def parse_script(code: str) -> Program:
  """
  Parses JavaScript source in script mode into a raw `Program`.

  Args:
      code: The source text.

  Returns:
      Program: The unlinked, unannotated program tree.

  Raises:
      ParseError: If the source is not syntactically valid.
      UnsupportedNodeError: If the source uses syntax outside the supported set.
  """
  try:
    raw_program = esprima.parseScript(code)
  except EsprimaError as e:
    description = _get(e, "description") or str(e)
    log_debug(f"Parse failure: {escape(str(description))}")
    raise ParseError(description, line=_get(e, "lineNumber"), column=_get(e, "column")) from e

  program = EstreeBuilder().build(raw_program)
  if not isinstance(program, Program):
    raise UnsupportedNodeError(str(_get(raw_program, "type")))
  return program


def parse_structure(raw: Any) -> Node:
  """
  Converts an already-parsed ESTree object or dictionary into dataclass nodes.

  Args:
      raw: Output of any ESTree-compliant parser in object or dict form.

  Returns:
      Node: The equivalent raw dataclass tree.
  """
  return EstreeBuilder().build(raw)

