"""
Node Utilities.

Tree-level helpers used by transformation passes:

- `clone`: deep structural copy with fresh parent links.
- `parentize_ast` / `parentize_node`: parent link assignment.
- `convert_code_to_structure` / `convert_structure_to_code`: source text to
  annotated top-level statements and back.
- `get_unary_expression_argument_node`: unwraps ``!!!x`` style chains.
"""

import re
from dataclasses import fields, is_dataclass
from typing import Any, Dict, List, Optional, Sequence, TypeVar

from rich.markup import escape

from estree_kit.config import ConversionConfig
from estree_kit.core.codegen import CodeGenerator
from estree_kit.core.metadata import set_metadata
from estree_kit.core.nodes import (
  PARENT_FIELD,
  Literal,
  Node,
  Statement,
  UnaryExpression,
  Verbatim,
)
from estree_kit.core.parser import parse_script
from estree_kit.core.traversal import replace
from estree_kit.enums import Precedence
from estree_kit.utils.console import log_debug

N = TypeVar("N", bound=Node)


def add_verbatim_to(literal: Literal) -> Literal:
  """
  Pins a literal's emitted text to its original source spelling.

  Args:
      literal: A literal node with ``raw`` populated.

  Returns:
      Literal: The same node, with ``verbatim == Verbatim(raw, PRIMARY)``.
  """
  literal.verbatim = Verbatim(content=literal.raw, precedence=Precedence.PRIMARY)
  return literal


def clone(tree: N) -> N:
  """
  Deep-copies a tree and links the copy's parents.

  Every field except ``parent`` is copied; compiled regular expressions are
  shared. The copy's root points to itself.

  Args:
      tree: Root of the subtree to copy.

  Returns:
      The copy, structurally equal to ``tree`` but sharing no nodes with it.
  """
  return parentize_ast(_copy_value(tree))


def _copy_value(value: Any) -> Any:
  """
  Deep-copies nested lists, tuples, dicts and dataclasses with a work list.

  Containers are created empty and filled as their items are copied;
  dataclasses are constructed once all of their field values exist.
  """
  result: List[Any] = [None]
  stack: List[tuple] = [("copy", value, result, 0)]
  while stack:
    task = stack.pop()
    if task[0] == "build":
      _, cls, kwargs, container, key = task
      container[key] = cls(**kwargs)
      continue
    if task[0] == "freeze":
      _, items, container, key = task
      container[key] = tuple(items)
      continue

    _, item, container, key = task
    if item is None or isinstance(item, re.Pattern):
      container[key] = item
    elif isinstance(item, (list, tuple)):
      items = [None] * len(item)
      if isinstance(item, tuple):
        stack.append(("freeze", items, container, key))
      else:
        container[key] = items
      stack.extend(("copy", sub, items, i) for i, sub in enumerate(item))
    elif isinstance(item, dict):
      copied: Dict[Any, Any] = {}
      container[key] = copied
      stack.extend(("copy", v, copied, k) for k, v in item.items())
    elif is_dataclass(item) and not isinstance(item, type):
      kwargs: Dict[str, Any] = {}
      stack.append(("build", type(item), kwargs, container, key))
      stack.extend(("copy", getattr(item, f.name), kwargs, f.name) for f in fields(item) if f.name != PARENT_FIELD)
    else:
      container[key] = item
  return result[0]


def parentize_node(node: N, parent: Optional[Node]) -> N:
  """
  Sets a node's parent link; a node without a parent links to itself.

  Args:
      node: The node to update.
      parent: Its syntactic container, or None for a root.

  Returns:
      The same node.
  """
  node.parent = parent if parent is not None else node
  return node


def parentize_ast(tree: N) -> N:
  """
  Assigns the parent link of every node in a tree, in place.

  Args:
      tree: Root of the tree.

  Returns:
      The same root, which now points to itself.
  """
  replace(tree, enter=parentize_node)
  return tree


def convert_code_to_structure(code: str) -> List[Statement]:
  """
  Parses source text into annotated top-level statements.

  Every node gets its parent link and ``metadata.ignored_node == False``;
  every literal gets a verbatim annotation holding its original text. The
  returned statements keep their link to the enclosing `Program`.

  Args:
      code: JavaScript source (script mode).

  Returns:
      List[Statement]: The program body.

  Raises:
      ParseError: If the source is not valid JavaScript.
  """
  program = parse_script(code)

  def _annotate(node: Node, parent: Optional[Node]) -> Node:
    parentize_node(node, parent)
    if isinstance(node, Literal):
      add_verbatim_to(node)
    set_metadata(node, ignored_node=False)
    return node

  replace(program, enter=_annotate)
  log_debug(f"Converted source to {len(program.body)} top-level statement(s)")
  return program.body


def convert_structure_to_code(structure: Sequence[Node], config: Optional[ConversionConfig] = None) -> str:
  """
  Renders a sequence of nodes back to source text.

  Each node is generated on its own and the results are concatenated
  without a separator.

  Args:
      structure: Nodes to render, typically top-level statements.
      config: Layout options.

  Returns:
      str: The concatenated source text.
  """
  generator = CodeGenerator(config)
  code = "".join(generator.generate(node) for node in structure)
  log_debug(f"Generated {len(code)} characters from {len(structure)} node(s): {escape(code[:60])}")
  return code


def get_unary_expression_argument_node(node: UnaryExpression) -> Node:
  """
  Returns the innermost operand of a chain of unary operators.

  ``!!!x`` yields the `Identifier` ``x``; ``-f()`` yields the call.

  Args:
      node: The outermost unary expression.

  Returns:
      Node: The first argument in the chain that is not a unary expression.
  """
  argument = node.argument
  while isinstance(argument, UnaryExpression):
    argument = argument.argument
  return argument
