"""
ast_utils, structural comparison helpers for the dataclass node model
"""

from dataclasses import fields

from estree_kit.core.nodes import METADATA_FIELD, PARENT_FIELD, VERBATIM_FIELD, Node


class Undefined:
  """Null class"""


def cmp_nodes(node0, node1, ignore_metadata=False, ignore_verbatim=False):
  """
  Compare if two nodes are equal, never following parent links.

  :param node0: First node
  :type node0: ```Union[Node, List[Node], Tuple[Node]]```

  :param node1: Second node
  :type node1: ```Union[Node, List[Node], Tuple[Node]]```

  :param ignore_metadata: Skip the ``metadata`` record of every node
  :type ignore_metadata: ```bool```

  :param ignore_verbatim: Skip the ``verbatim`` annotation of literals
  :type ignore_verbatim: ```bool```

  :return: Whether they are equal (recursive)
  :rtype: ```bool```
  """

  if type(node0) is not type(node1):
    return False

  if isinstance(node0, (list, tuple)):
    if len(node0) != len(node1):
      return False

    for left, right in zip(node0, node1):
      if not cmp_nodes(left, right, ignore_metadata, ignore_verbatim):
        return False

  elif isinstance(node0, Node):
    skipped = {PARENT_FIELD}
    if ignore_metadata:
      skipped.add(METADATA_FIELD)
    if ignore_verbatim:
      skipped.add(VERBATIM_FIELD)

    for field in fields(node0):
      if field.name in skipped:
        continue
      left = getattr(node0, field.name, Undefined)
      right = getattr(node1, field.name, Undefined)

      if not cmp_nodes(left, right, ignore_metadata, ignore_verbatim):
        return False
  else:
    return node0 == node1

  return True
