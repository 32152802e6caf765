"""
estree-kit Package.

Syntax tree construction and manipulation for JavaScript source-to-source
transformation pipelines. Trees follow the ESTree shape and are modelled as
Python dataclasses.

Usage
-----

Round Trip
^^^^^^^^^^

.. code-block:: python

    import estree_kit as ek

    structure = ek.convert_code_to_structure("var a = 0x1F;")
    print(ek.convert_structure_to_code(structure))
    # var a = 0x1F;

Synthesizing Code
^^^^^^^^^^^^^^^^^

.. code-block:: python

    from estree_kit import NodeFactory as F, generate

    call = F.call_expression_node(F.identifier_node("log"), [F.literal_node("hi")])
    print(generate(F.expression_statement_node(call)))
    # log('hi');
"""

from estree_kit.config import ConversionConfig
from estree_kit.core.codegen import CodeGenerator, generate
from estree_kit.core.factory import NodeFactory
from estree_kit.core.metadata import get_metadata, is_ignored_node, set_metadata
from estree_kit.core.node_utils import (
  add_verbatim_to,
  clone,
  convert_code_to_structure,
  convert_structure_to_code,
  get_unary_expression_argument_node,
  parentize_ast,
  parentize_node,
)
from estree_kit.core.nodes import *  # noqa: F401,F403
from estree_kit.core.nodes import __all__ as _node_names
from estree_kit.core.parser import parse_script, parse_structure
from estree_kit.core.traversal import VisitorOption, replace, traverse
from estree_kit.enums import NodeType, Precedence
from estree_kit.exceptions import (
  ConfigurationError,
  EstreeKitError,
  GenerationError,
  ParseError,
  UnsupportedNodeError,
)

__version__ = "0.1.0"

__all__ = [
  "CodeGenerator",
  "ConfigurationError",
  "ConversionConfig",
  "EstreeKitError",
  "GenerationError",
  "NodeFactory",
  "NodeType",
  "ParseError",
  "Precedence",
  "UnsupportedNodeError",
  "VisitorOption",
  "__version__",
  "add_verbatim_to",
  "clone",
  "convert_code_to_structure",
  "convert_structure_to_code",
  "generate",
  "get_metadata",
  "get_unary_expression_argument_node",
  "is_ignored_node",
  "parentize_ast",
  "parentize_node",
  "parse_script",
  "parse_structure",
  "replace",
  "set_metadata",
  "traverse",
  *_node_names,
]
