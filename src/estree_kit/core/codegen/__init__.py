"""
JavaScript code generation from the dataclass node model.
"""

from estree_kit.core.codegen.base import Flags
from estree_kit.core.codegen.generator import CodeGenerator, generate

__all__ = ["CodeGenerator", "Flags", "generate"]
