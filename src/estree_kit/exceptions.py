"""Custom exceptions for estree-kit."""

from typing import Optional


class EstreeKitError(Exception):
  """Base exception for all estree-kit errors."""

  pass


class ParseError(EstreeKitError, SyntaxError):
  """
  Raised when source text cannot be parsed.

  Subclasses ``SyntaxError`` so callers can treat it as any other syntax
  failure. The parser's own exception is chained as ``__cause__``.

  Attributes:
      description (str): The parser's message without the location prefix.
      line (Optional[int]): 1-based line of the failure, when known.
      column (Optional[int]): 1-based column of the failure, when known.
  """

  def __init__(self, description: str, line: Optional[int] = None, column: Optional[int] = None):
    self.description = description
    self.line = line
    self.column = column
    super().__init__(description)
    # SyntaxError.__str__ appends "(line N)" when lineno is set
    self.lineno = line
    self.offset = column


class UnsupportedNodeError(EstreeKitError, TypeError):
  """Raised when a node kind outside the supported ESTree subset is encountered."""

  def __init__(self, node_type: str):
    self.node_type = node_type
    super().__init__(f"Unsupported node type: {node_type!r}")


class GenerationError(EstreeKitError):
  """Raised when a tree is structurally invalid for code generation."""

  pass


class ConfigurationError(EstreeKitError, ValueError):
  """Raised when configuration is invalid or cannot be loaded."""

  pass
