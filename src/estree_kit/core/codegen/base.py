"""
Code Generator Base Utilities.

Defines the mixin with the helpers shared by the expression and statement
generators: indentation tracking, parenthesization and literal rendering.
"""

import math
import re
from contextlib import contextmanager
from enum import IntFlag
from typing import Iterator, Optional

from estree_kit.config import ConversionConfig
from estree_kit.core.nodes import Literal
from estree_kit.enums import Precedence, QuoteStyle


class Flags(IntFlag):
  """
  Context flags threaded through expression generation.

  ``ALLOW_IN``: a bare ``in`` operator is legal here (false inside the
  initializer of a ``for`` head).
  ``ALLOW_CALL``: an unparenthesized call is legal here (false in the callee
  of ``new``).
  """

  NONE = 0
  ALLOW_IN = 1
  ALLOW_CALL = 2
  DEFAULT = ALLOW_IN | ALLOW_CALL


_PLAIN_INTEGER = re.compile(r"\d+")

_CHAR_ESCAPES = {
  "\\": "\\\\",
  "\n": "\\n",
  "\r": "\\r",
  "\t": "\\t",
  "\b": "\\b",
  "\f": "\\f",
  "\v": "\\v",
  "\u2028": "\\u2028",
  "\u2029": "\\u2029",
}


class BaseGeneratorMixin:
  """
  Base class providing indentation state and literal rendering.

  Attributes:
      config (ConversionConfig): Layout options.
      _depth (int): Current statement nesting level.
  """

  def __init__(self, config: Optional[ConversionConfig] = None) -> None:
    self.config = config or ConversionConfig()
    self._depth = 0

  @property
  def newline(self) -> str:
    return self.config.newline

  def _indent(self) -> str:
    """Returns the indentation prefix for the current depth."""
    return self.config.indent * self._depth

  @contextmanager
  def _indented(self) -> Iterator[None]:
    """Increments the nesting level for the duration of the block."""
    self._depth += 1
    try:
      yield
    finally:
      self._depth -= 1

  @staticmethod
  def _parenthesize(text: str, current: Precedence, required: Precedence) -> str:
    """
    Wraps text in parentheses when its precedence is below the required one.

    Args:
        text: Generated expression text.
        current: Precedence of the expression itself.
        required: Minimum precedence demanded by the enclosing context.
    """
    if current < required:
      return f"({text})"
    return text

  @staticmethod
  def _is_plain_integer(text: str) -> bool:
    """True for digit-only text, which needs a second dot before member access (``1..x``)."""
    return _PLAIN_INTEGER.fullmatch(text) is not None

  def _render_literal(self, node: Literal, precedence: Precedence) -> str:
    """
    Renders a literal, preferring its verbatim annotation.

    Args:
        node: The literal node.
        precedence: Precedence required by the context.

    Returns:
        str: Literal source text.
    """
    if self.config.verbatim and node.verbatim is not None:
      return self._parenthesize(node.verbatim.content, node.verbatim.precedence, precedence)

    if node.regex is not None:
      return f"/{node.regex.pattern}/{node.regex.flags}"

    value = node.value
    if value is None:
      return "null"
    if isinstance(value, bool):
      return "true" if value else "false"
    if isinstance(value, str):
      return self._quote_string(value)
    if isinstance(value, (int, float)):
      text = self._render_number(value)
      if text.startswith("-"):
        return self._parenthesize(text, Precedence.UNARY, precedence)
      return text
    if isinstance(value, re.Pattern):
      return f"/{value.pattern}/"
    return str(value)

  @staticmethod
  def _render_number(value: float) -> str:
    if isinstance(value, int):
      return str(value)
    if math.isnan(value):
      return "NaN"
    if math.isinf(value):
      return "1e400" if value > 0 else "-1e400"
    if value.is_integer() and abs(value) < 1e21:
      return str(int(value))
    return repr(value)

  def _quote_string(self, value: str) -> str:
    """
    Quotes a string value using the configured quote style.

    Control characters without a short escape are written as ``\\xHH``.
    """
    quote = "'" if self.config.quotes == QuoteStyle.SINGLE else '"'
    out = [quote]
    for ch in value:
      if ch == quote:
        out.append("\\" + ch)
      elif ch in _CHAR_ESCAPES:
        out.append(_CHAR_ESCAPES[ch])
      elif ch == "\0":
        out.append("\\x00")
      elif ord(ch) < 0x20:
        out.append(f"\\x{ord(ch):02x}")
      else:
        out.append(ch)
    out.append(quote)
    return "".join(out)
