"""
Conversion Configuration Store.

Holds the layout options consumed by the code generator and the
source-to-tree converter. Values can be declared in a project's
``pyproject.toml`` under ``[tool.estree_kit]`` and overridden per call.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.markup import escape

from estree_kit.enums import QuoteStyle
from estree_kit.exceptions import ConfigurationError
from estree_kit.utils.console import log_warning

if sys.version_info >= (3, 11):
  import tomllib
else:
  try:
    import tomli as tomllib
  except ImportError:
    tomllib = None  # type: ignore

TOOL_SECTION = "estree_kit"

_VALID_NEWLINES = ("\n", "\r\n")


class ConversionConfig(BaseModel):
  """
  Layout and emission options for tree-to-text conversion.
  """

  indent: str = Field("    ", description="Indentation unit for nested statements.")
  newline: str = Field("\n", description="Line terminator between statements.")
  quotes: QuoteStyle = Field(QuoteStyle.SINGLE, description="Quote style for value-derived string literals.")
  verbatim: bool = Field(True, description="Honor the verbatim annotation on literal nodes.")

  @field_validator("indent")
  @classmethod
  def validate_indent(cls, v: str) -> str:
    """
    Ensures the indentation unit is whitespace only.

    Args:
        v (str): The configured indentation unit.

    Returns:
        str: The unchanged value.

    Raises:
        ValueError: If the value contains non-blank characters.
    """
    if v.strip(" \t"):
      raise ValueError(f"Indent must contain only spaces or tabs, got {v!r}")
    return v

  @field_validator("newline")
  @classmethod
  def validate_newline(cls, v: str) -> str:
    """
    Restricts line terminators to LF or CRLF.

    Args:
        v (str): The configured newline sequence.

    Returns:
        str: The unchanged value.

    Raises:
        ValueError: If the value is not a supported line terminator.
    """
    if v not in _VALID_NEWLINES:
      raise ValueError(f"Unsupported newline sequence: {v!r}")
    return v

  @classmethod
  def load(
    cls,
    indent: Optional[str] = None,
    newline: Optional[str] = None,
    quotes: Optional[str] = None,
    verbatim: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "ConversionConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Args:
        indent (Optional[str]): Override for the indentation unit.
        newline (Optional[str]): Override for the line terminator.
        quotes (Optional[str]): Override for the quote style.
        verbatim (Optional[bool]): Override for verbatim literal emission.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        ConversionConfig: The fully resolved configuration object.

    Raises:
        ConfigurationError: If the merged values fail validation.
    """
    start_dir = search_path or Path.cwd()
    toml_config, found_in = _load_toml_settings(start_dir)

    overrides = {
      "indent": indent,
      "newline": newline,
      "quotes": quotes,
      "verbatim": verbatim,
    }
    unknown = sorted(set(toml_config) - set(overrides))
    if unknown:
      section = escape(f"[tool.{TOOL_SECTION}]")
      log_warning(f"Ignoring unknown {section} keys in {escape(str(found_in))}: {escape(', '.join(unknown))}")

    merged: Dict[str, Any] = {k: v for k, v in toml_config.items() if k in overrides}
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
      return cls.model_validate(merged)
    except ValidationError as e:
      raise ConfigurationError(f"Invalid estree_kit configuration: {e}") from e


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.

  Raises:
      ConfigurationError: If the first pyproject.toml found cannot be decoded.
  """
  if not tomllib:
    return {}, None

  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Cannot read {toml_path}: {e}") from e

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None
