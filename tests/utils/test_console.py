"""
Tests for Centralized Logging Utility and Injection Mechanics.

Verifies:
1. Singleton Proxy correctness.
2. Injection capabilities (`set_console`).
3. Standard logging wrappers on the package logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from estree_kit.core.node_utils import convert_code_to_structure
from estree_kit.utils.console import (
  LOGGER_NAME,
  console,
  get_console,
  get_logger,
  log_debug,
  log_error,
  log_info,
  log_warning,
  reset_console,
  set_console,
)


def test_console_singleton_proxy():
  """
  Verify `console` acts as a proxy to a real Rich console.
  """
  assert callable(console.print)
  assert hasattr(console, "export_text")
  assert isinstance(get_console(), Console)


def test_custom_console_injection():
  """
  Verify we can inject a capturing console and retrieve logs.
  """
  capture_console = Console(record=True, width=120)
  set_console(capture_console)

  log_info("Captured Log")
  log_warning("Careful")
  log_error("Broken")

  output = capture_console.export_text()
  assert "Captured Log" in output
  assert "Careful" in output
  assert "Broken" in output
  assert "ℹ️" in output


def test_reset_functionality():
  """
  Verify `reset_console` restores a fresh default backend.
  """
  temp = Console()
  set_console(temp)
  assert get_console() is temp

  reset_console()
  assert get_console() is not temp


def test_handler_is_not_duplicated():
  """
  Swapping backends keeps exactly one rich handler on the package logger.
  """
  set_console(Console(record=True))
  set_console(Console(record=True))

  logger = get_logger()
  assert logger.name == LOGGER_NAME
  assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
  assert logger.propagate is True


def test_debug_hidden_by_default():
  """
  Debug records are filtered at the default INFO level.
  """
  capture_console = Console(record=True, width=120)
  set_console(capture_console)

  log_debug("invisible detail")
  assert "invisible detail" not in capture_console.export_text()


def test_conversion_logs_at_debug_level():
  """
  The converter reports a summary when debug logging is enabled.
  """
  capture_console = Console(record=True, width=120)
  set_console(capture_console)
  logger = get_logger()
  previous = logger.level
  logger.setLevel(logging.DEBUG)
  try:
    convert_code_to_structure("a; b;")
  finally:
    logger.setLevel(previous)

  assert "2 top-level statement" in capture_console.export_text()
