"""
Central Logging and Console Utilities.

Routes the package's diagnostics through the Python standard `logging`
library, rendered by `rich`.

The package logger (``estree_kit``) is attached to a `RichHandler` bound to a
Console Proxy. The proxy's backend (stdout, file or in-memory buffer) can be
swapped at runtime via `set_console`, which lets embedding applications
capture the diagnostics of a conversion.

Attributes:
    LOGGER_NAME (str): Name of the package logger.
    console (_ConsoleProxy): A global, stable reference to the active Rich Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "estree_kit"

_THEME = Theme(
  {
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "code": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  A Proxy wrapper around `rich.console.Console`.

  All printing operations are forwarded to the current backend. When the
  backend changes, the package logger's handler is rebuilt so that records
  follow the new destination.

  Attributes:
      _backend (Console): The active Rich Console instance.
  """

  def __init__(self) -> None:
    """Initializes the proxy with a default Standard Output console."""
    self._backend: Console = Console(theme=_THEME)
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Resets the proxy to use a fresh standard output console."""
    self._backend = Console(theme=_THEME)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """
    Access the raw backend console.

    Returns:
        Console: The currently active implementation.
    """
    return self._backend

  def _configure_logging(self) -> None:
    """
    Re-attaches the package logger to the current backend console.

    The level is only raised to INFO when the logger has not been configured
    by the host application.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
      if isinstance(handler, RichHandler):
        logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )

    if logger.level == logging.NOTSET:
      logger.setLevel(logging.INFO)
    logger.addHandler(rich_handler)

  def print(self, *args: Any, **kwargs: Any) -> None:
    """Forwards `print` calls to the active backend."""
    self._backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    """
    Forwards `export_text` (useful for log capturing).

    Returns:
        str: The captured text output.
    """
    return self._backend.export_text(**kwargs)

  def __getattr__(self, name: str) -> Any:
    """Fallback to forward any other attributes/methods to the backend."""
    return getattr(self._backend, name)


console = _ConsoleProxy()


def get_logger() -> logging.Logger:
  """
  Returns the package logger.

  Returns:
      logging.Logger: The ``estree_kit`` logger.
  """
  return logging.getLogger(LOGGER_NAME)


def set_console(new_console: Console) -> None:
  """
  Global helper to inject a specific console instance.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Global helper to reset logging and console to standard output."""
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active console backend.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def log_debug(msg: str) -> None:
  """
  Logs a debug message on the package logger.

  Args:
      msg (str): The message content.
  """
  get_logger().debug(msg, extra={"markup": True})


def log_info(msg: str) -> None:
  """
  Logs an informational message on the package logger.

  Args:
      msg (str): The message content. Can include rich markup like [bold].
  """
  get_logger().info(f"ℹ️  {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message on the package logger.

  Args:
      msg (str): The message content.
  """
  get_logger().warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  """
  Logs an error message on the package logger.

  Args:
      msg (str): The message content.
  """
  get_logger().error(f"❌ {msg}", extra={"markup": True})
