"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so a capturing console in one test cannot leak into another.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'estree_kit' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from estree_kit.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """Restores the default console after every test."""
  yield
  reset_console()
