"""Shared pytest fixtures and configuration for the basekit test suite.

Guidelines
----------
* Tests that intern symbols use a fresh :class:`SymbolTable` unless they
  exercise the process-wide table on purpose.
* Optional dependencies are hidden via ``sys.modules``, never uninstalled.
"""

from __future__ import annotations

import pytest

from basekit.core.symbols import SymbolTable


@pytest.fixture
def table() -> SymbolTable:
    """An isolated, empty symbol table."""
    return SymbolTable()
