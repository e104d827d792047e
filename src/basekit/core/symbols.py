"""Canonical symbols ("keywords") and the tables that intern them.

A :class:`Symbol` is created only by a :class:`SymbolTable`, which keys
it by the uppercased text of its input.  Within one table, equal
normalized text always yields the *same* object, so symbols compare by
identity.  Whitespace is preserved: ``"foo "`` and ``"foo"`` differ.

Thread safety
-------------
Inserts are serialized by a lock and re-check the table under it, so
concurrent interning of the same text converges on the first inserted
symbol.  Lookups read a plain ``dict``, which never exposes a
partially-inserted entry.  Tables only grow.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from basekit.log import get_logger

logger = get_logger("symbols")


@dataclass(frozen=True, slots=True, eq=False)
class Symbol:
    """An interned, case-normalized identifier.  Compared by identity."""

    name: str
    """Uppercased text this symbol was interned under."""

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f":{self.name}"


def _normalize(name: object) -> str:
    return str(name).upper()


class SymbolTable:
    """Append-only interning table mapping uppercased text to symbols."""

    def __init__(self) -> None:
        self._symbols: dict[str, Symbol] = {}
        self._lock = threading.Lock()

    def intern(self, name: object) -> Symbol:
        """Return the canonical symbol for *name*, inserting it if new."""
        key = _normalize(name)
        existing = self._symbols.get(key)
        if existing is not None:
            return existing
        with self._lock:
            existing = self._symbols.get(key)
            if existing is not None:
                return existing
            symbol = Symbol(key)
            self._symbols[key] = symbol
        logger.debug("interned symbol %r", symbol)
        return symbol

    def lookup(self, name: object) -> Symbol | None:
        """Return the symbol already interned for *name*, or ``None``."""
        return self._symbols.get(_normalize(name))

    def __contains__(self, name: object) -> bool:
        return _normalize(name) in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"<SymbolTable size={len(self)}>"


default_symbol_table = SymbolTable()
"""Process-wide table used by :func:`make_symbol`.

Created once at import and never cleared.  Components that need an
isolated namespace should own a :class:`SymbolTable` instead.
"""


def make_symbol(name: object) -> Symbol:
    """Intern *name* into the process-wide table.

    ``make_symbol("foo") is make_symbol("FOO")`` holds; any value with a
    string form is accepted.
    """
    return default_symbol_table.intern(name)
