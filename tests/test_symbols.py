"""Tests for canonical symbol interning (core/symbols.py).

Coverage:
* Case folding and identity of interned symbols.
* Whitespace is preserved, never trimmed.
* ``lookup`` never inserts.
* Concurrent interning converges on one symbol.
* The process-wide table behind ``make_symbol``.
"""

from __future__ import annotations

import logging
import threading

import pytest

from basekit.core.protocols import Interner
from basekit.core.symbols import Symbol, SymbolTable, default_symbol_table, make_symbol


# ---------------------------------------------------------------------------
# SymbolTable
# ---------------------------------------------------------------------------

class TestSymbolTable:
    def test_case_insensitive_identity(self, table: SymbolTable) -> None:
        assert table.intern("foo") is table.intern("FOO")
        assert table.intern("Foo") is table.intern("fOo")

    def test_idempotent(self, table: SymbolTable) -> None:
        assert table.intern("bar") is table.intern("bar")

    def test_name_is_uppercased(self, table: SymbolTable) -> None:
        assert table.intern("hello").name == "HELLO"

    def test_trailing_space_is_distinct(self, table: SymbolTable) -> None:
        assert table.intern("foo ") is not table.intern("foo")
        assert table.intern("foo ").name == "FOO "

    def test_accepts_non_strings(self, table: SymbolTable) -> None:
        assert table.intern(42).name == "42"
        assert table.intern(42) is table.intern("42")

    def test_reinterning_a_symbol(self, table: SymbolTable) -> None:
        sym = table.intern("key")
        assert table.intern(sym) is sym

    def test_lookup_does_not_insert(self, table: SymbolTable) -> None:
        assert table.lookup("missing") is None
        assert len(table) == 0

    def test_lookup_finds_existing(self, table: SymbolTable) -> None:
        sym = table.intern("present")
        assert table.lookup("PRESENT") is sym

    def test_contains_and_len(self, table: SymbolTable) -> None:
        table.intern("a")
        table.intern("A")
        table.intern("b")
        assert "a" in table
        assert "c" not in table
        assert len(table) == 2

    def test_tables_are_independent(self) -> None:
        first = SymbolTable()
        second = SymbolTable()
        assert first.intern("x") is not second.intern("x")

    def test_satisfies_interner_protocol(self, table: SymbolTable) -> None:
        interner: Interner = table
        assert interner.intern("p") is interner.lookup("P")

    def test_concurrent_interning_converges(self, table: SymbolTable) -> None:
        results: list[Symbol] = []
        lock = threading.Lock()
        barrier = threading.Barrier(16)

        def worker(text: str) -> None:
            barrier.wait()
            sym = table.intern(text)
            with lock:
                results.append(sym)

        threads = [
            threading.Thread(target=worker, args=("race" if i % 2 else "RACE",))
            for i in range(16)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 16
        assert all(sym is results[0] for sym in results)
        assert len(table) == 1


# ---------------------------------------------------------------------------
# Symbol
# ---------------------------------------------------------------------------

class TestSymbol:
    def test_str_and_repr(self, table: SymbolTable) -> None:
        sym = table.intern("kw")
        assert str(sym) == "KW"
        assert repr(sym) == ":KW"

    def test_frozen(self, table: SymbolTable) -> None:
        sym = table.intern("kw")
        with pytest.raises(AttributeError):
            sym.name = "OTHER"  # type: ignore[misc]

    def test_usable_as_dict_key(self, table: SymbolTable) -> None:
        mapping = {table.intern("k"): 1}
        assert mapping[table.intern("K")] == 1


# ---------------------------------------------------------------------------
# make_symbol
# ---------------------------------------------------------------------------

class TestMakeSymbol:
    def test_case_folding(self) -> None:
        assert make_symbol("foo") is make_symbol("FOO")

    def test_trailing_space_differs(self) -> None:
        assert make_symbol("foo ") is not make_symbol("foo")

    def test_uses_default_table(self) -> None:
        sym = make_symbol("basekit-test-default")
        assert default_symbol_table.lookup("BASEKIT-TEST-DEFAULT") is sym


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestLogging:
    def test_new_symbols_logged_once(
        self, table: SymbolTable, caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="basekit"):
            table.intern("logged")
            table.intern("LOGGED")
        records = [r for r in caplog.records if r.name == "basekit.symbols"]
        assert len(records) == 1
        assert ":LOGGED" in records[0].getMessage()
