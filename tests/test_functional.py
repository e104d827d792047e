"""Tests for functional combinators (utils/functional.py)."""

from __future__ import annotations

import pytest

from basekit.utils import const


class TestConst:
    @pytest.mark.parametrize("value", [0, "text", None, 3.5, (1, 2)])
    def test_ignores_argument(self, value: object) -> None:
        f = const(value)
        assert f(1) == value
        assert f("other") == value
        assert f(None) == value

    def test_returns_captured_object_not_copy(self) -> None:
        payload: list[int] = [1, 2]
        f = const(payload)
        assert f(object()) is payload

    def test_sees_later_mutation_of_captured_value(self) -> None:
        payload: list[int] = []
        f = const(payload)
        payload.append(1)
        assert f(0) == [1]

    def test_independent_functions(self) -> None:
        a = const("a")
        b = const("b")
        assert a(0) == "a"
        assert b(0) == "b"
        assert a is not b
