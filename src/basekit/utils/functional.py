"""Small functional combinators."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


def const(x: T) -> Callable[[object], T]:
    """Return a unary function that ignores its argument and yields *x*.

    The captured value is returned by identity; it is never copied.
    """

    def constant(_: object) -> T:
        return x

    return constant
