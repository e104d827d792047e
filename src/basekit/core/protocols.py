"""Protocols (interfaces) for injectable core services.

Owners of symbol canonicalization depend on :class:`Interner` rather
than on the process-wide table, so a context can bring its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from basekit.core.symbols import Symbol


class Interner(Protocol):
    """Contract for canonical-symbol tables.

    Any object that implements :meth:`intern` and :meth:`lookup` with
    the correct signatures satisfies this protocol structurally.
    """

    def intern(self, name: object) -> Symbol:
        """Return the canonical symbol for ``str(name).upper()``.

        Equal normalized text must always yield the same object, even
        when several threads intern it concurrently.
        """
        ...  # pragma: no cover

    def lookup(self, name: object) -> Symbol | None:
        """Return the existing symbol for *name*, or ``None``.

        Never inserts.
        """
        ...  # pragma: no cover
