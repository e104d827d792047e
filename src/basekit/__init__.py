"""basekit — cross-cutting helpers shared by the rest of the system.

Provides an internal-error kind, a constant combinator, canonical
symbol interning, and immutable record generation.
"""

from basekit.core import (
    Symbol,
    SymbolTable,
    define_readonly_record,
    make_symbol,
    readonly_record,
)
from basekit.exceptions import InternalError, ReadOnlyFieldError, internal_error
from basekit.utils import const
from basekit.version import __version__

__all__: list[str] = [
    "InternalError",
    "ReadOnlyFieldError",
    "Symbol",
    "SymbolTable",
    "__version__",
    "const",
    "define_readonly_record",
    "internal_error",
    "make_symbol",
    "readonly_record",
]
