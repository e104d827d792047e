"""Core layer — canonical symbols and immutable record generation.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* The only shared mutable state is a :class:`SymbolTable`.
"""

from basekit.core.protocols import Interner
from basekit.core.records import FieldSpec, define_readonly_record, parse_field_spec, readonly_record
from basekit.core.symbols import Symbol, SymbolTable, default_symbol_table, make_symbol

__all__: list[str] = [
    "FieldSpec",
    "Interner",
    "Symbol",
    "SymbolTable",
    "default_symbol_table",
    "define_readonly_record",
    "make_symbol",
    "parse_field_spec",
    "readonly_record",
]
