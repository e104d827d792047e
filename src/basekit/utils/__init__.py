"""Shared utilities — stateless helpers importable by any layer.

Rules
-----
* No business logic.
* No I/O.
* No shared state.
"""

from basekit.utils.functional import const

__all__: list[str] = ["const"]
