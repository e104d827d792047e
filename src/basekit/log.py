"""Logger namespace for basekit.

The library never configures handlers beyond a ``NullHandler`` on the
package logger; the host application owns logging configuration.
"""

from __future__ import annotations

import logging

_LOGGER_PREFIX = "basekit"

logging.getLogger(_LOGGER_PREFIX).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the basekit namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")
