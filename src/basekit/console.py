"""Error rendering with optional Rich support.

Rich is imported lazily so that importing basekit never requires it;
:func:`report_error` falls back to plain stderr output when it is not
installed.
"""

from __future__ import annotations

import sys
from typing import Any

from basekit.exceptions import BasekitError, DependencyMissingError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``DependencyMissingError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise DependencyMissingError(
			"rich is not installed.",
			hint="Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def render_error(exc: BaseException) -> str:
	"""Return the user-visible text for *exc*.

	The message is ``str(exc)`` verbatim; a :class:`BasekitError` hint,
	when present, follows on its own line.
	"""
	message = str(exc)
	hint = exc.hint if isinstance(exc, BasekitError) else None
	if hint:
		return f"{message}\n{hint}"
	return message


def report_error(exc: BaseException) -> None:
	"""Print *exc* to stderr, through Rich when available.

	Markup is disabled so bracketed text in the message is shown as-is.
	"""
	text = render_error(exc)
	try:
		rich_console = get_rich_console()
	except DependencyMissingError:
		print(text, file=sys.stderr)
		return
	rich_console.print(text, style="bold red", markup=False, highlight=False)
