"""Stderr console helper with optional Rich support.

Rich is imported lazily so that reading a file and ``--help`` keep
working when it is not installed.

Rich only ever renders the fixed *label* of a line (``Error:``,
``Hint:``, ...).  The message text embeds user-supplied paths, which may
legally contain tabs, carriage returns or other control characters that
Rich would expand or strip, so it is written to the stream unchanged.
"""

from __future__ import annotations

import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
	"""Return ``rich.console.Console`` or ``None`` when Rich is missing."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console


def get_rich_console() -> Any | None:
	"""Create a Rich console instance targeting stderr, if available."""
	console_class = _load_rich_console_class()
	if console_class is None:
		return None
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal line printer with plain-stderr fallback."""

	def print(
		self,
		text: str = "",
		*,
		label: str | None = None,
		style: str | None = None,
	) -> None:
		"""Write ``"<label> <text>"`` as one line on stderr.

		*style* applies to *label* only; *text* is emitted verbatim.
		"""
		rich_console = get_rich_console()
		if rich_console is None:
			print(" ".join(part for part in (label, text) if part), file=sys.stderr)
			return
		if label is not None:
			rich_console.print(
				label,
				style=style,
				markup=False,
				emoji=False,
				highlight=False,
				end=" " if text else "\n",
			)
			if not text:
				return
		stream = rich_console.file
		stream.write(text + "\n")
		stream.flush()


console = _ConsoleProxy()
