"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so the
driver keeps working, with plain output, when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from foo_record.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def _escape_markup(text: str) -> str:
	"""Escape Rich markup in user-controlled *text*."""
	from rich.markup import escape

	return escape(text)


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(
		stderr=stderr,
		highlight=False,
		emoji=False,
		soft_wrap=True,
	)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = True) -> None:
		self._stderr = stderr

	def _stream(self) -> TextIO:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=self._stream())
			return
		rich_console.print(*objects)

	def plain(self, text: str) -> None:
		"""Write *text* verbatim, with no markup interpretation."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(text, file=self._stream())
			return
		rich_console.print(text, markup=False)

	def error(self, message: str, *, hint: str | None = None) -> None:
		"""Render an ``ERROR: <message>`` line and an optional hint."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(f"ERROR: {message}", file=self._stream())
			if hint:
				print(f"Hint: {hint}", file=self._stream())
			return
		rich_console.print(f"[bold red]ERROR:[/bold red] {_escape_markup(message)}")
		if hint:
			rich_console.print(f"[yellow]Hint:[/yellow] {_escape_markup(hint)}")


console = _ConsoleProxy()
"""Diagnostics console (stderr)."""

stdout_console = _ConsoleProxy(stderr=False)
"""Result console (stdout)."""
