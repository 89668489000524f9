"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
and plain rendering keep working even when it is not installed.  The
console writes to stderr; rendered values go to stdout.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from print_ip.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def rich_available() -> bool:
	"""Return whether Rich can be imported."""
	try:
		_load_rich_console_class()
	except EnvironmentError:
		return False
	return True


_MARKUP_TAG = re.compile(r"\[(?:/|/?[a-z][a-z0-9 _.#=-]*)\]")


def strip_markup(text: str) -> str:
	"""Remove Rich markup tags such as ``[bold red]`` from *text*."""
	return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
			return
		rich_console.print(*objects)

	def print_labeled(self, label: str, style: str, message: str) -> None:
		"""Print a styled *label* followed by *message* taken literally.

		*message* is never parsed as Rich markup, so text from the user
		(or an exception carrying it) is shown exactly as given.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(f"{label} {message}", file=sys.stderr)
			return
		from rich.text import Text

		rich_console.print(Text.assemble((label, style), " ", message))


console = _ConsoleProxy()
