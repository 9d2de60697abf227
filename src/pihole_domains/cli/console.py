"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, empty batches) remain
functional even when Rich is not installed.

Report output goes to stdout through :data:`console`; errors and hints
go to stderr through :data:`err_console`.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from pihole_domains.exceptions import EnvironmentError

# Only the styles this package emits; stripped when Rich is unavailable.
_STYLE_TAG = re.compile(r"(?<!\\)\[/?(?:bold red|bold green|bold|dim|red|green|blue|yellow|cyan)\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console instance targeting stdout or stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False, soft_wrap=True)


def escape(text: str) -> str:
    """Escape user-supplied text (domains, regexes) for Rich markup."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


def strip_markup(text: str) -> str:
    """Plain-text rendering of our markup for the no-Rich fallback."""
    return _STYLE_TAG.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool = False) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            stream = sys.stderr if self._stderr else sys.stdout
            print(*(strip_markup(str(obj)) for obj in objects), file=stream)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
