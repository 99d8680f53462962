"""User-facing messages and context display.

All output meant for the user goes through this module. Messages come in
three severities, each with a fixed prefix; they are printed on a shared
``rich`` console on stderr and also recorded through :mod:`logging`.
Rendered results (the context table) go to a second console on stdout,
so that piped output never mixes with messages.
"""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from brainmode.constants import ColorScheme
from brainmode.context import FIELD_NAMES, Context
from brainmode.formatting import status_line
from brainmode.models import Outcome

logger = logging.getLogger(__name__)

DEBUG_PREFIX = "Debug: "
INFO_PREFIX = "Info: "
ERROR_PREFIX = "Error: "

# ---------------------------------------------------------------------------
# Console singleton
# ---------------------------------------------------------------------------

_THEMES = {
    ColorScheme.DARK: Theme({
        "debug": "dim",
        "info": "dim cyan",
        "error": "bold red",
        "heading": "bold cyan",
        "muted": "dim",
    }),
    ColorScheme.LIGHT: Theme({
        "debug": "grey50",
        "info": "blue",
        "error": "bold red3",
        "heading": "bold blue",
        "muted": "grey50",
    }),
}

console = Console(theme=_THEMES[ColorScheme.DARK], stderr=True)
output = Console(theme=_THEMES[ColorScheme.DARK])

_show_debug = False


def use_color_scheme(scheme: ColorScheme | str) -> None:
    """Replace both shared consoles with ones themed for *scheme*."""
    global console, output
    theme = _THEMES[ColorScheme(scheme)]
    console = Console(theme=theme, stderr=True)
    output = Console(theme=theme)


def set_debug(enabled: bool) -> None:
    """Show or hide debug messages on the console."""
    global _show_debug
    _show_debug = enabled


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

def _emit(prefix: str, style: str, message: str) -> str:
    console.print(Text.assemble((prefix.rstrip(), style), " ", message), soft_wrap=True)
    return prefix + message


def debug_message(message: str) -> str:
    """Record a debug message; print it only when debug output is on.

    Returns:
        The prefixed message.
    """
    logger.debug(message)
    if _show_debug:
        return _emit(DEBUG_PREFIX, "debug", message)
    return DEBUG_PREFIX + message


def info_message(message: str) -> str:
    """Print an informational message and return it prefixed."""
    logger.info(message)
    return _emit(INFO_PREFIX, "info", message)


def error_message(message: str) -> str:
    """Print an error message and return it prefixed."""
    logger.error(message)
    return _emit(ERROR_PREFIX, "error", message)


def report(outcome: Outcome) -> bool:
    """Show the message of a failed guard.

    Returns:
        Whether the guard passed, so callers can write
        ``if not report(in_view_mode(ctx)): return``.
    """
    if not outcome:
        error_message(outcome.message)
    return bool(outcome)


# ---------------------------------------------------------------------------
# Context display
# ---------------------------------------------------------------------------

def _display_value(attr: str, value: Any) -> str:
    if value is None:
        return "-"
    if attr == "atoms_by_id":
        return f"{len(value)} atoms"
    if attr in ("view", "view_properties"):
        return f"{len(value)} keys"
    if hasattr(value, "value"):
        return str(value.value)
    return str(value)


def display_context(ctx: Context) -> None:
    """Render every field of *ctx* in a table."""
    table = Table(
        title="Context",
        caption=Text(status_line(ctx)),
        border_style="cyan",
        show_header=True,
        header_style="heading",
    )
    table.add_column("Field", style="bold")
    table.add_column("Value")

    for symbol, attr in FIELD_NAMES.items():
        table.add_row(symbol, Text(_display_value(attr, getattr(ctx, attr))))

    output.print()
    output.print(table)
    output.print()
