"""Text formatting helpers for views and status lines."""

from __future__ import annotations

from datetime import datetime
from typing import Union

from brainmode.context import Context

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
TIME_FORMAT_SECONDS = "%H:%M:%S"

TRUNCATION_MARK = " [...]"

# Either a datetime, or milliseconds since the epoch as the graph service sends them.
Timestamp = Union[datetime, int, float]


def _as_datetime(when: Timestamp) -> datetime:
    if isinstance(when, datetime):
        return when
    return datetime.fromtimestamp(when / 1000.0)


def format_date(when: Timestamp) -> str:
    """Format *when* as ``YYYY-MM-DD`` in local time."""
    return _as_datetime(when).strftime(DATE_FORMAT)


def format_time(when: Timestamp, seconds: bool = False) -> str:
    """Format *when* as ``HH:MM``, or ``HH:MM:SS`` with *seconds*."""
    fmt = TIME_FORMAT_SECONDS if seconds else TIME_FORMAT
    return _as_datetime(when).strftime(fmt)


def truncate_value(value: str, cutoff: int) -> str:
    """Shorten *value* to *cutoff* characters plus a truncation mark.

    A cutoff of zero or less disables truncation.
    """
    if cutoff <= 0 or len(value) <= cutoff:
        return value
    return value[:cutoff] + TRUNCATION_MARK


def status_line(ctx: Context) -> str:
    """One-line summary of the view settings of *ctx*.

    Example: ``readwrite forward h=2 s=[0.25,1.00]:0.50 w=[0.00,1.00]:0.50``
    """
    def _default(value: float | None) -> str:
        return "-" if value is None else f"{value:.2f}"

    return (
        f"{ctx.mode.value} {ctx.style.value} h={ctx.height}"
        f" s=[{ctx.min_sharability:.2f},{ctx.max_sharability:.2f}]:{_default(ctx.default_sharability)}"
        f" w=[{ctx.min_weight:.2f},{ctx.max_weight:.2f}]:{_default(ctx.default_weight)}"
    )
