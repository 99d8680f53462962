"""Predicates and guards over a view's context.

Predicates answer a yes/no question about the context and return a
plain ``bool``. Guards gate a command: they return an
:class:`~brainmode.models.Outcome` whose message explains a refusal.
Guards never print anything; pass the outcome to
:func:`brainmode.messages.report` to show it to the user.
"""

from __future__ import annotations

from brainmode import constants
from brainmode.constants import Mode, Style, ViewStyle
from brainmode.context import Context
from brainmode.models import ErrorKind, Outcome


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def in_readonly_mode(ctx: Context) -> bool:
    return ctx.mode == Mode.READONLY


def in_readwrite_mode(ctx: Context) -> bool:
    return ctx.mode == Mode.READWRITE


def in_search_mode(ctx: Context) -> bool:
    return ctx.mode == Mode.SEARCH


def in_forward_style(ctx: Context) -> bool:
    return ctx.style == Style.FORWARD


def in_backward_style(ctx: Context) -> bool:
    return ctx.style == Style.BACKWARD


def in_sharability_view(ctx: Context) -> bool:
    return ctx.view_style == ViewStyle.SHARABILITY


def in_inference_view(ctx: Context) -> bool:
    return ctx.view_style == ViewStyle.INFERENCE


# ---------------------------------------------------------------------------
# Mode guards
# ---------------------------------------------------------------------------

def _wrong_mode(ctx: Context, required: str) -> Outcome:
    return Outcome.failure(
        ErrorKind.WRONG_MODE,
        f"this command requires {required} (current mode: {ctx.mode.value})",
    )


def assert_readwrite_context(ctx: Context) -> Outcome:
    """Allow commands that change the graph.

    Only readwrite views may be edited.
    """
    if ctx.mode == Mode.READWRITE:
        return Outcome.success()
    return _wrong_mode(ctx, "readwrite mode")


def in_view_mode(ctx: Context) -> Outcome:
    """Allow commands that render a tree view.

    Search results are a flat list, not a tree, so search mode is refused.
    """
    if ctx.mode in (Mode.READONLY, Mode.READWRITE):
        return Outcome.success()
    return _wrong_mode(ctx, "a readonly or readwrite view")


def in_setproperties_mode(ctx: Context) -> Outcome:
    """Allow commands that inspect or set atom properties.

    Broader than :func:`in_view_mode`: properties may be set on search
    results too.
    """
    if ctx.mode in (Mode.SEARCH, Mode.READONLY, Mode.READWRITE):
        return Outcome.success()
    return _wrong_mode(ctx, "a search, readonly or readwrite view")


# ---------------------------------------------------------------------------
# Numeric guards
# ---------------------------------------------------------------------------

def assert_height_in_bounds(height: int) -> Outcome:
    """Check that *height* is a supported view depth."""
    if height < constants.MIN_HEIGHT:
        return Outcome.failure(
            ErrorKind.HEIGHT_OUT_OF_BOUNDS,
            f"height of {height} is too small (must be >= {constants.MIN_HEIGHT})",
        )
    if height > constants.MAX_HEIGHT:
        return Outcome.failure(
            ErrorKind.HEIGHT_OUT_OF_BOUNDS,
            f"height of {height} is too large (must be <= {constants.MAX_HEIGHT})",
        )
    return Outcome.success()


def sharability_level(prefix: int) -> tuple[Outcome, float | None]:
    """Map a command prefix 1-4 to private, personal, public or universal.

    Returns:
        ``(outcome, level)``; *level* is ``None`` when the outcome failed.
    """
    levels = constants.SHARABILITY_LEVELS
    if 1 <= prefix <= len(levels):
        return Outcome.success(), levels[prefix - 1]
    return (
        Outcome.failure(
            ErrorKind.INVALID_LEVEL,
            f"sharability prefix must be between 1 and {len(levels)}, got {prefix}",
        ),
        None,
    )


def weight_level(prefix: int) -> tuple[Outcome, float | None]:
    """Map a command prefix 0-4 to a weight from none to full."""
    levels = constants.WEIGHT_LEVELS
    if 0 <= prefix < len(levels):
        return Outcome.success(), levels[prefix]
    return (
        Outcome.failure(
            ErrorKind.INVALID_LEVEL,
            f"weight prefix must be between 0 and {len(levels) - 1}, got {prefix}",
        ),
        None,
    )
