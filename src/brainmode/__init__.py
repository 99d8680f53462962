"""brainmode - session context for outline views of a knowledge graph.

Quick start::

    >>> from brainmode import default_context, clone_context, parse_context
    >>> ctx = default_context()
    >>> ctx = parse_context(ctx, {"root": "a1b2c3", "height": 3, "title": "Projects"})
    >>> child = clone_context(ctx, line=12)

Guards return an :class:`Outcome` instead of printing::

    >>> from brainmode import assert_readwrite_context, report
    >>> report(assert_readwrite_context(ctx))
    Error: this command requires readwrite mode (current mode: readonly)
    False
"""

from brainmode.constants import ColorScheme, Mode, Style, ViewStyle
from brainmode.context import (
    Context,
    atom_visible,
    bounds_violations,
    clone_context,
    default_context,
    index_atoms,
    parse_context,
)
from brainmode.errors import (
    BrainModeError,
    ConfigError,
    ContextFieldError,
    ContextNotFoundError,
    HeightOutOfBoundsError,
    InvalidLevelError,
    ModeError,
    ResponseFormatError,
    ValidationError,
)
from brainmode.formatting import format_date, format_time, status_line, truncate_value
from brainmode.guards import (
    assert_height_in_bounds,
    assert_readwrite_context,
    in_backward_style,
    in_forward_style,
    in_inference_view,
    in_readonly_mode,
    in_readwrite_mode,
    in_search_mode,
    in_setproperties_mode,
    in_sharability_view,
    in_view_mode,
    sharability_level,
    weight_level,
)
from brainmode.messages import debug_message, error_message, info_message, report
from brainmode.models import Atom, ErrorKind, Outcome, parse_atom
from brainmode.store import ContextStore

__version__ = "0.1.0"
__all__ = [
    "Mode",
    "Style",
    "ViewStyle",
    "ColorScheme",
    "Context",
    "ContextStore",
    "Atom",
    "Outcome",
    "ErrorKind",
    "parse_atom",
    "default_context",
    "clone_context",
    "parse_context",
    "index_atoms",
    "atom_visible",
    "bounds_violations",
    "in_readonly_mode",
    "in_readwrite_mode",
    "in_search_mode",
    "in_forward_style",
    "in_backward_style",
    "in_sharability_view",
    "in_inference_view",
    "assert_readwrite_context",
    "in_view_mode",
    "in_setproperties_mode",
    "assert_height_in_bounds",
    "sharability_level",
    "weight_level",
    "format_date",
    "format_time",
    "truncate_value",
    "status_line",
    "debug_message",
    "info_message",
    "error_message",
    "report",
    "BrainModeError",
    "ConfigError",
    "ContextFieldError",
    "ContextNotFoundError",
    "HeightOutOfBoundsError",
    "InvalidLevelError",
    "ModeError",
    "ResponseFormatError",
    "ValidationError",
]
