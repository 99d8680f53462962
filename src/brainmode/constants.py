"""Named constants for brain-mode sessions.

Enums use ``str, Enum`` so they compare equal to the plain strings the
graph service sends and can be written straight back into responses.
"""

from __future__ import annotations

from enum import Enum


# ===================================================================
# Enums
# ===================================================================

class Mode(str, Enum):
    """How a view may be interacted with."""
    READONLY = "readonly"
    READWRITE = "readwrite"
    SEARCH = "search"


class Style(str, Enum):
    """Tree layout direction."""
    FORWARD = "forward"
    BACKWARD = "backward"


class ViewStyle(str, Enum):
    """What the outline colors encode."""
    SHARABILITY = "sharability-coloring"
    INFERENCE = "inference-coloring"


class ColorScheme(str, Enum):
    """Console color scheme."""
    LIGHT = "light"
    DARK = "dark"


# ===================================================================
# Sharability and weight levels
# ===================================================================

SHARABILITY_PRIVATE = 0.25
SHARABILITY_PERSONAL = 0.5
SHARABILITY_PUBLIC = 0.75
SHARABILITY_UNIVERSAL = 1.0

SHARABILITY_LEVELS = (
    SHARABILITY_PRIVATE,
    SHARABILITY_PERSONAL,
    SHARABILITY_PUBLIC,
    SHARABILITY_UNIVERSAL,
)

WEIGHT_NONE = 0.0
WEIGHT_DEEMPHASIZED = 0.25
WEIGHT_DEFAULT = 0.5
WEIGHT_EMPHASIZED = 0.75
WEIGHT_FULL = 1.0

WEIGHT_LEVELS = (
    WEIGHT_NONE,
    WEIGHT_DEEMPHASIZED,
    WEIGHT_DEFAULT,
    WEIGHT_EMPHASIZED,
    WEIGHT_FULL,
)

# ===================================================================
# View height
# ===================================================================

MIN_HEIGHT = 1
MAX_HEIGHT = 7

# ===================================================================
# Context defaults
# ===================================================================

DEFAULT_MODE = Mode.READONLY
DEFAULT_STYLE = Style.FORWARD
DEFAULT_VIEW_STYLE = ViewStyle.SHARABILITY
DEFAULT_HEIGHT = 2
DEFAULT_LINE = 1

DEFAULT_MIN_SHARABILITY = SHARABILITY_PRIVATE
DEFAULT_MAX_SHARABILITY = SHARABILITY_UNIVERSAL
DEFAULT_SHARABILITY = SHARABILITY_PERSONAL

DEFAULT_MIN_WEIGHT = WEIGHT_NONE
DEFAULT_MAX_WEIGHT = WEIGHT_FULL
DEFAULT_WEIGHT = WEIGHT_DEFAULT

DEFAULT_VALUE_LENGTH_CUTOFF = 100

# A cloned view never inherits a default sharability above this cap.
CLONE_SHARABILITY_CAP = SHARABILITY_PUBLIC
# Used when the source view had no default sharability at all.
CLONE_SHARABILITY_FALLBACK = SHARABILITY_PERSONAL
