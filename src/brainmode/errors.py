"""Custom exceptions for brain-mode.

Hierarchy::

    BrainModeError
    ├── ContextFieldError        unknown context field name
    ├── ContextNotFoundError     no context open for a buffer
    ├── ValidationError          invalid value for a context field
    ├── ModeError                command not allowed in the current mode
    ├── HeightOutOfBoundsError   view height outside [1, 7]
    ├── InvalidLevelError        prefix does not name a sharability/weight level
    ├── ResponseFormatError      malformed graph-service response
    └── ConfigError              invalid configuration
"""

from __future__ import annotations


class BrainModeError(Exception):
    """Base exception for all brain-mode errors."""


class ContextFieldError(BrainModeError):
    """A context field was addressed by a name that does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No such context field: {name!r}")


class ContextNotFoundError(BrainModeError):
    """No context is open for the given buffer."""

    def __init__(self, buffer_id: str) -> None:
        self.buffer_id = buffer_id
        super().__init__(f"No context open for buffer: {buffer_id!r}")


class ValidationError(BrainModeError):
    """A value cannot be stored in a context field.

    Examples: an unknown mode string, a non-numeric height.
    """


class ModeError(BrainModeError):
    """The current view mode does not allow the requested command."""


class HeightOutOfBoundsError(BrainModeError):
    """A view height lies outside the supported range."""


class InvalidLevelError(BrainModeError):
    """A numeric prefix does not correspond to a sharability or weight level."""


class ResponseFormatError(BrainModeError):
    """A graph-service response carries a value of the wrong shape.

    Attributes:
        key: The response key holding the offending value.
        value: The offending value.
    """

    def __init__(self, key: str, value: object, expected: str) -> None:
        self.key = key
        self.value = value
        super().__init__(
            f"Malformed response value for {key!r}: {value!r} (expected {expected})"
        )


class ConfigError(BrainModeError):
    """Raised when configuration is invalid or incomplete."""
