"""Typed data models for brain-mode.

Models here are frozen dataclasses: an :class:`Atom` is a snapshot of
what the graph service rendered, and an :class:`Outcome` is the verdict
of a guard. Neither is edited after creation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from brainmode.errors import (
    BrainModeError,
    HeightOutOfBoundsError,
    InvalidLevelError,
    ModeError,
    ResponseFormatError,
)


# ===================================================================
# Atoms
# ===================================================================

@dataclass(frozen=True)
class Atom:
    """A node of the knowledge graph, as rendered in one outline entry.

    Attributes:
        id: Unique atom identifier.
        value: The text of the atom.
        weight: Importance, 0.0 to 1.0.
        sharability: How freely the atom may be shared, 0.0 to 1.0.
        created: Creation time in milliseconds since the epoch.
        alias: Optional alias (usually a URL) attached to the atom.
        priority: Optional priority, 0.0 to 1.0.
        children: Identifiers of the child atoms shown below this one.
    """
    id: str
    value: str = ""
    weight: Optional[float] = None
    sharability: Optional[float] = None
    created: Optional[int] = None
    alias: Optional[str] = None
    priority: Optional[float] = None
    children: tuple[str, ...] = ()

    @property
    def has_children(self) -> bool:
        """Whether the atom was rendered with any children."""
        return bool(self.children)


def _optional_float(key: str, value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ResponseFormatError(key, value, "a number")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ResponseFormatError(key, value, "a number") from exc


def _optional_int(key: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ResponseFormatError(key, value, "an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ResponseFormatError(key, value, "an integer") from exc


def parse_atom(data: Mapping[str, Any]) -> Atom:
    """Parse one node of a rendered view into an :class:`Atom`.

    Missing keys fall back to the dataclass defaults. Children may be
    given either as nested node objects or as bare identifiers.

    Raises:
        ResponseFormatError: If a numeric key holds a non-numeric value,
            or ``children`` is not a list.
    """
    raw_children = data.get("children") or []
    if not isinstance(raw_children, (list, tuple)):
        raise ResponseFormatError("children", raw_children, "a list")

    children: list[str] = []
    for child in raw_children:
        if isinstance(child, Mapping):
            if child.get("id") is not None:
                children.append(str(child["id"]))
        elif child is not None:
            children.append(str(child))

    return Atom(
        id=str(data.get("id", "")),
        value=data.get("value") or "",
        weight=_optional_float("weight", data.get("weight")),
        sharability=_optional_float("sharability", data.get("sharability")),
        created=_optional_int("created", data.get("created")),
        alias=data.get("alias"),
        priority=_optional_float("priority", data.get("priority")),
        children=tuple(children),
    )


# ===================================================================
# Guard outcomes
# ===================================================================

class ErrorKind(str, Enum):
    """Why a guard failed."""
    WRONG_MODE = "wrong_mode"
    HEIGHT_OUT_OF_BOUNDS = "height_out_of_bounds"
    INVALID_LEVEL = "invalid_level"


_ERRORS_BY_KIND: dict[ErrorKind, type[BrainModeError]] = {
    ErrorKind.WRONG_MODE: ModeError,
    ErrorKind.HEIGHT_OUT_OF_BOUNDS: HeightOutOfBoundsError,
    ErrorKind.INVALID_LEVEL: InvalidLevelError,
}


@dataclass(frozen=True)
class Outcome:
    """Result of a guard: success, or a failure with a kind and a message.

    An outcome is truthy exactly when it succeeded, so guards read
    naturally in conditions::

        if not assert_readwrite_context(ctx):
            ...

    Attributes:
        ok: Whether the guard passed.
        kind: The failure kind, ``None`` on success.
        message: Human-readable reason for the failure.
    """
    ok: bool
    kind: Optional[ErrorKind] = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> Outcome:
        return cls(ok=True)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> Outcome:
        return cls(ok=False, kind=kind, message=message)

    def raise_for_error(self) -> None:
        """Raise the exception matching :attr:`kind` if the guard failed."""
        if self.ok:
            return
        error_cls = _ERRORS_BY_KIND.get(self.kind, BrainModeError)  # type: ignore[arg-type]
        raise error_cls(self.message)
