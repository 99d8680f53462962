"""The per-view session context and its lifecycle.

A :class:`Context` holds everything a view needs to know about itself:
how it may be edited, how its tree is laid out, which atoms its
sharability and weight bounds let through, how deep it is rendered and
which atoms it is currently showing.

Every field also has a symbolic, hyphenated name (``"view-style"``,
``"default-sharability"``, ...) under which it can be read and written
with :meth:`Context.get` and :meth:`Context.set`.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Optional

from brainmode import constants
from brainmode.constants import Mode, Style, ViewStyle
from brainmode.errors import ContextFieldError, ResponseFormatError, ValidationError
from brainmode.models import Atom, parse_atom

if TYPE_CHECKING:
    from brainmode.config import ContextDefaults

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# The context record
# ---------------------------------------------------------------------------

@dataclass
class Context:
    """Mutable session state of one view.

    Contexts are edited in place; two names bound to the same context
    see each other's changes. Use :func:`clone_context` for an
    independent copy.
    """

    mode: Mode = constants.DEFAULT_MODE
    style: Style = constants.DEFAULT_STYLE
    view_style: ViewStyle = constants.DEFAULT_VIEW_STYLE

    min_sharability: float = constants.DEFAULT_MIN_SHARABILITY
    max_sharability: float = constants.DEFAULT_MAX_SHARABILITY
    default_sharability: Optional[float] = constants.DEFAULT_SHARABILITY

    min_weight: float = constants.DEFAULT_MIN_WEIGHT
    max_weight: float = constants.DEFAULT_MAX_WEIGHT
    default_weight: Optional[float] = constants.DEFAULT_WEIGHT

    height: int = constants.DEFAULT_HEIGHT

    root_id: Optional[str] = None
    title: Optional[str] = None
    query: Optional[str] = None
    query_type: Optional[str] = None
    file: Optional[str] = None
    format: Optional[str] = None
    line: int = constants.DEFAULT_LINE
    view: Optional[Mapping[str, Any]] = None
    view_properties: Optional[Mapping[str, Any]] = None
    atoms_by_id: dict[str, Atom] = field(default_factory=dict)

    value_length_cutoff: int = constants.DEFAULT_VALUE_LENGTH_CUTOFF
    minimize_verbatim_blocks: bool = False

    # ------------------------------------------------------------------
    # Access by symbolic name
    # ------------------------------------------------------------------

    def get(self, name: str) -> Any:
        """Return the field called *name*.

        Raises:
            ContextFieldError: If no field has that name.
        """
        return getattr(self, _attribute_for(name))

    def set(self, name: str, value: Any) -> None:
        """Store *value* in the field called *name*.

        Strings are coerced into the enum of the ``mode``, ``style`` and
        ``view-style`` fields; numeric fields accept any real number.

        Raises:
            ContextFieldError: If no field has that name.
            ValidationError: If *value* cannot be stored in the field.
        """
        attr = _attribute_for(name)
        setattr(self, attr, _coerce(attr, value))

    def to_dict(self) -> dict[str, Any]:
        """Return the context as a plain dict keyed by symbolic name."""
        result: dict[str, Any] = {}
        for symbol, attr in FIELD_NAMES.items():
            value = getattr(self, attr)
            if isinstance(value, Enum):
                value = value.value
            elif attr == "atoms_by_id":
                value = {k: dataclasses.asdict(a) for k, a in value.items()}
            result[symbol] = value
        return result


FIELD_NAMES: dict[str, str] = {
    f.name.replace("_", "-"): f.name for f in dataclasses.fields(Context)
}

_ENUM_FIELDS: dict[str, type[Enum]] = {
    "mode": Mode,
    "style": Style,
    "view_style": ViewStyle,
}

_FLOAT_FIELDS = frozenset({
    "min_sharability", "max_sharability", "default_sharability",
    "min_weight", "max_weight", "default_weight",
})

_INT_FIELDS = frozenset({"height", "line", "value_length_cutoff"})


def _attribute_for(name: str) -> str:
    if name in FIELD_NAMES:
        return FIELD_NAMES[name]
    if name in FIELD_NAMES.values():
        return name
    raise ContextFieldError(name)


def _coerce(attr: str, value: Any) -> Any:
    if attr in _ENUM_FIELDS:
        enum_cls = _ENUM_FIELDS[attr]
        try:
            return enum_cls(value)
        except ValueError as exc:
            allowed = ", ".join(m.value for m in enum_cls)
            raise ValidationError(
                f"Invalid {attr.replace('_', '-')}: {value!r} (expected one of {allowed})"
            ) from exc

    if attr in _FLOAT_FIELDS:
        if value is None and attr.startswith("default_"):
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(f"{attr.replace('_', '-')} must be a number, got {value!r}")
        return float(value)

    if attr in _INT_FIELDS:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{attr.replace('_', '-')} must be an integer, got {value!r}")
        return value

    if attr == "minimize_verbatim_blocks":
        return bool(value)

    return value


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

def default_context(defaults: Optional[ContextDefaults] = None) -> Context:
    """Build a fresh context.

    Args:
        defaults: Optional :class:`~brainmode.config.ContextDefaults`
            whose values replace the built-in defaults.

    Returns:
        A new :class:`Context`.
    """
    ctx = Context()
    if defaults is None:
        return ctx

    ctx.mode = Mode(defaults.mode)
    ctx.style = Style(defaults.style)
    ctx.view_style = ViewStyle(defaults.view_style)
    ctx.height = defaults.height
    ctx.min_sharability = defaults.min_sharability
    ctx.max_sharability = defaults.max_sharability
    ctx.default_sharability = defaults.default_sharability
    ctx.min_weight = defaults.min_weight
    ctx.max_weight = defaults.max_weight
    ctx.default_weight = defaults.default_weight
    ctx.value_length_cutoff = defaults.value_length_cutoff
    ctx.minimize_verbatim_blocks = defaults.minimize_verbatim_blocks
    return ctx


def clone_context(ctx: Context, line: Optional[int] = None) -> Context:
    """Copy *ctx* for a newly opened view.

    If *line* is given, it is first recorded as the cursor line of the
    source view. The copy gets its own atom cache. Its default
    sharability is capped at :data:`~brainmode.constants.CLONE_SHARABILITY_CAP`,
    so that a "universal" setting does not silently carry over into the
    next view; a source without a default falls back to
    :data:`~brainmode.constants.CLONE_SHARABILITY_FALLBACK`.
    """
    if line is not None:
        ctx.set("line", line)

    clone = dataclasses.replace(ctx, atoms_by_id=dict(ctx.atoms_by_id))

    previous = ctx.default_sharability
    if previous is None:
        clone.default_sharability = constants.CLONE_SHARABILITY_FALLBACK
    else:
        clone.default_sharability = min(previous, constants.CLONE_SHARABILITY_CAP)

    logger.debug(
        "Cloned context (default sharability %s -> %s)",
        previous,
        clone.default_sharability,
    )
    return clone


# Response keys holding floats, and the fields they update.
_RESPONSE_FLOATS = {
    "minSharability": "min_sharability",
    "maxSharability": "max_sharability",
    "defaultSharability": "default_sharability",
    "minWeight": "min_weight",
    "maxWeight": "max_weight",
    "defaultWeight": "default_weight",
}


def _response_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ResponseFormatError(key, value, "a number")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ResponseFormatError(key, value, "a number") from exc


def _response_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ResponseFormatError(key, value, "an integer")
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ResponseFormatError(key, value, "an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ResponseFormatError(key, value, "an integer") from exc


def parse_context(ctx: Context, response: Mapping[str, Any]) -> Context:
    """Merge the view settings of a graph-service response into *ctx*.

    Every recognised key that is absent (or ``None``) keeps the current
    value of its field. In search mode the height is forced to 1, since
    search results are always shown flat.

    Args:
        ctx: The context to update in place.
        response: The decoded response map.

    Returns:
        *ctx*, for chaining.

    Raises:
        ResponseFormatError: If a recognised key carries a value of the
            wrong type, or an unknown style. *ctx* is left untouched.
    """
    updates: dict[str, Any] = {}

    for key, attr in _RESPONSE_FLOATS.items():
        value = response.get(key)
        if value is not None:
            updates[attr] = _response_float(key, value)

    root = response.get("root")
    if root is not None:
        updates["root_id"] = str(root)

    height = response.get("height")
    if height is not None:
        updates["height"] = _response_int("height", height)

    style = response.get("style")
    if style is not None:
        try:
            updates["style"] = Style(style)
        except ValueError as exc:
            raise ResponseFormatError("style", style, "'forward' or 'backward'") from exc

    title = response.get("title")
    if title is not None:
        updates["title"] = str(title)

    for attr, value in updates.items():
        setattr(ctx, attr, value)

    if ctx.mode == Mode.SEARCH:
        ctx.height = 1

    for problem in bounds_violations(ctx):
        logger.warning("Context bounds after parse: %s", problem)

    logger.debug(
        "Parsed context: root=%s height=%d style=%s",
        ctx.root_id,
        ctx.height,
        ctx.style.value,
    )
    return ctx


def bounds_violations(ctx: Context) -> list[str]:
    """Describe every sharability or weight bound that is out of order.

    Bounds are not enforced anywhere; this only reports them.
    """
    problems: list[str] = []
    for label, low, default, high in (
        ("sharability", ctx.min_sharability, ctx.default_sharability, ctx.max_sharability),
        ("weight", ctx.min_weight, ctx.default_weight, ctx.max_weight),
    ):
        if low > high:
            problems.append(f"min {label} {low} exceeds max {label} {high}")
        if default is not None and not low <= default <= high:
            problems.append(
                f"default {label} {default} lies outside [{low}, {high}]"
            )
    return problems


# ---------------------------------------------------------------------------
# Atom cache
# ---------------------------------------------------------------------------

def index_atoms(ctx: Context, view: Mapping[str, Any]) -> int:
    """Make *view* the current view of *ctx* and rebuild its atom cache.

    The view is the tree the graph service rendered: a root node whose
    ``children`` are nodes of the same shape.

    Returns:
        The number of atoms in the rebuilt cache.

    Raises:
        ResponseFormatError: If a node carries a malformed value. The
            current view and cache of *ctx* are kept.
    """
    atoms: dict[str, Atom] = {}

    stack: list[Mapping[str, Any]] = [view]
    while stack:
        node = stack.pop()
        if node.get("id") is not None:
            atom = parse_atom(node)
            atoms[atom.id] = atom
        children = node.get("children") or []
        if not isinstance(children, (list, tuple)):
            raise ResponseFormatError("children", children, "a list")
        for child in children:
            if isinstance(child, Mapping):
                stack.append(child)

    ctx.view = view
    ctx.atoms_by_id = atoms
    logger.debug("Indexed %d atoms for root %s", len(ctx.atoms_by_id), ctx.root_id)
    return len(ctx.atoms_by_id)


def atom_visible(ctx: Context, atom: Atom) -> bool:
    """Whether *atom* passes the sharability and weight bounds of *ctx*.

    An atom without a sharability or weight is not filtered on it.
    """
    if atom.sharability is not None and not (
        ctx.min_sharability <= atom.sharability <= ctx.max_sharability
    ):
        return False
    if atom.weight is not None and not (
        ctx.min_weight <= atom.weight <= ctx.max_weight
    ):
        return False
    return True
