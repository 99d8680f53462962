"""Configuration loading for brain-mode.

Loads settings from (highest to lowest priority):
    1. CLI arguments
    2. Environment variables
    3. YAML config file
    4. Defaults
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from brainmode import constants
from brainmode.constants import ColorScheme, Mode, Style, ViewStyle
from brainmode.errors import ConfigError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Default paths
# ---------------------------------------------------------------------------

DEFAULT_CONFIG_DIR = Path.home() / ".brainmode"
DEFAULT_CONFIG_PATH = str(DEFAULT_CONFIG_DIR / "config.yaml")


# ---------------------------------------------------------------------------
# Nested configuration dataclasses
# ---------------------------------------------------------------------------

@dataclass
class ContextDefaults:
    """Initial values of every newly opened context."""

    mode: Mode = constants.DEFAULT_MODE
    style: Style = constants.DEFAULT_STYLE
    view_style: ViewStyle = constants.DEFAULT_VIEW_STYLE
    height: int = constants.DEFAULT_HEIGHT
    min_sharability: float = constants.DEFAULT_MIN_SHARABILITY
    max_sharability: float = constants.DEFAULT_MAX_SHARABILITY
    default_sharability: float = constants.DEFAULT_SHARABILITY
    min_weight: float = constants.DEFAULT_MIN_WEIGHT
    max_weight: float = constants.DEFAULT_MAX_WEIGHT
    default_weight: float = constants.DEFAULT_WEIGHT
    value_length_cutoff: int = constants.DEFAULT_VALUE_LENGTH_CUTOFF
    minimize_verbatim_blocks: bool = False


@dataclass
class DisplayConfig:
    """Settings that control terminal display."""

    color_scheme: ColorScheme = ColorScheme.DARK
    show_debug: bool = False


# ---------------------------------------------------------------------------
# Top-level configuration
# ---------------------------------------------------------------------------

@dataclass
class Config:
    """Complete application configuration.

    Constructed via :func:`load_config`, which merges CLI arguments,
    environment variables, a YAML config file, and built-in defaults.
    """

    verbose: bool = False

    # Nested sections
    context: ContextDefaults = field(default_factory=ContextDefaults)
    display: DisplayConfig = field(default_factory=DisplayConfig)


# ---------------------------------------------------------------------------
# CLI argument parsing
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        A configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="brain-mode",
        description="Inspect and update the session context of a knowledge-graph view",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help=f"Path to config.yaml (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        help="View mode of the context (default: from config)",
    )
    parser.add_argument(
        "--style",
        choices=[s.value for s in Style],
        help="Tree layout direction (default: from config)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="View height (default: from config)",
    )
    parser.add_argument(
        "--response",
        dest="response_path",
        default=None,
        help="JSON file holding a graph-service response to merge into the context",
    )
    parser.add_argument(
        "--json",
        dest="output_json",
        action="store_true",
        default=False,
        help="Print the context as JSON instead of a table",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        default=False,
        help="Show version and exit",
    )
    return parser


# ---------------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------------

def _load_yaml(path: str | None) -> dict[str, Any]:
    """Load a YAML config file, returning an empty dict on any failure.

    Args:
        path: Filesystem path to the YAML file, or ``None`` to skip.

    Returns:
        Parsed YAML as a dictionary, or an empty dictionary if the file does
        not exist or cannot be parsed.
    """
    if path is None:
        return {}

    config_path = Path(path).expanduser()
    if not config_path.is_file():
        logger.debug("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
            return data if isinstance(data, dict) else {}
    except yaml.YAMLError as exc:
        logger.warning("Failed to parse config file %s: %s", config_path, exc)
        return {}
    except OSError as exc:
        logger.warning("Failed to read config file %s: %s", config_path, exc)
        return {}


def _section(yaml_data: dict[str, Any], name: str) -> dict[str, Any]:
    section = yaml_data.get(name, {})
    return section if isinstance(section, dict) else {}


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------

def _enum_value(enum_cls: type[Enum], value: Any, source: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ConfigError(
            f"Invalid {source}: {value!r} (expected one of {allowed})"
        ) from exc


def _number(value: Any, source: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"Invalid {source}: {value!r} (expected a number)")
    return float(value)


def _integer(value: Any, source: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Invalid {source}: {value!r} (expected an integer)")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {source}: {value!r} (expected an integer)") from exc


def _height(value: Any, source: str) -> int:
    height = _integer(value, source)
    if not constants.MIN_HEIGHT <= height <= constants.MAX_HEIGHT:
        raise ConfigError(
            f"Invalid {source}: {height} (must be between "
            f"{constants.MIN_HEIGHT} and {constants.MAX_HEIGHT})"
        )
    return height


def _env_flag(name: str) -> bool | None:
    value = os.environ.get(name, "").lower()
    if value in ("1", "true", "yes"):
        return True
    if value in ("0", "false", "no"):
        return False
    return None


# ---------------------------------------------------------------------------
# Nested-section helpers
# ---------------------------------------------------------------------------

def _build_context_defaults(
    yaml_section: dict[str, Any],
    mode: str | None = None,
    style: str | None = None,
    height: Any = None,
) -> ContextDefaults:
    """Build :class:`ContextDefaults` from YAML values and overrides.

    Args:
        yaml_section: The ``context`` section of the YAML config (may be empty).
        mode: Mode already resolved from the CLI or environment.
        style: Style already resolved from the CLI or environment.
        height: Height already resolved from the CLI or environment.

    Returns:
        A populated :class:`ContextDefaults`.

    Raises:
        ConfigError: If a value has the wrong type or is out of range.
    """
    cfg = ContextDefaults(
        mode=_enum_value(
            Mode, mode or yaml_section.get("mode", ContextDefaults.mode), "mode"
        ),
        style=_enum_value(
            Style, style or yaml_section.get("style", ContextDefaults.style), "style"
        ),
        view_style=_enum_value(
            ViewStyle,
            yaml_section.get("view_style", ContextDefaults.view_style),
            "view_style",
        ),
        height=_height(
            height if height is not None
            else yaml_section.get("height", ContextDefaults.height),
            "height",
        ),
        value_length_cutoff=_integer(
            yaml_section.get("value_length_cutoff", ContextDefaults.value_length_cutoff),
            "value_length_cutoff",
        ),
        minimize_verbatim_blocks=bool(
            yaml_section.get(
                "minimize_verbatim_blocks", ContextDefaults.minimize_verbatim_blocks
            )
        ),
    )
    for name in (
        "min_sharability", "max_sharability", "default_sharability",
        "min_weight", "max_weight", "default_weight",
    ):
        if name in yaml_section:
            value = _number(yaml_section[name], name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"Invalid {name}: {value} (must be between 0 and 1)")
            setattr(cfg, name, value)
    return cfg


def _build_display_config(
    yaml_section: dict[str, Any],
    color_scheme: str | None = None,
) -> DisplayConfig:
    """Build a :class:`DisplayConfig` from YAML values.

    Args:
        yaml_section: The ``display`` section of the YAML config (may be empty).
        color_scheme: Scheme already resolved from the environment.

    Returns:
        A populated :class:`DisplayConfig`.
    """
    return DisplayConfig(
        color_scheme=_enum_value(
            ColorScheme,
            color_scheme
            or yaml_section.get("color_scheme", DisplayConfig.color_scheme),
            "color_scheme",
        ),
        show_debug=bool(yaml_section.get("show_debug", DisplayConfig.show_debug)),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_config(argv: list[str] | None = None) -> Config:
    """Load configuration by merging all sources.

    Priority (highest first):
        1. CLI arguments (from *argv* or ``sys.argv``)
        2. Environment variables
        3. YAML config file
        4. Built-in defaults

    Args:
        argv: Explicit argument list. Pass ``None`` to read from ``sys.argv``.

    Returns:
        A fully-resolved :class:`Config` instance.

    Raises:
        ConfigError: If a configured value is invalid (unknown mode,
            height out of range, ...).
    """
    # ---- 1. Parse CLI arguments ----
    parser = _build_parser()
    args = parser.parse_args(argv)

    # ---- 2. Load YAML ----
    config_path = args.config_path or DEFAULT_CONFIG_PATH
    yaml_data = _load_yaml(config_path)

    # ---- 3. Resolve overridable fields: CLI -> env (-> YAML -> default below) ----
    mode = args.mode or os.environ.get("BRAINMODE_MODE") or None
    style = args.style or os.environ.get("BRAINMODE_STYLE") or None
    height: Any = args.height
    if height is None:
        height = os.environ.get("BRAINMODE_HEIGHT") or None
    color_scheme = os.environ.get("BRAINMODE_COLOR_SCHEME") or None

    verbose: bool
    if args.verbose is not None:
        verbose = args.verbose
    else:
        env_verbose = _env_flag("BRAINMODE_VERBOSE")
        if env_verbose is not None:
            verbose = env_verbose
        else:
            verbose = bool(yaml_data.get("verbose", Config.verbose))

    # ---- 4. Build nested configs ----
    context = _build_context_defaults(
        _section(yaml_data, "context"), mode=mode, style=style, height=height
    )
    display = _build_display_config(
        _section(yaml_data, "display"), color_scheme=color_scheme
    )

    # ---- 5. Assemble and return ----
    config = Config(verbose=verbose, context=context, display=display)

    # Attach extra CLI-only flags for the entry point to inspect.
    # These are not part of the persisted config but influence startup.
    config._response_path = args.response_path  # type: ignore[attr-defined]
    config._output_json = args.output_json  # type: ignore[attr-defined]
    config._show_version_and_exit = args.version  # type: ignore[attr-defined]

    return config
