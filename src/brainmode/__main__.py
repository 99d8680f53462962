"""
Entry point for the brain-mode CLI.

Run with::

    python -m brainmode                          # show the default context
    brain-mode --response view.json --json       # merge a service response

Configuration priority (highest to lowest):

1. CLI arguments
2. Environment variables (``BRAINMODE_MODE``, ``BRAINMODE_HEIGHT``, etc.)
3. YAML configuration file
4. Built-in defaults

CLI parsing and config merging are handled by :func:`brainmode.config.load_config`.
This module focuses on wiring the components together.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

BUFFER_ID = "*brain*"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_response(path: str) -> dict[str, Any]:
    """Read a graph-service response from a JSON file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If it does not hold a JSON object.
    """
    text = Path(path).expanduser().read_text(encoding="utf-8")
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object in {path}")
    return data


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Load the configuration, build a context, and print it.

    This is the primary entry point invoked by ``python -m brainmode``
    or the ``brain-mode`` console script defined in ``pyproject.toml``.

    Returns:
        The process exit code.
    """
    # --- Load configuration (handles its own CLI parsing) ---
    from brainmode.config import load_config
    from brainmode.errors import BrainModeError
    from brainmode import messages

    try:
        config = load_config(argv)
    except BrainModeError as exc:
        messages.error_message(f"loading configuration: {exc}")
        return 1

    # --- Early-exit flags ---
    if getattr(config, "_show_version_and_exit", False):
        from brainmode import __version__

        print(f"brain-mode {__version__}")
        return 0

    # --- Logging and display ---
    from brainmode.utils.logger import setup_logging

    setup_logging(verbose=config.verbose)
    messages.use_color_scheme(config.display.color_scheme)
    messages.set_debug(config.display.show_debug or config.verbose)

    # --- Context ---
    from brainmode.context import index_atoms, parse_context
    from brainmode.guards import assert_height_in_bounds
    from brainmode.store import ContextStore

    store = ContextStore(config.context)
    ctx = store.open(BUFFER_ID)
    messages.debug_message(f"opened context for {BUFFER_ID}")

    response_path = getattr(config, "_response_path", None)
    if response_path:
        try:
            response = _load_response(response_path)
            parse_context(ctx, response)
            view = response.get("view")
            if isinstance(view, dict):
                count = index_atoms(ctx, view)
                messages.info_message(f"indexed {count} atoms")
        except (OSError, ValueError) as exc:
            messages.error_message(f"reading response {response_path}: {exc}")
            return 1
        except BrainModeError as exc:
            messages.error_message(str(exc))
            logger.debug("Response rejected", exc_info=True)
            return 1

    if not messages.report(assert_height_in_bounds(ctx.height)):
        return 1

    # --- Output ---
    if getattr(config, "_output_json", False):
        print(json.dumps(ctx.to_dict(), indent=2, default=str))
    else:
        messages.display_context(ctx)
    return 0


if __name__ == "__main__":
    sys.exit(main())
