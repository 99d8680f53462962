"""Shared pytest fixtures for brain-mode tests."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from brainmode import messages
from brainmode.constants import ColorScheme, Mode
from brainmode.context import Context, default_context


# ---------------------------------------------------------------------------
# Contexts
# ---------------------------------------------------------------------------

@pytest.fixture
def ctx() -> Context:
    """A fresh default context (readonly, forward, height 2)."""
    return default_context()


@pytest.fixture
def readwrite_ctx(ctx: Context) -> Context:
    ctx.mode = Mode.READWRITE
    return ctx


@pytest.fixture
def search_ctx(ctx: Context) -> Context:
    ctx.mode = Mode.SEARCH
    return ctx


@pytest.fixture
def sample_view() -> dict:
    """A two-level view as the graph service renders it."""
    return {
        "id": "root1",
        "value": "Projects",
        "weight": 0.75,
        "sharability": 0.5,
        "created": 1420070400000,
        "children": [
            {
                "id": "c1",
                "value": "brain-mode",
                "weight": 0.5,
                "sharability": 1.0,
                "alias": "http://example.org/brain-mode",
                "children": [],
            },
            {
                "id": "c2",
                "value": "private notes",
                "weight": 0.25,
                "sharability": 0.1,
                "children": [
                    {"id": "g1", "value": "deep", "weight": 0.5, "sharability": 0.5},
                ],
            },
        ],
    }


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------

@pytest.fixture
def console_output(monkeypatch):
    """Redirect both shared consoles into one buffer.

    Yields a callable returning everything printed so far.
    """
    buffer = io.StringIO()
    captured = Console(
        file=buffer,
        width=200,
        color_system=None,
        theme=messages._THEMES[ColorScheme.DARK],
    )
    monkeypatch.setattr(messages, "console", captured)
    monkeypatch.setattr(messages, "output", captured)
    monkeypatch.setattr(messages, "_show_debug", False)
    yield buffer.getvalue


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def package_logger():
    """The ``brainmode`` logger, restored to its prior state afterwards."""
    logger = logging.getLogger("brainmode")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
