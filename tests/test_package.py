"""Import and packaging tests for brain-mode."""


def test_import_context_api():
    """Lifecycle functions should be importable from the top-level package."""
    from brainmode import Context, clone_context, default_context, parse_context
    assert Context is not None
    assert clone_context is not None
    assert default_context is not None
    assert parse_context is not None


def test_import_errors():
    """Exception classes should be importable from the top-level package."""
    from brainmode import BrainModeError, ModeError, ResponseFormatError
    assert issubclass(ModeError, BrainModeError)
    assert issubclass(ResponseFormatError, BrainModeError)


def test_version():
    """Package version should be set."""
    from brainmode import __version__
    assert __version__ == "0.1.0"


def test_all_exports():
    """All names in __all__ should be accessible attributes."""
    import brainmode
    for name in brainmode.__all__:
        assert hasattr(brainmode, name), f"Missing export: {name}"
