"""Process-level helpers for the brain-mode console entry point."""
