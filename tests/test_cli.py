"""Tests for the console entry point (brainmode.__main__)."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from brainmode import messages
from brainmode.__main__ import main

_ENV = {
    "BRAINMODE_MODE": "",
    "BRAINMODE_STYLE": "",
    "BRAINMODE_HEIGHT": "",
    "BRAINMODE_COLOR_SCHEME": "",
    "BRAINMODE_VERBOSE": "",
}

_NO_FILE = ["--config", "/nonexistent/config.yaml"]


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, package_logger):
    """Undo the global logging and console changes main() makes."""
    monkeypatch.setattr(messages, "console", messages.console)
    monkeypatch.setattr(messages, "output", messages.output)
    monkeypatch.setattr(messages, "_show_debug", False)
    with patch.dict("os.environ", _ENV, clear=False):
        yield


def _write_response(tmp_path, data) -> str:
    path = tmp_path / "response.json"
    path.write_text(json.dumps(data))
    return str(path)


class TestVersion:
    def test_version(self, capsys):
        assert main(["--version", *_NO_FILE]) == 0
        assert capsys.readouterr().out.strip() == "brain-mode 0.1.0"


class TestOutput:
    def test_default_context_as_json(self, capsys):
        assert main(["--json", *_NO_FILE]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data["mode"] == "readonly"
        assert data["height"] == 2
        assert data["default-sharability"] == 0.5

    def test_cli_overrides_reach_context(self, capsys):
        assert main(["--json", "--mode", "readwrite", "--height", "4", *_NO_FILE]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data["mode"] == "readwrite"
        assert data["height"] == 4

    def test_verbose_json_keeps_stdout_clean(self, capsys):
        assert main(["--json", "--verbose", *_NO_FILE]) == 0
        captured = capsys.readouterr()

        assert json.loads(captured.out)["mode"] == "readonly"
        assert "Debug: opened context for *brain*" in captured.err

    def test_table(self, capsys):
        assert main(_NO_FILE) == 0
        out = capsys.readouterr().out

        assert "Context" in out
        assert "view-style" in out


class TestResponse:
    def test_response_is_merged(self, tmp_path, capsys, sample_view):
        path = _write_response(tmp_path, {
            "root": "root1",
            "height": 3,
            "title": "Projects",
            "style": "backward",
            "view": sample_view,
        })

        assert main(["--response", path, "--json", *_NO_FILE]) == 0
        captured = capsys.readouterr()
        data = json.loads(captured.out)

        assert "Info: indexed 4 atoms" in captured.err
        assert data["root-id"] == "root1"
        assert data["height"] == 3
        assert data["style"] == "backward"
        assert set(data["atoms-by-id"]) == {"root1", "c1", "c2", "g1"}

    def test_search_mode_flattens(self, tmp_path, capsys):
        path = _write_response(tmp_path, {"height": 5})

        assert main(["--response", path, "--mode", "search", "--json", *_NO_FILE]) == 0
        assert json.loads(capsys.readouterr().out)["height"] == 1

    def test_response_height_out_of_bounds(self, tmp_path, capsys):
        path = _write_response(tmp_path, {"height": 9})

        assert main(["--response", path, *_NO_FILE]) == 1
        assert "Error: height of 9 is too large" in capsys.readouterr().err

    def test_malformed_response(self, tmp_path, capsys):
        path = _write_response(tmp_path, {"style": "sideways"})

        assert main(["--response", path, *_NO_FILE]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_malformed_atom_value(self, tmp_path, capsys):
        path = _write_response(tmp_path, {
            "root": "a",
            "view": {"id": "a", "weight": {"x": 1}},
        })

        assert main(["--response", path, "--json", *_NO_FILE]) == 1
        captured = capsys.readouterr()

        assert "Error: Malformed response value for 'weight'" in captured.err
        assert captured.out == ""

    def test_missing_response_file(self, tmp_path, capsys):
        assert main(["--response", str(tmp_path / "missing.json"), *_NO_FILE]) == 1
        assert "Error: reading response" in capsys.readouterr().err

    def test_response_must_be_object(self, tmp_path, capsys):
        path = _write_response(tmp_path, [1, 2, 3])

        assert main(["--response", path, *_NO_FILE]) == 1
        assert "expected a JSON object" in capsys.readouterr().err


class TestConfigErrors:
    def test_bad_height(self, capsys):
        assert main(["--height", "9", *_NO_FILE]) == 1
        assert "Error: loading configuration" in capsys.readouterr().err
