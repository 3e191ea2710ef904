"""Tests for the ``wesh`` entry point (wesh_repl.py)."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from wesh_repl import build_parser, main


@pytest.fixture
def no_config(tmp_path: Path) -> list:
    return ["--config", str(tmp_path / "absent.json")]


def _feed(monkeypatch: pytest.MonkeyPatch, text: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


class TestMain:
    def test_exit_terminates_with_zero(
        self, monkeypatch: pytest.MonkeyPatch, no_config, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _feed(monkeypatch, "conf\nup\nexit\n")
        with pytest.raises(SystemExit) as exc_info:
            main(no_config)
        assert exc_info.value.code == 0
        assert capsys.readouterr().out == "> # > "

    def test_up_at_root_terminates_with_zero(self, monkeypatch: pytest.MonkeyPatch, no_config) -> None:
        _feed(monkeypatch, "up\n")
        with pytest.raises(SystemExit) as exc_info:
            main(no_config)
        assert exc_info.value.code == 0

    def test_end_of_input_is_fatal(
        self, monkeypatch: pytest.MonkeyPatch, no_config, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _feed(monkeypatch, "conf\n")
        assert main(no_config) == 1
        assert "End of input" in capsys.readouterr().out

    def test_undecodable_input_is_fatal(
        self, monkeypatch: pytest.MonkeyPatch, no_config, capsys: pytest.CaptureFixture[str]
    ) -> None:
        stream = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stream)
        assert main(no_config) == 1
        assert "Failed to read input" in capsys.readouterr().out

    def test_undecodable_layout(
        self, tmp_path: Path, no_config, capsys: pytest.CaptureFixture[str]
    ) -> None:
        layout = tmp_path / "layout.yaml"
        layout.write_bytes(b"entry: \xff\n")
        assert main(no_config + ["--layout", str(layout)]) == 1
        assert "Failed to load layout" in capsys.readouterr().out

    def test_unknown_policy_flag(
        self, monkeypatch: pytest.MonkeyPatch, no_config, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _feed(monkeypatch, "bogus\nexit\n")
        with pytest.raises(SystemExit):
            main(no_config + ["--unknown-policy", "silent"])
        assert "bogus" not in capsys.readouterr().out

    def test_invalid_settings(
        self, monkeypatch: pytest.MonkeyPatch, no_config, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("WESH_UNKNOWN_POLICY", "loud")
        assert main(no_config) == 1
        assert "Invalid unknown_policy 'loud'" in capsys.readouterr().out

    def test_invalid_layout(
        self, tmp_path: Path, no_config, capsys: pytest.CaptureFixture[str]
    ) -> None:
        layout = tmp_path / "layout.yaml"
        layout.write_text("entry: oper\ndirectives:\n  - action: exit\n")
        assert main(no_config + ["--layout", str(layout)]) == 1
        out = capsys.readouterr().out
        assert "Invalid shell layout" in out
        assert "missing 'handler' field" in out


class TestParser:
    def test_rejects_unknown_policy(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--unknown-policy", "loud"])

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.config is None
        assert args.layout is None
        assert args.plain is False
