"""Tests for settings resolution (config/settings.py)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wesh_lib.config import (
    DEFAULT_UNKNOWN_POLICY,
    SettingsError,
    ShellSettings,
    get_config_path,
    get_route_families,
    get_unknown_policy,
    load_wesh_config,
    resolve_settings,
)


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data))
    return path


class TestConfigFile:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert load_wesh_config(tmp_path / "absent.json") == {}

    def test_reads_object(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "wesh.json", {"unknown_policy": "list"})
        assert load_wesh_config(path) == {"unknown_policy": "list"}

    def test_invalid_json_warns(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "wesh.json"
        path.write_text("{not json")
        assert load_wesh_config(path) == {}
        assert "Ignoring unreadable settings file" in capsys.readouterr().out

    def test_undecodable_file_warns(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "wesh.json"
        path.write_bytes(b'{"unknown_policy": "\xff\xfe"}')
        assert load_wesh_config(path) == {}
        assert "Ignoring unreadable settings file" in capsys.readouterr().out

    def test_non_object_warns(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path / "wesh.json", ["echo"])
        assert load_wesh_config(path) == {}
        assert "expected a JSON object" in capsys.readouterr().out

    def test_env_selects_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WESH_CONFIG", str(tmp_path / "env.json"))
        assert get_config_path() == tmp_path / "env.json"
        assert get_config_path(tmp_path / "arg.json") == tmp_path / "arg.json"


class TestUnknownPolicy:
    def test_default(self) -> None:
        assert get_unknown_policy() == DEFAULT_UNKNOWN_POLICY == "echo"

    def test_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        config = {"unknown_policy": "list"}
        assert get_unknown_policy(None, config) == "list"
        monkeypatch.setenv("WESH_UNKNOWN_POLICY", "silent")
        assert get_unknown_policy(None, config) == "silent"
        assert get_unknown_policy("echo", config) == "echo"

    def test_invalid(self) -> None:
        with pytest.raises(SettingsError):
            get_unknown_policy("loud")


class TestRouteFamilies:
    def test_default_is_ipv4(self) -> None:
        assert get_route_families({}) == ["inet"]

    def test_single_string(self) -> None:
        assert get_route_families({"route_families": "inet6"}) == ["inet6"]

    @pytest.mark.parametrize("value", [5, {"inet": True}])
    def test_wrong_type(self, value) -> None:
        with pytest.raises(SettingsError, match="Invalid route_families"):
            get_route_families({"route_families": value})

    def test_invalid(self) -> None:
        with pytest.raises(SettingsError):
            get_route_families({"route_families": ["inet", "ipx"]})


class TestResolveSettings:
    def test_defaults(self, tmp_path: Path) -> None:
        assert resolve_settings(tmp_path / "absent.json") == ShellSettings()

    def test_from_file_and_args(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "wesh.json", {
            "unknown_policy": "silent",
            "route_families": ["inet", "inet6"],
            "layout": "/etc/wesh/layout.yaml",
        })
        settings = resolve_settings(path, arg_layout=tmp_path / "mine.yaml")
        assert settings.unknown_policy == "silent"
        assert settings.route_families == ["inet", "inet6"]
        assert settings.layout_file == tmp_path / "mine.yaml"
