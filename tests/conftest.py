"""Shared pytest fixtures for the WeSh test suite.

Guidelines
----------
* No real netlink sockets: the route query is mocked at the pyroute2 boundary.
* No real terminal: the REPL loop is driven by scripted readers.
"""

from __future__ import annotations

from typing import List

import pytest

from wesh_lib.config.layout import build_shell
from wesh_lib.config.settings import ShellSettings
from wesh_lib.repl import Branch, ShellState, prompt_text
from wesh_lib.shell import DEFAULT_LAYOUT


class ScriptedReader:
    """Reader that replays fixed input lines and records every prompt."""

    def __init__(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self.prompts: List[str] = []

    def read_line(self, branch: Branch) -> str:
        self.prompts.append(prompt_text(branch))
        if not self.lines:
            raise EOFError("script exhausted")
        return self.lines.pop(0)


@pytest.fixture
def shell() -> ShellState:
    """The built-in oper/conf shell, positioned at oper."""
    return build_shell(DEFAULT_LAYOUT, ShellSettings())


@pytest.fixture
def oper(shell: ShellState):
    return shell.current


@pytest.fixture
def conf(shell: ShellState):
    return next(b for b in shell.tree if b.command_str == "conf")


@pytest.fixture
def scripted():
    """Factory for ScriptedReader."""
    return ScriptedReader


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WESH_CONFIG", raising=False)
    monkeypatch.delenv("WESH_UNKNOWN_POLICY", raising=False)
