"""
Action directives for the WeSh REPL.

An action binds a command string to a named handler. Handlers are plain
functions taking the mutable ShellState; see actions.py for the built-ins.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Union

from .branch import Branch
from .outcome import InvokeAction

if TYPE_CHECKING:
    from .state import ShellState


Handler = Callable[["ShellState"], None]


@dataclass(frozen=True)
class Action:
    """An executable command with no navigation target."""
    command_str: str
    brief: str
    handler: Handler

    def resolve(self) -> InvokeAction:
        return InvokeAction(self)


# Everything the registry can hold
Directive = Union[Branch, Action]
