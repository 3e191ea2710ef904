"""
Shell state and outcome application for the WeSh REPL.

ShellState holds the cursor (current branch) together with the registry
and branch tree it navigates. The cursor is the only thing that changes
once the shell is running.
"""

from dataclasses import dataclass, field

from wesh_lib.common import warn
from wesh_lib.config.settings import ShellSettings

from .branch import Branch, BranchTree
from .outcome import InvokeAction, MoveToBranch, Outcome, Unresolved
from .registry import Registry


@dataclass
class ShellState:
    """Current position in the branch tree plus everything needed to move it."""
    current: Branch
    registry: Registry
    tree: BranchTree
    settings: ShellSettings = field(default_factory=ShellSettings)


def report_unresolved(state: ShellState, line: str) -> None:
    """Tell the user their input matched nothing, per the unknown-command policy."""
    policy = state.settings.unknown_policy
    if policy == "silent" or line == "":
        return

    warn(f"Unknown command: {line}")
    if policy == "list":
        print("Known commands: " + " ".join(state.registry.command_strings()))


def apply_outcome(state: ShellState, outcome: Outcome) -> None:
    """Apply one resolved outcome to the shell state."""
    if isinstance(outcome, MoveToBranch):
        state.current = outcome.branch
    elif isinstance(outcome, InvokeAction):
        outcome.action.handler(state)
    elif isinstance(outcome, Unresolved):
        report_unresolved(state, outcome.line)
    else:
        raise TypeError(f"Not an outcome: {outcome!r}")


def step(state: ShellState, line: str) -> Outcome:
    """
    Process one input line: resolve it and apply the result.

    Only the line terminator is removed; everything else is matched as typed.

    Returns:
        The outcome that was applied
    """
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    outcome = state.registry.resolve_input(line)
    apply_outcome(state, outcome)
    return outcome
