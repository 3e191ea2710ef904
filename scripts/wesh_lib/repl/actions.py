"""
Built-in action handlers for the WeSh REPL.

Handlers are registered by name in ACTION_HANDLERS so shell layouts can
bind them to command strings. Each handler receives the mutable ShellState.
"""

import sys
from typing import Callable, Dict

from rich.console import Console
from rich.table import Table
from rich.text import Text

from wesh_lib.common import error
from wesh_lib.routes import route_table_lines

from .action import Action, Handler
from .state import ShellState


ACTION_HANDLERS: Dict[str, Handler] = {}


def handler(name: str) -> Callable[[Handler], Handler]:
    """Register a function as the action handler called name."""
    def register(fn: Handler) -> Handler:
        ACTION_HANDLERS[name] = fn
        return fn
    return register


@handler("exit")
def action_exit(state: ShellState) -> None:
    """Terminate the shell, whatever branch we are in."""
    sys.exit(0)


@handler("up")
def action_up(state: ShellState) -> None:
    """Move to the parent branch, or terminate the shell from the root."""
    if state.current.is_root:
        sys.exit(0)
    state.current = state.tree.parent_of(state.current)


@handler("help")
def action_help(state: ShellState) -> None:
    """List every registered command with its brief, in registry order."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Command")
    table.add_column("Description")
    for directive in state.registry:
        table.add_row(Text(directive.command_str), Text(directive.brief))
    Console().print(table)


@handler("show-routes")
def action_show_routes(state: ShellState) -> None:
    """Print the main routing table."""
    success, output = route_table_lines(state.settings.route_families)
    if not success:
        error(f"Route query failed: {output}")
        return
    if output:
        print(output)


def make_action(command_str: str, brief: str, handler_name: str) -> Action:
    """
    Bind a named handler to a command string.

    Raises:
        KeyError: no handler is registered under handler_name
    """
    return Action(command_str=command_str, brief=brief, handler=ACTION_HANDLERS[handler_name])
