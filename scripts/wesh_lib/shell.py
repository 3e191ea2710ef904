"""
Shell assembly for WeSh.

Holds the built-in layout (operational and configuration branches plus the
standard actions) and builds a ShellState from settings.
"""

from wesh_lib.common import log
from wesh_lib.config.layout import build_shell, load_layout
from wesh_lib.config.settings import ShellSettings
from wesh_lib.repl.state import ShellState


DEFAULT_LAYOUT = {
    "entry": "oper",
    "directives": [
        {"branch": "oper", "display": ">", "brief": "Enter operational mode"},
        {"branch": "conf", "parent": "oper", "display": "#", "brief": "Enter configuration mode"},
        {"action": "exit", "handler": "exit", "brief": "Exit the shell"},
        {"action": "up", "handler": "up", "brief": "Return to the parent branch"},
        {"action": "?", "handler": "help", "brief": "List available commands"},
        {"action": "show", "handler": "show-routes", "brief": "Show the main routing table"},
    ],
}


def create_shell(settings: ShellSettings = None) -> ShellState:
    """Build the shell from the configured layout file, or the built-in layout."""
    settings = settings if settings is not None else ShellSettings()
    if settings.layout_file is not None:
        state = build_shell(load_layout(settings.layout_file), settings)
        log(f"Loaded shell layout from {settings.layout_file} ({len(state.registry)} commands)")
        return state
    return build_shell(DEFAULT_LAYOUT, settings)
