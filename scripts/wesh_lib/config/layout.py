"""
Shell layout loading for WeSh.

A layout describes the branches and actions of a shell, in registration
order. It is read from YAML:

    entry: oper
    directives:
      - branch: oper
        display: ">"
        brief: Operational mode
      - branch: conf
        parent: oper
        display: "#"
      - action: exit
        handler: exit

`parent` names an earlier branch by its command string. `handler` names an
entry of ACTION_HANDLERS.
"""

from pathlib import Path
from typing import Dict, List

import yaml

from wesh_lib.common import warn
from wesh_lib.repl.actions import ACTION_HANDLERS, make_action
from wesh_lib.repl.branch import Branch, BranchTree
from wesh_lib.repl.registry import Registry
from wesh_lib.repl.state import ShellState

from .settings import ShellSettings


class LayoutValidationError(Exception):
    """Raised when a shell layout is invalid."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def validate_layout(data: dict) -> List[str]:
    """
    Validate a shell layout structure.
    Returns list of error messages (empty if valid).
    """
    if not isinstance(data, dict):
        return ["Layout must be a mapping"]

    errors = []
    directives = data.get('directives')
    if not isinstance(directives, list) or not directives:
        return ["'directives' must be a non-empty list"]

    branch_names = []
    for i, entry in enumerate(directives):
        if not isinstance(entry, dict):
            errors.append(f"directives[{i}]: must be a mapping")
            continue

        if 'branch' in entry and 'action' in entry:
            errors.append(f"directives[{i}]: cannot be both a branch and an action")
        elif 'branch' in entry:
            if 'display' not in entry:
                errors.append(f"directives[{i}]: branch '{entry['branch']}' missing 'display' field")
            parent = entry.get('parent')
            if parent is not None and str(parent) not in branch_names:
                errors.append(
                    f"directives[{i}]: parent '{parent}' of branch '{entry['branch']}' "
                    "must be defined before it"
                )
            branch_names.append(str(entry['branch']))
        elif 'action' in entry:
            handler_name = entry.get('handler')
            if handler_name is None:
                errors.append(f"directives[{i}]: action '{entry['action']}' missing 'handler' field")
            elif not isinstance(handler_name, str):
                errors.append(f"directives[{i}]: handler of action '{entry['action']}' must be a name")
            elif handler_name not in ACTION_HANDLERS:
                errors.append(
                    f"directives[{i}]: unknown handler '{handler_name}' "
                    f"(available: {', '.join(sorted(ACTION_HANDLERS))})"
                )
        else:
            errors.append(f"directives[{i}]: must have a 'branch' or 'action' field")

    entry_name = data.get('entry')
    if entry_name is None:
        errors.append("Missing required field: entry")
    elif str(entry_name) not in branch_names:
        errors.append(f"Entry branch '{entry_name}' is not defined")

    return errors


def find_duplicate_commands(data: dict) -> List[str]:
    """Command strings registered more than once (only the first is reachable)."""
    seen = set()
    duplicates = []
    for entry in data.get('directives', []):
        command = str(entry.get('branch', entry.get('action')))
        if command in seen and command not in duplicates:
            duplicates.append(command)
        seen.add(command)
    return duplicates


def build_shell(data: dict, settings: ShellSettings = None) -> ShellState:
    """
    Build a ready-to-run shell from layout data.

    Branches are created in file order, so every parent exists before its
    children. The registry is sealed before the state is returned.

    Raises:
        LayoutValidationError: the layout is invalid
    """
    errors = validate_layout(data)
    if errors:
        raise LayoutValidationError(errors)

    for command in find_duplicate_commands(data):
        warn(f"Command '{command}' is defined more than once; only the first is used")

    tree = BranchTree()
    registry = Registry()
    branches: Dict[str, Branch] = {}

    for entry in data['directives']:
        if 'branch' in entry:
            parent = branches[str(entry['parent'])] if entry.get('parent') is not None else None
            branch = tree.add(
                parent,
                display=str(entry['display']),
                command_str=str(entry['branch']),
                brief=str(entry.get('brief', '')),
            )
            # First definition wins, as in the registry
            branches.setdefault(branch.command_str, branch)
            registry.add(branch)
        else:
            registry.add(make_action(
                str(entry['action']),
                str(entry.get('brief', '')),
                entry['handler'],
            ))

    registry.seal()
    return ShellState(
        current=branches[str(data['entry'])],
        registry=registry,
        tree=tree,
        settings=settings if settings is not None else ShellSettings(),
    )


def load_layout(path: Path) -> dict:
    """
    Load a shell layout from a YAML file.

    Raises:
        LayoutValidationError: the file cannot be read or parsed
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError, IOError) as e:
        raise LayoutValidationError([f"Failed to load layout {path}: {e}"]) from e
    return data if data is not None else {}
