"""
Settings for the WeSh shell.

Each setting is resolved from, in order: command-line argument, environment,
settings file, default.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from wesh_lib.common import warn


DEFAULT_UNKNOWN_POLICY = "echo"
DEFAULT_ROUTE_FAMILIES = ["inet"]
WESH_CONFIG_FILE = Path("/etc/wesh/wesh.json")

# silent: say nothing, echo: report the input, list: report it and list commands
UNKNOWN_POLICIES = ("silent", "echo", "list")
ROUTE_FAMILIES = ("inet", "inet6")


class SettingsError(Exception):
    """Raised when a setting has an invalid value."""
    pass


@dataclass
class ShellSettings:
    """Resolved shell settings."""
    unknown_policy: str = DEFAULT_UNKNOWN_POLICY
    route_families: List[str] = field(default_factory=lambda: list(DEFAULT_ROUTE_FAMILIES))
    layout_file: Optional[Path] = None


def get_config_path(arg_path: Optional[Path] = None) -> Path:
    """Get settings file path from args, env, or default."""
    if arg_path:
        return Path(arg_path)
    if os.environ.get("WESH_CONFIG"):
        return Path(os.environ["WESH_CONFIG"])
    return WESH_CONFIG_FILE


def load_wesh_config(path: Optional[Path] = None) -> dict:
    """Load WeSh settings from the config file. Missing file means no settings."""
    config_path = get_config_path(path)
    if not config_path.exists():
        return {}
    try:
        with open(config_path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, IOError) as e:
        warn(f"Ignoring unreadable settings file {config_path}: {e}")
        return {}
    if not isinstance(data, dict):
        warn(f"Ignoring settings file {config_path}: expected a JSON object")
        return {}
    return data


def get_unknown_policy(arg_policy: Optional[str] = None, config: Optional[dict] = None) -> str:
    """Get the unknown-command policy from args, env, config, or default."""
    if arg_policy:
        policy = arg_policy
    elif os.environ.get("WESH_UNKNOWN_POLICY"):
        policy = os.environ["WESH_UNKNOWN_POLICY"]
    elif config and config.get("unknown_policy"):
        policy = config["unknown_policy"]
    else:
        policy = DEFAULT_UNKNOWN_POLICY

    if policy not in UNKNOWN_POLICIES:
        raise SettingsError(
            f"Invalid unknown_policy '{policy}': must be one of {', '.join(UNKNOWN_POLICIES)}"
        )
    return policy


def get_route_families(config: Optional[dict] = None) -> List[str]:
    """Get the address families dumped by 'show'."""
    families = (config or {}).get("route_families") or DEFAULT_ROUTE_FAMILIES
    if isinstance(families, str):
        families = [families]
    if not isinstance(families, list):
        raise SettingsError(
            f"Invalid route_families {families!r}: must be a family name or a list of them"
        )
    for family in families:
        if family not in ROUTE_FAMILIES:
            raise SettingsError(
                f"Invalid route family '{family}': must be one of {', '.join(ROUTE_FAMILIES)}"
            )
    return list(families)


def get_layout_file(arg_layout: Optional[Path] = None, config: Optional[dict] = None) -> Optional[Path]:
    """Get the shell layout file from args or config. None means the built-in layout."""
    if arg_layout:
        return Path(arg_layout)
    if config and config.get("layout"):
        return Path(config["layout"])
    return None


def resolve_settings(
    arg_config: Optional[Path] = None,
    arg_policy: Optional[str] = None,
    arg_layout: Optional[Path] = None,
) -> ShellSettings:
    """Resolve every setting into a ShellSettings."""
    config = load_wesh_config(arg_config)
    return ShellSettings(
        unknown_policy=get_unknown_policy(arg_policy, config),
        route_families=get_route_families(config),
        layout_file=get_layout_file(arg_layout, config),
    )
