"""
wesh_lib.config - Configuration for the WeSh shell

This package contains:
- settings: settings file, environment and argument resolution
- layout: YAML shell layout parsing and validation (import
  wesh_lib.config.layout directly; it depends on wesh_lib.repl)
"""

from .settings import (
    DEFAULT_UNKNOWN_POLICY,
    DEFAULT_ROUTE_FAMILIES,
    WESH_CONFIG_FILE,
    UNKNOWN_POLICIES,
    ROUTE_FAMILIES,
    SettingsError,
    ShellSettings,
    get_config_path,
    load_wesh_config,
    get_unknown_policy,
    get_route_families,
    get_layout_file,
    resolve_settings,
)

__all__ = [
    'DEFAULT_UNKNOWN_POLICY',
    'DEFAULT_ROUTE_FAMILIES',
    'WESH_CONFIG_FILE',
    'UNKNOWN_POLICIES',
    'ROUTE_FAMILIES',
    'SettingsError',
    'ShellSettings',
    'get_config_path',
    'load_wesh_config',
    'get_unknown_policy',
    'get_route_families',
    'get_layout_file',
    'resolve_settings',
]
