"""
wesh_lib.routes - Routing table access for WeSh
"""

from .netlink import (
    RT_TABLE_MAIN,
    RT_SCOPE_UNIVERSE,
    ADDRESS_FAMILIES,
    RouteRecord,
    parse_route,
    format_route,
    dump_routes,
    route_table_lines,
)

__all__ = [
    'RT_TABLE_MAIN',
    'RT_SCOPE_UNIVERSE',
    'ADDRESS_FAMILIES',
    'RouteRecord',
    'parse_route',
    'format_route',
    'dump_routes',
    'route_table_lines',
]
