"""
Route table queries over rtnetlink.

Dumps the kernel routing table with pyroute2 and formats main-table routes
the way `ip route` does.
"""

from dataclasses import dataclass
from socket import AF_INET, AF_INET6
from typing import Iterable, List, Optional, Tuple

from pyroute2 import IPRoute
from pyroute2.netlink.exceptions import NetlinkError


RT_TABLE_MAIN = 254
RT_SCOPE_UNIVERSE = 0

ADDRESS_FAMILIES = {
    "inet": AF_INET,
    "inet6": AF_INET6,
}

# Names used by iproute2 for rtm_protocol values
RT_PROTO_NAMES = {
    0: "unspec",
    1: "redirect",
    2: "kernel",
    3: "boot",
    4: "static",
    8: "gated",
    9: "ra",
    10: "mrt",
    11: "zebra",
    12: "bird",
    13: "dnrouted",
    14: "xorp",
    15: "ntk",
    16: "dhcp",
    17: "mrouted",
    42: "babel",
    186: "bgp",
    187: "isis",
    188: "ospf",
    189: "rip",
    192: "eigrp",
}

RT_SCOPE_NAMES = {
    0: "universe",
    200: "site",
    253: "link",
    254: "host",
    255: "nowhere",
}


@dataclass
class RouteRecord:
    """One route decoded from an RTM_NEWROUTE message."""
    table: int
    family: int
    dst_len: int
    scope: int
    proto: int
    dst: Optional[str] = None
    gateway: Optional[str] = None
    prefsrc: Optional[str] = None


def parse_route(msg) -> RouteRecord:
    """Decode a pyroute2 rtmsg into a RouteRecord."""
    # Tables above 255 only appear in RTA_TABLE
    table = msg.get_attr("RTA_TABLE") or msg["table"]
    return RouteRecord(
        table=table,
        family=msg["family"],
        dst_len=msg["dst_len"],
        scope=msg["scope"],
        proto=msg["proto"],
        dst=msg.get_attr("RTA_DST"),
        gateway=msg.get_attr("RTA_GATEWAY"),
        prefsrc=msg.get_attr("RTA_PREFSRC"),
    )


def format_route(route: RouteRecord) -> str:
    """Format a route like `ip route` output."""
    if route.dst:
        parts = [f"{route.dst}/{route.dst_len}"]
    else:
        parts = ["default"]
        if route.gateway:
            parts.append(f"via {route.gateway}")

    if route.scope != RT_SCOPE_UNIVERSE:
        proto = RT_PROTO_NAMES.get(route.proto, str(route.proto))
        scope = RT_SCOPE_NAMES.get(route.scope, str(route.scope))
        parts.append(f"proto {proto} scope {scope}")

    if route.prefsrc:
        parts.append(f"src {route.prefsrc}")

    return " ".join(parts)


def dump_routes(families: Iterable[str] = ("inet",)) -> List[RouteRecord]:
    """
    Dump the main routing table for the given address families.

    Args:
        families: Family names from ADDRESS_FAMILIES

    Returns:
        Main-table routes in kernel order

    Raises:
        NetlinkError, OSError: the dump could not be completed
    """
    routes = []
    with IPRoute() as ipr:
        for name in families:
            for msg in ipr.get_routes(family=ADDRESS_FAMILIES[name]):
                route = parse_route(msg)
                if route.table == RT_TABLE_MAIN:
                    routes.append(route)
    return routes


def route_table_lines(families: Iterable[str] = ("inet",)) -> Tuple[bool, str]:
    """
    Query the main routing table and format it.

    Returns:
        Tuple of (success: bool, output: str)
        On failure, output contains the error message.
    """
    try:
        routes = dump_routes(families)
    except (NetlinkError, OSError) as e:
        return False, str(e)
    return True, "\n".join(format_route(r) for r in routes)
