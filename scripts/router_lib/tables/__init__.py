"""
router_lib.tables - Interface and route table loading.
"""

from .loader import (
    TableLoadError,
    is_skippable,
    parse_interface_line,
    parse_route_line,
    parse_interfaces,
    parse_routes,
    load_interfaces,
    load_routes,
    iter_destinations,
)

__all__ = [
    'TableLoadError',
    'is_skippable',
    'parse_interface_line',
    'parse_route_line',
    'parse_interfaces',
    'parse_routes',
    'load_interfaces',
    'load_routes',
    'iter_destinations',
]
