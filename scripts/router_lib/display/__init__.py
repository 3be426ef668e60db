"""
router_lib.display - Rendering of loaded tables for the terminal.
"""

from .tables import (
    console,
    interfaces_table,
    routes_table,
    show_interfaces,
    show_routes,
)

__all__ = [
    'console',
    'interfaces_table',
    'routes_table',
    'show_interfaces',
    'show_routes',
]
