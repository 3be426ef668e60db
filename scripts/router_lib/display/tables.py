"""
Table display functions.

Shows the loaded interface and route tables as rich tables.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from router_lib.config import Interface, Route, format_address
from router_lib.forwarding import find_interface


console = Console()


def interfaces_table(interfaces: Sequence[Interface]) -> Table:
    """Build the interface table."""
    table = Table(title="Interfaces", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Address")
    table.add_column("Network")

    for iface in interfaces:
        table.add_row(
            iface.name,
            iface.cidr,
            iface.network_cidr,
        )
    return table


def routes_table(routes: Sequence[Route], interfaces: Sequence[Interface] = ()) -> Table:
    """Build the route table, resolving each next hop to its egress interface."""
    table = Table(title="Static Routes", show_header=True, header_style="bold")
    table.add_column("Destination", style="cyan")
    table.add_column("Next Hop")
    table.add_column("Interface")

    for route in routes:
        iface = find_interface(route.next_hop, interfaces)
        dest = route.destination + (" (default)" if route.is_default else "")
        table.add_row(
            dest,
            format_address(route.next_hop),
            iface.name if iface else "[red]-[/red]",
        )
    return table


def show_interfaces(interfaces: Sequence[Interface], out: Optional[Console] = None) -> None:
    """Show interfaces summary."""
    out = out or console
    if not interfaces:
        out.print("  (no interfaces configured)")
        return
    out.print(interfaces_table(interfaces))


def show_routes(routes: Sequence[Route], interfaces: Sequence[Interface] = (),
                out: Optional[Console] = None) -> None:
    """Show static routes."""
    out = out or console
    if not routes:
        out.print("  (no routes configured)")
        return
    out.print(routes_table(routes, interfaces))
