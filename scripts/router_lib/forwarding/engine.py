"""
Forwarding decision engine.

For each destination the engine first checks the attached subnets (when
enabled), then picks the longest matching prefix from the route table and
resolves its next hop to an outgoing interface. Tables are held as tuples
and never modified, so decisions are independent and can run in parallel.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional, Sequence

from router_lib.common import Diagnostics
from router_lib.config import (
    Interface,
    Route,
    MalformedInputError,
    parse_address,
    format_address,
)
from router_lib.tables import iter_destinations

from .dataclasses import Outcome, Decision


def find_route(dest: int, routes: Sequence[Route]) -> Optional[Route]:
    """
    Return the longest-prefix route covering dest, or None.

    Among routes with equal prefix length the first one in table order wins.
    """
    best = None
    for route in routes:
        if route.matches(dest) and (best is None or route.mask_length > best.mask_length):
            best = route
    return best


def find_interface(addr: int, interfaces: Sequence[Interface]) -> Optional[Interface]:
    """Return the first interface whose subnet contains addr, or None."""
    for iface in interfaces:
        if iface.contains(addr):
            return iface
    return None


class ForwardingEngine:
    """Decides where packets for a destination address leave the router."""

    def __init__(self, interfaces: Iterable[Interface], routes: Iterable[Route],
                 check_direct_attachment: bool = True,
                 diagnostics: Optional[Diagnostics] = None):
        self.interfaces = tuple(interfaces)
        self.routes = tuple(routes)
        self.check_direct_attachment = check_direct_attachment
        self.diagnostics = diagnostics or Diagnostics(echo=False)

    def decide(self, dest: int, text: Optional[str] = None) -> Decision:
        """Decide the outcome for a destination given as an integer."""
        text = text if text is not None else format_address(dest)
        diag = self.diagnostics

        if self.check_direct_attachment:
            iface = find_interface(dest, self.interfaces)
            if iface:
                diag.debug("Packet on same subnet as destination.")
                return Decision(Outcome.DELIVERED, text, dest, interface=iface)

        diag.debug("Packet destination is not on same subnet, will be forwarded now.")

        route = find_route(dest, self.routes)
        if route is None:
            diag.debug(f"No route to {format_address(dest)}")
            return Decision(Outcome.NO_ROUTE, text, dest)

        diag.debug(f"Matched route {route.destination} via {format_address(route.next_hop)}")

        iface = find_interface(route.next_hop, self.interfaces)
        if iface is None:
            diag.warn("Bad interface, can't find next hop.")
            return Decision(Outcome.BAD_NEXT_HOP, text, dest, route=route)

        return Decision(Outcome.FORWARDED, text, dest, interface=iface, route=route)

    def decide_text(self, text: str) -> Decision:
        """Parse a destination line and decide it; bad text yields MALFORMED."""
        text = text.strip()
        try:
            dest = parse_address(text)
        except MalformedInputError as e:
            self.diagnostics.warn(f"Malformed destination '{text}': {e}")
            return Decision(Outcome.MALFORMED, text, error=str(e))
        return self.decide(dest, text)

    def decide_all(self, lines: Iterable[str], workers: int = 1) -> list[Decision]:
        """
        Decide every destination line, skipping blanks and comments.

        Results are returned in input order regardless of worker count.
        """
        destinations = list(iter_destinations(lines))
        if workers <= 1 or len(destinations) < 2:
            return [self.decide_text(text) for text in destinations]

        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.decide_text, destinations))
