"""
Decision dataclasses for the forwarding engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from router_lib.config import Interface, Route


class Outcome(str, Enum):
    """Terminal outcome of a forwarding decision."""
    DELIVERED = "delivered"        # Destination is on an attached subnet
    FORWARDED = "forwarded"        # Sent to a route's next hop
    NO_ROUTE = "no_route"          # No route covers the destination
    BAD_NEXT_HOP = "bad_next_hop"  # Route found, next hop not on any interface
    MALFORMED = "malformed"        # Destination text did not parse


@dataclass(frozen=True)
class Decision:
    """The result of deciding one destination."""
    outcome: Outcome
    text: str                           # Destination as read from input
    destination: Optional[int] = None   # None only when MALFORMED
    interface: Optional[Interface] = None
    route: Optional[Route] = None
    error: Optional[str] = None

    @property
    def next_hop(self) -> Optional[int]:
        if self.outcome == Outcome.FORWARDED:
            return self.route.next_hop
        return None

    @property
    def reachable(self) -> bool:
        return self.outcome in (Outcome.DELIVERED, Outcome.FORWARDED)
