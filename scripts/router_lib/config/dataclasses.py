"""
Configuration dataclasses for the static router.

Interface and Route are the loaded table entries; both are frozen and
carry a network already masked by their own prefix length. RouterOptions
and MessageTemplates hold the run-time settings read from an options file
or the command line.
"""

from dataclasses import dataclass, field

from .validation import apply_mask, format_address, validate_mask_length


@dataclass(frozen=True)
class Interface:
    """A local attachment point: name plus address/prefix."""
    name: str
    address: int
    mask_length: int
    network: int = field(init=False)

    def __post_init__(self):
        validate_mask_length(self.mask_length)
        object.__setattr__(self, 'network', apply_mask(self.address, self.mask_length))

    def contains(self, addr: int) -> bool:
        """True if addr lies on this interface's subnet."""
        return apply_mask(addr, self.mask_length) == self.network

    @property
    def cidr(self) -> str:
        """Address with prefix length, e.g. '192.168.1.1/24'."""
        return f"{format_address(self.address)}/{self.mask_length}"

    @property
    def network_cidr(self) -> str:
        return f"{format_address(self.network)}/{self.mask_length}"


@dataclass(frozen=True)
class Route:
    """A static route: destination prefix and next-hop address."""
    network: int
    mask_length: int
    next_hop: int

    def __post_init__(self):
        # Host bits in the configured prefix are dropped
        validate_mask_length(self.mask_length)
        object.__setattr__(self, 'network', apply_mask(self.network, self.mask_length))

    def matches(self, addr: int) -> bool:
        """True if addr falls within this route's prefix."""
        return apply_mask(addr, self.mask_length) == self.network

    @property
    def destination(self) -> str:
        """Destination prefix, e.g. '10.0.0.0/8'."""
        return f"{format_address(self.network)}/{self.mask_length}"

    @property
    def is_default(self) -> bool:
        return self.mask_length == 0


@dataclass
class MessageTemplates:
    """Jinja2 templates for each kind of decision line."""
    delivered: str = (
        "Packet now being sent to destination {{ destination }}, "
        "leaving router from interface {{ interface }}"
    )
    forwarded: str = (
        "Packet destination is {{ destination }}, "
        "leaving router from interface {{ interface }} to next hop {{ next_hop }}"
    )
    no_route: str = "{{ destination }}: unreachable"
    bad_next_hop: str = "Destination {{ destination }} is unreachable."
    malformed: str = "{{ text }}: malformed destination address"


@dataclass
class RouterOptions:
    """Run-time settings for a router session."""
    check_direct_attachment: bool = True  # Deliver locally before consulting routes
    debug_level: int = 2                  # 0 silent .. 4 debug
    workers: int = 1                      # Threads used for batch decisions
    messages: MessageTemplates = field(default_factory=MessageTemplates)
