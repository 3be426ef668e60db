"""
Configuration constants for the static router.

Address limits, default paths and default values used across the package.
"""

from pathlib import Path


# IPv4 address geometry
OCTET_COUNT = 4
OCTET_MAX = 255
MASK_LENGTH_MAX = 32
ADDRESS_MAX = 0xFFFFFFFF

# Comment marker shared by the interface, route and destination files
COMMENT_PREFIX = "#"

# Interactive shell history
HISTORY_FILE = Path.home() / ".static_router_history"
