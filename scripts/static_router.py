#!/usr/bin/env python3
"""
static_router.py - Static router forwarding simulator

Loads an interface table and a route table, then reports for every
destination address whether it is delivered locally, forwarded to a
next hop, or unreachable.

Usage:
    static_router.py -c interfaces.conf -r routes.conf [-i input] [-o output] [-d level]
"""

import sys

from router_lib.cli import main


if __name__ == "__main__":
    sys.exit(main())
