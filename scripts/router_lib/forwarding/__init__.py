"""
router_lib.forwarding - Longest-prefix-match forwarding decisions.

This package contains:
- dataclasses: Outcome and Decision
- engine: Route and interface lookup, ForwardingEngine
- render: Jinja2 rendering of decision lines
"""

from .dataclasses import Outcome, Decision
from .engine import find_route, find_interface, ForwardingEngine
from .render import DecisionRenderer

__all__ = [
    'Outcome',
    'Decision',
    'find_route',
    'find_interface',
    'ForwardingEngine',
    'DecisionRenderer',
]
