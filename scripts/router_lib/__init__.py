"""
router_lib - Shared library for the static router simulator

This package contains the components behind the static-router CLI:
table loading, the longest-prefix-match forwarding engine, decision
rendering, table display and the interactive lookup shell.
"""

__version__ = "1.0.0"
