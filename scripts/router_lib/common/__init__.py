"""
router_lib.common - Shared utilities for the static router

This module provides:
- colors: ANSI color codes and console message functions
- diagnostics: Leveled diagnostic collector passed to loader and engine
"""

from .colors import Colors, log, warn, error, info, debug
from .diagnostics import (
    SILENT,
    ERROR,
    WARN,
    INFO,
    DEBUG,
    DiagnosticEvent,
    Diagnostics,
)

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info', 'debug',
    'SILENT', 'ERROR', 'WARN', 'INFO', 'DEBUG',
    'DiagnosticEvent', 'Diagnostics',
]
