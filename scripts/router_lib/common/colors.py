"""
ANSI color codes and console message functions for the static router.
"""

import sys
from typing import Optional, TextIO


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    NC = "\033[0m"  # No Color / Reset


def log(msg: str, file: Optional[TextIO] = None) -> None:
    """Log a success message in green."""
    print(f"{Colors.GREEN}[+]{Colors.NC} {msg}", file=file or sys.stdout)


def warn(msg: str, file: Optional[TextIO] = None) -> None:
    """Log a warning message in yellow."""
    print(f"{Colors.YELLOW}[!]{Colors.NC} {msg}", file=file or sys.stdout)


def error(msg: str, file: Optional[TextIO] = None) -> None:
    """Log an error message in red."""
    print(f"{Colors.RED}[ERROR]{Colors.NC} {msg}", file=file or sys.stdout)


def info(msg: str, file: Optional[TextIO] = None) -> None:
    """Log an informational message in cyan."""
    print(f"{Colors.CYAN}[i]{Colors.NC} {msg}", file=file or sys.stdout)


def debug(msg: str, file: Optional[TextIO] = None) -> None:
    """Log a trace message, dimmed."""
    print(f"{Colors.DIM}[.] {msg}{Colors.NC}", file=file or sys.stdout)
