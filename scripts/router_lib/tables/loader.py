"""
Table loader for the static router.

Parses the interface table (``name ip/len``) and the route table
(``network/len next_hop``) from line-oriented text. Blank lines and
``#`` comments are skipped; a malformed line is reported as a warning
and skipped so the rest of the file still loads. A file that cannot be
opened is fatal and raises TableLoadError.
"""

import re
from pathlib import Path
from typing import Iterable, Iterator, Optional

from router_lib.common import Diagnostics
from router_lib.config import (
    COMMENT_PREFIX,
    Interface,
    Route,
    MalformedInputError,
    parse_address,
    parse_prefix,
)


INTERFACE_NAME_RE = re.compile(r'^[A-Za-z0-9]+$')


class TableLoadError(Exception):
    """Raised when a table file cannot be opened."""
    pass


def is_skippable(line: str) -> bool:
    """True for blank lines and comment lines."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIX)


def _split_fields(line: str, what: str) -> tuple[str, str]:
    fields = line.split()
    if len(fields) != 2:
        raise MalformedInputError(f"{what} entry needs 2 fields, got {len(fields)}")
    return fields[0], fields[1]


def parse_interface_line(line: str) -> Interface:
    """
    Parse one interface table line: ``name ip/mask_length``.

    Raises:
        MalformedInputError: if the line has the wrong shape or bad values
    """
    name, cidr = _split_fields(line, "Interface")
    if not INTERFACE_NAME_RE.match(name):
        raise MalformedInputError(f"Invalid interface name '{name}': must be letters and digits only")
    address, mask_length = parse_prefix(cidr)
    return Interface(name=name, address=address, mask_length=mask_length)


def parse_route_line(line: str) -> Route:
    """
    Parse one route table line: ``network/mask_length next_hop``.

    The network is re-masked, so host bits in the file are tolerated.

    Raises:
        MalformedInputError: if the line has the wrong shape or bad values
    """
    cidr, next_hop = _split_fields(line, "Route")
    network, mask_length = parse_prefix(cidr)
    return Route(network=network, mask_length=mask_length, next_hop=parse_address(next_hop))


def _parse_table(lines: Iterable[str], parse_line, bad_entry: str,
                 diagnostics: Optional[Diagnostics], source: str) -> list:
    entries = []
    for lineno, line in enumerate(lines, start=1):
        if is_skippable(line):
            continue
        try:
            entries.append(parse_line(line))
        except MalformedInputError as e:
            if diagnostics:
                diagnostics.warn(f"{source}:{lineno}: {bad_entry} ({e})")
    return entries


def parse_interfaces(lines: Iterable[str], diagnostics: Optional[Diagnostics] = None,
                     source: str = "<interfaces>") -> list[Interface]:
    """Parse interface table lines, skipping comments and bad entries."""
    interfaces = _parse_table(
        lines, parse_interface_line,
        "Bad entry in configuration file, skipping to next line.",
        diagnostics, source,
    )
    if diagnostics:
        diagnostics.debug(f"Loaded {len(interfaces)} interface(s) from {source}")
    return interfaces


def parse_routes(lines: Iterable[str], diagnostics: Optional[Diagnostics] = None,
                 source: str = "<routes>") -> list[Route]:
    """Parse route table lines, skipping comments and bad entries."""
    routes = _parse_table(
        lines, parse_route_line,
        "Bad entry in routing table file, skipping to next line.",
        diagnostics, source,
    )
    if diagnostics:
        diagnostics.debug(f"Loaded {len(routes)} route(s) from {source}")
    return routes


def _read_lines(path: Path, failure: str) -> list[str]:
    try:
        with open(path, errors="replace") as f:
            return f.read().splitlines()
    except OSError as e:
        raise TableLoadError(f"{failure} ({path}: {e.strerror or e})") from e


def load_interfaces(path: Path, diagnostics: Optional[Diagnostics] = None) -> list[Interface]:
    """
    Load the interface table from a file.

    Raises:
        TableLoadError: if the file cannot be opened
    """
    lines = _read_lines(path, "Could not open interface config file.")
    return parse_interfaces(lines, diagnostics, source=str(path))


def load_routes(path: Path, diagnostics: Optional[Diagnostics] = None) -> list[Route]:
    """
    Load the route table from a file.

    Raises:
        TableLoadError: if the file cannot be opened
    """
    lines = _read_lines(path, "Could not open route table file.")
    return parse_routes(lines, diagnostics, source=str(path))


def iter_destinations(lines: Iterable[str]) -> Iterator[str]:
    """Yield destination lines, stripped, skipping blanks and comments."""
    for line in lines:
        if not is_skippable(line):
            yield line.strip()
