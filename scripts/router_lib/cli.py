"""
Command-line entry point for the static router.

Usage:
    static-router -c interfaces.conf -r routes.conf               # stdin -> stdout
    static-router -c interfaces.conf -r routes.conf -i in -o out  # files
    static-router -c interfaces.conf -r routes.conf --interactive # lookup shell
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from router_lib.common import Diagnostics, error, log
from router_lib.config import (
    RouterOptions,
    OptionsValidationError,
    load_options,
    save_tables,
)
from router_lib.display import show_interfaces, show_routes
from router_lib.forwarding import ForwardingEngine, DecisionRenderer
from router_lib.repl import ShellContext, run_shell
from router_lib.tables import TableLoadError, load_interfaces, load_routes, iter_destinations


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="static-router",
        description="Simulate a static IPv4 router's forwarding decisions",
        epilog="Default for input and output is stdin and stdout.",
    )
    parser.add_argument("-c", "--config", type=Path, required=True,
                        help="Interface configuration file (name ip/len per line)")
    parser.add_argument("-r", "--routes", type=Path, required=True,
                        help="Route table file (network/len next_hop per line)")
    parser.add_argument("-i", "--input", type=Path,
                        help="Destination addresses, one per line (default: stdin)")
    parser.add_argument("-o", "--output", type=Path,
                        help="Decision output file (default: stdout)")
    parser.add_argument("-d", "--debug", type=int, choices=range(0, 5), metavar="LEVEL",
                        help="Diagnostic level 0-4 (0 silent, 4 debug)")
    parser.add_argument("--options", type=Path,
                        help="YAML options file")
    parser.add_argument("--no-direct-check", action="store_true",
                        help="Route every destination, even on attached subnets")
    parser.add_argument("--workers", type=int,
                        help="Decide destinations on this many threads")
    parser.add_argument("--show-tables", action="store_true",
                        help="Print the loaded tables before processing")
    parser.add_argument("--dump-tables", type=Path, metavar="FILE",
                        help="Write the loaded tables to FILE as JSON")
    parser.add_argument("--interactive", action="store_true",
                        help="Start the interactive lookup shell instead of batch mode")
    return parser


def resolve_options(args: argparse.Namespace) -> RouterOptions:
    """Load the options file, if any, and apply command-line overrides."""
    options = load_options(args.options) if args.options else RouterOptions()

    if args.debug is not None:
        options.debug_level = args.debug
    if args.no_direct_check:
        options.check_direct_attachment = False
    if args.workers is not None:
        if args.workers < 1:
            raise OptionsValidationError([f"workers must be >= 1, got {args.workers}"])
        options.workers = args.workers
    return options


def process_stream(engine: ForwardingEngine, renderer: DecisionRenderer,
                   infile, outfile, workers: int = 1) -> int:
    """Write one decision line per destination. Returns the number decided."""
    if workers > 1:
        decisions = engine.decide_all(infile, workers=workers)
    else:
        decisions = (engine.decide_text(text) for text in iter_destinations(infile))

    count = 0
    for decision in decisions:
        outfile.write(renderer.render(decision) + "\n")
        outfile.flush()
        count += 1
    return count


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        options = resolve_options(args)
    except (OptionsValidationError, OSError) as e:
        error(f"Invalid options: {e}", file=sys.stderr)
        return 1

    diagnostics = Diagnostics(level=options.debug_level, record=False)
    diagnostics.debug("Proper flags received.")

    try:
        interfaces = load_interfaces(args.config, diagnostics)
        routes = load_routes(args.routes, diagnostics)
    except TableLoadError as e:
        error(str(e), file=sys.stderr)
        return 1

    engine = ForwardingEngine(
        interfaces, routes,
        check_direct_attachment=options.check_direct_attachment,
        diagnostics=diagnostics,
    )
    renderer = DecisionRenderer(options.messages)

    if args.show_tables:
        err_console = Console(stderr=True)
        show_interfaces(engine.interfaces, out=err_console)
        show_routes(engine.routes, engine.interfaces, out=err_console)

    if args.dump_tables:
        save_tables(args.dump_tables, engine.interfaces, engine.routes)
        log(f"Tables written to {args.dump_tables}", file=sys.stderr)

    if args.interactive:
        return run_shell(ShellContext(engine=engine, renderer=renderer))

    infile = sys.stdin
    outfile = sys.stdout
    try:
        if args.input:
            try:
                infile = open(args.input, errors="replace")
            except OSError as e:
                error(f"Could not open input file: {args.input} ({e.strerror or e})", file=sys.stderr)
                return 1
            diagnostics.debug("Now opening input file.")
        else:
            # Undecodable bytes become a malformed line rather than an exception
            if hasattr(sys.stdin, "reconfigure"):
                sys.stdin.reconfigure(errors="replace")
            diagnostics.info("No input file specified. Ready to use stdin.")

        if args.output:
            try:
                outfile = open(args.output, 'w')
            except OSError as e:
                error(f"Could not open output file: {args.output} ({e.strerror or e})", file=sys.stderr)
                return 1
            diagnostics.debug("Now opening output file.")
        else:
            diagnostics.info("No output file specified. Program will use stdout.")

        count = process_stream(engine, renderer, infile, outfile, workers=options.workers)
    finally:
        if infile is not sys.stdin:
            infile.close()
        if outfile is not sys.stdout:
            outfile.close()

    diagnostics.debug(f"Decided {count} destination(s)")
    diagnostics.info("Packets done processing! Program will now exit.")
    return 0
