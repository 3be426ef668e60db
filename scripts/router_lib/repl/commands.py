"""
Command handlers for the interactive lookup shell.
"""

from router_lib.common import Colors, log, warn, error
from router_lib.config import validate_ipv4
from router_lib.display import show_interfaces, show_routes

from .context import ShellContext


COMMANDS = ['lookup', 'show', 'set', 'help', 'exit', 'quit']
SHOW_TARGETS = ['interfaces', 'routes']


def cmd_help(ctx: ShellContext, args: list[str]) -> None:
    """Show available commands."""
    print()
    print(f"{Colors.BOLD}Commands{Colors.NC}")
    print("  lookup <ip>                 Decide where a packet to <ip> leaves the router")
    print("  <ip>                        Same as lookup")
    print("  show interfaces|routes      Show the loaded tables")
    print("  set direct-check on|off     Toggle delivery to attached subnets")
    print("  help                        Show this help")
    print("  exit, quit                  Leave the shell")
    print()


def cmd_lookup(ctx: ShellContext, args: list[str]) -> None:
    """Decide one destination and print the decision line."""
    if len(args) != 1:
        error("Usage: lookup <ip>")
        return

    decision = ctx.engine.decide_text(args[0])
    ctx.lookups += 1
    ctx.last_decision = decision
    print(ctx.renderer.render(decision))


def cmd_show(ctx: ShellContext, args: list[str]) -> None:
    """Show a loaded table."""
    if not args or args[0] not in SHOW_TARGETS:
        error(f"Usage: show {'|'.join(SHOW_TARGETS)}")
        return

    if args[0] == "interfaces":
        show_interfaces(ctx.engine.interfaces)
    else:
        show_routes(ctx.engine.routes, ctx.engine.interfaces)


def cmd_set(ctx: ShellContext, args: list[str]) -> None:
    """Change a session setting."""
    if len(args) != 2 or args[0] != "direct-check" or args[1] not in ("on", "off"):
        error("Usage: set direct-check on|off")
        return

    enabled = args[1] == "on"
    if ctx.engine.check_direct_attachment == enabled:
        warn(f"Direct attachment check is already {args[1]}")
        return

    ctx.engine.check_direct_attachment = enabled
    log(f"Direct attachment check {args[1]}")


def handle_command(cmd: str, ctx: ShellContext) -> bool:
    """
    Handle a command. Returns False if should exit the shell.
    """
    parts = cmd.strip().split()
    if not parts:
        return True

    command = parts[0].lower()
    args = parts[1:]

    if command in ("exit", "quit"):
        return False

    if command in ("help", "?"):
        cmd_help(ctx, args)
        return True

    if command == "lookup":
        cmd_lookup(ctx, args)
        return True

    if command == "show":
        cmd_show(ctx, args)
        return True

    if command == "set":
        cmd_set(ctx, args)
        return True

    if len(parts) == 1 and validate_ipv4(command):
        cmd_lookup(ctx, parts)
        return True

    error(f"Unknown command: {command}. Type 'help' for commands")
    return True
