"""
Interactive lookup shell built on prompt_toolkit.
"""

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from router_lib.common import Colors
from router_lib.config import HISTORY_FILE

from .commands import COMMANDS, SHOW_TARGETS, handle_command
from .context import ShellContext, get_prompt_text


SHELL_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
})


def run_shell(ctx: ShellContext) -> int:
    """Main shell entry point."""
    print()
    print(f"{Colors.BOLD}Static Router Lookup Shell{Colors.NC}")
    print(f"{len(ctx.engine.interfaces)} interface(s), {len(ctx.engine.routes)} route(s) loaded")
    print("Type 'help' for commands, 'exit' to quit")
    print()

    completer = WordCompleter(COMMANDS + SHOW_TARGETS + ['direct-check', 'on', 'off'])
    session = PromptSession(
        history=FileHistory(str(HISTORY_FILE)),
        completer=completer,
        style=SHELL_STYLE,
    )

    while True:
        try:
            cmd = session.prompt(get_prompt_text(ctx))
            if not handle_command(cmd, ctx):
                break
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print()
            break

    print(f"{ctx.lookups} lookup(s). Goodbye!")
    return 0
