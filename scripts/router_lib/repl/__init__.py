"""
router_lib.repl - Interactive lookup shell

This package contains:
- context: Shell state and prompt text
- commands: Command handlers and dispatcher
- shell: prompt_toolkit session loop
"""

from .context import ShellContext, get_prompt_text
from .commands import handle_command
from .shell import run_shell

__all__ = [
    'ShellContext',
    'get_prompt_text',
    'handle_command',
    'run_shell',
]
