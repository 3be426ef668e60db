"""
Shell context and prompt text for the interactive lookup shell.
"""

from dataclasses import dataclass, field
from typing import Optional

from router_lib.forwarding import ForwardingEngine, DecisionRenderer, Decision


@dataclass
class ShellContext:
    """Tracks the engine, renderer and session counters for the shell."""
    engine: ForwardingEngine
    renderer: DecisionRenderer = field(default_factory=DecisionRenderer)
    lookups: int = 0
    last_decision: Optional[Decision] = None


def get_prompt_text(ctx: ShellContext) -> str:
    """Generate the prompt string; marks sessions with the direct check off."""
    marker = "" if ctx.engine.check_direct_attachment else "!"
    return f"router{marker}> "
