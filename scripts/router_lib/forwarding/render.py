"""
Decision line rendering.

Each outcome has a Jinja2 template; the defaults reproduce the router's
classic output lines.
"""

from jinja2 import Environment, StrictUndefined

from router_lib.config import MessageTemplates, format_address

from .dataclasses import Outcome, Decision


class DecisionRenderer:
    """Renders decisions into single output lines."""

    def __init__(self, templates: MessageTemplates = None):
        self.templates = templates or MessageTemplates()
        env = Environment(undefined=StrictUndefined, autoescape=False)
        self._compiled = {
            outcome: env.from_string(getattr(self.templates, outcome.value))
            for outcome in Outcome
        }

    def context(self, decision: Decision) -> dict:
        """Template variables for a decision."""
        ctx = {
            'text': decision.text,
            'outcome': decision.outcome.value,
            'destination': decision.text,
            'interface': decision.interface.name if decision.interface else "",
            'next_hop': "",
            'route': decision.route.destination if decision.route else "",
            'error': decision.error or "",
        }
        if decision.destination is not None:
            ctx['destination'] = format_address(decision.destination)
        if decision.route is not None:
            ctx['next_hop'] = format_address(decision.route.next_hop)
        return ctx

    def render(self, decision: Decision) -> str:
        template = self._compiled[decision.outcome]
        return template.render(**self.context(decision))
