"""Confirmation checkpoint before destructive changes"""
from typing import Optional, Sequence

from rich.console import Console

from git_tools.logging_config import get_logger

console = Console()
logger = get_logger(__name__)


class InteractiveGate:
    """Blocks until the operator confirms, when enabled.

    Any entered line counts as confirmation. Ctrl+C (KeyboardInterrupt) or a
    closed stdin (EOFError) propagate to the caller untouched, so nothing
    after the gate runs.
    """

    def __init__(self, enabled: bool = False, output: Optional[Console] = None):
        self.enabled = enabled
        self.console = output or console

    def confirm(self, lines: Sequence[str], prompt: str) -> None:
        if not self.enabled:
            return

        logger.debug(f"Waiting for confirmation: {prompt}")
        # Printed verbatim, never wrapped or styled
        for line in lines:
            self.console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)
        self.console.print(prompt, markup=False, emoji=False, highlight=False, soft_wrap=True, end="")
        self.console.input()
        logger.debug("Confirmed")
