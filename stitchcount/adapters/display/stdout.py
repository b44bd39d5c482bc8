"""Stdout display adapter.

Implements DisplayPort by printing the two digits to the terminal
whenever the right digit is rendered, which is the last call of every
re-render.
"""

import asyncio
import logging

from stitchcount.core.models import Digit
from stitchcount.core.ports import DisplayPort

logger = logging.getLogger(__name__)


class StdoutDisplayAdapter(DisplayPort):
    """Prints the counter as a two-digit panel."""

    def __init__(self) -> None:
        self.values: dict[Digit, int] = {Digit.LEFT: 0, Digit.RIGHT: 0}

    async def render_digit(self, which: Digit, value: int) -> None:
        self.values[which] = value
        if which is Digit.RIGHT:
            await asyncio.to_thread(print, self.format_panel())

    def format_panel(self) -> str:
        """Render both digits, e.g. ``[ 3 | 7 ]``."""
        return f"[ {self.values[Digit.LEFT]} | {self.values[Digit.RIGHT]} ]"
