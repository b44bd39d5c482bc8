"""Terminal feedback adapter.

Implements FeedbackPort by printing a short marker for the flashed
element and tracking it as lit until the flash duration elapses.
"""

import asyncio
import logging
from itertools import count

from stitchcount.core.models import FlashKind
from stitchcount.core.ports import FeedbackPort

logger = logging.getLogger(__name__)

MARKERS = {FlashKind.UP: "+", FlashKind.DOWN: "-"}


class TerminalFeedbackAdapter(FeedbackPort):
    """Prints flashes and clears them after `duration_ms`."""

    def __init__(self, duration_ms: int = 100):
        """Initialize the adapter.

        Args:
            duration_ms: How long a flashed element stays lit.
        """
        self.duration_ms = duration_ms
        self.active: dict[str, FlashKind] = {}
        self._generation: dict[str, int] = {}
        self._counter = count(1)

    async def flash(self, target: str, kind: FlashKind) -> None:
        # A repeated flash on the same target restarts it.
        generation = next(self._counter)
        self.active[target] = kind
        self._generation[target] = generation
        asyncio.get_running_loop().call_later(
            self.duration_ms / 1000, self._clear, target, generation
        )
        await asyncio.to_thread(print, f"  {MARKERS[kind]} {target}")

    def _clear(self, target: str, generation: int) -> None:
        """Remove the flash unless a newer one replaced it."""
        if self._generation.get(target) == generation:
            self.active.pop(target, None)
            self._generation.pop(target, None)
