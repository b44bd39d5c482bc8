"""Web feedback adapter.

Queues flashes until the current HTTP response is built. The page adds
a CSS class to each flashed element and removes it after `duration_ms`.
"""

from typing import Any

from stitchcount.core.models import FlashKind
from stitchcount.core.ports import FeedbackPort


class WebFeedbackAdapter(FeedbackPort):
    """Collects pending flashes for the browser."""

    def __init__(self, duration_ms: int = 100):
        self.duration_ms = duration_ms
        self.pending: list[tuple[str, FlashKind]] = []

    async def flash(self, target: str, kind: FlashKind) -> None:
        self.pending.append((target, kind))

    def drain(self) -> list[dict[str, Any]]:
        """Return and clear the pending flashes as JSON-ready dicts."""
        flashes = [{"target": target, "kind": kind.value} for target, kind in self.pending]
        self.pending.clear()
        return flashes
