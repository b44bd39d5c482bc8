"""Fake FeedbackPort implementation for testing."""

from stitchcount.core.models import FlashKind
from stitchcount.core.ports import FeedbackPort


class FakeFeedbackPort(FeedbackPort):
    """Captures flashes for test assertions and can be told to fail."""

    def __init__(self):
        self.flashes: list[tuple[str, FlashKind]] = []
        self.should_fail = False

    async def flash(self, target: str, kind: FlashKind) -> None:
        if self.should_fail:
            raise RuntimeError("Element not found")
        self.flashes.append((target, kind))
