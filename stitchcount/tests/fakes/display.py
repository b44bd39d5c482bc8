"""Fake DisplayPort implementation for testing."""

from stitchcount.core.models import Digit
from stitchcount.core.ports import DisplayPort


class FakeDisplayPort(DisplayPort):
    """Captures every render call."""

    def __init__(self):
        self.renders: list[tuple[Digit, int]] = []

    async def render_digit(self, which: Digit, value: int) -> None:
        self.renders.append((which, value))

    def shown(self, which: Digit) -> int | None:
        """Last value rendered on the digit, if any."""
        for digit, value in reversed(self.renders):
            if digit is which:
                return value
        return None
