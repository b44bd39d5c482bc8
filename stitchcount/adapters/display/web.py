"""Web display adapter.

The browser redraws from the JSON returned by each request, so this
adapter only remembers the last rendered value of each digit.
"""

from stitchcount.core.models import Digit
from stitchcount.core.ports import DisplayPort


class WebDisplayAdapter(DisplayPort):
    """Keeps the rendered digits for the next HTTP response."""

    def __init__(self) -> None:
        self.values: dict[Digit, int] = {Digit.LEFT: 0, Digit.RIGHT: 0}
        self.render_count = 0

    async def render_digit(self, which: Digit, value: int) -> None:
        self.values[which] = value
        self.render_count += 1

    def snapshot(self) -> dict[str, int]:
        return {digit.value: value for digit, value in self.values.items()}
