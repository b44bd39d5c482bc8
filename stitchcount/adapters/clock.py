"""System clock adapter."""

import time

from stitchcount.core.ports import ClockPort


class SystemClock(ClockPort):
    """Monotonic millisecond clock, unaffected by wall-clock changes."""

    def now_ms(self) -> int:
        return time.monotonic_ns() // 1_000_000
