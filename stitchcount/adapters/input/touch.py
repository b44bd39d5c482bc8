"""Touch input adapter.

A touch that starts over a digit becomes a swipe-start; the matching
touch-end carries the finger's final position so the classifier can
tell swipes from taps. Clicks synthesized by the browser after a touch
are dropped, except on the reset-all control which has no gesture of
its own.
"""

import logging
from collections.abc import Mapping
from typing import Any

from stitchcount.core.models import EventKind, InputEvent
from stitchcount.core.ports import ClockPort

from .base import (
    DomInputAdapter,
    client_y,
    event_target,
    is_reset_control,
    target_digit,
)

logger = logging.getLogger(__name__)


class TouchInputAdapter(DomInputAdapter):
    """Input tier for touch-capable devices."""

    name = "touch"

    def __init__(self, clock: ClockPort):
        super().__init__(clock)
        self.touch_active = False

    def translate(self, raw: Mapping[str, Any]) -> InputEvent | None:
        event_type = raw.get("type")

        if event_type == "keydown":
            return self._key_event(raw)

        if event_type == "click":
            if is_reset_control(raw):
                return self._reset_event(raw)
            return None

        if event_type == "touchstart":
            digit = target_digit(raw)
            position = client_y(raw)
            on_control = event_target(raw).get("action") is not None
            if digit is None or position is None or on_control:
                logger.debug("Touch outside a digit, ignoring")
                return None
            self.touch_active = True
            return self._event(EventKind.SWIPE_START, raw, digit=digit, position=position)

        if event_type == "touchend":
            self.touch_active = False
            position = client_y(raw)
            if position is None:
                return self._event(EventKind.SWIPE_CANCEL, raw)
            return self._event(EventKind.SWIPE_END, raw, position=position)

        if event_type == "touchcancel":
            self.touch_active = False
            return self._event(EventKind.SWIPE_CANCEL, raw)

        return None

    def suppresses_default(self, raw: Mapping[str, Any]) -> bool:
        if raw.get("type") == "touchmove":
            return self.touch_active
        return super().suppresses_default(raw)
