"""Mouse and keyboard input adapter.

Clicks on a digit increment it, clicks on a digit's "down" control go
through double-press detection, and the reset-all control resets both.
"""

import logging
from collections.abc import Mapping
from typing import Any

from stitchcount.core.models import EventKind, InputEvent

from .base import DomInputAdapter, event_target, is_reset_control, target_digit

logger = logging.getLogger(__name__)


class PointerInputAdapter(DomInputAdapter):
    """Input tier for devices without touch."""

    name = "pointer"

    def translate(self, raw: Mapping[str, Any]) -> InputEvent | None:
        event_type = raw.get("type")

        if event_type == "keydown":
            return self._key_event(raw)

        if event_type != "click":
            return None

        if is_reset_control(raw):
            return self._reset_event(raw)

        digit = target_digit(raw)
        if digit is None:
            logger.debug("Click without a digit target, ignoring")
            return None

        action = event_target(raw).get("action")
        if action == "down":
            return self._event(EventKind.SECONDARY_PRESS, raw, digit=digit)
        if action is None:
            return self._event(EventKind.TAP, raw, digit=digit)

        logger.debug(f"Click on unknown control action {action!r}, ignoring")
        return None
