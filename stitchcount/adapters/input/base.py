"""Shared helpers for reading DOM-style raw events."""

import math
from collections.abc import Mapping
from typing import Any

from stitchcount.core.models import Digit, EventKind, InputEvent
from stitchcount.core.ports import ClockPort, InputAdapterPort

ARROW_KEYS = frozenset({"ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight"})
RESET_ALL_ID = "reset-all"


def event_target(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    """The `target` mapping of a raw event, empty if missing."""
    target = raw.get("target")
    return target if isinstance(target, Mapping) else {}


def target_digit(raw: Mapping[str, Any]) -> Digit | None:
    """The digit named by the event target's `data-digit`, if valid."""
    try:
        return Digit(event_target(raw).get("digit"))
    except ValueError:
        return None


def target_id(raw: Mapping[str, Any]) -> str | None:
    value = event_target(raw).get("id")
    return value if isinstance(value, str) and value else None


def is_reset_control(raw: Mapping[str, Any]) -> bool:
    target = event_target(raw)
    return target.get("id") == RESET_ALL_ID or target.get("action") == "reset"


def client_y(raw: Mapping[str, Any]) -> float | None:
    value = raw.get("clientY")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def event_time(raw: Mapping[str, Any]) -> int | None:
    """The page's `event.timeStamp` in whole ms, if it sent a usable one."""
    value = raw.get("timeStamp")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return int(value)


class DomInputAdapter(InputAdapterPort):
    """Common base for the pointer and touch tiers.

    Keyboard handling and the reset-all control are the same on both.
    """

    def __init__(self, clock: ClockPort):
        """Initialize the adapter.

        Events carrying the page's own `timeStamp` keep it, so gesture
        timing reflects when the user acted rather than when the request
        arrived. Events without one are stamped from the clock.

        Args:
            clock: ClockPort used to timestamp events that carry no time.
        """
        self.clock = clock

    def _timestamp(self, raw: Mapping[str, Any]) -> int:
        stamp = event_time(raw)
        return stamp if stamp is not None else self.clock.now_ms()

    def _event(self, kind: EventKind, raw: Mapping[str, Any], **fields: Any) -> InputEvent:
        return InputEvent(
            kind=kind,
            timestamp=self._timestamp(raw),
            target=target_id(raw),
            **fields,
        )

    def _key_event(self, raw: Mapping[str, Any]) -> InputEvent | None:
        key = raw.get("key")
        if not isinstance(key, str) or not key:
            return None
        return InputEvent(kind=EventKind.KEY, timestamp=self._timestamp(raw), key=key)

    def _reset_event(self, raw: Mapping[str, Any]) -> InputEvent:
        return self._event(EventKind.RESET_PRESS, raw)

    def suppresses_default(self, raw: Mapping[str, Any]) -> bool:
        return raw.get("type") == "keydown" and raw.get("key") in ARROW_KEYS
