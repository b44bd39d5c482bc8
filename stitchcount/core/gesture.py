"""Gesture classification.

Turns normalized input events into counter actions. Two input tiers
share one state machine:

- Pointer tier: a click on a digit increments it; a press on the
  digit's decrement control decrements, and a second press within the
  double-tap window resets that digit instead.
- Touch tier: a touch over a digit is either a swipe (fast, long
  vertical travel: up increments, down decrements), a tap (almost no
  travel: single increments, double resets the digit) or ambiguous
  (discarded).

States for the touch tier are Idle (no gesture in flight) and Armed
(touch started over a digit). Every swipe-end returns to Idle.
"""

import logging

from .models import (
    Action,
    Digit,
    EventKind,
    GestureThresholds,
    InputEvent,
    TapRecord,
    TouchGesture,
)

logger = logging.getLogger(__name__)


KEY_BINDINGS: dict[str, Action] = {
    "ArrowUp": Action.increment(Digit.LEFT),
    "ArrowDown": Action.decrement(Digit.LEFT),
    "ArrowRight": Action.increment(Digit.RIGHT),
    "ArrowLeft": Action.decrement(Digit.RIGHT),
    "r": Action.reset_all(),
    "R": Action.reset_all(),
}


class GestureClassifier:
    """Decides which action, if any, an input event stands for.

    Holds the last tap record and the in-flight touch gesture. Events
    must be delivered one at a time, in order.
    """

    def __init__(self, thresholds: GestureThresholds | None = None):
        self.thresholds = thresholds or GestureThresholds()
        self.last_tap = TapRecord()
        self.gesture: TouchGesture | None = None

    @property
    def armed(self) -> bool:
        """True while a touch gesture is in flight."""
        return self.gesture is not None

    def reset(self) -> None:
        """Return to Idle and forget the last tap."""
        self.last_tap = TapRecord()
        self.gesture = None

    def classify(self, event: InputEvent) -> Action | None:
        """Classify one event.

        Returns:
            The action to apply, or None if the event produces no action.
        """
        if event.kind is EventKind.RESET_PRESS:
            return Action.reset_all()

        if event.kind is EventKind.KEY:
            return KEY_BINDINGS.get(event.key or "")

        if event.kind is EventKind.SWIPE_CANCEL:
            self.gesture = None
            return None

        if event.kind is EventKind.SWIPE_END:
            return self._finish_gesture(event)

        if event.digit is None:
            logger.debug(f"Ignoring {event.kind.value} event without a digit")
            return None

        if event.kind is EventKind.TAP:
            return Action.increment(event.digit)

        if event.kind is EventKind.SECONDARY_PRESS:
            return self._windowed(
                event.digit, event.timestamp, single=Action.decrement(event.digit)
            )

        if event.kind is EventKind.SWIPE_START:
            if event.position is None:
                logger.debug("Ignoring swipe-start without a position")
                return None
            self.gesture = TouchGesture(
                start_y=event.position,
                start_time=event.timestamp,
                digit=event.digit,
            )
            return None

        return None

    def _finish_gesture(self, event: InputEvent) -> Action | None:
        gesture = self.gesture
        self.gesture = None
        if gesture is None or event.position is None:
            return None

        delta_y = gesture.start_y - event.position
        delta_time = event.timestamp - gesture.start_time
        limits = self.thresholds

        if (
            abs(delta_y) > limits.swipe_min_distance_px
            and delta_time < limits.swipe_max_duration_ms
        ):
            if delta_y > 0:
                return Action.increment(gesture.digit)
            return Action.decrement(gesture.digit)

        if abs(delta_y) < limits.tap_max_distance_px:
            return self._windowed(
                gesture.digit, event.timestamp, single=Action.increment(gesture.digit)
            )

        logger.debug(
            f"Discarding ambiguous gesture on {gesture.digit.value} "
            f"(dy={delta_y}, dt={delta_time}ms)"
        )
        return None

    def _windowed(self, digit: Digit, now_ms: int, single: Action) -> Action:
        """Apply double-tap detection: reset on a quick repeat, else `single`."""
        if self.last_tap.matches(digit, now_ms, self.thresholds.double_tap_window_ms):
            self.last_tap = TapRecord()
            return Action.reset_digit(digit)

        self.last_tap = TapRecord(digit=digit, timestamp=max(now_ms, 0))
        return single
