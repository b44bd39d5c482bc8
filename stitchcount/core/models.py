"""Domain models for the stitch counter.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum


class Digit(Enum):
    """The two counters shown side by side."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class CounterState:
    """The two digit values.

    Both fields are always in [0, 9]. Instances are immutable; the
    CounterStore replaces its state on every mutation.
    """

    left: int = 0
    right: int = 0

    def __post_init__(self) -> None:
        """Validate digit range on creation."""
        for name in ("left", "right"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if not 0 <= value <= 9:
                raise ValueError(f"{name} must be between 0 and 9, got {value}")

    def get(self, digit: Digit) -> int:
        """Value of the named digit."""
        return self.left if digit is Digit.LEFT else self.right

    def to_dict(self) -> dict[str, int]:
        return {"left": self.left, "right": self.right}


@dataclass(frozen=True)
class TapRecord:
    """Most recent completed tap or decrement trigger.

    Used only for double-tap detection within a trailing window. The
    empty record (no digit) never matches.
    """

    digit: Digit | None = None
    timestamp: int = 0

    def __post_init__(self) -> None:
        if self.timestamp < 0:
            raise ValueError(f"timestamp must be non-negative, got {self.timestamp}")

    def matches(self, digit: Digit, now_ms: int, window_ms: int) -> bool:
        """True if this record is a tap on `digit` less than `window_ms` ago."""
        return self.digit is digit and now_ms - self.timestamp < window_ms


@dataclass(frozen=True)
class TouchGesture:
    """An in-flight touch, captured at touch-start and consumed at touch-end."""

    start_y: float
    start_time: int
    digit: Digit


class EventKind(Enum):
    """Kinds of normalized input events delivered to the classifier."""

    TAP = "tap"
    SECONDARY_PRESS = "secondary-press"
    SWIPE_START = "swipe-start"
    SWIPE_END = "swipe-end"
    SWIPE_CANCEL = "swipe-cancel"
    KEY = "key"
    RESET_PRESS = "reset-press"


@dataclass(frozen=True)
class InputEvent:
    """A device event after platform translation.

    `target` is the id of the UI element the input landed on and is only
    used to direct visual feedback.
    """

    kind: EventKind
    timestamp: int
    digit: Digit | None = None
    position: float | None = None
    key: str | None = None
    target: str | None = None


class ActionKind(Enum):
    """Logical counter operations."""

    INCREMENT = "increment"
    DECREMENT = "decrement"
    RESET_DIGIT = "reset-digit"
    RESET_ALL = "reset-all"


@dataclass(frozen=True)
class Action:
    """A classified input: what to do, and to which digit."""

    kind: ActionKind
    digit: Digit | None = None

    def __post_init__(self) -> None:
        """Every action except reset-all names a digit."""
        if self.kind is ActionKind.RESET_ALL:
            if self.digit is not None:
                raise ValueError("reset-all does not take a digit")
        elif self.digit is None:
            raise ValueError(f"{self.kind.value} requires a digit")

    @classmethod
    def increment(cls, digit: Digit) -> "Action":
        return cls(ActionKind.INCREMENT, digit)

    @classmethod
    def decrement(cls, digit: Digit) -> "Action":
        return cls(ActionKind.DECREMENT, digit)

    @classmethod
    def reset_digit(cls, digit: Digit) -> "Action":
        return cls(ActionKind.RESET_DIGIT, digit)

    @classmethod
    def reset_all(cls) -> "Action":
        return cls(ActionKind.RESET_ALL)


class FlashKind(Enum):
    """Direction of the visual pulse."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class GestureThresholds:
    """Timing and distance limits used to tell taps from swipes."""

    double_tap_window_ms: int = 300
    swipe_min_distance_px: float = 30
    swipe_max_duration_ms: int = 300
    tap_max_distance_px: float = 10

    def __post_init__(self) -> None:
        """Validate threshold invariants on creation."""
        for name in (
            "double_tap_window_ms",
            "swipe_min_distance_px",
            "swipe_max_duration_ms",
            "tap_max_distance_px",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.tap_max_distance_px > self.swipe_min_distance_px:
            raise ValueError(
                f"tap_max_distance_px ({self.tap_max_distance_px}) cannot exceed "
                f"swipe_min_distance_px ({self.swipe_min_distance_px})"
            )
