"""Core domain logic for the stitch counter.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import (
    Action,
    ActionKind,
    CounterState,
    Digit,
    EventKind,
    FlashKind,
    GestureThresholds,
    InputEvent,
    TapRecord,
    TouchGesture,
)

__all__ = [
    "Action",
    "ActionKind",
    "CounterState",
    "Digit",
    "EventKind",
    "FlashKind",
    "GestureThresholds",
    "InputEvent",
    "TapRecord",
    "TouchGesture",
]
