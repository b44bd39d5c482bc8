"""Port interfaces for the stitch counter.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - PersistencePort: Load and save the two counter values
   - DisplayPort: Re-render a digit
   - FeedbackPort: Transient visual flash on a UI element
   - ClockPort: Millisecond timestamps for gesture timing
   - InputAdapterPort: Translate raw device events into InputEvents

2. **Driving Ports** (surfaces call into core)
   - InputPort: Entry point for raw device events
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .models import CounterState, Digit, FlashKind, InputEvent


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class PersistencePort(ABC):
    """Port for durable storage of the counter state.

    Adapters store one record in a key-value slot keyed by a fixed
    application identifier.

    Implementations must handle:
    - Absent records (first run)
    - Malformed records (treated as absent, never raised)
    """

    @abstractmethod
    async def load(self) -> CounterState | None:
        """Read the persisted counter state.

        Returns:
            The stored CounterState, or None if no record exists or the
            stored record is malformed.
        """

    @abstractmethod
    async def save(self, state: CounterState) -> None:
        """Persist the counter state, replacing any previous record.

        Args:
            state: The state to store.

        Raises:
            Exception: If the underlying storage is unavailable.
                CounterStore logs and continues.
        """

    async def close(self) -> None:
        """Release any held resources. Default is a no-op."""


class DisplayPort(ABC):
    """Port for rendering digit values. Pure re-render, no error path."""

    @abstractmethod
    async def render_digit(self, which: Digit, value: int) -> None:
        """Show `value` (0-9) on the named digit."""


class FeedbackPort(ABC):
    """Port for transient visual feedback.

    Purely cosmetic: a failing flash must never affect counter state.
    """

    @abstractmethod
    async def flash(self, target: str, kind: FlashKind) -> None:
        """Pulse the UI element identified by `target`.

        The pulse clears itself after a short delay (about 100ms).
        """


class ClockPort(ABC):
    """Port for reading the current time in integer milliseconds."""

    @abstractmethod
    def now_ms(self) -> int:
        """Current time in milliseconds from an arbitrary fixed origin."""


class InputAdapterPort(ABC):
    """Port for translating platform-native events.

    Raw events are mappings in DOM vocabulary, e.g.
    ``{"type": "click", "target": {"id": "left-digit", "digit": "left"}}``.
    One adapter is selected per session, by device capability.
    """

    name: str = "base"

    @abstractmethod
    def translate(self, raw: Mapping[str, Any]) -> InputEvent | None:
        """Normalize a raw event.

        Returns:
            An InputEvent, or None if this adapter ignores the event
            (unknown type, missing target, suppressed click).
        """

    @abstractmethod
    def suppresses_default(self, raw: Mapping[str, Any]) -> bool:
        """Whether the host should cancel the event's native behavior."""


# ============================================================================
# DRIVING PORTS (Surfaces call into core)
# ============================================================================


class InputPort(ABC):
    """Entry point used by the web and terminal surfaces."""

    @abstractmethod
    async def start(self) -> CounterState:
        """Restore persisted state and render it. Called once at startup."""

    @abstractmethod
    async def handle_input(self, raw: Mapping[str, Any]) -> CounterState:
        """Process one raw device event to completion.

        Returns:
            The counter state after the event (unchanged if ignored).
        """

    @abstractmethod
    def suppresses_default(self, raw: Mapping[str, Any]) -> bool:
        """Whether the host should cancel the event's native behavior."""

    @property
    @abstractmethod
    def state(self) -> CounterState:
        """Current counter state."""
