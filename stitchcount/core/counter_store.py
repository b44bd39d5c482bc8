"""Counter state ownership and arithmetic.

Increment wraps modulo 10, and the right digit carries into the left
when it wraps. Decrement stops at 0 and never borrows from the left
digit.
"""

import logging

from .models import Action, ActionKind, CounterState, Digit
from .ports import DisplayPort, PersistencePort

logger = logging.getLogger(__name__)


class CounterStore:
    """Holds the two digits, persists and renders them after every mutation."""

    def __init__(self, persistence: PersistencePort, display: DisplayPort):
        """Initialize the store at the default zero state.

        Args:
            persistence: PersistencePort implementation for durable storage.
            display: DisplayPort implementation notified after every change.
        """
        self.persistence = persistence
        self.display = display
        self._state = CounterState()

    @property
    def state(self) -> CounterState:
        return self._state

    async def load(self) -> CounterState:
        """Restore persisted state, falling back to zero on absent or bad data.

        Always re-renders both digits, even when nothing was restored.
        """
        try:
            restored = await self.persistence.load()
        except Exception as e:
            logger.warning(f"Could not read persisted counter state: {e}")
            restored = None

        if restored is None:
            logger.info("No persisted counter state, starting at 0/0")
            self._state = CounterState()
        else:
            logger.info(f"Restored counter state {restored.left}/{restored.right}")
            self._state = restored

        await self._render()
        return self._state

    async def increment(self, digit: Digit) -> CounterState:
        left, right = self._state.left, self._state.right
        if digit is Digit.LEFT:
            left = (left + 1) % 10
        else:
            right += 1
            if right > 9:
                right = 0
                left = (left + 1) % 10
        return await self._commit(CounterState(left, right))

    async def decrement(self, digit: Digit) -> CounterState:
        """Decrement the named digit, stopping at 0.

        At 0 the state is unchanged but is still persisted and rendered.
        """
        left, right = self._state.left, self._state.right
        if digit is Digit.LEFT and left > 0:
            left -= 1
        elif digit is Digit.RIGHT and right > 0:
            right -= 1
        return await self._commit(CounterState(left, right))

    async def reset_digit(self, digit: Digit) -> CounterState:
        if digit is Digit.LEFT:
            return await self._commit(CounterState(0, self._state.right))
        return await self._commit(CounterState(self._state.left, 0))

    async def reset_all(self) -> CounterState:
        return await self._commit(CounterState())

    async def apply(self, action: Action) -> CounterState:
        """Run the operation named by a classified action."""
        if action.kind is ActionKind.RESET_ALL:
            return await self.reset_all()

        assert action.digit is not None
        if action.kind is ActionKind.INCREMENT:
            return await self.increment(action.digit)
        if action.kind is ActionKind.DECREMENT:
            return await self.decrement(action.digit)
        return await self.reset_digit(action.digit)

    async def _commit(self, new_state: CounterState) -> CounterState:
        """Replace state, persist it, then re-render."""
        self._state = new_state
        logger.debug(f"Counter state now {new_state.left}/{new_state.right}")

        try:
            await self.persistence.save(new_state)
        except Exception as e:
            logger.error(f"Failed to persist counter state: {e}", exc_info=True)

        await self._render()
        return new_state

    async def _render(self) -> None:
        await self.display.render_digit(Digit.LEFT, self._state.left)
        await self.display.render_digit(Digit.RIGHT, self._state.right)
