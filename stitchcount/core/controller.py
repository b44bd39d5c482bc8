"""Tally controller: implements InputPort for the web and terminal surfaces.

Runs each raw event through the active input adapter, the gesture
classifier and the counter store, then flashes the element the input
landed on. Events are processed strictly one at a time.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from .counter_store import CounterStore
from .gesture import GestureClassifier
from .models import Action, ActionKind, CounterState, FlashKind, InputEvent
from .ports import FeedbackPort, InputAdapterPort, InputPort

logger = logging.getLogger(__name__)


FLASH_KINDS: dict[ActionKind, FlashKind] = {
    ActionKind.INCREMENT: FlashKind.UP,
    ActionKind.DECREMENT: FlashKind.DOWN,
    ActionKind.RESET_DIGIT: FlashKind.DOWN,
}


class TallyController(InputPort):
    """Core implementation of InputPort."""

    def __init__(
        self,
        store: CounterStore,
        classifier: GestureClassifier,
        input_adapter: InputAdapterPort,
        feedback: FeedbackPort,
    ):
        """Initialize the controller.

        Args:
            store: CounterStore owning the counter state.
            classifier: GestureClassifier deciding actions.
            input_adapter: InputAdapterPort for the detected device tier.
            feedback: FeedbackPort for visual flashes.
        """
        self.store = store
        self.classifier = classifier
        self.input_adapter = input_adapter
        self.feedback = feedback
        self._lock = asyncio.Lock()

    @property
    def state(self) -> CounterState:
        return self.store.state

    async def start(self) -> CounterState:
        async with self._lock:
            return await self.store.load()

    def use_input_adapter(self, adapter: InputAdapterPort) -> None:
        """Switch device tier. Clears any half-finished gesture or tap."""
        if adapter is not self.input_adapter:
            logger.info(f"Input adapter: {adapter.name}")
        self.input_adapter = adapter
        self.classifier.reset()

    def suppresses_default(self, raw: Mapping[str, Any]) -> bool:
        return self.input_adapter.suppresses_default(raw)

    async def handle_input(self, raw: Mapping[str, Any]) -> CounterState:
        async with self._lock:
            event = self.input_adapter.translate(raw)
            if event is None:
                logger.debug(f"Ignored raw event: {raw.get('type')}")
                return self.store.state

            action = self.classifier.classify(event)
            if action is None:
                return self.store.state

            logger.debug(
                f"{event.kind.value} -> {action.kind.value}"
                + (f"({action.digit.value})" if action.digit else "")
            )
            state = await self.store.apply(action)
            await self._flash(event, action)
            return state

    async def _flash(self, event: InputEvent, action: Action) -> None:
        kind = FLASH_KINDS.get(action.kind)
        if kind is None or not event.target:
            return
        try:
            await self.feedback.flash(event.target, kind)
        except Exception as e:
            logger.warning(f"Flash on {event.target} failed: {e}")
