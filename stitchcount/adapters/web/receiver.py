"""Browser event receiver.

Bridges the HTTP server and the core: forwards raw DOM events from the
page to the InputPort and builds the JSON the page redraws from.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from stitchcount.adapters.display.web import WebDisplayAdapter
from stitchcount.adapters.feedback.web import WebFeedbackAdapter
from stitchcount.adapters.input import InputMode, select_input_adapter
from stitchcount.core.controller import TallyController
from stitchcount.core.ports import ClockPort

logger = logging.getLogger(__name__)


class WebReceiver:
    """Handles page requests one at a time.

    Each request runs to completion, including draining its flashes,
    before the next starts.
    """

    def __init__(
        self,
        controller: TallyController,
        display: WebDisplayAdapter,
        feedback: WebFeedbackAdapter,
        clock: ClockPort,
        input_mode: InputMode = "auto",
    ):
        """Initialize the receiver.

        Args:
            controller: TallyController processing events.
            display: WebDisplayAdapter the controller renders into.
            feedback: WebFeedbackAdapter the controller flashes into.
            clock: ClockPort handed to newly selected input adapters.
            input_mode: Forced input tier, or "auto" to follow the page.
        """
        self.controller = controller
        self.display = display
        self.feedback = feedback
        self.clock = clock
        self.input_mode = input_mode
        self._lock = asyncio.Lock()

    async def handle_state(self) -> dict[str, Any]:
        """Current digits."""
        return self.controller.state.to_dict()

    async def handle_session(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Select the input tier for a freshly loaded page.

        Args:
            data: ``{"touch": bool}`` as reported by the page.
        """
        touch = data.get("touch") is True
        async with self._lock:
            adapter = select_input_adapter(self.input_mode, touch, self.clock)
            self.controller.use_input_adapter(adapter)
            logger.info(f"Page session started with {adapter.name} input")
            return {
                "input": adapter.name,
                **self.controller.state.to_dict(),
                "flash_ms": self.feedback.duration_ms,
            }

    async def handle_event(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """Process one raw DOM event from the page."""
        async with self._lock:
            await self.controller.handle_input(raw)
            return {
                **self.display.snapshot(),
                "flashes": self.feedback.drain(),
                "flash_ms": self.feedback.duration_ms,
                "prevent_default": self.controller.suppresses_default(raw),
            }
