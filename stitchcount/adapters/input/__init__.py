"""Input adapters translating device events into InputEvents.

One tier is selected per session:
- pointer: mouse clicks and keyboard
- touch: swipes, taps and keyboard
"""

import logging
from typing import Literal

from stitchcount.core.ports import ClockPort, InputAdapterPort

from .pointer import PointerInputAdapter
from .touch import TouchInputAdapter

logger = logging.getLogger(__name__)

InputMode = Literal["auto", "pointer", "touch"]


def select_input_adapter(
    mode: InputMode, touch_capable: bool, clock: ClockPort
) -> InputAdapterPort:
    """Pick the input tier for a session.

    Args:
        mode: "pointer" or "touch" to force a tier, "auto" to follow
            the reported device capability.
        touch_capable: Whether the device reported touch support.
        clock: ClockPort used to timestamp events.

    Returns:
        A new InputAdapterPort for the chosen tier.
    """
    use_touch = mode == "touch" or (mode == "auto" and touch_capable)
    adapter: InputAdapterPort
    if use_touch:
        adapter = TouchInputAdapter(clock)
    else:
        adapter = PointerInputAdapter(clock)
    logger.debug(f"Selected {adapter.name} input (mode={mode}, touch={touch_capable})")
    return adapter


__all__ = [
    "InputMode",
    "PointerInputAdapter",
    "TouchInputAdapter",
    "select_input_adapter",
]
