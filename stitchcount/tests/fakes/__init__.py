"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakePersistencePort: In-memory state slot
- FakeDisplayPort: Captured renders for assertion
- FakeFeedbackPort: Captured flashes for assertion
- FakeClock: Manually advanced time
"""

from .clock import FakeClock
from .display import FakeDisplayPort
from .feedback import FakeFeedbackPort
from .store import FakePersistencePort

__all__ = [
    "FakeClock",
    "FakeDisplayPort",
    "FakeFeedbackPort",
    "FakePersistencePort",
]
