"""Tests for CounterStore arithmetic, persistence and rendering."""

import pytest

from stitchcount.core.counter_store import CounterStore
from stitchcount.core.models import Action, CounterState, Digit
from stitchcount.tests.fakes import FakeDisplayPort, FakePersistencePort


@pytest.fixture
def persistence() -> FakePersistencePort:
    return FakePersistencePort()


@pytest.fixture
def display() -> FakeDisplayPort:
    return FakeDisplayPort()


@pytest.fixture
def store(persistence: FakePersistencePort, display: FakeDisplayPort) -> CounterStore:
    return CounterStore(persistence, display)


async def make_store(state: CounterState) -> tuple[CounterStore, FakePersistencePort]:
    """Build a store restored to `state`."""
    persistence = FakePersistencePort(initial=state)
    store = CounterStore(persistence, FakeDisplayPort())
    await store.load()
    return store, persistence


# ============================================================================
# increment
# ============================================================================


@pytest.mark.asyncio
async def test_increment_left(store: CounterStore) -> None:
    state = await store.increment(Digit.LEFT)
    assert state == CounterState(1, 0)


@pytest.mark.asyncio
async def test_increment_left_wraps_without_touching_right() -> None:
    store, _ = await make_store(CounterState(9, 4))
    state = await store.increment(Digit.LEFT)
    assert state == CounterState(0, 4)


@pytest.mark.asyncio
async def test_increment_right_carries_into_left() -> None:
    store, _ = await make_store(CounterState(0, 9))
    state = await store.increment(Digit.RIGHT)
    assert state == CounterState(1, 0)


@pytest.mark.asyncio
async def test_carry_wraps_left_at_nine() -> None:
    store, _ = await make_store(CounterState(9, 9))
    state = await store.increment(Digit.RIGHT)
    assert state == CounterState(0, 0)


@pytest.mark.asyncio
@pytest.mark.parametrize("start", range(10))
async def test_ten_left_increments_return_to_start(start: int) -> None:
    store, _ = await make_store(CounterState(start, 3))
    for _ in range(10):
        await store.increment(Digit.LEFT)
    assert store.state == CounterState(start, 3)


@pytest.mark.asyncio
@pytest.mark.parametrize("start", range(10))
async def test_ten_right_increments_carry_exactly_once(start: int) -> None:
    store, _ = await make_store(CounterState(2, start))
    for _ in range(10):
        await store.increment(Digit.RIGHT)
    assert store.state == CounterState(3, start)


# ============================================================================
# decrement
# ============================================================================


@pytest.mark.asyncio
async def test_decrement_each_digit() -> None:
    store, _ = await make_store(CounterState(5, 5))
    assert await store.decrement(Digit.LEFT) == CounterState(4, 5)
    assert await store.decrement(Digit.RIGHT) == CounterState(4, 4)


@pytest.mark.asyncio
@pytest.mark.parametrize("digit", [Digit.LEFT, Digit.RIGHT])
async def test_decrement_at_zero_is_noop_but_persists(digit: Digit) -> None:
    store, persistence = await make_store(CounterState(0, 0))
    state = await store.decrement(digit)
    assert state == CounterState(0, 0)
    assert persistence.saved_states == [CounterState(0, 0)]


@pytest.mark.asyncio
async def test_decrement_right_never_borrows_from_left() -> None:
    store, _ = await make_store(CounterState(1, 0))
    state = await store.decrement(Digit.RIGHT)
    assert state == CounterState(1, 0)


# ============================================================================
# resets
# ============================================================================


@pytest.mark.asyncio
async def test_reset_digit_only_touches_named_digit() -> None:
    store, _ = await make_store(CounterState(6, 8))
    assert await store.reset_digit(Digit.RIGHT) == CounterState(6, 0)
    assert await store.reset_digit(Digit.LEFT) == CounterState(0, 0)


@pytest.mark.asyncio
async def test_reset_all() -> None:
    store, _ = await make_store(CounterState(7, 3))
    assert await store.reset_all() == CounterState(0, 0)


@pytest.mark.asyncio
async def test_apply_dispatches_actions() -> None:
    store, _ = await make_store(CounterState(4, 4))
    assert await store.apply(Action.increment(Digit.RIGHT)) == CounterState(4, 5)
    assert await store.apply(Action.decrement(Digit.LEFT)) == CounterState(3, 5)
    assert await store.apply(Action.reset_digit(Digit.RIGHT)) == CounterState(3, 0)
    assert await store.apply(Action.reset_all()) == CounterState(0, 0)


# ============================================================================
# persistence and rendering
# ============================================================================


@pytest.mark.asyncio
async def test_every_mutation_persists_then_renders(
    store: CounterStore,
    persistence: FakePersistencePort,
    display: FakeDisplayPort,
) -> None:
    await store.increment(Digit.RIGHT)
    await store.increment(Digit.LEFT)

    assert persistence.saved_states == [CounterState(0, 1), CounterState(1, 1)]
    assert display.renders == [
        (Digit.LEFT, 0),
        (Digit.RIGHT, 1),
        (Digit.LEFT, 1),
        (Digit.RIGHT, 1),
    ]


@pytest.mark.asyncio
async def test_load_restores_persisted_state(display: FakeDisplayPort) -> None:
    persistence = FakePersistencePort(initial=CounterState(3, 8))
    store = CounterStore(persistence, display)

    state = await store.load()

    assert state == CounterState(3, 8)
    assert display.shown(Digit.LEFT) == 3
    assert display.shown(Digit.RIGHT) == 8


@pytest.mark.asyncio
async def test_load_without_record_defaults_and_still_renders(
    store: CounterStore, display: FakeDisplayPort
) -> None:
    state = await store.load()

    assert state == CounterState(0, 0)
    assert display.renders == [(Digit.LEFT, 0), (Digit.RIGHT, 0)]


@pytest.mark.asyncio
async def test_load_failure_falls_back_to_zero(
    store: CounterStore, persistence: FakePersistencePort
) -> None:
    persistence.should_fail_load = True
    assert await store.load() == CounterState(0, 0)


@pytest.mark.asyncio
async def test_save_failure_keeps_in_memory_state(
    store: CounterStore,
    persistence: FakePersistencePort,
    display: FakeDisplayPort,
) -> None:
    persistence.should_fail_save = True

    state = await store.increment(Digit.LEFT)

    assert state == CounterState(1, 0)
    assert store.state == CounterState(1, 0)
    assert display.shown(Digit.LEFT) == 1
