"""Integration tests for the JSON file state store."""

import json
from pathlib import Path

import pytest

from stitchcount.adapters.store.json_file import JsonFileStateStore
from stitchcount.core.models import CounterState


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "state.json"


@pytest.mark.asyncio
async def test_missing_file_loads_as_none(state_path: Path) -> None:
    store = JsonFileStateStore(str(state_path))
    assert await store.load() is None


@pytest.mark.asyncio
async def test_save_then_load(state_path: Path) -> None:
    store = JsonFileStateStore(str(state_path))
    await store.save(CounterState(7, 1))

    assert await store.load() == CounterState(7, 1)
    assert await JsonFileStateStore(str(state_path)).load() == CounterState(7, 1)


@pytest.mark.asyncio
async def test_file_holds_string_slot_under_key(state_path: Path) -> None:
    store = JsonFileStateStore(str(state_path), key="rows")
    await store.save(CounterState(2, 3))

    slots = json.loads(state_path.read_text())
    assert json.loads(slots["rows"]) == {"left": 2, "right": 3}
    assert not state_path.with_suffix(".json.tmp").exists()


@pytest.mark.asyncio
async def test_save_keeps_other_slots(state_path: Path) -> None:
    state_path.parent.mkdir(parents=True, exist_ok=True)
    state_path.write_text(json.dumps({"theme": "dark"}))

    await JsonFileStateStore(str(state_path)).save(CounterState(1, 0))

    slots = json.loads(state_path.read_text())
    assert slots["theme"] == "dark"
    assert "stitchCounter" in slots


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content",
    [
        "{{{",
        "[]",
        json.dumps({"stitchCounter": 5}),
        json.dumps({"stitchCounter": "garbage"}),
        json.dumps({"stitchCounter": '{"left": 10, "right": 0}'}),
    ],
)
async def test_malformed_content_loads_as_none(state_path: Path, content: str) -> None:
    state_path.parent.mkdir(parents=True, exist_ok=True)
    state_path.write_text(content)

    assert await JsonFileStateStore(str(state_path)).load() is None


@pytest.mark.asyncio
async def test_save_recovers_from_corrupt_file(state_path: Path) -> None:
    state_path.parent.mkdir(parents=True, exist_ok=True)
    state_path.write_text("not json")
    store = JsonFileStateStore(str(state_path))

    await store.save(CounterState(0, 4))

    assert await store.load() == CounterState(0, 4)


@pytest.mark.asyncio
async def test_non_utf8_file_loads_as_none(state_path: Path) -> None:
    state_path.parent.mkdir(parents=True, exist_ok=True)
    state_path.write_bytes(b"\xff\xfe{garbage")

    assert await JsonFileStateStore(str(state_path)).load() is None


@pytest.mark.asyncio
async def test_save_recovers_from_non_utf8_file(state_path: Path) -> None:
    state_path.parent.mkdir(parents=True, exist_ok=True)
    state_path.write_bytes(b"\xff\xfe{garbage")
    store = JsonFileStateStore(str(state_path))

    await store.save(CounterState(3, 8))

    assert await store.load() == CounterState(3, 8)
    assert json.loads(state_path.read_text(encoding="utf-8"))["stitchCounter"]
