"""JSON file state store adapter.

Implements PersistencePort as a small JSON object on disk mapping
storage keys to encoded records, the way a browser's localStorage
holds string values under string keys.
"""

import asyncio
import json
import logging
import os
from pathlib import Path

from stitchcount.core.models import CounterState
from stitchcount.core.ports import PersistencePort

from .record import decode_record, encode_record

logger = logging.getLogger(__name__)


class JsonFileStateStore(PersistencePort):
    """Stores the counter record in a JSON file."""

    def __init__(self, path: str, key: str = "stitchCounter"):
        """Initialize the file store.

        Args:
            path: Path of the JSON file. Parent directories are created
                if missing.
            key: Key of the slot holding the counter record.
        """
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.key = key
        self._lock = asyncio.Lock()

    def _read_slots(self) -> dict[str, str]:
        """Read all slots. A missing or unreadable file has no slots."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError:
            logger.warning(f"State file {self.path} is not valid UTF-8, ignoring it")
            return {}
        try:
            slots = json.loads(text)
        except json.JSONDecodeError:
            logger.warning(f"State file {self.path} is not valid JSON, ignoring it")
            return {}
        if not isinstance(slots, dict):
            logger.warning(f"State file {self.path} is not a JSON object, ignoring it")
            return {}
        return slots

    def _write_slots(self, slots: dict[str, str]) -> None:
        """Write all slots atomically via a temp file and rename."""
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(slots, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp_path, self.path)

    async def load(self) -> CounterState | None:
        async with self._lock:
            slots = await asyncio.to_thread(self._read_slots)

        value = slots.get(self.key)
        if value is not None and not isinstance(value, str):
            logger.warning(f"Slot {self.key!r} does not hold a string, ignoring it")
            return None
        return decode_record(value)

    async def save(self, state: CounterState) -> None:
        async with self._lock:
            slots = await asyncio.to_thread(self._read_slots)
            slots[self.key] = encode_record(state)
            await asyncio.to_thread(self._write_slots, slots)
