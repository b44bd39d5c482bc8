"""Validation of the stored counter record.

The record is JSON ``{"left": int, "right": int}``. A missing field
counts as 0. Anything else that does not fit (not JSON, not an object,
non-integer or out-of-range values) makes the whole record malformed.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from stitchcount.core.models import CounterState

logger = logging.getLogger(__name__)


class StoredCounter(BaseModel):
    """Schema of the persisted record."""

    model_config = ConfigDict(strict=True, extra="ignore")

    left: int = Field(default=0, ge=0, le=9)
    right: int = Field(default=0, ge=0, le=9)


def encode_record(state: CounterState) -> str:
    """Serialize a counter state for storage."""
    return StoredCounter(left=state.left, right=state.right).model_dump_json()


def decode_record(raw: str | bytes | None) -> CounterState | None:
    """Parse a stored record.

    Returns:
        The CounterState, or None if the record is absent or malformed.
    """
    if raw is None:
        return None
    try:
        record = StoredCounter.model_validate_json(raw)
    except ValidationError as e:
        logger.warning(f"Discarding malformed counter record: {e.error_count()} error(s)")
        return None
    return CounterState(left=record.left, right=record.right)


__all__ = ["StoredCounter", "decode_record", "encode_record"]
