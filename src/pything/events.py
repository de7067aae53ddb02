"""Committed value changes.

Every change accepted by :class:`pything.value.Value` is described by a
:class:`ValueUpdate`, regardless of whether it came from a caller's ``set``,
a requestor pull, or a value pushed by the device layer.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pything.utils import timestamp


class UpdateSource(StrEnum):
    SET = "set"
    REQUEST = "request"
    EXTERNAL = "external"


class ValueUpdate(BaseModel):
    """A change committed to a value."""

    model_config = ConfigDict(frozen=True)

    value: Any
    previous: Any = None
    source: UpdateSource = UpdateSource.EXTERNAL
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("observed_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def timestamp(self) -> str:
        """``observed_at`` as ``YYYY-mm-ddTHH:MM:SS+00:00``."""
        return timestamp(self.observed_at)
