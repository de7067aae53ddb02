from __future__ import annotations

from datetime import UTC, datetime

import pydantic
import pytest

from pything.events import UpdateSource, ValueUpdate


def test_naive_observed_at_is_made_utc() -> None:
    update = ValueUpdate(value=1, observed_at=datetime(2026, 1, 1, 12, 30, 5))
    assert update.observed_at.tzinfo is UTC
    assert update.timestamp == "2026-01-01T12:30:05+00:00"


def test_defaults() -> None:
    update = ValueUpdate(value="on")
    assert update.previous is None
    assert update.source == UpdateSource.EXTERNAL
    assert update.observed_at.tzinfo is not None


def test_update_is_frozen() -> None:
    update = ValueUpdate(value=1, previous=0, source=UpdateSource.SET)
    with pytest.raises(pydantic.ValidationError):
        update.value = 2  # type: ignore[misc]
