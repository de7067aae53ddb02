"""Custom exception hierarchy for pything."""

from __future__ import annotations

from typing import Any


class PyThingError(Exception):
    """Base exception for all pything errors."""


class PyThingConfigError(PyThingError):
    """Invalid or missing configuration."""


class ValueForwardError(PyThingError):
    """The backing system rejected a forwarded value.

    Forwarders raise this when a write cannot be applied to the physical
    or virtual thing.  :meth:`pything.value.Value.set` re-raises it to the
    caller untouched; the stored value is left as it was.
    """

    def __init__(self, message: str, *, value: Any = None) -> None:
        self.value = value
        super().__init__(message)


class ValueRequestError(PyThingError):
    """The backing system could not report its current value.

    Raised by requestors and surfaced by :meth:`pything.value.Value.get`.
    """
