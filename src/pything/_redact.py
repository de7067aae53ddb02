"""Render property values for debug logging.

Property values can be anything a device exposes, including credentials
(a Wi-Fi password, an API token) and large binary blobs such as camera
frames.  :func:`value_for_log` produces a bounded, secret-free rendering.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

_SECRET_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "passphrase",
        "psk",
        "pin",
        "secret",
        "token",
        "accesstoken",
        "apikey",
        "authorization",
    }
)

_MAX_DEPTH = 10


def _is_secret_key(key: str) -> bool:
    return key.replace("_", "").replace("-", "").lower() in _SECRET_KEYS


def value_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a copy of *value* that is safe to put in a log record."""
    if _depth > _MAX_DEPTH:
        return "<max-depth>"

    if value is None or isinstance(value, (bool, int, float)):
        return value

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, BaseModel):
        value = value.model_dump()

    if isinstance(value, Mapping):
        return {
            str(k): "<redacted>" if _is_secret_key(str(k)) else value_for_log(v, max_string=max_string, _depth=_depth + 1)
            for k, v in value.items()
        }

    if isinstance(value, Sequence):
        return [value_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    return repr(value)
