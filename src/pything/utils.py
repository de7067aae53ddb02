"""Small helpers shared by device layers built on :mod:`pything`."""

from __future__ import annotations

import socket
from datetime import UTC, datetime

import psutil

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Link-local prefixes, never useful for advertising a thing.
_IPV4_LINK_LOCAL = "169.254."
_IPV6_LINK_LOCAL = "fe80:"


def timestamp(now: datetime | None = None) -> str:
    """Return *now* (default: the current time) as ``YYYY-mm-ddTHH:MM:SS+00:00``.

    Naive datetimes are taken to be UTC already; aware ones are converted.
    Fractional seconds are dropped.
    """
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    else:
        now = now.astimezone(UTC)
    return f"{now.strftime(_TIMESTAMP_FORMAT)}+00:00"


def get_addresses() -> list[str]:
    """Return all non link-local IP addresses of this host.

    IPv6 addresses are bracketed (``[::1]``) so they can be dropped straight
    into a URL.  The result is sorted and free of duplicates.
    """
    addresses: set[str] = set()

    for entries in psutil.net_if_addrs().values():
        for entry in entries:
            address = entry.address.lower()
            if entry.family == socket.AF_INET6:
                # macOS and BSD report the zone, e.g. "fe80::1%lo0".
                address = address.split("%", 1)[0]
                if not address.startswith(_IPV6_LINK_LOCAL):
                    addresses.add(f"[{address}]")
            elif entry.family == socket.AF_INET and not address.startswith(_IPV4_LINK_LOCAL):
                addresses.add(address)

    return sorted(addresses)
