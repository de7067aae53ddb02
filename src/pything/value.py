"""An observable, settable property value.

A :class:`Value` sits between the representation of a thing's property and
the implementation that actually owns the state (a sensor, a relay, a
remote service).  Writes go out through an optional *forwarder*, reads can
be refreshed through an optional *requestor*, and every effective change,
whatever its origin, is announced to the registered observers.
"""

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from pything._redact import value_for_log
from pything.config import ValueComparison, ValueConfig
from pything.events import UpdateSource, ValueUpdate

_logger = logging.getLogger(__name__)

T = TypeVar("T")

Forwarder = Callable[[T], Awaitable[None] | None]
"""Pushes a new value to the backing system; may be sync or async."""

Requestor = Callable[[], T | Awaitable[T]]
"""Pulls the current value from the backing system; may be sync or async."""

Observer = Callable[[T], None]


class Value(Generic[T]):
    """A property value kept in sync with the thing that backs it.

    Usage::

        async def write_relay(on: bool) -> None:
            await relay.switch(on)

        power = Value(False, write_relay)
        power.on_change(lambda on: print("power is now", on))
        await power.set(True)

    Parameters
    ----------
    initial_value
        The value reported until the first change is committed.
    value_forwarder
        Called with the new value on :meth:`set`, before it is stored.
        Whatever it raises propagates out of :meth:`set`.
    value_requestor
        Called on :meth:`get` to read the current value from the thing.
        Whatever it raises propagates out of :meth:`get`.
    config
        Comparison and logging settings; defaults to :class:`ValueConfig`.

    Observers are isolated from one another: an observer that raises is
    logged with its traceback and the remaining observers are still called.
    The change stays committed and the :meth:`set` or :meth:`get` that
    triggered it does not fail.
    """

    def __init__(
        self,
        initial_value: T,
        value_forwarder: Forwarder[T] | None = None,
        value_requestor: Requestor[T] | None = None,
        *,
        config: ValueConfig | None = None,
    ) -> None:
        self._last_value: T = initial_value
        self._forwarder = value_forwarder
        self._requestor = value_requestor
        self._config = config or ValueConfig()
        self._observers: list[Observer[T]] = []
        self._last_update: ValueUpdate | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._last_value!r})"

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def last_value(self) -> T:
        """The last known value, without consulting the requestor."""
        return self._last_value

    @property
    def last_update(self) -> ValueUpdate | None:
        """The most recent committed change, or ``None`` if there was none."""
        return self._last_update

    @property
    def config(self) -> ValueConfig:
        return self._config

    @property
    def has_forwarder(self) -> bool:
        return self._forwarder is not None

    @property
    def has_requestor(self) -> bool:
        return self._requestor is not None

    @property
    def listener_count(self) -> int:
        return len(self._observers)

    # ------------------------------------------------------------------
    # Reads and writes
    # ------------------------------------------------------------------

    async def set(self, value: T) -> None:
        """Set a new value for this thing.

        The forwarder (if any) runs first; the value is only stored, and
        observers only notified, once it has completed successfully.
        """
        if self._forwarder is not None:
            try:
                result = self._forwarder(value)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                _logger.debug("Value forwarder failed for %s", value_for_log(value), exc_info=True)
                raise
        self.notify_of_external_update(value, source=UpdateSource.SET)

    async def get(self) -> T:
        """Return the current value.

        With a requestor, the thing is asked for its value first and the
        answer goes through the same change detection as a write.  A
        requestor answering ``None`` leaves the last known value in place.

        The stored value is returned rather than the requestor's raw answer,
        so an answer equal to the stored one (``1.0`` against ``1``) yields
        the stored object.
        """
        if self._requestor is None:
            return self._last_value

        try:
            result = self._requestor()
            if inspect.isawaitable(result):
                result = await result
        except Exception:
            _logger.debug("Value requestor failed", exc_info=True)
            raise
        self.notify_of_external_update(result, source=UpdateSource.REQUEST)
        return self._last_value

    def notify_of_external_update(
        self,
        value: T | None,
        *,
        source: UpdateSource = UpdateSource.EXTERNAL,
    ) -> bool:
        """Commit *value* and notify observers if it is an actual change.

        This is the only place the stored value is replaced.  Device
        implementations call it directly when the thing reports a new value
        on its own (a sensor reading, a physical button press).

        Returns ``True`` when the value was committed.
        """
        if value is None or self._is_same(value):
            return False

        previous = self._last_value
        self._last_value = value
        self._last_update = ValueUpdate(value=value, previous=previous, source=source)

        if self._config.log_updates:
            max_string = self._config.log_max_string
            _logger.debug(
                "Value changed source=%s value=%s previous=%s",
                source,
                value_for_log(value, max_string=max_string),
                value_for_log(previous, max_string=max_string),
            )

        self._emit(value)
        return True

    def _is_same(self, value: T) -> bool:
        if self._config.comparison is ValueComparison.IDENTITY:
            return value is self._last_value
        return bool(value == self._last_value)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def on_change(self, handler: Observer[T]) -> Callable[[], None]:
        """Call *handler* with the new value after every committed change.

        Returns a callable that removes this registration again.
        """
        self._observers.append(handler)

        def _unsubscribe() -> None:
            self.remove_listener(handler)

        return _unsubscribe

    def remove_listener(self, handler: Observer[T]) -> None:
        """Remove one registration of *handler*; unknown handlers are ignored."""
        with contextlib.suppress(ValueError):
            self._observers.remove(handler)

    def remove_all_listeners(self) -> None:
        self._observers.clear()

    def _emit(self, value: T) -> None:
        # Snapshot: handlers may subscribe or unsubscribe while being called.
        for handler in tuple(self._observers):
            try:
                handler(value)
            except Exception:
                _logger.warning("Value observer %r failed", handler, exc_info=True)
