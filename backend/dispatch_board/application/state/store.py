"""Observable state container shared by the client-side stores.

A store owns one immutable state snapshot (a frozen dataclass). Setters build
a new snapshot with ``dataclasses.replace`` and notify every subscriber with
``(new_state, previous_state)``. Mutations are synchronous and run to
completion, so no locking is involved.
"""

import dataclasses
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT")

Listener = Callable[[StateT, StateT], None]


class Store(Generic[StateT]):
    """Single-writer state holder with subscription support."""

    def __init__(self, initial_state: StateT):
        self._state = initial_state
        self._listeners: list[Listener[StateT]] = []

    @property
    def state(self) -> StateT:
        return self._state

    def subscribe(self, listener: Listener[StateT]) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def close(self) -> None:
        """Drop all subscribers (application shutdown)."""
        self._listeners.clear()

    def _set(self, **changes: Any) -> None:
        """Commit the new snapshot, then notify every listener.

        A listener that raises does not stop the others; the first error is
        re-raised once all listeners have run. The new state stays committed.
        """
        previous = self._state
        self._state = dataclasses.replace(previous, **changes)

        first_error: Exception | None = None
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            try:
                listener(self._state, previous)
            except Exception as exc:
                logger.exception("Store listener %r failed", listener)
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error
