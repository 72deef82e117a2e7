"""Synchronous publish/subscribe holder for immutable state snapshots.

Each store owns one ``Observable``. Mutations build a new snapshot and hand
it to ``_publish``, which swaps it in and notifies every listener that was
registered when the broadcast started. Readers therefore only ever see the
old snapshot or the new one.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")

Listener = Callable[[S], None]
Unsubscribe = Callable[[], None]


class Observable(Generic[S]):
    """Holds the current snapshot and the listeners interested in it."""

    def __init__(self, initial: S) -> None:
        self._snapshot = initial
        self._listeners: dict[int, Listener] = {}
        self._tokens = itertools.count()

    @property
    def snapshot(self) -> S:
        """The current immutable snapshot."""
        return self._snapshot

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Register ``listener`` and return a handle that removes it.

        The handle may be called any number of times. Subscribing the same
        callable twice yields two independent registrations.
        """
        token = next(self._tokens)
        self._listeners[token] = listener

        def unsubscribe() -> None:
            self._listeners.pop(token, None)

        return unsubscribe

    def _publish(self, snapshot: S) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners.values()):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("State listener %r failed", listener)
