"""Preferences store: flat toggle/set transitions over a Preferences snapshot.

Theme and direction are written to a KeyValueStore under the ``theme`` and
``direction`` keys right after each change and read back at construction.
The in-memory snapshot stays authoritative: a failed write is logged and
otherwise ignored, and an unknown stored value falls back to the default.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, TypeVar

from cmsadmin.preferences.models import Direction, Page, Preferences, Theme
from cmsadmin.preferences.storage import KeyValueStore, MemoryKeyValueStore
from cmsadmin.shared.observable import Observable

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
DIRECTION_KEY = "direction"

E = TypeVar("E", bound=StrEnum)


def _read_enum(storage: KeyValueStore, key: str, enum_cls: type[E], default: E) -> E:
    try:
        raw = storage.get(key)
    except Exception:
        logger.warning("Could not read preference %r, using default", key, exc_info=True)
        return default
    if raw is None:
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        logger.info("Ignoring unknown %s value %r", key, raw)
        return default


def load_preferences(storage: KeyValueStore) -> Preferences:
    """Initial snapshot: persisted theme/direction, defaults for the rest."""
    defaults = Preferences()
    return Preferences(
        theme=_read_enum(storage, THEME_KEY, Theme, defaults.theme),
        direction=_read_enum(storage, DIRECTION_KEY, Direction, defaults.direction),
    )


class PreferencesStore(Observable[Preferences]):
    """Display and navigation preferences for one admin session."""

    def __init__(self, storage: KeyValueStore | None = None) -> None:
        self._storage = storage if storage is not None else MemoryKeyValueStore()
        super().__init__(load_preferences(self._storage))

    @property
    def storage(self) -> KeyValueStore:
        return self._storage

    def toggle_theme(self) -> Preferences:
        return self.set_theme(self.snapshot.theme.toggled())

    def set_theme(self, theme: Theme | str) -> Preferences:
        theme = Theme(theme)
        prefs = self._transition(theme=theme)
        self._persist(THEME_KEY, theme.value)
        return prefs

    def toggle_direction(self) -> Preferences:
        return self.set_direction(self.snapshot.direction.toggled())

    def set_direction(self, direction: Direction | str) -> Preferences:
        direction = Direction(direction)
        prefs = self._transition(direction=direction)
        self._persist(DIRECTION_KEY, direction.value)
        return prefs

    def toggle_sidebar(self) -> Preferences:
        return self._transition(sidebar_open=not self.snapshot.sidebar_open)

    def set_current_page(self, page: Page | str) -> Preferences:
        return self._transition(current_page=Page(page))

    def set_busy(self, busy: bool) -> Preferences:
        return self._transition(busy=bool(busy))

    def set_error(self, message: str | None) -> Preferences:
        return self._transition(error=message)

    def _transition(self, **changes: Any) -> Preferences:
        prefs = self.snapshot.model_copy(update=changes)
        self._publish(prefs)
        return prefs

    def _persist(self, key: str, value: str) -> None:
        try:
            self._storage.set(key, value)
        except Exception:
            logger.warning("Could not persist preference %s=%s", key, value, exc_info=True)
