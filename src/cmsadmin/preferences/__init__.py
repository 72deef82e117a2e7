"""Preferences: theme, text direction and navigation state."""

from cmsadmin.preferences.models import Direction, Page, Preferences, Theme
from cmsadmin.preferences.storage import (
    PREFERENCES_FILENAME,
    JsonFileKeyValueStore,
    KeyValueStore,
    MemoryKeyValueStore,
)
from cmsadmin.preferences.store import (
    DIRECTION_KEY,
    THEME_KEY,
    PreferencesStore,
    load_preferences,
)

__all__ = [
    "DIRECTION_KEY",
    "PREFERENCES_FILENAME",
    "THEME_KEY",
    "Direction",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "Page",
    "Preferences",
    "PreferencesStore",
    "Theme",
    "load_preferences",
]
