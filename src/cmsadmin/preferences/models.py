"""Preference data types: display settings and navigation state."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class Direction(StrEnum):
    """Text direction of the admin UI."""

    LTR = "ltr"
    RTL = "rtl"

    def toggled(self) -> Direction:
        return Direction.RTL if self is Direction.LTR else Direction.LTR


class Page(StrEnum):
    """Top-level admin pages reachable from the sidebar."""

    DASHBOARD = "dashboard"
    CONTENT_TYPES = "content-types"
    CONTENT_MANAGER = "content-manager"
    MEDIA = "media"
    ROLES = "roles"
    SETTINGS = "settings"


class Preferences(BaseModel):
    """Snapshot of the preferences store.

    Only ``theme`` and ``direction`` survive a restart; the rest is
    session state.
    """

    model_config = ConfigDict(frozen=True)

    theme: Theme = Theme.LIGHT
    direction: Direction = Direction.LTR
    sidebar_open: bool = True
    current_page: Page = Page.DASHBOARD
    busy: bool = False
    error: str | None = None
