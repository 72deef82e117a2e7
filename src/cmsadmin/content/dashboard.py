"""Read model behind the admin dashboard: headline counts and recent entries."""

from __future__ import annotations

from pydantic import BaseModel

from cmsadmin.content.models import ContentEntry, DomainState, EntryStatus

RECENT_LIMIT = 5


class DashboardStats(BaseModel):
    total_entries: int = 0
    published: int = 0
    drafts: int = 0
    content_types: int = 0

    @classmethod
    def from_state(cls, state: DomainState) -> DashboardStats:
        return cls(
            total_entries=len(state.entries),
            published=sum(1 for e in state.entries if e.status == EntryStatus.PUBLISHED),
            drafts=sum(1 for e in state.entries if e.status == EntryStatus.DRAFT),
            content_types=len(state.schemas),
        )


def entry_title(entry: ContentEntry) -> str:
    """Display title: the ``title`` value, else ``name``, else "Untitled"."""
    for key in ("title", "name"):
        value = entry.data.get(key)
        if value:
            return str(value)
    return "Untitled"


def recent_entries(state: DomainState, limit: int = RECENT_LIMIT) -> list[ContentEntry]:
    """The first ``limit`` entries in collection order."""
    if limit <= 0:
        return []
    return list(state.entries[:limit])
