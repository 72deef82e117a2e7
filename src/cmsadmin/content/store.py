"""In-memory domain store for content types and entries.

Holds the authoritative schema and entry collections as an immutable
DomainState snapshot. Every mutation builds a new snapshot and broadcasts
it to subscribers; nothing here touches disk or the network.

Lookups that miss return a ``NotFound`` value instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from cmsadmin.content.models import (
    ContentEntry,
    ContentTypeSchema,
    DomainState,
    EntryFilter,
    EntryStatus,
    SchemaDraft,
    new_id,
)
from cmsadmin.content.results import NotFound
from cmsadmin.shared.observable import Observable

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]

# Patch key that sets ContentEntry.status rather than a data field.
STATUS_KEY = "status"


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


class SchemaDeletePolicy(StrEnum):
    """What happens to entries when their content type is deleted."""

    RETAIN = "retain"
    CASCADE = "cascade"


class EntryView:
    """Lazy, restartable view over the entries of one snapshot.

    Iterating walks the snapshot again each time, yielding matching entries
    in insertion order. Later store mutations do not affect an existing view.
    """

    def __init__(self, entries: tuple[ContentEntry, ...], criteria: EntryFilter) -> None:
        self._entries = entries
        self._criteria = criteria

    def __iter__(self) -> Iterator[ContentEntry]:
        return (e for e in self._entries if self._criteria.matches(e))

    def count(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"EntryView({self._criteria!r})"


class DomainStore(Observable[DomainState]):
    """CRUD store for content type schemas and content entries.

    Args:
        state: Initial snapshot (empty by default).
        clock: Source of timezone-aware timestamps.
        id_factory: Source of fresh opaque ids.
        on_schema_delete: Entry handling when a schema is deleted.
    """

    def __init__(
        self,
        state: DomainState | None = None,
        *,
        clock: Clock = utc_now,
        id_factory: IdFactory = new_id,
        on_schema_delete: SchemaDeletePolicy | str = SchemaDeletePolicy.RETAIN,
    ) -> None:
        super().__init__(state if state is not None else DomainState())
        self._clock = clock
        self._new_id = id_factory
        self.on_schema_delete = SchemaDeletePolicy(on_schema_delete)

    # ── Read operations ──────────────────────────────────────────

    @property
    def schemas(self) -> tuple[ContentTypeSchema, ...]:
        return self.snapshot.schemas

    @property
    def entries(self) -> tuple[ContentEntry, ...]:
        return self.snapshot.entries

    def get_schema(self, schema_id: str) -> ContentTypeSchema | NotFound:
        for schema in self.snapshot.schemas:
            if schema.id == schema_id:
                return schema
        return NotFound("schema", schema_id)

    def get_schema_by_singular_name(self, singular_name: str) -> ContentTypeSchema | NotFound:
        """Resolve the schema an entry points at through ``content_type``."""
        for schema in self.snapshot.schemas:
            if schema.singular_name == singular_name:
                return schema
        return NotFound("schema", singular_name)

    def get_entry(self, entry_id: str) -> ContentEntry | NotFound:
        for entry in self.snapshot.entries:
            if entry.id == entry_id:
                return entry
        return NotFound("entry", entry_id)

    def list_entries(
        self,
        criteria: EntryFilter | None = None,
        *,
        content_type: str | None = None,
        status: EntryStatus | str | None = None,
    ) -> EntryView:
        """Return entries, optionally filtered by content type and/or status.

        ``criteria`` and the keyword filters are alternatives; keywords are
        ignored when ``criteria`` is given.
        """
        if criteria is None:
            criteria = EntryFilter(content_type=content_type, status=status)
        return EntryView(self.snapshot.entries, criteria)

    def orphaned_entries(self) -> tuple[ContentEntry, ...]:
        """Entries whose content type no longer names a defined schema."""
        known = {s.singular_name for s in self.snapshot.schemas}
        return tuple(e for e in self.snapshot.entries if e.content_type not in known)

    # ── Schema operations ────────────────────────────────────────

    def define_schema(self, draft: SchemaDraft | Mapping[str, Any]) -> ContentTypeSchema:
        """Store a new content type under a fresh id."""
        draft = _as_draft(draft)
        schema = ContentTypeSchema.from_draft(self._new_id(), draft)
        state = self.snapshot
        self._commit(state.model_copy(update={"schemas": (*state.schemas, schema)}))
        logger.debug("Defined content type %s (%s)", schema.singular_name, schema.id)
        return schema

    def update_schema(
        self, schema_id: str, replacement: SchemaDraft | Mapping[str, Any]
    ) -> ContentTypeSchema | NotFound:
        """Replace a content type wholesale, keeping its id."""
        replacement = _as_draft(replacement)
        state = self.snapshot
        if not any(s.id == schema_id for s in state.schemas):
            return NotFound("schema", schema_id)
        updated = ContentTypeSchema.from_draft(schema_id, replacement)
        schemas = tuple(updated if s.id == schema_id else s for s in state.schemas)
        self._commit(state.model_copy(update={"schemas": schemas}))
        logger.debug("Updated content type %s", schema_id)
        return updated

    def delete_schema(self, schema_id: str) -> None:
        """Remove a content type. Deleting an unknown id does nothing."""
        state = self.snapshot
        target = self.get_schema(schema_id)
        if isinstance(target, NotFound):
            return
        update: dict[str, Any] = {
            "schemas": tuple(s for s in state.schemas if s.id != schema_id)
        }
        if self.on_schema_delete is SchemaDeletePolicy.CASCADE:
            update["entries"] = tuple(
                e for e in state.entries if e.content_type != target.singular_name
            )
        self._commit(state.model_copy(update=update))
        logger.debug(
            "Deleted content type %s (entries: %s)", schema_id, self.on_schema_delete.value
        )

    # ── Entry operations ─────────────────────────────────────────

    def create_entry(self, content_type: str, data: Mapping[str, Any]) -> ContentEntry:
        """Store a new draft entry of ``content_type``."""
        now = self._clock()
        entry = ContentEntry(
            id=self._new_id(),
            content_type=content_type,
            status=EntryStatus.DRAFT,
            data=dict(data),
            created_at=now,
            updated_at=now,
        )
        state = self.snapshot
        self._commit(state.model_copy(update={"entries": (*state.entries, entry)}))
        logger.debug("Created %s entry %s", content_type, entry.id)
        return entry

    def update_entry(
        self,
        entry_id: str,
        data: Mapping[str, Any] | None = None,
        *,
        status: EntryStatus | str | None = None,
    ) -> ContentEntry | NotFound:
        """Merge ``data`` into an entry and optionally change its status.

        Keys in ``data`` overwrite existing values; other keys are kept. A
        ``"status"`` key in ``data`` sets the entry status, as the ``status``
        keyword does; the keyword wins when both are given.
        """
        current = self.get_entry(entry_id)
        if isinstance(current, NotFound):
            return current
        patch, patched_status = split_status(data)
        if status is None:
            status = patched_status
        changes: dict[str, Any] = {
            "updated_at": max(self._clock(), current.created_at),
        }
        if patch:
            changes["data"] = {**current.data, **patch}
        if status is not None:
            changes["status"] = EntryStatus(status)
        updated = ContentEntry.model_validate({**dict(current), **changes})
        state = self.snapshot
        entries = tuple(updated if e.id == entry_id else e for e in state.entries)
        self._commit(state.model_copy(update={"entries": entries}))
        logger.debug("Updated entry %s", entry_id)
        return updated

    def publish_entry(self, entry_id: str) -> ContentEntry | NotFound:
        return self.update_entry(entry_id, status=EntryStatus.PUBLISHED)

    def unpublish_entry(self, entry_id: str) -> ContentEntry | NotFound:
        return self.update_entry(entry_id, status=EntryStatus.DRAFT)

    def delete_entry(self, entry_id: str) -> None:
        """Remove an entry. Deleting an unknown id does nothing."""
        state = self.snapshot
        entries = tuple(e for e in state.entries if e.id != entry_id)
        if len(entries) == len(state.entries):
            return
        self._commit(state.model_copy(update={"entries": entries}))
        logger.debug("Deleted entry %s", entry_id)

    # ── Bulk operations ──────────────────────────────────────────

    def replace_state(self, state: DomainState) -> None:
        """Swap in a whole new set of schemas and entries, e.g. a loaded export."""
        self._commit(state)
        logger.debug(
            "Replaced state: %d content types, %d entries",
            len(state.schemas),
            len(state.entries),
        )

    # ── Private helpers ──────────────────────────────────────────

    def _commit(self, state: DomainState) -> None:
        self._publish(state)


def _as_draft(value: SchemaDraft | Mapping[str, Any]) -> SchemaDraft:
    if isinstance(value, SchemaDraft):
        return value
    return SchemaDraft.model_validate(dict(value))


def split_status(
    data: Mapping[str, Any] | None,
) -> tuple[dict[str, Any], EntryStatus | str | None]:
    """Separate the ``status`` key of an entry patch from its data fields."""
    patch = dict(data or {})
    return patch, patch.pop(STATUS_KEY, None)
