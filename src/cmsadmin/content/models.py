"""Content domain models: pure Pydantic v2 data types.

A ContentTypeSchema describes the shape of a record as an ordered list of
FieldDefinitions. A ContentEntry is one record of such a schema, carrying a
draft/published status and a free-form data mapping keyed by field name.

All models are frozen: the stores hand them out as read-only snapshots and
produce new instances on every change. Serialized output uses camelCase
keys (``singularName``, ``createdAt``) to match the admin UI's data shape.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return uuid.uuid4().hex


def freeze(value: Any) -> Any:
    """Return a read-only copy of ``value``, recursing into mappings and lists."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of ``freeze``, for serialization."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value


class _Frozen(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FieldKind(StrEnum):
    """Kind of value a field slot holds."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SELECT = "select"
    RELATION = "relation"
    MEDIA = "media"


class EntryStatus(StrEnum):
    """Publication status of an entry."""

    DRAFT = "draft"
    PUBLISHED = "published"


class FieldDefinition(_Frozen):
    """One named, typed slot within a content type.

    ``options`` is only kept for select fields and ``relation`` only for
    relation fields; whichever does not apply to ``kind`` is dropped.
    """

    id: str = Field(default_factory=new_id)
    name: str
    kind: FieldKind = Field(default=FieldKind.TEXT, alias="type")
    required: bool = False
    options: tuple[str, ...] | None = None
    relation: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _drop_inapplicable(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        kind = data.get("type", data.get("kind", FieldKind.TEXT))
        if kind != FieldKind.SELECT:
            data.pop("options", None)
        if kind != FieldKind.RELATION:
            data.pop("relation", None)
        return data


class SchemaDraft(_Frozen):
    """Caller-supplied content type definition, before an id is assigned."""

    name: str
    singular_name: str
    plural_name: str
    fields: tuple[FieldDefinition, ...] = ()

    @field_validator("name", "singular_name", "plural_name")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("fields")
    @classmethod
    def _unique_field_ids(
        cls, fields: tuple[FieldDefinition, ...]
    ) -> tuple[FieldDefinition, ...]:
        seen: set[str] = set()
        for f in fields:
            if f.id in seen:
                raise ValueError(f"duplicate field id {f.id!r}")
            seen.add(f.id)
        return fields

    def field(self, name: str) -> FieldDefinition | None:
        """Return the field called ``name``, if any."""
        for f in self.fields:
            if f.name == name:
                return f
        return None


class ContentTypeSchema(SchemaDraft):
    """A stored content type: a SchemaDraft with its identity."""

    id: str

    @classmethod
    def from_draft(cls, schema_id: str, draft: SchemaDraft) -> ContentTypeSchema:
        return cls(
            id=schema_id,
            name=draft.name,
            singular_name=draft.singular_name,
            plural_name=draft.plural_name,
            fields=draft.fields,
        )


class ContentEntry(_Frozen):
    """One record of a content type.

    ``content_type`` holds the owning schema's singular name. Values in
    ``data`` are not checked against the schema here. ``data`` is stored as
    a read-only copy: nested mappings become ``MappingProxyType`` and lists
    become tuples. Dumping the model turns them back into dicts and lists.
    """

    id: str
    content_type: str
    status: EntryStatus = EntryStatus.DRAFT
    data: Mapping[str, Any] = Field(default_factory=lambda: MappingProxyType({}))
    created_at: datetime
    updated_at: datetime

    @field_validator("data")
    @classmethod
    def _freeze_data(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return freeze(value)

    @field_serializer("data")
    def _thaw_data(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return thaw(value)

    @model_validator(mode="after")
    def _updated_not_before_created(self) -> ContentEntry:
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self


class EntryFilter(_Frozen):
    """Selection criteria for listing entries. Unset criteria match all."""

    content_type: str | None = None
    status: EntryStatus | None = None

    def matches(self, entry: ContentEntry) -> bool:
        if self.content_type is not None and entry.content_type != self.content_type:
            return False
        if self.status is not None and entry.status != self.status:
            return False
        return True


class DomainState(_Frozen):
    """Point-in-time view of every content type and entry."""

    schemas: tuple[ContentTypeSchema, ...] = ()
    entries: tuple[ContentEntry, ...] = ()
