"""Schema-aware validation layered on top of the permissive DomainStore.

The core store accepts any entry data. ``ValidatingDomainStore`` wraps it and
checks entry data against the content type's field definitions before a
create or update reaches the store.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from cmsadmin.content.models import (
    ContentEntry,
    ContentTypeSchema,
    EntryStatus,
    FieldDefinition,
    FieldKind,
)
from cmsadmin.content.results import NotFound
from cmsadmin.content.store import DomainStore, split_status
from cmsadmin.errors import EntryValidationError, UnknownContentTypeError


class FieldIssue(BaseModel):
    """A single problem with one field's value."""

    code: str
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _check_value(field: FieldDefinition, value: Any) -> FieldIssue | None:
    def issue(code: str, message: str) -> FieldIssue:
        return FieldIssue(code=code, field=field.name, message=message)

    kind = field.kind
    if kind in (FieldKind.TEXT, FieldKind.TEXTAREA):
        if not isinstance(value, str):
            return issue("TYPE_MISMATCH", "must be a string")
    elif kind == FieldKind.NUMBER:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            return issue("TYPE_MISMATCH", "must be a number")
    elif kind == FieldKind.BOOLEAN:
        if not isinstance(value, bool):
            return issue("TYPE_MISMATCH", "must be a boolean")
    elif kind == FieldKind.SELECT:
        allowed = field.options or ()
        if value not in allowed:
            return issue("INVALID_OPTION", f"must be one of {list(allowed)}")
    elif kind in (FieldKind.RELATION, FieldKind.MEDIA):
        if not isinstance(value, str):
            return issue("TYPE_MISMATCH", "must be a reference string")
    return None


def validate_entry_data(
    schema: ContentTypeSchema,
    data: Mapping[str, Any],
    *,
    partial: bool = False,
) -> list[FieldIssue]:
    """Check ``data`` against ``schema``'s fields.

    Required fields must be present and non-blank; with ``partial`` only the
    required fields present in ``data`` are checked. ``None`` values skip
    the kind check. Keys that name no field are accepted.
    """
    issues: list[FieldIssue] = []
    for field in schema.fields:
        present = field.name in data
        value = data.get(field.name)
        if field.required and (present or not partial) and _is_blank(value):
            issues.append(
                FieldIssue(code="REQUIRED_FIELD", field=field.name, message="is required")
            )
            continue
        if value is None:
            continue
        found = _check_value(field, value)
        if found is not None:
            issues.append(found)
    return issues


class ValidatingDomainStore:
    """DomainStore wrapper that rejects entry data its schema does not allow.

    Creates are checked in full. Updates check only the fields being changed,
    so a required field may be left out of a patch but not blanked.

    Raises:
        UnknownContentTypeError: the entry's content type is not defined.
        EntryValidationError: the data breaks a field definition.
    """

    def __init__(self, store: DomainStore) -> None:
        self._store = store

    @property
    def store(self) -> DomainStore:
        return self._store

    def __getattr__(self, name: str) -> Any:
        return getattr(self._store, name)

    def _schema_for(self, content_type: str) -> ContentTypeSchema:
        schema = self._store.get_schema_by_singular_name(content_type)
        if isinstance(schema, NotFound):
            raise UnknownContentTypeError(content_type)
        return schema

    def create_entry(self, content_type: str, data: Mapping[str, Any]) -> ContentEntry:
        schema = self._schema_for(content_type)
        issues = validate_entry_data(schema, data)
        if issues:
            raise EntryValidationError(content_type, issues)
        return self._store.create_entry(content_type, data)

    def update_entry(
        self,
        entry_id: str,
        data: Mapping[str, Any] | None = None,
        *,
        status: EntryStatus | str | None = None,
    ) -> ContentEntry | NotFound:
        current = self._store.get_entry(entry_id)
        if isinstance(current, NotFound):
            return current
        patch, _ = split_status(data)
        if patch:
            schema = self._schema_for(current.content_type)
            issues = validate_entry_data(schema, patch, partial=True)
            if issues:
                raise EntryValidationError(current.content_type, issues)
        return self._store.update_entry(entry_id, data, status=status)
