"""Starter content shown on a fresh admin session."""

from __future__ import annotations

from cmsadmin.content.models import (
    ContentEntry,
    ContentTypeSchema,
    DomainState,
    EntryStatus,
    FieldDefinition,
    FieldKind,
)
from cmsadmin.content.store import Clock, utc_now


def demo_schemas() -> tuple[ContentTypeSchema, ...]:
    article = ContentTypeSchema(
        id="1",
        name="Article",
        singular_name="article",
        plural_name="articles",
        fields=(
            FieldDefinition(id="1", name="title", kind=FieldKind.TEXT, required=True),
            FieldDefinition(id="2", name="content", kind=FieldKind.TEXTAREA, required=True),
            FieldDefinition(id="3", name="published", kind=FieldKind.BOOLEAN),
        ),
    )
    product = ContentTypeSchema(
        id="2",
        name="Product",
        singular_name="product",
        plural_name="products",
        fields=(
            FieldDefinition(id="1", name="name", kind=FieldKind.TEXT, required=True),
            FieldDefinition(id="2", name="price", kind=FieldKind.NUMBER, required=True),
            FieldDefinition(id="3", name="description", kind=FieldKind.TEXTAREA),
        ),
    )
    return (article, product)


def demo_state(clock: Clock = utc_now) -> DomainState:
    """Two content types and two article entries, one of them published."""
    now = clock()
    entries = (
        ContentEntry(
            id="1",
            content_type="article",
            status=EntryStatus.PUBLISHED,
            data={"title": "Getting Started", "content": "Welcome to our CMS", "published": True},
            created_at=now,
            updated_at=now,
        ),
        ContentEntry(
            id="2",
            content_type="article",
            status=EntryStatus.DRAFT,
            data={"title": "Draft Article", "content": "Work in progress", "published": False},
            created_at=now,
            updated_at=now,
        ),
    )
    return DomainState(schemas=demo_schemas(), entries=entries)
