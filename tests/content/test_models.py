"""Tests for content domain models."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from cmsadmin.content.models import (
    ContentEntry,
    ContentTypeSchema,
    EntryFilter,
    EntryStatus,
    FieldDefinition,
    FieldKind,
    SchemaDraft,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class TestFieldKind:
    def test_all_values(self):
        values = {k.value for k in FieldKind}
        assert values == {
            "text", "textarea", "number", "boolean", "select", "relation", "media",
        }


class TestEntryStatus:
    def test_enum_values(self):
        assert EntryStatus.DRAFT == "draft"
        assert EntryStatus.PUBLISHED == "published"


class TestFieldDefinition:
    def test_defaults(self):
        field = FieldDefinition(name="title")
        assert field.kind == FieldKind.TEXT
        assert field.required is False
        assert field.options is None
        assert field.relation is None
        assert field.id

    def test_accepts_type_key(self):
        field = FieldDefinition.model_validate({"name": "price", "type": "number"})
        assert field.kind == FieldKind.NUMBER

    def test_select_keeps_options(self):
        field = FieldDefinition(name="size", kind=FieldKind.SELECT, options=["s", "m"])
        assert field.options == ("s", "m")

    def test_options_dropped_for_other_kinds(self):
        field = FieldDefinition(name="title", kind=FieldKind.TEXT, options=["a"])
        assert field.options is None

    def test_relation_only_for_relation_kind(self):
        rel = FieldDefinition(name="author", kind=FieldKind.RELATION, relation="author")
        other = FieldDefinition(name="body", kind=FieldKind.TEXTAREA, relation="author")
        assert rel.relation == "author"
        assert other.relation is None

    def test_serializes_kind_as_type(self):
        field = FieldDefinition(id="1", name="title", kind=FieldKind.TEXT, required=True)
        dumped = field.model_dump(by_alias=True, exclude_none=True)
        assert dumped == {"id": "1", "name": "title", "type": "text", "required": True}

    def test_is_frozen(self):
        field = FieldDefinition(name="title")
        with pytest.raises(ValidationError):
            field.name = "other"  # type: ignore[misc]


class TestSchemaDraft:
    def test_accepts_camel_case_input(self):
        draft = SchemaDraft.model_validate(
            {
                "name": "Article",
                "singularName": "article",
                "pluralName": "articles",
                "fields": [{"name": "title", "type": "text", "required": True}],
            }
        )
        assert draft.singular_name == "article"
        assert draft.fields[0].required is True

    def test_names_are_stripped(self):
        draft = SchemaDraft(name=" Article ", singular_name="article ", plural_name=" articles")
        assert draft.name == "Article"
        assert draft.singular_name == "article"
        assert draft.plural_name == "articles"

    @pytest.mark.parametrize("attr", ["name", "singular_name", "plural_name"])
    def test_rejects_blank_labels(self, attr):
        values = {"name": "Article", "singular_name": "article", "plural_name": "articles"}
        values[attr] = "   "
        with pytest.raises(ValidationError):
            SchemaDraft(**values)

    def test_empty_field_list_allowed(self):
        draft = SchemaDraft(name="Tag", singular_name="tag", plural_name="tags")
        assert draft.fields == ()

    def test_rejects_duplicate_field_ids(self):
        with pytest.raises(ValidationError, match="duplicate field id"):
            SchemaDraft(
                name="Article",
                singular_name="article",
                plural_name="articles",
                fields=[FieldDefinition(id="1", name="a"), FieldDefinition(id="1", name="b")],
            )

    def test_field_lookup_by_name(self):
        draft = SchemaDraft(
            name="Article",
            singular_name="article",
            plural_name="articles",
            fields=[FieldDefinition(name="title")],
        )
        assert draft.field("title") is not None
        assert draft.field("missing") is None


class TestContentTypeSchema:
    def test_from_draft_keeps_fields(self):
        draft = SchemaDraft(
            name="Article",
            singular_name="article",
            plural_name="articles",
            fields=[FieldDefinition(id="f1", name="title")],
        )
        schema = ContentTypeSchema.from_draft("abc", draft)
        assert schema.id == "abc"
        assert schema.fields == draft.fields

    def test_camel_case_dump(self):
        schema = ContentTypeSchema(
            id="1", name="Article", singular_name="article", plural_name="articles"
        )
        dumped = schema.model_dump(by_alias=True)
        assert dumped["singularName"] == "article"
        assert dumped["pluralName"] == "articles"


class TestContentEntry:
    def test_defaults_to_draft(self):
        entry = ContentEntry(id="1", content_type="article", created_at=NOW, updated_at=NOW)
        assert entry.status == EntryStatus.DRAFT
        assert entry.data == {}

    def test_rejects_updated_before_created(self):
        with pytest.raises(ValidationError):
            ContentEntry(
                id="1",
                content_type="article",
                created_at=NOW,
                updated_at=NOW - timedelta(seconds=1),
            )

    def test_data_is_read_only_copy(self):
        source = {"title": "Hello", "tags": ["a"]}
        entry = ContentEntry(
            id="1", content_type="article", data=source, created_at=NOW, updated_at=NOW
        )
        source["title"] = "Changed"

        assert entry.data["title"] == "Hello"
        with pytest.raises(TypeError):
            entry.data["title"] = "Changed"
        assert entry.model_dump(mode="json")["data"] == {"title": "Hello", "tags": ["a"]}

    def test_camel_case_dump(self):
        entry = ContentEntry(id="1", content_type="article", created_at=NOW, updated_at=NOW)
        dumped = entry.model_dump(by_alias=True, mode="json")
        assert dumped["contentType"] == "article"
        assert dumped["status"] == "draft"
        assert "createdAt" in dumped and "updatedAt" in dumped


class TestEntryFilter:
    def _entry(self, content_type: str, status: EntryStatus) -> ContentEntry:
        return ContentEntry(
            id="1", content_type=content_type, status=status, created_at=NOW, updated_at=NOW
        )

    def test_empty_filter_matches_everything(self):
        assert EntryFilter().matches(self._entry("article", EntryStatus.PUBLISHED))

    def test_filters_by_type_and_status(self):
        criteria = EntryFilter(content_type="article", status="draft")
        assert criteria.matches(self._entry("article", EntryStatus.DRAFT))
        assert not criteria.matches(self._entry("article", EntryStatus.PUBLISHED))
        assert not criteria.matches(self._entry("product", EntryStatus.DRAFT))
