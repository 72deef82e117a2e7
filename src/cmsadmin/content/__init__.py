"""Content domain: content type schemas, entries and their store.

The DomainStore is the single owner of both collections. It stays
permissive about entry data; ValidatingDomainStore adds schema checks.
"""

from cmsadmin.content.dashboard import DashboardStats, entry_title, recent_entries
from cmsadmin.content.models import (
    ContentEntry,
    ContentTypeSchema,
    DomainState,
    EntryFilter,
    EntryStatus,
    FieldDefinition,
    FieldKind,
    SchemaDraft,
)
from cmsadmin.content.results import NotFound, is_not_found
from cmsadmin.content.store import DomainStore, EntryView, SchemaDeletePolicy
from cmsadmin.content.validation import (
    FieldIssue,
    ValidatingDomainStore,
    validate_entry_data,
)

__all__ = [
    "ContentEntry",
    "ContentTypeSchema",
    "DashboardStats",
    "DomainState",
    "DomainStore",
    "EntryFilter",
    "EntryStatus",
    "EntryView",
    "FieldDefinition",
    "FieldIssue",
    "FieldKind",
    "NotFound",
    "SchemaDeletePolicy",
    "SchemaDraft",
    "ValidatingDomainStore",
    "entry_title",
    "is_not_found",
    "recent_entries",
    "validate_entry_data",
]
