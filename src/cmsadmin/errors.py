"""Exceptions raised by cms-admin.

Missing ids are not errors: store operations return a ``NotFound`` value
instead (see :mod:`cmsadmin.content.results`). The exceptions here are
raised by the optional validating layer and by callers that break an
operation's input contract.
"""

from __future__ import annotations


class CmsAdminError(Exception):
    """Base class for all cms-admin errors."""


class UnknownContentTypeError(CmsAdminError):
    """An entry referenced a content type that is not defined."""

    def __init__(self, content_type: str) -> None:
        self.content_type = content_type
        super().__init__(f"Unknown content type: {content_type!r}")


class EntryValidationError(CmsAdminError):
    """Entry data does not satisfy its content type's field definitions."""

    def __init__(self, content_type: str, issues: list) -> None:
        self.content_type = content_type
        self.issues = list(issues)
        summary = "; ".join(str(issue) for issue in self.issues)
        super().__init__(f"Invalid {content_type} entry: {summary}")
