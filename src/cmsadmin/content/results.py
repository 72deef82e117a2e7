"""Tagged results for lookups that may miss.

A missing id is an ordinary outcome, so store operations return a
``NotFound`` value rather than raising. Callers branch on it::

    result = store.update_entry(entry_id, {"title": "Hi"})
    if is_not_found(result):
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeGuard


@dataclass(frozen=True, slots=True)
class NotFound:
    """No schema or entry has the requested id."""

    kind: Literal["schema", "entry"]
    id: str

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.kind} {self.id!r} not found"


def is_not_found(result: object) -> TypeGuard[NotFound]:
    return isinstance(result, NotFound)
