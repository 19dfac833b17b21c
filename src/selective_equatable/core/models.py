"""Core dataclasses shared by the comparator and the matcher."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..errors import NotEquivalentError


@dataclass(slots=True, frozen=True)
class Field:
    """A named, read-only projection from a record to one of its values."""

    name: str
    getter: Callable[[Any], Any]

    def __call__(self, record: Any) -> Any:
        return self.getter(record)


class MismatchKind(str, Enum):
    DIFFERENT_COUNTS = "different_counts"
    DUPLICATE_ID_IN_FIRST = "duplicate_id_in_first"
    DUPLICATE_ID_IN_SECOND = "duplicate_id_in_second"
    MISSING_COUNTERPART = "missing_counterpart"
    VALUES_MISMATCH = "values_mismatch"


@dataclass(slots=True, frozen=True)
class ComparisonIssue:
    """The first reason two collections were found not to be equivalent.

    ``first``/``second`` hold the two counts for ``DIFFERENT_COUNTS`` and the
    two differing values (or whole records when ``field`` is ``None``) for
    ``VALUES_MISMATCH``.
    """

    kind: MismatchKind
    identity: Any = None
    field: Optional[str] = None
    first: Any = None
    second: Any = None

    def describe(self) -> str:
        if self.kind is MismatchKind.DIFFERENT_COUNTS:
            return f"Collections have different counts: {self.first} vs {self.second}"
        if self.kind is MismatchKind.DUPLICATE_ID_IN_FIRST:
            return f"Duplicate id in first collection: {self.identity!r}"
        if self.kind is MismatchKind.DUPLICATE_ID_IN_SECOND:
            return f"Duplicate id in second collection: {self.identity!r}"
        if self.kind is MismatchKind.MISSING_COUNTERPART:
            return f"No counterpart found for id: {self.identity!r}"
        if self.field is not None:
            return (
                f"Elements with id {self.identity!r} differ on {self.field!r}: "
                f"first={self.first!r}, second={self.second!r}"
            )
        return (
            f"Elements with id {self.identity!r} have different values: "
            f"first={self.first!r}, second={self.second!r}"
        )


@dataclass(slots=True, frozen=True)
class ComparisonResult:
    equivalent: bool
    first_count: int
    second_count: int
    issue: Optional[ComparisonIssue] = None

    def __bool__(self) -> bool:
        return self.equivalent

    def raise_for_mismatch(self) -> None:
        if not self.equivalent:
            raise NotEquivalentError(self)


__all__ = ["Field", "MismatchKind", "ComparisonIssue", "ComparisonResult"]
