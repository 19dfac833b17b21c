"""Field-subset equality for single records."""
from __future__ import annotations

from typing import Any, Optional

from ..adapters import AccessorSpec
from ..utils import as_fields
from .models import Field


def differing_field(first: Any, second: Any, fields: tuple[Field, ...]) -> Optional[Field]:
    """Return the first resolved field whose values differ, stopping at the first mismatch."""
    for field in fields:
        if field(first) != field(second):
            return field
    return None


def first_difference(first: Any, second: Any, *fields: AccessorSpec) -> Optional[Field]:
    """Return the first accessor in ``fields`` on which the two records differ.

    Accessors may be attribute or key names, dotted paths, callables or
    ``Field`` instances. ``None`` means the records agree on every field.
    """
    return differing_field(first, second, as_fields(fields))


def is_equal(first: Any, second: Any, *fields: AccessorSpec) -> bool:
    """Compare two records over the given fields only.

    With no fields the answer is ``True``: nothing was asked to differ.
    """
    return first_difference(first, second, *fields) is None


def is_not_equal(first: Any, second: Any, *fields: AccessorSpec) -> bool:
    return not is_equal(first, second, *fields)


class SelectiveEquatable:
    """Mixin giving a record class ``is_equal``/``is_not_equal`` methods.

    >>> @dataclass
    ... class Person(SelectiveEquatable):
    ...     name: str
    ...     age: int
    >>> Person("Mickey", 100).is_equal(Person("Mickey", 200), "name")
    True
    """

    __slots__ = ()

    def is_equal(self, other: Any, *fields: AccessorSpec) -> bool:
        return is_equal(self, other, *fields)

    def is_not_equal(self, other: Any, *fields: AccessorSpec) -> bool:
        return is_not_equal(self, other, *fields)


__all__ = [
    "SelectiveEquatable",
    "differing_field",
    "first_difference",
    "is_equal",
    "is_not_equal",
]
