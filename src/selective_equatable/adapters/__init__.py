"""Protocol definitions for accessors supplied by callers."""
from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

from ..core.models import Field


@runtime_checkable
class FieldAccessor(Protocol):
    """Pure projection from a record to one comparable value."""

    def __call__(self, record: Any) -> Any:
        ...


# Attribute/key name or dotted path, a callable projection, or a named Field.
AccessorSpec = Union[str, FieldAccessor, Field]
IdentitySpec = Union[str, FieldAccessor]


__all__ = ["FieldAccessor", "AccessorSpec", "IdentitySpec"]
