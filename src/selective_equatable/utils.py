"""Utility helpers for resolving accessors and preparing collections."""
from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from typing import Any, Callable

from .adapters import AccessorSpec, FieldAccessor
from .core.models import Field
from .errors import InvalidAccessorError


def read_value(record: Any, name: str) -> Any:
    """Read ``name`` from ``record``: a key for mappings, an attribute otherwise."""
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)


def path_getter(path: str) -> Callable[[Any], Any]:
    """Build a getter for an attribute name or a dotted path such as ``address.city``."""
    parts = tuple(path.split("."))
    if not all(parts):
        raise InvalidAccessorError(f"Invalid field path: {path!r}")
    if len(parts) == 1:
        name = parts[0]
        return lambda record: read_value(record, name)

    def getter(record: Any) -> Any:
        value = record
        for part in parts:
            value = read_value(value, part)
        return value

    return getter


def accessor_name(func: FieldAccessor) -> str:
    name = getattr(func, "__name__", None)
    if name and name != "<lambda>":
        return name
    return repr(func)


def as_field(spec: AccessorSpec) -> Field:
    """Resolve a name, dotted path, callable or ``Field`` into a ``Field``."""
    if isinstance(spec, Field):
        return spec
    if isinstance(spec, str):
        return Field(name=spec, getter=path_getter(spec))
    if callable(spec):
        return Field(name=accessor_name(spec), getter=spec)
    raise InvalidAccessorError(
        f"Unsupported accessor {spec!r} ({type(spec).__name__}); "
        "expected a field name, a callable or a Field"
    )


def as_fields(specs: Iterable[AccessorSpec]) -> tuple[Field, ...]:
    return tuple(as_field(spec) for spec in specs)


def ensure_collection(items: Iterable[Any]) -> Collection[Any]:
    """Return ``items`` unchanged when sized and re-iterable, else a tuple of them."""
    if isinstance(items, Collection):
        return items
    return tuple(items)
