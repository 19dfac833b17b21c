"""Comparison building blocks: the field comparator and the collection matcher."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "EquivalenceMatcher",
    "SelectiveEquatable",
    "Field",
    "MismatchKind",
    "ComparisonIssue",
    "ComparisonResult",
    "is_equal",
    "is_not_equal",
    "first_difference",
    "is_equivalent",
    "is_not_equivalent",
    "elements_are_equivalent",
    "elements_are_not_equivalent",
    "compare_elements",
    "assert_equivalent",
]

_SELECTIVE = {"SelectiveEquatable", "is_equal", "is_not_equal", "first_difference"}
_MODELS = {"Field", "MismatchKind", "ComparisonIssue", "ComparisonResult"}


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in _SELECTIVE:
        module = import_module(".selective", __name__)
        return getattr(module, name)
    if name in _MODELS:
        module = import_module(".models", __name__)
        return getattr(module, name)
    if name in __all__:
        module = import_module(".equivalence", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
