"""Selective, field-subset equality for records and identifiable collections."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from . import utils
from .config import MatchConfig, ReportConfig
from .core.equivalence import (
    EquivalenceMatcher,
    assert_equivalent,
    compare_elements,
    elements_are_equivalent,
    elements_are_not_equivalent,
    is_equivalent,
    is_not_equivalent,
)
from .core.models import ComparisonIssue, ComparisonResult, Field, MismatchKind
from .core.selective import SelectiveEquatable, first_difference, is_equal, is_not_equal
from .errors import InvalidAccessorError, NotEquivalentError, SelectiveEquatableError

__all__ = [
    "ComparisonIssue",
    "ComparisonResult",
    "EquivalenceMatcher",
    "Field",
    "InvalidAccessorError",
    "MatchConfig",
    "MismatchKind",
    "NotEquivalentError",
    "ReportBuilder",
    "ReportConfig",
    "SelectiveEquatable",
    "SelectiveEquatableError",
    "assert_equivalent",
    "compare_elements",
    "elements_are_equivalent",
    "elements_are_not_equivalent",
    "first_difference",
    "is_equal",
    "is_equivalent",
    "is_not_equal",
    "is_not_equivalent",
    "utils",
]

__version__ = "0.1.0"


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name == "ReportBuilder":
        module = import_module(".report", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
