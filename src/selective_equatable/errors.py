"""Exception hierarchy for selective comparison.

Comparisons themselves never raise for well-typed input: every outcome,
duplicate identities included, is reported as a boolean or a
``ComparisonResult``. The exceptions below cover caller configuration
faults and the opt-in assertion helpers.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - type hints only
    from .core.models import ComparisonResult


class SelectiveEquatableError(Exception):
    """Base exception for all errors raised by this package."""


class InvalidAccessorError(SelectiveEquatableError, TypeError):
    """Raised when a field or identity accessor cannot be resolved.

    Accessors must be attribute/key names (optionally dotted), callables, or
    ``Field`` instances.
    """


class NotEquivalentError(SelectiveEquatableError, AssertionError):
    """Raised by ``raise_for_mismatch`` and ``assert_equivalent``.

    The comparison that failed is available as ``result``.
    """

    def __init__(self, result: "ComparisonResult") -> None:
        self.result = result
        issue = result.issue
        message = issue.describe() if issue is not None else "Collections are not equivalent"
        super().__init__(message)


__all__ = ["SelectiveEquatableError", "InvalidAccessorError", "NotEquivalentError"]
