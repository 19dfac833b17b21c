"""Order-independent equivalence of identifiable collections."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Iterable, Optional

from ..adapters import AccessorSpec, IdentitySpec
from ..config import DEFAULT_IDENTITY, MatchConfig
from ..utils import as_field, as_fields, ensure_collection
from .models import ComparisonIssue, ComparisonResult, Field, MismatchKind
from .selective import differing_field

logger = logging.getLogger(__name__)

_MISSING = object()


class EquivalenceMatcher:
    """Pairs the elements of two collections by identity and compares each pair.

    Two collections are equivalent when there is a one-to-one correspondence
    between them by identity and every pair is equal: wholly when no fields
    are selected, otherwise on the selected fields only. Order is ignored and
    the relation is symmetric. A duplicate identity on either side makes the
    collections non-equivalent.
    """

    def __init__(self, config: MatchConfig | None = None) -> None:
        self.config = config or MatchConfig()
        self._identity = as_field(self.config.identity)
        self._fields = as_fields(self.config.fields)

    def compare(
        self,
        first: Iterable[Any],
        second: Iterable[Any],
        *fields: AccessorSpec,
        whole: bool = False,
    ) -> ComparisonResult:
        """Compare two collections and report the first issue found, if any.

        ``fields`` overrides the configured default field subset for this call;
        ``whole=True`` compares paired records with ``==`` regardless of it.
        """
        if whole and fields:
            raise ValueError("whole=True cannot be combined with explicit fields")
        start = perf_counter()
        if whole:
            selected: tuple[Field, ...] = ()
        else:
            selected = as_fields(fields) if fields else self._fields
        first = ensure_collection(first)
        second = ensure_collection(second)
        issue = self._find_issue(first, second, selected)
        if issue is not None and self.config.log_mismatches and logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Collections not equivalent after %.6fs: %s",
                perf_counter() - start,
                issue.describe(),
            )
        return ComparisonResult(
            equivalent=issue is None,
            first_count=len(first),
            second_count=len(second),
            issue=issue,
        )

    def is_equivalent(
        self, first: Iterable[Any], second: Iterable[Any], *fields: AccessorSpec, whole: bool = False
    ) -> bool:
        return self.compare(first, second, *fields, whole=whole).equivalent

    def is_not_equivalent(
        self, first: Iterable[Any], second: Iterable[Any], *fields: AccessorSpec, whole: bool = False
    ) -> bool:
        return not self.is_equivalent(first, second, *fields, whole=whole)

    # Mixed container types take the same path.
    elements_are_equivalent = is_equivalent
    elements_are_not_equivalent = is_not_equivalent

    def assert_equivalent(
        self, first: Iterable[Any], second: Iterable[Any], *fields: AccessorSpec, whole: bool = False
    ) -> None:
        self.compare(first, second, *fields, whole=whole).raise_for_mismatch()

    def _find_issue(
        self,
        first,
        second,
        fields: tuple[Field, ...],
    ) -> Optional[ComparisonIssue]:
        if len(first) != len(second):
            return ComparisonIssue(
                kind=MismatchKind.DIFFERENT_COUNTS,
                first=len(first),
                second=len(second),
            )

        identity = self._identity
        lookup: dict[Any, Any] = {}
        for element in first:
            key = identity(element)
            if key in lookup:
                return ComparisonIssue(kind=MismatchKind.DUPLICATE_ID_IN_FIRST, identity=key)
            lookup[key] = element

        seen: set[Any] = set()
        for element in second:
            key = identity(element)
            if key in seen:
                return ComparisonIssue(kind=MismatchKind.DUPLICATE_ID_IN_SECOND, identity=key)
            seen.add(key)

            counterpart = lookup.get(key, _MISSING)
            if counterpart is _MISSING:
                return ComparisonIssue(kind=MismatchKind.MISSING_COUNTERPART, identity=key)

            if fields:
                field = differing_field(counterpart, element, fields)
                if field is not None:
                    return ComparisonIssue(
                        kind=MismatchKind.VALUES_MISMATCH,
                        identity=key,
                        field=field.name,
                        first=field(counterpart),
                        second=field(element),
                    )
            elif counterpart != element:
                return ComparisonIssue(
                    kind=MismatchKind.VALUES_MISMATCH,
                    identity=key,
                    first=counterpart,
                    second=element,
                )
        return None


_DEFAULT_MATCHER = EquivalenceMatcher()


def _matcher_for(identity: IdentitySpec) -> EquivalenceMatcher:
    if isinstance(identity, str) and identity == DEFAULT_IDENTITY:
        return _DEFAULT_MATCHER
    return EquivalenceMatcher(MatchConfig(identity=identity))


def compare_elements(
    first: Iterable[Any],
    second: Iterable[Any],
    *fields: AccessorSpec,
    identity: IdentitySpec = DEFAULT_IDENTITY,
) -> ComparisonResult:
    """Diagnostic form of ``is_equivalent`` reporting why collections differ."""
    return _matcher_for(identity).compare(first, second, *fields)


def is_equivalent(
    first: Iterable[Any],
    second: Iterable[Any],
    *fields: AccessorSpec,
    identity: IdentitySpec = DEFAULT_IDENTITY,
) -> bool:
    """Return ``True`` when both collections hold the same records by identity.

    Order is ignored. Without ``fields`` paired records must be ``==``;
    with ``fields`` they only need to agree on those fields.
    """
    return compare_elements(first, second, *fields, identity=identity).equivalent


def is_not_equivalent(
    first: Iterable[Any],
    second: Iterable[Any],
    *fields: AccessorSpec,
    identity: IdentitySpec = DEFAULT_IDENTITY,
) -> bool:
    return not is_equivalent(first, second, *fields, identity=identity)


def elements_are_equivalent(
    first: Iterable[Any],
    second: Iterable[Any],
    *fields: AccessorSpec,
    identity: IdentitySpec = DEFAULT_IDENTITY,
) -> bool:
    """Same as ``is_equivalent`` for collections of different container types,
    e.g. a list against a set."""
    return is_equivalent(first, second, *fields, identity=identity)


def elements_are_not_equivalent(
    first: Iterable[Any],
    second: Iterable[Any],
    *fields: AccessorSpec,
    identity: IdentitySpec = DEFAULT_IDENTITY,
) -> bool:
    return not elements_are_equivalent(first, second, *fields, identity=identity)


def assert_equivalent(
    first: Iterable[Any],
    second: Iterable[Any],
    *fields: AccessorSpec,
    identity: IdentitySpec = DEFAULT_IDENTITY,
) -> None:
    """Raise ``NotEquivalentError`` describing the first issue when not equivalent."""
    compare_elements(first, second, *fields, identity=identity).raise_for_mismatch()


__all__ = [
    "EquivalenceMatcher",
    "assert_equivalent",
    "compare_elements",
    "elements_are_equivalent",
    "elements_are_not_equivalent",
    "is_equivalent",
    "is_not_equivalent",
]
