"""Configuration dataclasses for the equivalence matcher."""
from __future__ import annotations

from dataclasses import dataclass

from .adapters import AccessorSpec, IdentitySpec

DEFAULT_IDENTITY = "id"


@dataclass(slots=True, frozen=True)
class MatchConfig:
    identity: IdentitySpec = DEFAULT_IDENTITY
    fields: tuple[AccessorSpec, ...] = ()  # empty compares whole records with ==
    log_mismatches: bool = True


@dataclass(slots=True)
class ReportConfig:
    first_label: str = "first"
    second_label: str = "second"
    include_values: bool = True
    value_width: int = 120  # truncate rendered values beyond this many characters
