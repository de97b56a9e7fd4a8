"""Validation Results — tagged outcomes of validating one schema.

Invariants:
    - A ValidationResult is either Success or Failure, never both
    - Failure always carries at least one FieldIssue
    - All result types are frozen: results are shared, never mutated

Design Decisions:
    - Success/Failure dataclasses over exceptions: both schemas are validated
      before deciding, so per-schema outcomes must be values, not raises
    - ExposureViolation keeps declaration order so diagnostics read like the schema
"""

from dataclasses import dataclass, field
from typing import Any, Union

from envgate.core.domain_types import EnvScope


@dataclass(frozen=True)
class FieldIssue:
    """One constraint violation on one declared variable."""
    variable: str
    message: str
    scope: EnvScope
    error_type: str = "value_error"


@dataclass(frozen=True)
class Success:
    """Schema accepted the subset — values are coerced/typed per the schema."""
    values: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Schema rejected the subset."""
    issues: tuple[FieldIssue, ...]

    def __post_init__(self):
        if not self.issues:
            raise ValueError("Failure requires at least one FieldIssue")

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Union[Success, Failure]


@dataclass(frozen=True)
class ExposureViolation:
    """Declared variables that break the exposure-prefix naming convention."""
    scope: EnvScope
    variables: tuple[str, ...]
