"""Partition & Merge — pure helpers that split the raw environment and join results.

Invariants:
    - select_declared never invents values: absent names are omitted, not ""
    - collect_issues keeps server issues before client issues
    - merge_validated only accepts two Success results
"""

from typing import Iterable

from envgate.core.domain_types import RawEnvironment
from envgate.core.validated_environment import ValidatedEnvironment
from envgate.core.validation_result import (
    FieldIssue, Success, ValidationResult,
)


def select_declared(
    names: Iterable[str], environ: RawEnvironment,
) -> dict[str, str]:
    """Subset of `environ` restricted to declared names."""
    return {name: environ[name] for name in names if name in environ}


def collect_issues(
    server_result: ValidationResult, client_result: ValidationResult,
) -> tuple[FieldIssue, ...]:
    """Every issue from both schemas — server first."""
    issues: list[FieldIssue] = []
    for result in (server_result, client_result):
        if not result.ok:
            issues.extend(result.issues)
    return tuple(issues)


def merge_validated(
    server_result: Success, client_result: Success, prefix: str,
) -> ValidatedEnvironment:
    return ValidatedEnvironment(
        server_result.values, client_result.values, prefix,
    )
