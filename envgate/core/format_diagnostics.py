"""Diagnostic Formatting — human-readable startup failure reports.

Invariants:
    - One context line, then one "  - NAME: reason" line per offending variable
    - Pure string building: logging happens in services/validate_env.py
"""

from envgate.core.domain_types import EnvScope
from envgate.core.validation_result import ExposureViolation, FieldIssue


def format_schema_failure(issues: tuple[FieldIssue, ...]) -> str:
    lines = ["Invalid environment variables:"]
    for issue in issues:
        lines.append(f"  - {issue.variable} ({issue.scope.value}): {issue.message}")
    return "\n".join(lines)


def format_exposure_violation(violation: ExposureViolation, prefix: str) -> str:
    if violation.scope == EnvScope.SERVER:
        header = (
            f"You are exposing the following variables to the client "
            f"(server variables must not start with '{prefix}'):"
        )
        reason = f"server variable starts with '{prefix}'"
    else:
        header = (
            f"Client variables must start with '{prefix}' or the build "
            f"will not expose them:"
        )
        reason = f"client variable missing '{prefix}' prefix"
    lines = [header]
    for name in violation.variables:
        lines.append(f"  - {name}: {reason}")
    return "\n".join(lines)
