"""Exposure Enforcement — the naming convention that decides browser exposure.

Invariants:
    - All functions are PURE: no IO, no logging, no os.environ
    - Return ExposureViolation on violation, None on success
    - Violations list every offending name in declaration order
    - Prefix matching is case-sensitive (environment names are)
    - A blank (empty or whitespace-only) prefix is rejected with ValueError

Design Decisions:
    - Name-only checks: values are irrelevant, a misnamed variable is wrong
      even when its value validates
    - Two separate checks, not one: the pipeline runs them fail-fast in order
      (server first), so each must be callable on its own
"""

from typing import Iterable

from envgate.core.domain_types import EnvScope
from envgate.core.validation_result import ExposureViolation


def require_prefix(prefix: str) -> str:
    """Reject an empty or whitespace-only exposure prefix; returns it unchanged."""
    if not prefix or not prefix.strip():
        raise ValueError("exposure prefix cannot be blank")
    return prefix


def check_server_exposure(
    names: Iterable[str], prefix: str,
) -> ExposureViolation | None:
    """Server variables must NOT carry the exposure prefix (would leak secrets)."""
    require_prefix(prefix)
    leaked = tuple(n for n in names if n.startswith(prefix))
    if leaked:
        return ExposureViolation(EnvScope.SERVER, leaked)
    return None


def check_client_exposure(
    names: Iterable[str], prefix: str,
) -> ExposureViolation | None:
    """Client variables MUST carry the exposure prefix (else always empty in the browser)."""
    require_prefix(prefix)
    hidden = tuple(n for n in names if not n.startswith(prefix))
    if hidden:
        return ExposureViolation(EnvScope.CLIENT, hidden)
    return None
