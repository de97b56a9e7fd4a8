"""Environment Validation — the startup pipeline that produces a ValidatedEnvironment.

Invariants:
    - Both schemas are validated before any decision: all value errors are
      reported together, never just the first schema's
    - Value errors short-circuit: exposure checks run only when both schemas pass
    - Exposure checks are fail-fast: a server violation skips the client check
    - Every failure is logged (one combined record) before it is raised
    - Reads the environment once; never mutates it

Design Decisions:
    - Raise typed EnvGateError subclasses carrying the offending names, log text
      is a side channel for humans (structured data for callers and tests)
    - environ injectable: tests pass plain dicts, production defaults to os.environ
"""

import logging
import os
from typing import Any

from envgate.core.domain_types import DEFAULT_EXPOSURE_PREFIX, EnvScope, RawEnvironment
from envgate.core.enforce_exposure import (
    check_client_exposure, check_server_exposure, require_prefix,
)
from envgate.core.errors import (
    ClientExposureViolation, ServerExposureViolation, SchemaValidationFailure,
)
from envgate.core.format_diagnostics import (
    format_exposure_violation, format_schema_failure,
)
from envgate.core.partition_env import collect_issues, merge_validated, select_declared
from envgate.core.schema import as_schema
from envgate.core.validated_environment import ValidatedEnvironment

logger = logging.getLogger(__name__)


def validate(
    client_schema: Any,
    server_schema: Any,
    *,
    environ: RawEnvironment | None = None,
    exposure_prefix: str = DEFAULT_EXPOSURE_PREFIX,
) -> ValidatedEnvironment:
    """Validate the process environment against client and server schemas.

    Args:
        client_schema: Variables exposed to the browser bundle. Anything
            accepted by as_schema() (pydantic model class, field mapping,
            EnvSchema, or None).
        server_schema: Server-only variables, same accepted shapes.
        environ: Environment snapshot to read. Defaults to os.environ.
        exposure_prefix: Prefix that marks a variable as client-exposed.

    Returns:
        ValidatedEnvironment with every declared variable, typed per its schema.

    Raises:
        SchemaValidationFailure: a schema rejected its subset of the environment.
        ServerExposureViolation: a server variable carries the exposure prefix.
        ClientExposureViolation: a client variable lacks the exposure prefix.
        ValueError: exposure_prefix is empty or whitespace-only.
        TypeError: a schema has an unsupported shape or an AliasPath field.
    """
    require_prefix(exposure_prefix)
    client = as_schema(client_schema)
    server = as_schema(server_schema)
    env = os.environ if environ is None else environ

    server_raw = select_declared(server.field_names(), env)
    server_result = server.validate(server_raw, EnvScope.SERVER)
    client_raw = select_declared(client.field_names(), env)
    client_result = client.validate(client_raw, EnvScope.CLIENT)

    if not (server_result.ok and client_result.ok):
        issues = collect_issues(server_result, client_result)
        message = format_schema_failure(issues)
        error = SchemaValidationFailure(message, issues)
        logger.error(
            message,
            extra={
                "error_code": error.code,
                "variables": list(error.variables),
                "issue_count": len(issues),
            },
        )
        raise error

    violation = check_server_exposure(server.field_names(), exposure_prefix)
    if violation is not None:
        message = format_exposure_violation(violation, exposure_prefix)
        error = ServerExposureViolation(message, violation)
        _log_exposure(error)
        raise error

    violation = check_client_exposure(client.field_names(), exposure_prefix)
    if violation is not None:
        message = format_exposure_violation(violation, exposure_prefix)
        error = ClientExposureViolation(message, violation)
        _log_exposure(error)
        raise error

    env_values = merge_validated(server_result, client_result, exposure_prefix)
    logger.debug(
        f"Environment validated: {len(env_values.server_keys)} server, "
        f"{len(env_values.client_keys)} client variables",
    )
    return env_values


def _log_exposure(error: ServerExposureViolation | ClientExposureViolation) -> None:
    logger.error(
        error.message,
        extra={
            "error_code": error.code,
            "scope": error.violation.scope.value,
            "variables": list(error.variables),
        },
    )
