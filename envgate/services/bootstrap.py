"""Startup Bootstrap — the integration layer that honors the skip-validation escape hatch.

Invariants:
    - SKIP_ENV_VALIDATION is read here, never inside validate()
    - Skipping returns the raw declared variables, marked validated=False
    - Exactly one ValidatedEnvironment per call: callers store and inject it

Design Decisions:
    - Escape hatch returns raw strings rather than None so code paths that
      read the environment still run in build containers without secrets
"""

import logging
import os
from typing import Any

from envgate.config import Settings, get_settings
from envgate.core.domain_types import RawEnvironment
from envgate.core.partition_env import select_declared
from envgate.core.schema import as_schema
from envgate.core.validated_environment import ValidatedEnvironment
from envgate.services.validate_env import validate

logger = logging.getLogger(__name__)


def load_environment(
    client_schema: Any,
    server_schema: Any,
    *,
    settings: Settings | None = None,
    environ: RawEnvironment | None = None,
) -> ValidatedEnvironment:
    """Produce the application's environment once at startup."""
    settings = settings or get_settings()
    prefix = settings.env_exposure_prefix

    if settings.skip_env_validation:
        logger.warning(
            "SKIP_ENV_VALIDATION is set — environment variables are NOT validated",
        )
        return _unvalidated(client_schema, server_schema, prefix, environ)

    return validate(
        client_schema, server_schema,
        environ=environ, exposure_prefix=prefix,
    )


def _unvalidated(
    client_schema: Any,
    server_schema: Any,
    prefix: str,
    environ: RawEnvironment | None,
) -> ValidatedEnvironment:
    env = os.environ if environ is None else environ
    client = as_schema(client_schema)
    server = as_schema(server_schema)
    # Misnamed declarations could collide here; client wins, as in a plain merge
    client_raw = select_declared(client.field_names(), env)
    server_raw = {
        k: v for k, v in select_declared(server.field_names(), env).items()
        if k not in client_raw
    }
    return ValidatedEnvironment(server_raw, client_raw, prefix, validated=False)
