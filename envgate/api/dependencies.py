"""Dependencies — inject the startup-validated environment into route handlers.

Invariants:
    - The environment lives on app.state.env, set once by the lifespan
    - get_env never re-validates: a missing env is a startup bug, not a retry

Design Decisions:
    - app.state over module globals: each app (and each test) owns its own env
"""

from fastapi import Request

from envgate.core.errors import EnvironmentNotInitializedError
from envgate.core.validated_environment import ValidatedEnvironment


def get_env(request: Request) -> ValidatedEnvironment:
    env = getattr(request.app.state, "env", None)
    if env is None:
        raise EnvironmentNotInitializedError()
    return env


def get_client_env(request: Request) -> ValidatedEnvironment:
    """Client-safe view — server variables raise on access."""
    return get_env(request).client_view()
