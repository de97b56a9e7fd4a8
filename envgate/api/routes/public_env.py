"""Public Environment — serves the client-exposed variables to the browser.

Invariants:
    - Only variables from the client view are returned (exposure prefix enforced)
    - Server variables never appear, even when validation was skipped
"""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder

from envgate.api.dependencies import get_client_env
from envgate.core.validated_environment import ValidatedEnvironment

router = APIRouter(prefix="/api/v1/env", tags=["env"])


@router.get("/public")
async def public_env(env: ValidatedEnvironment = Depends(get_client_env)):
    """Client-safe variables, typed values JSON-encoded."""
    return jsonable_encoder(env.to_dict())
