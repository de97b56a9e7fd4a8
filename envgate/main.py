"""envgate App Factory — FastAPI application whose startup validates the environment.

Invariants:
    - The environment is validated exactly once, in the lifespan, before any
      request is served; a failure propagates and aborts startup
    - The result is stored on app.state.env and reached through get_env()
    - Shutdown removes the log handler and restores the root level it found
    - Routes registered explicitly (no auto-discovery)

Design Decisions:
    - Factory over module-level app: schemas are the caller's, and tests build
      one app per environment
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from envgate.api.error_handlers import register_error_handlers
from envgate.api.routes import public_env
from envgate.config import Settings, get_settings
from envgate.core.domain_types import RawEnvironment
from envgate.infrastructure.observability import setup_logging
from envgate.services.bootstrap import load_environment

logger = logging.getLogger(__name__)


def create_app(
    client_schema: Any,
    server_schema: Any,
    *,
    settings: Settings | None = None,
    environ: RawEnvironment | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        previous_level = logging.root.level
        handler = setup_logging(settings.log_level, settings.log_format)
        try:
            app.state.env = load_environment(
                client_schema, server_schema,
                settings=settings, environ=environ,
            )
            logger.info("Environment loaded, application starting")
            yield
            logger.info("Application shutting down")
        finally:
            app.state.env = None
            logging.root.removeHandler(handler)
            logging.root.setLevel(previous_level)

    app = FastAPI(title="envgate", version="1.0.0", lifespan=lifespan)
    app.state.env = None
    app.include_router(public_env.router)
    register_error_handlers(app)
    return app
