"""Application Configuration — envgate's own settings via pydantic-settings.

Invariants:
    - Settings describe how envgate runs, never the variables it validates
    - get_settings() is cached (lru_cache) — single instance per process
    - No .env file is read: loading variables from files is the caller's job

Design Decisions:
    - pydantic-settings over raw os.environ: bool/str coercion for the escape
      hatch flag comes for free
    - SKIP_ENV_VALIDATION read here and only consumed by services/bootstrap.py,
      so the validation pipeline itself never looks at it
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from envgate.core.domain_types import DEFAULT_EXPOSURE_PREFIX
from envgate.core.enforce_exposure import require_prefix


class Settings(BaseSettings):
    """envgate settings from environment variables."""

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    # Escape hatch: skip validation entirely (e.g. docker build stages)
    skip_env_validation: bool = False

    # Naming convention for browser-exposed variables
    env_exposure_prefix: str = DEFAULT_EXPOSURE_PREFIX

    @field_validator("env_exposure_prefix")
    @classmethod
    def prefix_not_blank(cls, v: str) -> str:
        return require_prefix(v)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
