"""Domain Types — names and enums shared across the validation pipeline.

Invariants:
    - Variable names are case-sensitive strings, never normalized
    - EnvScope has exactly 2 members: every declared variable is server or client
    - DEFAULT_EXPOSURE_PREFIX is the only built-in naming convention

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (error envelopes, log extras)
"""

from enum import Enum
from typing import Mapping


# Snapshot of the process environment; values are always strings at the OS boundary
RawEnvironment = Mapping[str, str]


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_EXPOSURE_PREFIX = "NEXT_PUBLIC_"


# ─── Enums ───────────────────────────────────────────────────────

class EnvScope(str, Enum):
    """Which side of the deployment a variable belongs to."""
    SERVER = "server"
    CLIENT = "client"
