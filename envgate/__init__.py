"""envgate — startup validation of server/client environment variables.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, callers import
      envgate.services.validate_env.validate directly (no star exports)
"""
