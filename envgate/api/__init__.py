"""API Layer — FastAPI dependency, routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes read the environment only through the get_env dependency

Design Decisions:
    - Thin routes delegate to the ValidatedEnvironment (no logic here)
"""
