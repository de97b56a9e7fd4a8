"""Core Layer — pure validation logic, no IO, no logging, no os.environ.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic given their inputs

Design Decisions:
    - Functional core separated from imperative shell: services/validate_env.py
      reads the process environment and logs, core/ only decides
"""
