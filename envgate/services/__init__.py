"""Services Layer — imperative shell around the pure core.

Invariants:
    - Only this layer reads os.environ and writes diagnostics to the log
    - Decisions are delegated to core/ functions; services only sequence them
"""
