"""Infrastructure — process-level plumbing (logging setup)."""
