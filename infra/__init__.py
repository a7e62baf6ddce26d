"""Infrastructure helpers (logging)."""
