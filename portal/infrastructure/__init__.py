"""Infrastructure layer: the in-memory store and everything built on it."""
