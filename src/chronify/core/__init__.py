"""Core logic for chronify (independent of CLI)."""

__all__ = [
    "config",
    "dispatcher",
    "durations",
    "exceptions",
    "formatter",
    "grammar",
    "ranges",
    "semantic",
    "tags",
    "types",
]
