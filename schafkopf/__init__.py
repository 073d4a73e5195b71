"""Core engine package for the Schafkopf table."""

__all__ = [
    "cards",
    "deck",
    "errors",
    "events",
    "turns",
    "trick",
    "state",
    "game",
    "store",
    "service",
]
