"""Data models."""

from debug_playground.models.person import AgeBand, Person

__all__ = ["AgeBand", "Person"]
