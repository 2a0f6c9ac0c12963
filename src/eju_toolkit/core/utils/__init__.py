"""Serialization helpers for core models."""

from .serialization import database_from_json, database_to_json

__all__ = ["database_from_json", "database_to_json"]
