"""Persistence helpers for Pydantic models."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
