"""Shared API models."""

from .base import CamelModel

__all__ = ["CamelModel"]
