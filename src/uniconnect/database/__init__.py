"""Database access for uniconnect."""

from .connection import DatabaseManager
from .schema import SCHEMA_STATEMENTS, create_schema

__all__ = ["DatabaseManager", "SCHEMA_STATEMENTS", "create_schema"]
