"""
Data layer for Resume Ingest.

Submodules:
- database: MongoDB connection management
- models: Pydantic data models/schemas
- repositories: Task store contract and implementations
"""

from .database import DatabaseManager, get_database_manager

__all__ = [
    "DatabaseManager",
    "get_database_manager",
]
