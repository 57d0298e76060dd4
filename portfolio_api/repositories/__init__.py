"""
Persistence adapters.

Services depend on the DocumentStorage protocol rather than touching JSON files,
so the same use cases run against disk in production and memory in tests.
"""

from portfolio_api.repositories.base import (
    DocumentNotFoundError,
    DocumentStorage,
    StorageError,
)
from portfolio_api.repositories.json_storage import JsonFileStorage
from portfolio_api.repositories.memory_storage import InMemoryStorage

__all__ = [
    "DocumentNotFoundError",
    "DocumentStorage",
    "InMemoryStorage",
    "JsonFileStorage",
    "StorageError",
]
