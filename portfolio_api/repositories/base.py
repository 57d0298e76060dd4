"""Storage contract shared by the JSON-file and in-memory adapters."""
from __future__ import annotations

from typing import Any, Callable, Protocol


class StorageError(Exception):
    """Document exists but could not be read, parsed or written."""

    def __init__(self, key: str, cause: BaseException):
        super().__init__(f"{key}: {cause}")
        self.key = key
        self.cause = cause


class DocumentNotFoundError(LookupError):
    """Raised when the requested document does not exist."""

    def __init__(self, key: str, location: str):
        super().__init__(f"Document '{key}' not found at {location}")
        self.key = key
        self.location = location


class DocumentStorage(Protocol):
    def location(self, key: str) -> str: ...

    def exists(self, key: str) -> bool: ...

    def load_document(self, key: str) -> Any: ...

    def save_document(self, key: str, value: Any) -> None: ...

    def update_document(self, key: str, fn: Callable[[Any], Any], default: Any = None) -> Any: ...
