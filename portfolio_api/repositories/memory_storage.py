"""In-memory DocumentStorage used by tests and local experiments."""
from __future__ import annotations

from typing import Any, Callable, Dict, Optional
import copy
import threading

from portfolio_api.repositories.base import DocumentNotFoundError


class InMemoryStorage:
    def __init__(self, documents: Optional[Dict[str, Any]] = None) -> None:
        self._documents: Dict[str, Any] = copy.deepcopy(documents or {})
        self._lock = threading.RLock()

    def location(self, key: str) -> str:
        return f"memory://{key}"

    def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._documents

    def load_document(self, key: str) -> Any:
        with self._lock:
            if key not in self._documents:
                raise DocumentNotFoundError(key, self.location(key))
            return copy.deepcopy(self._documents[key])

    def save_document(self, key: str, value: Any) -> None:
        with self._lock:
            self._documents[key] = copy.deepcopy(value)

    def update_document(self, key: str, fn: Callable[[Any], Any], default: Any = None) -> Any:
        with self._lock:
            try:
                current = self.load_document(key)
            except DocumentNotFoundError:
                current = copy.deepcopy(default)
            updated = fn(current)
            self.save_document(key, updated)
            return updated
