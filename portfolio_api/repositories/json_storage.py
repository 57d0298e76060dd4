"""
JSON-file persistence adapter.

Each document key maps to one UTF-8 JSON file inside ``data_dir``. Files are
read and written wholesale; writes go through a temp file and ``os.replace`` so
a reader never sees a half-written document.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional
import copy
import json
import os
import stat
import tempfile
import threading

from portfolio_api.repositories.base import DocumentNotFoundError, StorageError


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


DEFAULT_FILE_MODE = 0o666 & ~_current_umask()


def _target_mode(path: Path) -> int:
    """Keep the mode of an existing file; new files follow the process umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return DEFAULT_FILE_MODE


class JsonFileStorage:
    def __init__(self, data_dir: Path | str, files: Optional[Mapping[str, str]] = None) -> None:
        self.data_dir = Path(data_dir)
        self._files: Dict[str, str] = dict(files or {})
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def path(self, key: str) -> Path:
        return self.data_dir / self._files.get(key, f"{key}.json")

    def location(self, key: str) -> str:
        return str(self.path(key))

    def exists(self, key: str) -> bool:
        return self.path(key).is_file()

    def _lock(self, key: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(key, threading.Lock())

    def load_document(self, key: str) -> Any:
        path = self.path(key)
        if not path.is_file():
            raise DocumentNotFoundError(key, str(path))
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageError(key, exc) from exc

    def save_document(self, key: str, value: Any) -> None:
        path = self.path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(value, f, ensure_ascii=False, indent=2)
                os.chmod(tmp_name, _target_mode(path))
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except (OSError, TypeError, ValueError) as exc:
            raise StorageError(key, exc) from exc

    def update_document(self, key: str, fn: Callable[[Any], Any], default: Any = None) -> Any:
        """
        Read-modify-write under the key's lock. A missing document starts from
        a copy of ``default``. Returns the value that was saved.
        """
        with self._lock(key):
            try:
                current = self.load_document(key)
            except DocumentNotFoundError:
                current = copy.deepcopy(default)
            updated = fn(current)
            self.save_document(key, updated)
            return updated
