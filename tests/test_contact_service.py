from __future__ import annotations

import sys
import threading
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Garante que o pacote portfolio_api seja importavel durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portfolio_api.repositories.json_storage import JsonFileStorage  # noqa: E402
from portfolio_api.repositories.memory_storage import InMemoryStorage  # noqa: E402
from portfolio_api.services.contact_service import (  # noqa: E402
    ContactPersistenceError,
    ContactService,
    ContactValidationError,
)


def test_submit_normalizes_fields_and_prepends():
    storage = InMemoryStorage()
    svc = ContactService(storage)

    svc.submit({"name": "Ada", "email": "ADA@Example.com ", "message": " hi "}, ip="10.0.0.1")

    log = storage.load_document("contacts")
    assert len(log) == 1
    entry = log[0]
    assert entry["name"] == "Ada"
    assert entry["email"] == "ada@example.com"
    assert entry["message"] == "hi"
    assert entry["ip"] == "10.0.0.1"
    assert isinstance(entry["id"], int)
    assert entry["timestamp"].endswith("Z")


def test_submit_uses_current_time_for_id_and_timestamp(monkeypatch):
    svc = ContactService(InMemoryStorage())
    fixed = datetime(2026, 10, 19, 12, 0, 0, 123000, tzinfo=timezone.utc)
    monkeypatch.setattr(svc, "_now", lambda: fixed)

    submission = svc.submit({"name": "Bob", "email": "bob@example.com", "message": "yo"})

    assert submission.id == round(fixed.timestamp() * 1000)
    assert submission.id % 1000 == 123
    assert submission.timestamp == "2026-10-19T12:00:00.123Z"
    assert submission.ip is None


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": "Ada", "email": "ada@example.com"},
        {"name": "   ", "email": "ada@example.com", "message": "hi"},
        {"name": "Ada", "email": "", "message": "hi"},
        {"name": "Ada", "email": "ada@example.com", "message": "\n\t"},
        {"name": 42, "email": "ada@example.com", "message": "hi"},
    ],
)
def test_missing_fields_rejected_without_touching_log(payload):
    storage = InMemoryStorage({"contacts": [{"id": 1}]})
    svc = ContactService(storage)

    with pytest.raises(ContactValidationError) as exc:
        svc.submit(payload)

    assert exc.value.message == "All fields are required"
    assert storage.load_document("contacts") == [{"id": 1}]


@pytest.mark.parametrize("email", ["ada.example.com", "ada@example", "ada @example.com", "a@b@c.com", "@example.com"])
def test_invalid_email_rejected(email):
    storage = InMemoryStorage()
    svc = ContactService(storage)

    with pytest.raises(ContactValidationError) as exc:
        svc.submit({"name": "Ada", "email": email, "message": "hi"})

    assert exc.value.message == "Invalid email format"
    assert not storage.exists("contacts")


def test_loose_email_shapes_still_accepted():
    svc = ContactService(InMemoryStorage())
    # Shapes a stricter validator would refuse; the check stays permissive.
    for email in ("a@b.c", "x@y..z", "weird!#$@host.tld"):
        svc.submit({"name": "n", "email": email, "message": "m"})


def test_log_grows_newest_first():
    storage = InMemoryStorage()
    svc = ContactService(storage)

    for i in range(3):
        svc.submit({"name": f"user{i}", "email": f"u{i}@example.com", "message": "hello"})

    names = [entry["name"] for entry in storage.load_document("contacts")]
    assert names == ["user2", "user1", "user0"]


def test_missing_contacts_file_is_created_with_one_entry(tmp_path):
    storage = JsonFileStorage(tmp_path)
    svc = ContactService(storage)
    assert not (tmp_path / "contacts.json").exists()

    svc.submit({"name": "Ada", "email": "ada@example.com", "message": "hi"})

    text = (tmp_path / "contacts.json").read_text(encoding="utf-8")
    assert text.startswith('[\n  {\n    "id": ')
    assert len(storage.load_document("contacts")) == 1


def test_corrupt_log_surfaces_persistence_error(tmp_path):
    (tmp_path / "contacts.json").write_text("{not json", encoding="utf-8")
    svc = ContactService(JsonFileStorage(tmp_path))

    with pytest.raises(ContactPersistenceError):
        svc.submit({"name": "Ada", "email": "ada@example.com", "message": "hi"})

    assert (tmp_path / "contacts.json").read_text(encoding="utf-8") == "{not json"


def test_non_array_log_surfaces_persistence_error():
    storage = InMemoryStorage({"contacts": {"oops": True}})
    svc = ContactService(storage)

    with pytest.raises(ContactPersistenceError):
        svc.submit({"name": "Ada", "email": "ada@example.com", "message": "hi"})

    assert storage.load_document("contacts") == {"oops": True}


def test_concurrent_submissions_do_not_lose_updates(tmp_path):
    svc = ContactService(JsonFileStorage(tmp_path))
    errors = []

    def worker(i: int) -> None:
        try:
            svc.submit({"name": f"user{i}", "email": f"u{i}@example.com", "message": "hello"})
        except Exception as exc:  # pragma: no cover - surfaced via assert below
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    log = svc.storage.load_document("contacts")
    assert sorted(entry["name"] for entry in log) == sorted(f"user{i}" for i in range(20))
