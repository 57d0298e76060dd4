"""Contact form use case: validate, prepend to the contact log, persist."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from portfolio_api.core.utils import epoch_millis, iso_timestamp, utc_now
from portfolio_api.domain.contacts import (
    ContactSubmission,
    clean_fields,
    is_valid_email,
    normalize_email,
)
from portfolio_api.repositories.base import DocumentStorage, StorageError

logger = logging.getLogger(__name__)

CONTACTS_KEY = "contacts"
FIELDS_REQUIRED_MESSAGE = "All fields are required"
INVALID_EMAIL_MESSAGE = "Invalid email format"
THANK_YOU_MESSAGE = "Thank you! Your message has been sent successfully."


class ContactError(Exception):
    """Base exception for the contact workflow."""


class ContactValidationError(ContactError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ContactPersistenceError(ContactError):
    """Raised when the contact log cannot be read or written."""


class ContactService:
    """Validates submissions and records them newest-first in the contact log."""

    def __init__(self, storage: DocumentStorage, key: str = CONTACTS_KEY) -> None:
        self.storage = storage
        self.key = key

    def _now(self):
        return utc_now()

    def validate(self, payload: Mapping[str, Any]) -> dict[str, str]:
        fields = clean_fields(payload)
        if not all(fields.values()):
            raise ContactValidationError(FIELDS_REQUIRED_MESSAGE)
        if not is_valid_email(fields["email"]):
            raise ContactValidationError(INVALID_EMAIL_MESSAGE)
        return fields

    def build_submission(self, fields: Mapping[str, str], ip: Optional[str] = None) -> ContactSubmission:
        now = self._now()
        return ContactSubmission(
            id=epoch_millis(now),
            name=fields["name"],
            email=normalize_email(fields["email"]),
            message=fields["message"],
            timestamp=iso_timestamp(now),
            ip=ip,
        )

    def submit(self, payload: Mapping[str, Any], ip: Optional[str] = None) -> ContactSubmission:
        fields = self.validate(payload)
        submission = self.build_submission(fields, ip)

        def _prepend(contacts):
            if not isinstance(contacts, list):
                raise TypeError(f"contact log must be a JSON array, got {type(contacts).__name__}")
            return [submission.to_dict(), *contacts]

        try:
            self.storage.update_document(self.key, _prepend, default=[])
        except (StorageError, TypeError) as exc:
            logger.exception("Error processing contact form: %s", exc)
            raise ContactPersistenceError(str(exc)) from exc
        logger.info("New contact from: %s (%s)", submission.name, submission.email)
        return submission

