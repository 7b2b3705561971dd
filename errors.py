"""
Error types raised by the StudyHub data layer.

Validation, duplicate and not-found errors are recoverable: routes turn them
into a form message or a 404. Store errors mean the dataset could not be read
or written and are surfaced as a generic failure.
"""

from __future__ import annotations


class StudyHubError(Exception):
    """Base class for every error raised by the data layer."""


class ValidationError(StudyHubError):
    """A required input was missing or empty."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field.capitalize()} is required.")


class DuplicateEmailError(StudyHubError):
    """A user with this email already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already registered. Please login.")


class NotFoundError(StudyHubError):
    """No record matched the requested key."""

    def __init__(self, kind: str, key: str | None):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind.capitalize()} not found: {key!r}")


class StoreError(StudyHubError):
    """The persisted dataset could not be read or written."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)


class CorruptStoreError(StoreError):
    """The dataset document exists but cannot be parsed."""


class StoreUnavailableError(StoreError):
    """The storage medium could not be read from or written to."""
