"""
User accounts — signup and lookup by email or id.

There are no passwords: a user is identified by email alone. Email equality
is exact and case-sensitive; surrounding whitespace is ignored only when no
stored email matches the full string.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from errors import DuplicateEmailError, NotFoundError, ValidationError
from models import User
from store import GuardedStore

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, store: GuardedStore):
        self.store = store

    def create_user(self, name: Optional[str], email: Optional[str]) -> User:
        """Register a new user with zero points and nothing completed.

        Raises ValidationError for a missing name or email and
        DuplicateEmailError if the email is already registered.
        """
        name = (name or "").strip()
        email = (email or "").strip()
        if not name:
            raise ValidationError("name", "Name and Email required")
        if not email:
            raise ValidationError("email", "Name and Email required")

        with self.store.transaction() as txn:
            if txn.dataset.user_by_email(email) is not None:
                raise DuplicateEmailError(email)
            user = User(id=str(uuid.uuid4()), name=name, email=email)
            txn.dataset.users.append(user)
            txn.mark_dirty()

        logger.info("Created user %s", user.id)
        return user

    def find_by_email(self, email: Optional[str]) -> User:
        """Exact match first, then the trimmed form of ``email``.

        Stored emails are compared as full strings, so records written with
        surrounding spaces stay reachable.
        """
        email = email or ""
        with self.store.read() as dataset:
            user = dataset.user_by_email(email) if email else None
            trimmed = email.strip()
            if user is None and trimmed and trimmed != email:
                user = dataset.user_by_email(trimmed)
        if user is None:
            raise NotFoundError("user", email)
        return user

    def find_by_id(self, user_id: Optional[str]) -> User:
        with self.store.read() as dataset:
            user = dataset.user_by_id(user_id) if user_id else None
        if user is None:
            raise NotFoundError("user", user_id)
        return user

    def count_users(self) -> int:
        with self.store.read() as dataset:
            return len(dataset.users)
