"""
Shared helpers used across blueprints.

Services are built per call from the app's store; they hold no state of
their own, so this is cheap.
"""

from __future__ import annotations

from flask import request
from flask_login import current_user

from accounts import AccountService
from catalog import CatalogService
from progress import ProgressService
from store import get_store


def current_user_id() -> str | None:
    """Return the logged-in user's id, or None for an anonymous session."""
    if current_user.is_authenticated:
        return current_user.id
    return None


def catalog_service() -> CatalogService:
    return CatalogService(get_store())


def account_service() -> AccountService:
    return AccountService(get_store())


def progress_service() -> ProgressService:
    return ProgressService(get_store())


def wants_json() -> bool:
    """True for API routes, which get JSON errors instead of HTML pages."""
    return request.path.startswith("/api/") or request.path == "/ai/grammar"
