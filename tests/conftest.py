"""
Test fixtures for StudyHub.

Provides a file-backed store seeded with a known catalog, the three services
built on it, and app / client / auth_client fixtures for route tests.
"""

from __future__ import annotations

import json
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))


TEST_MATERIALS = [
    {"id": "alg-1", "title": "Algebra Basics", "content": "Solving for x.", "type": "lesson"},
    {"id": "geo-1", "title": "Triangles", "content": "Angles add up to 180 degrees.", "type": "lesson"},
    {"id": "quiz-1", "title": "Weekly Quiz", "content": "Mixed ALGEBRA and geometry questions.", "type": "quiz"},
    {"id": "vid-1", "title": "Photosynthesis", "content": "How plants make sugar.", "type": "video"},
    {"id": "alg-2", "title": "Linear Equations", "content": "Graphing lines.", "type": "Algebra-Workshop"},
]


def write_dataset(path: Path, users=None, materials=None) -> Path:
    path.write_text(json.dumps({
        "users": users or [],
        "materials": TEST_MATERIALS if materials is None else materials,
    }, indent=2))
    return path


@pytest.fixture
def data_file(tmp_path):
    return write_dataset(tmp_path / "data.json")


@pytest.fixture
def store(data_file):
    from store import GuardedStore, JsonFileStore
    return GuardedStore(JsonFileStore(data_file))


@pytest.fixture
def catalog(store):
    from catalog import CatalogService
    return CatalogService(store)


@pytest.fixture
def accounts(store):
    from accounts import AccountService
    return AccountService(store)


@pytest.fixture
def progress(store):
    from progress import ProgressService
    return ProgressService(store)


@pytest.fixture
def app(data_file):
    """Create app against a temporary JSON data file."""
    from app import create_app

    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret-key",
        "WTF_CSRF_ENABLED": False,
        "STORE_BACKEND": "json",
        "DATA_FILE": str(data_file),
    })
    yield app


@pytest.fixture
def client(app):
    """Unauthenticated test client."""
    return app.test_client()


@pytest.fixture
def auth_client(app):
    """Authenticated test client (signed up as the test student)."""
    client = app.test_client()
    with client:
        client.post("/signup", data={
            "name": "Test Student",
            "email": "test@example.com",
        }, follow_redirects=True)
        yield client
