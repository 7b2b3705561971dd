"""
Persistent store for the StudyHub dataset.

The whole dataset lives in one JSON document that is read in full and
rewritten in full. Backends implement the ``DatasetStore`` protocol and do no
locking of their own; ``GuardedStore`` wraps a backend and serializes every
load/mutate/save cycle behind one lock so concurrent requests cannot lose
each other's updates.

Usage:
    from store import init_store, get_store
    init_store(app)                  # called once in create_app()
    with get_store().transaction() as txn:
        txn.dataset.users.append(user)
        txn.mark_dirty()
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import threading
import uuid
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from flask import current_app

from errors import CorruptStoreError, StoreUnavailableError
from models import Dataset

logger = logging.getLogger(__name__)

EXTENSION_KEY = "studyhub_store"


# ── Protocol ───────────────────────────────────────────────

class DatasetStore(Protocol):
    def load(self) -> Dataset: ...
    def save(self, dataset: Dataset) -> None: ...


def _dump(dataset: Dataset) -> str:
    return json.dumps(dataset.to_dict(), indent=2, ensure_ascii=False) + "\n"


def _parse(raw: str, source: str) -> Dataset:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CorruptStoreError(source, f"Dataset at {source} is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise CorruptStoreError(source, f"Dataset at {source} is nested too deeply") from exc
    try:
        return Dataset.from_dict(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise CorruptStoreError(source, f"Dataset at {source} has an invalid shape: {exc}") from exc


# ── JSON file implementation ──────────────────────────────

class JsonFileStore:
    """Dataset stored as a single JSON file on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Dataset:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptStoreError(str(self.path), f"Dataset at {self.path} is not UTF-8 text") from exc
        except OSError as exc:
            raise StoreUnavailableError(str(self.path), f"Cannot read dataset at {self.path}: {exc}") from exc
        return _parse(raw, str(self.path))

    def save(self, dataset: Dataset) -> None:
        """Write to a sibling temp file, then rename over the target."""
        payload = _dump(dataset)
        tmp = self.path.with_name(f".{self.path.name}.{uuid.uuid4().hex[:8]}.tmp")
        try:
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StoreUnavailableError(str(self.path), f"Cannot write dataset to {self.path}: {exc}") from exc
        logger.debug("Saved dataset to %s (%d users)", self.path, len(dataset.users))


# ── In-memory implementation ──────────────────────────────

class InMemoryStore:
    """Keeps the serialized document in memory; every load is a fresh copy."""

    def __init__(self, dataset: Dataset | None = None) -> None:
        self._raw = _dump(dataset or Dataset())

    def load(self) -> Dataset:
        return _parse(self._raw, "<memory>")

    def save(self, dataset: Dataset) -> None:
        self._raw = _dump(dataset)


# ── Serializing boundary ──────────────────────────────────

class Transaction:
    """A loaded dataset plus whether it needs to be written back."""

    def __init__(self, dataset: Dataset) -> None:
        self.dataset = dataset
        self.dirty = False

    def mark_dirty(self) -> None:
        self.dirty = True


class GuardedStore:
    """Runs every read and every read-modify-write under a single lock."""

    def __init__(self, backend: DatasetStore) -> None:
        self.backend = backend
        self._lock = threading.RLock()

    @contextlib.contextmanager
    def read(self) -> Iterator[Dataset]:
        with self._lock:
            yield self.backend.load()

    @contextlib.contextmanager
    def transaction(self) -> Iterator[Transaction]:
        """Load, hand the dataset to the caller, save if it was marked dirty.

        If the block raises, nothing is saved.
        """
        with self._lock:
            txn = Transaction(self.backend.load())
            yield txn
            if txn.dirty:
                self.backend.save(txn.dataset)


# ── App wiring ────────────────────────────────────────────

def init_store(app) -> GuardedStore:
    """Build the configured backend and attach it to the app."""
    from seed_data import ensure_seeded, seed_dataset

    backend_name = app.config.get("STORE_BACKEND", "json")
    if backend_name == "memory":
        backend: DatasetStore = InMemoryStore(seed_dataset())
        app.logger.info("Dataset store: in-memory")
    elif backend_name == "json":
        backend = JsonFileStore(app.config["DATA_FILE"])
        ensure_seeded(backend)
        app.logger.info("Dataset store: JSON file (%s)", backend.path)
    else:
        raise ValueError(f"Unknown STORE_BACKEND: {backend_name!r}")

    store = GuardedStore(backend)
    app.extensions[EXTENSION_KEY] = store
    return store


def get_store() -> GuardedStore:
    """Return the store attached to the current app."""
    return current_app.extensions[EXTENSION_KEY]
