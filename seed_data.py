"""
Seed Data — starter catalog and first-run dataset creation.

The JSON store is created with an empty user list and the default materials
the first time the app starts against a missing data file.

Usage:
    python seed_data.py                    # Write data/data.json if it is missing
    python seed_data.py path/to/data.json  # Same, for another file
    python seed_data.py --reset            # Overwrite with a fresh seed
"""

from __future__ import annotations

import logging
import sys

from errors import StoreUnavailableError
from models import Dataset, Material
from store import JsonFileStore

logger = logging.getLogger(__name__)


DEFAULT_MATERIALS = [
    {"id": "m1", "title": "Intro to Algebra", "type": "lesson",
     "content": "Variables, expressions and solving simple linear equations."},
    {"id": "m2", "title": "Algebra Practice Quiz", "type": "quiz",
     "content": "Ten short questions on linear equations and inequalities."},
    {"id": "m3", "title": "The Water Cycle", "type": "video",
     "content": "Evaporation, condensation and precipitation explained with diagrams."},
    {"id": "m4", "title": "Essay Structure Basics", "type": "lesson",
     "content": "How to plan an introduction, body paragraphs and a conclusion."},
    {"id": "m5", "title": "Present Perfect Tense", "type": "lesson",
     "content": "Forming and using the present perfect in English grammar."},
]


def seed_dataset() -> Dataset:
    """A dataset with no users and the default materials."""
    return Dataset(users=[], materials=[Material.from_dict(m) for m in DEFAULT_MATERIALS])


def ensure_seeded(backend: JsonFileStore, reset: bool = False) -> bool:
    """Write the seed dataset if the file is missing (or always, with ``reset``).

    Returns True if a file was written.
    """
    if backend.exists() and not reset:
        return False
    try:
        backend.path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StoreUnavailableError(str(backend.path), f"Cannot create {backend.path.parent}: {exc}") from exc
    backend.save(seed_dataset())
    logger.info("Seeded dataset at %s with %d materials", backend.path, len(DEFAULT_MATERIALS))
    return True


if __name__ == "__main__":
    from config import BaseConfig

    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    target = JsonFileStore(args[0] if args else BaseConfig.DATA_FILE)
    written = ensure_seeded(target, reset="--reset" in sys.argv)
    if written:
        print(f"[Seed] Wrote {target.path}")
    else:
        print(f"[Seed] {target.path} already exists; use --reset to overwrite.")
