"""
Material completion and point awards.

Each (user, material) pair moves from not-completed to completed exactly
once. The first completion appends the material id and awards
``AWARD_POINTS``; repeating it changes nothing and writes nothing, so
``points == AWARD_POINTS * len(completed)`` always holds.

Material ids are not checked against the catalog: a user may complete an id
that has no matching material.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from errors import NotFoundError
from models import User
from store import GuardedStore

logger = logging.getLogger(__name__)

AWARD_POINTS = 10


@dataclass(frozen=True)
class ProgressSummary:
    points: int
    completed_count: int
    total_materials: int

    @property
    def percent_complete(self) -> int:
        if self.total_materials <= 0:
            return 0
        return min(100, int(self.completed_count / self.total_materials * 100))


@dataclass(frozen=True)
class CompletionResult:
    user: User
    awarded: int


class ProgressService:
    def __init__(self, store: GuardedStore):
        self.store = store

    def complete_material(self, user_id: str, material_id: str) -> User:
        """Mark ``material_id`` completed for the user and award points once."""
        return self.record_completion(user_id, material_id).user

    def record_completion(self, user_id: str, material_id: str) -> CompletionResult:
        """Like complete_material, but also reports how many points were awarded."""
        with self.store.transaction() as txn:
            user = txn.dataset.user_by_id(user_id) if user_id else None
            if user is None:
                raise NotFoundError("user", user_id)
            if user.has_completed(material_id):
                return CompletionResult(user=user, awarded=0)
            user.completed.append(material_id)
            user.points += AWARD_POINTS
            txn.mark_dirty()

        logger.info("User %s completed %s (+%d, total %d)", user.id, material_id, AWARD_POINTS, user.points)
        return CompletionResult(user=user, awarded=AWARD_POINTS)

    def is_completed(self, user_id: str, material_id: str) -> bool:
        with self.store.read() as dataset:
            user = dataset.user_by_id(user_id)
        if user is None:
            raise NotFoundError("user", user_id)
        return user.has_completed(material_id)

    def progress_summary(self, user_id: str) -> ProgressSummary:
        with self.store.read() as dataset:
            user = dataset.user_by_id(user_id)
            if user is None:
                raise NotFoundError("user", user_id)
            catalog_ids = {m.id for m in dataset.materials}
            total = len(dataset.materials)
        done = sum(1 for mid in user.completed if mid in catalog_ids)
        return ProgressSummary(points=user.points, completed_count=done, total_materials=total)
