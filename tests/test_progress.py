"""Tests for progress.py — completion, idempotent awards, progress summary."""

from __future__ import annotations

import json
import pytest

from errors import NotFoundError
from progress import AWARD_POINTS, ProgressService


@pytest.fixture
def user(accounts):
    return accounts.create_user("Ann", "ann@x.com")


class TestCompleteMaterial:
    def test_first_completion_awards_points(self, progress, user):
        updated = progress.complete_material(user.id, "alg-1")
        assert updated.completed == ["alg-1"]
        assert updated.points == AWARD_POINTS == 10

    def test_completion_persisted(self, progress, user, data_file):
        progress.complete_material(user.id, "alg-1")
        raw = json.loads(data_file.read_text())
        assert raw["users"][0]["completed"] == ["alg-1"]
        assert raw["users"][0]["points"] == 10

    def test_second_completion_is_noop(self, progress, user):
        progress.complete_material(user.id, "alg-1")
        again = progress.complete_material(user.id, "alg-1")
        assert again.completed == ["alg-1"]
        assert again.points == 10

    def test_repeat_completion_skips_save(self, progress, user, store, monkeypatch):
        progress.complete_material(user.id, "alg-1")
        saves = []
        monkeypatch.setattr(store.backend, "save", lambda ds: saves.append(ds))
        progress.complete_material(user.id, "alg-1")
        assert saves == []

    def test_points_invariant_over_sequence(self, progress, user, accounts):
        for mid in ["alg-1", "geo-1", "alg-1", "quiz-1", "geo-1", "vid-1", "vid-1"]:
            progress.complete_material(user.id, mid)
        stored = accounts.find_by_id(user.id)
        assert stored.completed == ["alg-1", "geo-1", "quiz-1", "vid-1"]
        assert stored.points == AWARD_POINTS * len(stored.completed)

    def test_unknown_material_still_completes(self, progress, user):
        updated = progress.complete_material(user.id, "not-in-catalog")
        assert updated.completed == ["not-in-catalog"]
        assert updated.points == 10

    def test_unknown_user_raises(self, progress):
        with pytest.raises(NotFoundError) as exc_info:
            progress.complete_material("ghost", "alg-1")
        assert exc_info.value.kind == "user"

    def test_other_users_untouched(self, progress, user, accounts):
        other = accounts.create_user("Bob", "bob@x.com")
        progress.complete_material(user.id, "alg-1")
        assert accounts.find_by_id(other.id).points == 0


class TestRecordCompletion:
    def test_reports_award(self, progress, user):
        first = progress.record_completion(user.id, "geo-1")
        second = progress.record_completion(user.id, "geo-1")
        assert first.awarded == 10
        assert second.awarded == 0
        assert second.user.points == 10


class TestQueries:
    def test_is_completed(self, progress, user):
        assert not progress.is_completed(user.id, "alg-1")
        progress.complete_material(user.id, "alg-1")
        assert progress.is_completed(user.id, "alg-1")

    def test_is_completed_unknown_user(self, progress):
        with pytest.raises(NotFoundError):
            progress.is_completed("ghost", "alg-1")

    def test_summary(self, progress, user):
        progress.complete_material(user.id, "alg-1")
        progress.complete_material(user.id, "geo-1")
        summary = progress.progress_summary(user.id)
        assert summary.points == 20
        assert summary.completed_count == 2
        assert summary.total_materials == 5
        assert summary.percent_complete == 40

    def test_summary_ignores_ids_outside_catalog(self, progress, user):
        progress.complete_material(user.id, "not-in-catalog")
        summary = progress.progress_summary(user.id)
        assert summary.points == 10
        assert summary.completed_count == 0
        assert summary.percent_complete == 0

    def test_summary_empty_catalog(self):
        from store import GuardedStore, InMemoryStore
        from models import Dataset, User
        store = GuardedStore(InMemoryStore(Dataset(users=[User(id="u1", name="A", email="a@x.com")])))
        summary = ProgressService(store).progress_summary("u1")
        assert summary.total_materials == 0
        assert summary.percent_complete == 0
