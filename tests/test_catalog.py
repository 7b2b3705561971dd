"""Tests for catalog.py — listing, search, fetch by id."""

from __future__ import annotations

import pytest

from errors import NotFoundError


class TestListMaterials:
    def test_no_query_returns_all_in_order(self, catalog):
        ids = [m.id for m in catalog.list_materials()]
        assert ids == ["alg-1", "geo-1", "quiz-1", "vid-1", "alg-2"]

    def test_empty_query_returns_all(self, catalog):
        assert len(catalog.list_materials("")) == 5

    def test_whitespace_query_returns_all(self, catalog):
        assert len(catalog.list_materials("   ")) == 5

    def test_search_matches_title_content_and_type(self, catalog):
        # title "Algebra Basics", content "...ALGEBRA...", type "Algebra-Workshop"
        ids = [m.id for m in catalog.list_materials("algebra")]
        assert ids == ["alg-1", "quiz-1", "alg-2"]

    def test_search_is_case_insensitive(self, catalog):
        assert [m.id for m in catalog.list_materials("PHOTO")] == ["vid-1"]

    def test_search_by_type(self, catalog):
        assert [m.id for m in catalog.list_materials("quiz")] == ["quiz-1"]

    def test_search_no_match(self, catalog):
        assert catalog.list_materials("calculus") == []

    def test_search_strips_surrounding_whitespace(self, catalog):
        assert [m.id for m in catalog.list_materials("  triangles ")] == ["geo-1"]


class TestGetMaterial:
    def test_get_existing(self, catalog):
        m = catalog.get_material("geo-1")
        assert m.title == "Triangles"
        assert m.type == "lesson"

    def test_get_missing_raises(self, catalog):
        with pytest.raises(NotFoundError) as exc_info:
            catalog.get_material("nonexistent-id")
        assert exc_info.value.kind == "material"
        assert exc_info.value.key == "nonexistent-id"

    def test_id_match_is_exact(self, catalog):
        with pytest.raises(NotFoundError):
            catalog.get_material("ALG-1")


class TestMaterialTypes:
    def test_distinct_types_first_seen_order(self, catalog):
        assert catalog.material_types() == ["lesson", "quiz", "video", "Algebra-Workshop"]
