"""Read-only queries over the learning-material catalog."""

from __future__ import annotations

from typing import Optional

from errors import NotFoundError
from models import Material
from store import GuardedStore


class CatalogService:
    def __init__(self, store: GuardedStore):
        self.store = store

    def list_materials(self, query: Optional[str] = None) -> list[Material]:
        """All materials, or those whose title, content or type contains ``query``.

        Matching is case-insensitive and keeps the persisted order.
        """
        needle = (query or "").strip().lower()
        with self.store.read() as dataset:
            if not needle:
                return list(dataset.materials)
            return [m for m in dataset.materials if m.matches(needle)]

    def get_material(self, material_id: str) -> Material:
        with self.store.read() as dataset:
            material = dataset.material_by_id(material_id)
        if material is None:
            raise NotFoundError("material", material_id)
        return material

    def material_types(self) -> list[str]:
        seen: list[str] = []
        with self.store.read() as dataset:
            for m in dataset.materials:
                if m.type and m.type not in seen:
                    seen.append(m.type)
        return seen
