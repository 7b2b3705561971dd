"""
Domain records for StudyHub: users, learning materials and the dataset
document that holds both.

Field names match the persisted JSON exactly. Keys we do not model are kept
in ``extra`` and written back on save so existing data files round-trip.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

USER_FIELDS = ("id", "name", "email", "points", "completed")
MATERIAL_FIELDS = ("id", "title", "content", "type")


def _require_str(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _extra(data: dict, known: tuple[str, ...]) -> dict[str, Any]:
    return {k: copy.deepcopy(v) for k, v in data.items() if k not in known}


@dataclass
class User:
    id: str
    name: str
    email: str
    points: int = 0
    completed: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def has_completed(self, material_id: str) -> bool:
        return material_id in self.completed

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.extra)
        data.update({
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "points": self.points,
            "completed": list(self.completed),
        })
        return data

    @staticmethod
    def from_dict(data: dict[str, Any]) -> User:
        if not isinstance(data, dict):
            raise TypeError("user record must be an object")
        points = data["points"]
        # bool is an int subclass; reject it explicitly
        if not isinstance(points, int) or isinstance(points, bool) or points < 0:
            raise ValueError(f"points must be a non-negative integer, got {points!r}")
        completed = data["completed"]
        if not isinstance(completed, list) or not all(isinstance(c, str) for c in completed):
            raise TypeError("completed must be a list of material ids")
        return User(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            email=_require_str(data, "email"),
            points=points,
            completed=list(completed),
            extra=_extra(data, USER_FIELDS),
        )


@dataclass(frozen=True)
class Material:
    id: str
    title: str
    content: str
    type: str
    extra: dict[str, Any] = field(default_factory=dict, repr=False, compare=False, hash=False)

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on title, content or type.

        ``needle`` is expected to be lower-cased already.
        """
        return (
            needle in self.title.lower()
            or needle in self.content.lower()
            or needle in self.type.lower()
        )

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.extra)
        data.update({
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "type": self.type,
        })
        return data

    @staticmethod
    def from_dict(data: dict[str, Any]) -> Material:
        if not isinstance(data, dict):
            raise TypeError("material record must be an object")
        return Material(
            id=_require_str(data, "id"),
            title=_require_str(data, "title"),
            content=_require_str(data, "content"),
            type=_require_str(data, "type"),
            extra=_extra(data, MATERIAL_FIELDS),
        )


@dataclass
class Dataset:
    """The whole persisted state: every user and every material."""

    users: list[User] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def user_by_id(self, user_id: str | None) -> User | None:
        for user in self.users:
            if user.id == user_id:
                return user
        return None

    def user_by_email(self, email: str | None) -> User | None:
        for user in self.users:
            if user.email == email:
                return user
        return None

    def material_by_id(self, material_id: str | None) -> Material | None:
        for material in self.materials:
            if material.id == material_id:
                return material
        return None

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.extra)
        data["users"] = [u.to_dict() for u in self.users]
        data["materials"] = [m.to_dict() for m in self.materials]
        return data

    @staticmethod
    def from_dict(data: Any) -> Dataset:
        """Build a Dataset from parsed JSON.

        Raises KeyError, TypeError or ValueError when the document does not
        have the expected shape.
        """
        if not isinstance(data, dict):
            raise TypeError("dataset document must be an object")
        users = data["users"]
        materials = data["materials"]
        if not isinstance(users, list) or not isinstance(materials, list):
            raise TypeError("users and materials must be lists")
        return Dataset(
            users=[User.from_dict(u) for u in users],
            materials=[Material.from_dict(m) for m in materials],
            extra={k: copy.deepcopy(v) for k, v in data.items() if k not in ("users", "materials")},
        )
