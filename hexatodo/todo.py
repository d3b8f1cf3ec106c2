"""The todo entity and its JSON-friendly representation."""

from __future__ import annotations

import math
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

_MAX_ID = 2**64 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_seconds(moment: datetime) -> int:
    return math.floor(moment.timestamp())


def _from_seconds(value: Any, name: str) -> datetime:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"`{name}` must be an integer timestamp")
    try:
        return datetime.fromtimestamp(value, timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"`{name}` is out of range") from exc


@dataclass
class Todo:
    """A task with a title, a description and a completion flag."""

    id: int
    title: str
    completed: bool = False
    description: str = ""
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def new(cls, title: str, description: str) -> "Todo":
        """Create an open todo with a random 64-bit id, stamped now."""
        now = _utcnow()
        return cls(
            id=secrets.randbits(64),
            title=title,
            completed=False,
            description=description,
            created_at=now,
            updated_at=now,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the stored form; timestamps are whole Unix seconds."""
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "description": self.description,
            "created_at": _to_seconds(self.created_at),
            "updated_at": _to_seconds(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Todo":
        """Build a todo from its stored form, raising ValueError if invalid."""
        if not isinstance(data, Mapping):
            raise ValueError("a todo must be a JSON object")
        for key in ("id", "title", "completed", "description", "created_at", "updated_at"):
            if key not in data:
                raise ValueError(f"missing field `{key}`")
        todo_id = data["id"]
        if isinstance(todo_id, bool) or not isinstance(todo_id, int) or not 0 <= todo_id <= _MAX_ID:
            raise ValueError("`id` must be an unsigned 64-bit integer")
        for key in ("title", "description"):
            if not isinstance(data[key], str):
                raise ValueError(f"`{key}` must be a string")
        if not isinstance(data["completed"], bool):
            raise ValueError("`completed` must be a boolean")
        return cls(
            id=todo_id,
            title=data["title"],
            completed=data["completed"],
            description=data["description"],
            created_at=_from_seconds(data["created_at"], "created_at"),
            updated_at=_from_seconds(data["updated_at"], "updated_at"),
        )

    def __str__(self) -> str:
        icon = "OK" if self.completed else "NOK"
        return f"{icon} - {self.title}"