from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from .decision import utcnow


@dataclass
class Goal:
    id: str
    title: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    progress: float = 0
    decisions: list[str] = field(default_factory=list)

    @staticmethod
    def create(fields: dict[str, Any]) -> 'Goal':
        now = utcnow()
        return Goal(id=str(uuid4()), created_at=now, updated_at=now, **_mutable(fields))

    def apply(self, fields: dict[str, Any]) -> 'Goal':
        return replace(self, updated_at=utcnow(), **_mutable(fields))

    def to_payload(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "deadline": self.deadline,
            "progress": self.progress,
            "decisions": list(self.decisions),
        }


def _mutable(fields: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in ("id", "created_at", "updated_at")}
