from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from .decision import utcnow


@dataclass
class Project:
    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    progress: float = 0
    team: int = 0
    decisions: list[str] = field(default_factory=list)

    @staticmethod
    def create(fields: dict[str, Any]) -> 'Project':
        now = utcnow()
        return Project(id=str(uuid4()), created_at=now, updated_at=now, **_mutable(fields))

    def apply(self, fields: dict[str, Any]) -> 'Project':
        return replace(self, updated_at=utcnow(), **_mutable(fields))

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "deadline": self.deadline,
            "progress": self.progress,
            "team": self.team,
            "decisions": list(self.decisions),
        }


def _mutable(fields: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in ("id", "created_at", "updated_at")}
