from dataclasses import asdict
from datetime import datetime
from typing import Any, Optional
from domain.entities import Goal
from app.schemas.common import CamelModel, Number


class GoalPayload(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    progress: Optional[float] = None
    decisions: Optional[list[str]] = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class GoalOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    progress: Number
    decisions: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, goal: Goal) -> "GoalOut":
        return cls.model_validate(asdict(goal))


class GoalResponse(CamelModel):
    goal: GoalOut


class GoalListResponse(CamelModel):
    goals: list[GoalOut]
