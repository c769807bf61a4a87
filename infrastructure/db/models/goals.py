from datetime import datetime
from typing import Optional
from sqlalchemy import Column, String, Float, DateTime, Text
from sqlalchemy.orm import Mapped
from domain.entities.goal import Goal
from domain.services.normalization import Normalization
from infrastructure.db.models.base import Base, JSONDocument, as_utc


class GoalModel(Base):
    __tablename__ = "goal"
    id: Mapped[str] = Column(String(36), primary_key=True)
    title: Mapped[str] = Column(String(200), nullable=False)
    description: Mapped[Optional[str]] = Column(Text, nullable=True)
    deadline: Mapped[Optional[datetime]] = Column(DateTime(timezone=True), nullable=True)
    progress: Mapped[float] = Column(Float, nullable=False, default=0)
    # Decision ids; not a foreign key, decisions may be deleted independently
    decisions: Mapped[list] = Column(JSONDocument, nullable=False)
    created_at: Mapped[datetime] = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at: Mapped[datetime] = Column(DateTime(timezone=True), nullable=False)

    def to_domain(self) -> Goal:
        return Goal(
            id=self.id,
            title=self.title,
            description=self.description,
            deadline=as_utc(self.deadline),
            progress=Normalization.to_number(self.progress),
            decisions=list(self.decisions or []),
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )

    @classmethod
    def from_domain(cls, goal: Goal) -> "GoalModel":
        model = cls(id=goal.id, created_at=goal.created_at)
        model.copy_from(goal)
        return model

    def copy_from(self, goal: Goal) -> None:
        self.title = goal.title
        self.description = goal.description
        self.deadline = goal.deadline
        self.progress = goal.progress
        self.decisions = list(goal.decisions)
        self.updated_at = goal.updated_at
