from dataclasses import asdict
from datetime import datetime
from typing import Optional
from sqlalchemy import Column, String, Boolean, Float, DateTime, Text
from sqlalchemy.orm import Mapped
from domain.entities.decision import Decision, Outcomes, Stakeholders
from domain.services.normalization import Normalization
from infrastructure.db.models.base import Base, JSONDocument, as_utc


class DecisionModel(Base):
    __tablename__ = "decision"
    id: Mapped[str] = Column(String(36), primary_key=True)
    title: Mapped[str] = Column(String(200), nullable=False)
    description: Mapped[str] = Column(Text, nullable=False)
    rationale: Mapped[str] = Column(Text, nullable=False)
    category: Mapped[str] = Column(String(32), nullable=False, index=True)
    status: Mapped[str] = Column(String(16), nullable=False, index=True)
    impact_score: Mapped[float] = Column(Float, nullable=False)
    urgency_level: Mapped[float] = Column(Float, nullable=False)
    confidence_level: Mapped[float] = Column(Float, nullable=False)
    current_mood: Mapped[float] = Column(Float, nullable=False)
    affected_areas: Mapped[list] = Column(JSONDocument, nullable=False)
    stakeholders: Mapped[dict] = Column(JSONDocument, nullable=False)
    outcomes: Mapped[dict] = Column(JSONDocument, nullable=False)
    deadline: Mapped[Optional[datetime]] = Column(DateTime(timezone=True), nullable=True)
    approval_required: Mapped[bool] = Column(Boolean, nullable=False, default=False)
    backup_plan: Mapped[bool] = Column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at: Mapped[datetime] = Column(DateTime(timezone=True), nullable=False)

    def to_domain(self) -> Decision:
        return Decision(
            id=self.id,
            title=self.title,
            description=self.description,
            rationale=self.rationale,
            category=self.category,
            status=self.status,
            impact_score=Normalization.to_number(self.impact_score),
            urgency_level=Normalization.to_number(self.urgency_level),
            confidence_level=Normalization.to_number(self.confidence_level),
            current_mood=Normalization.to_number(self.current_mood),
            affected_areas=list(self.affected_areas or []),
            stakeholders=Stakeholders(**self.stakeholders),
            outcomes=Outcomes(**self.outcomes),
            deadline=as_utc(self.deadline),
            approval_required=bool(self.approval_required),
            backup_plan=bool(self.backup_plan),
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )

    @classmethod
    def from_domain(cls, decision: Decision) -> "DecisionModel":
        model = cls(id=decision.id, created_at=decision.created_at)
        model.copy_from(decision)
        return model

    def copy_from(self, decision: Decision) -> None:
        """Overwrite every mutable column with the values of ``decision``."""
        self.title = decision.title
        self.description = decision.description
        self.rationale = decision.rationale
        self.category = decision.category
        self.status = decision.status
        self.impact_score = decision.impact_score
        self.urgency_level = decision.urgency_level
        self.confidence_level = decision.confidence_level
        self.current_mood = decision.current_mood
        self.affected_areas = list(decision.affected_areas)
        self.stakeholders = asdict(decision.stakeholders)
        self.outcomes = asdict(decision.outcomes)
        self.deadline = decision.deadline
        self.approval_required = decision.approval_required
        self.backup_plan = decision.backup_plan
        self.updated_at = decision.updated_at
