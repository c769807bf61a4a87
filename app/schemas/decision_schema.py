# app/schemas/decision_schema.py
from dataclasses import asdict
from typing import Any, Optional
from datetime import datetime
from domain.entities import Decision
from domain.services.similarity import ScoredDecision
from app.schemas.common import CamelModel, Number


class StakeholdersPayload(CamelModel):
    key_stakeholders: Optional[str] = None
    impact_analysis: Optional[str] = None
    communication_plan: Optional[str] = None


class OutcomesPayload(CamelModel):
    expected: Optional[str] = None
    actual: Optional[str] = None
    success_metrics: Optional[str] = None
    potential_risks: Optional[str] = None
    risk_mitigation: Optional[str] = None


class DecisionPayload(CamelModel):
    """
    Decision body for POST and PATCH.

    Every field is optional here: presence, ranges and enumerations are checked
    by the domain validator so all violations are reported together. Affected
    areas must be an array of strings.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    rationale: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    impact_score: Optional[float] = None
    urgency_level: Optional[float] = None
    confidence_level: Optional[float] = None
    current_mood: Optional[float] = None
    affected_areas: Optional[list[str]] = None
    stakeholders: Optional[StakeholdersPayload] = None
    outcomes: Optional[OutcomesPayload] = None
    deadline: Optional[datetime] = None
    approval_required: Optional[bool] = None
    backup_plan: Optional[bool] = None

    def to_payload(self) -> dict[str, Any]:
        """Only the fields the caller actually sent, snake_case."""
        return self.model_dump(exclude_unset=True)


class StakeholdersOut(CamelModel):
    key_stakeholders: str
    impact_analysis: str
    communication_plan: str


class OutcomesOut(CamelModel):
    expected: str
    actual: str = ""
    success_metrics: str
    potential_risks: str
    risk_mitigation: str


class DecisionOut(CamelModel):
    id: str
    title: str
    description: str
    rationale: str
    category: str
    status: str
    impact_score: Number
    urgency_level: Number
    confidence_level: Number
    current_mood: Number
    affected_areas: list[str]
    stakeholders: StakeholdersOut
    outcomes: OutcomesOut
    deadline: Optional[datetime] = None
    approval_required: bool
    backup_plan: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, decision: Decision) -> "DecisionOut":
        return cls.model_validate(asdict(decision))


class SimilarDecisionOut(DecisionOut):
    similarity: float

    @classmethod
    def from_scored(cls, scored: ScoredDecision) -> "SimilarDecisionOut":
        return cls.model_validate({**asdict(scored.decision), "similarity": scored.similarity})


class DecisionResponse(CamelModel):
    decision: DecisionOut


class DecisionListResponse(CamelModel):
    decisions: list[DecisionOut]
    total: int
    pages: int
    current_page: int


class SimilarDecisionsResponse(CamelModel):
    decisions: list[SimilarDecisionOut]
