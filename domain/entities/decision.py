from dataclasses import asdict, dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import uuid4


class Category(Enum):
    PERSONAL = "personal"
    PROFESSIONAL = "professional"
    FINANCIAL = "financial"
    HEALTH = "health"
    RELATIONSHIPS = "relationships"
    CAREER = "career"
    EDUCATION = "education"


class DecisionStatus(Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class AffectedArea(Enum):
    FINANCIAL = "financial"
    PRODUCTIVITY = "productivity"
    WELLBEING = "wellbeing"
    RELATIONSHIPS = "relationships"
    CAREER = "career"
    SECURITY = "security"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Stakeholders:
    key_stakeholders: str
    impact_analysis: str
    communication_plan: str


@dataclass
class Outcomes:
    expected: str
    success_metrics: str
    potential_risks: str
    risk_mitigation: str
    actual: str = ""


@dataclass
class Decision:
    id: str
    title: str
    description: str
    rationale: str
    category: str
    impact_score: float
    urgency_level: float
    confidence_level: float
    current_mood: float
    affected_areas: list[str]
    stakeholders: Stakeholders
    outcomes: Outcomes
    created_at: datetime
    updated_at: datetime
    status: str = DecisionStatus.ACTIVE.value
    deadline: Optional[datetime] = None
    approval_required: bool = False
    backup_plan: bool = False

    @staticmethod
    def create(fields: dict[str, Any]) -> 'Decision':
        """Build a new decision from an already validated payload."""
        now = utcnow()
        return Decision(
            id=str(uuid4()),
            created_at=now,
            updated_at=now,
            **Decision._unpack(fields),
        )

    def apply(self, fields: dict[str, Any]) -> 'Decision':
        """Return a copy carrying the validated fields and a fresh updated_at."""
        return replace(self, updated_at=utcnow(), **Decision._unpack(fields))

    def to_payload(self) -> dict[str, Any]:
        """Mutable fields as a plain dict (nested composites as dicts)."""
        data = asdict(self)
        for key in ("id", "created_at", "updated_at"):
            data.pop(key)
        return data

    @staticmethod
    def _unpack(fields: dict[str, Any]) -> dict[str, Any]:
        data = dict(fields)
        for key in ("id", "created_at", "updated_at"):
            data.pop(key, None)
        data["stakeholders"] = Stakeholders(**data["stakeholders"])
        data["outcomes"] = Outcomes(**data["outcomes"])
        data["affected_areas"] = list(data["affected_areas"])
        return data
