"""
Payload builders and in-memory repositories shared by the tests.
"""
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Optional

from domain.entities import Decision, Goal, Page, Project
from domain.services.validation import validate_decision


def decision_payload(**overrides: Any) -> dict[str, Any]:
    """A valid decision payload (snake_case, as the services receive it)."""
    payload = {
        "title": "Switch teams",
        "description": "Move from platform to the data team",
        "rationale": "More ownership and a better fit for long-term goals",
        "category": "career",
        "impact_score": 7,
        "urgency_level": 3,
        "confidence_level": 6,
        "current_mood": 4,
        "affected_areas": ["career", "productivity"],
        "stakeholders": {
            "key_stakeholders": "Manager, new lead",
            "impact_analysis": "Short-term slowdown during handover",
            "communication_plan": "One-on-one with the manager first",
        },
        "outcomes": {
            "expected": "Lead a pipeline project within six months",
            "success_metrics": "Project shipped, positive review",
            "potential_risks": "Steeper learning curve",
            "risk_mitigation": "Pair with a senior engineer for the first month",
        },
    }
    payload.update(overrides)
    return payload


def decision_body(**overrides: Any) -> dict[str, Any]:
    """A valid decision request body (camelCase, as clients send it)."""
    body = {
        "title": "Switch teams",
        "description": "Move from platform to the data team",
        "rationale": "More ownership and a better fit for long-term goals",
        "category": "career",
        "impactScore": 7,
        "urgencyLevel": 3,
        "confidenceLevel": 6,
        "currentMood": 4,
        "affectedAreas": ["career", "productivity"],
        "stakeholders": {
            "keyStakeholders": "Manager, new lead",
            "impactAnalysis": "Short-term slowdown during handover",
            "communicationPlan": "One-on-one with the manager first",
        },
        "outcomes": {
            "expected": "Lead a pipeline project within six months",
            "successMetrics": "Project shipped, positive review",
            "potentialRisks": "Steeper learning curve",
            "riskMitigation": "Pair with a senior engineer for the first month",
        },
    }
    body.update(overrides)
    return body


def make_decision(created_at: Optional[datetime] = None, **overrides: Any) -> Decision:
    decision = Decision.create(validate_decision(decision_payload(**overrides)))
    if created_at is not None:
        decision = replace(decision, created_at=created_at, updated_at=created_at)
    return decision


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class InMemoryDecisionRepo:
    """DecisionRepository kept in a dict, ordered like the SQL adapter."""

    def __init__(self):
        self.decisions: dict[str, Decision] = {}

    def seed(self, *decisions: Decision) -> None:
        for d in decisions:
            self.decisions[d.id] = d

    def _ordered(self) -> list[Decision]:
        by_id = sorted(self.decisions.values(), key=lambda d: d.id)
        return sorted(by_id, key=lambda d: d.created_at, reverse=True)

    async def save_decision(self, decision: Decision) -> Decision:
        self.decisions[decision.id] = decision
        return decision

    async def get_decision(self, decision_id: str) -> Optional[Decision]:
        return self.decisions.get(decision_id)

    async def list_decisions(self, page, page_size, search=None, category=None, status=None) -> Page[Decision]:
        items = self._ordered()
        if search:
            needle = search.lower()
            items = [d for d in items if needle in d.title.lower() or needle in d.description.lower()]
        if category:
            items = [d for d in items if d.category == category]
        if status:
            items = [d for d in items if d.status == status]
        start = (page - 1) * page_size
        return Page(items=items[start:start + page_size], total=len(items), page=page, page_size=page_size)

    async def get_all_decisions(self) -> list[Decision]:
        return self._ordered()

    async def update_decision(self, decision: Decision) -> Decision:
        self.decisions[decision.id] = decision
        return decision

    async def delete_decision(self, decision_id: str) -> bool:
        return self.decisions.pop(decision_id, None) is not None


class InMemoryGoalRepo:
    def __init__(self):
        self.goals: dict[str, Goal] = {}

    async def save_goal(self, goal: Goal) -> Goal:
        self.goals[goal.id] = goal
        return goal

    async def get_goal(self, goal_id: str) -> Optional[Goal]:
        return self.goals.get(goal_id)

    async def list_goals(self) -> list[Goal]:
        return sorted(self.goals.values(), key=lambda g: g.created_at, reverse=True)

    async def count_goals(self) -> int:
        return len(self.goals)

    async def update_goal(self, goal: Goal) -> Goal:
        self.goals[goal.id] = goal
        return goal

    async def delete_goal(self, goal_id: str) -> bool:
        return self.goals.pop(goal_id, None) is not None


class InMemoryProjectRepo:
    def __init__(self):
        self.projects: dict[str, Project] = {}

    async def save_project(self, project: Project) -> Project:
        self.projects[project.id] = project
        return project

    async def get_project(self, project_id: str) -> Optional[Project]:
        return self.projects.get(project_id)

    async def list_projects(self) -> list[Project]:
        return sorted(self.projects.values(), key=lambda p: p.created_at, reverse=True)

    async def count_projects(self) -> int:
        return len(self.projects)

    async def update_project(self, project: Project) -> Project:
        self.projects[project.id] = project
        return project

    async def delete_project(self, project_id: str) -> bool:
        return self.projects.pop(project_id, None) is not None


