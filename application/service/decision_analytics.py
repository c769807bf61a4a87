from datetime import datetime
from typing import Optional
from domain.config import get_analytics_config
from domain.interfaces import DecisionRepository, GoalRepository, ProjectRepository
from domain.services.analytics import (
    DashboardSummary,
    DecisionMetrics,
    TimelineEvent,
    build_dashboard_summary,
    build_timeline,
    calculate_decision_metrics,
)


class DecisionMetricsService:
    def __init__(self, decision_repo: DecisionRepository):
        self.decision_repo = decision_repo

    async def execute(self, now: Optional[datetime] = None) -> DecisionMetrics:
        config = get_analytics_config()
        decisions = await self.decision_repo.get_all_decisions()
        return calculate_decision_metrics(
            decisions,
            now=now,
            months=config.trend_months,
            high_min=config.high_risk_min_impact,
            medium_min=config.medium_risk_min_impact,
        )


class DashboardService:
    def __init__(
        self,
        decision_repo: DecisionRepository,
        goal_repo: GoalRepository,
        project_repo: ProjectRepository,
    ):
        self.decision_repo = decision_repo
        self.goal_repo = goal_repo
        self.project_repo = project_repo

    async def execute(self, now: Optional[datetime] = None) -> DashboardSummary:
        config = get_analytics_config()
        decisions = await self.decision_repo.get_all_decisions()
        return build_dashboard_summary(
            decisions,
            goal_count=await self.goal_repo.count_goals(),
            project_count=await self.project_repo.count_projects(),
            now=now,
            months=config.trend_months,
            high_min=config.high_risk_min_impact,
        )


class TimelineService:
    def __init__(self, decision_repo: DecisionRepository):
        self.decision_repo = decision_repo

    async def execute(self) -> list[TimelineEvent]:
        return build_timeline(await self.decision_repo.get_all_decisions())
