from fastapi import APIRouter, Depends

from application.service import DashboardService, DecisionMetricsService, TimelineService
from domain.interfaces import DecisionRepository, GoalRepository, ProjectRepository
from app.dependencies import get_decision_repo, get_goal_repo, get_project_repo
from app.schemas.analytics_schema import DashboardResponse, DecisionMetricsResponse, TimelineResponse
from app.schemas.decision_schema import DecisionOut

router = APIRouter(prefix="/api", tags=["Analytics"])


@router.get("/analytics")
async def decision_metrics(
    decision_repo: DecisionRepository = Depends(get_decision_repo),
) -> DecisionMetricsResponse:
    """Totals, average impact, risk buckets and the trailing monthly trend."""
    metrics = await DecisionMetricsService(decision_repo).execute()
    return DecisionMetricsResponse.model_validate(metrics)


@router.get("/dashboard")
async def dashboard(
    decision_repo: DecisionRepository = Depends(get_decision_repo),
    goal_repo: GoalRepository = Depends(get_goal_repo),
    project_repo: ProjectRepository = Depends(get_project_repo),
) -> DashboardResponse:
    summary = await DashboardService(decision_repo, goal_repo, project_repo).execute()
    return DashboardResponse.model_validate({
        **summary,
        "recent_decisions": [DecisionOut.from_domain(d) for d in summary["recent_decisions"]],
    })


@router.get("/timeline")
async def timeline(decision_repo: DecisionRepository = Depends(get_decision_repo)) -> TimelineResponse:
    events = await TimelineService(decision_repo).execute()
    return TimelineResponse.model_validate({"events": events})
