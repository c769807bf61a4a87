from .create_decision import CreateDecisionService
from .get_decision import GetDecisionService
from .list_decisions import ListDecisionsService
from .update_decision import UpdateDecisionService
from .delete_decision import DeleteDecisionService
from .similar_decisions import SimilarDecisionsService
from .decision_analytics import DecisionMetricsService, DashboardService, TimelineService
from .goals import GoalService
from .projects import ProjectService

__all__ = [
    "CreateDecisionService", "GetDecisionService", "ListDecisionsService",
    "UpdateDecisionService", "DeleteDecisionService", "SimilarDecisionsService",
    "DecisionMetricsService", "DashboardService", "TimelineService",
    "GoalService", "ProjectService",
]
