from .normalization import Normalization
from .validation import validate_decision, validate_goal, validate_project, is_valid_id
from .analytics import calculate_decision_metrics, build_dashboard_summary, build_timeline
from .similarity import rank_similar, category_impact_similarity, ScoredDecision

__all__ = [
    "Normalization",
    "validate_decision", "validate_goal", "validate_project", "is_valid_id",
    "calculate_decision_metrics", "build_dashboard_summary", "build_timeline",
    "rank_similar", "category_impact_similarity", "ScoredDecision",
]
