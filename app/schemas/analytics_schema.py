from datetime import datetime
from app.schemas.common import CamelModel, Number
from app.schemas.decision_schema import DecisionOut


class RiskAnalysisOut(CamelModel):
    high_risk: int
    medium_risk: int
    low_risk: int


class MonthlyTrendOut(CamelModel):
    month: str
    count: int
    avg_impact: Number


class DecisionMetricsResponse(CamelModel):
    total_decisions: int
    average_impact_score: Number
    risk_analysis: RiskAnalysisOut
    monthly_trends: list[MonthlyTrendOut]


class DashboardResponse(CamelModel):
    decisions: int
    goals: int
    projects: int
    high_impact_decisions: int
    recent_decisions: list[DecisionOut]
    monthly_trends: list[MonthlyTrendOut]


class TimelineEventOut(CamelModel):
    date: datetime
    title: str
    description: str


class TimelineResponse(CamelModel):
    events: list[TimelineEventOut]
