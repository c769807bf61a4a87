"""
Decision analytics.

Summary statistics over an arbitrary list of decisions, used by the dashboard,
analytics and timeline views. Every function is total over its input: an empty
list yields zeroed output, never an error.

Month boundaries are calendar months in UTC so results do not depend on the
host time zone.
"""
import calendar
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, TypedDict

from domain.entities import Decision
from .normalization import Normalization

HIGH_RISK_MIN_IMPACT = 8
MEDIUM_RISK_MIN_IMPACT = 5
TREND_MONTHS = 6
RECENT_DECISIONS = 5


class RiskAnalysis(TypedDict):
    high_risk: int
    medium_risk: int
    low_risk: int


class MonthlyTrend(TypedDict):
    month: str
    count: int
    avg_impact: float


class DecisionMetrics(TypedDict):
    total_decisions: int
    average_impact_score: float
    risk_analysis: RiskAnalysis
    monthly_trends: list[MonthlyTrend]


class DashboardSummary(TypedDict):
    decisions: int
    goals: int
    projects: int
    high_impact_decisions: int
    recent_decisions: list[Decision]
    monthly_trends: list[MonthlyTrend]


class TimelineEvent(TypedDict):
    date: datetime
    title: str
    description: str


def round_one_decimal(value: float) -> float:
    """Round half away from zero to one decimal place."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def mean_impact(decisions: list[Decision]) -> float:
    if not decisions:
        return 0.0
    return round_one_decimal(sum(d.impact_score for d in decisions) / len(decisions))


def classify_risk(
    impact_score: float,
    high_min: float = HIGH_RISK_MIN_IMPACT,
    medium_min: float = MEDIUM_RISK_MIN_IMPACT,
) -> str:
    if impact_score >= high_min:
        return "high_risk"
    if impact_score >= medium_min:
        return "medium_risk"
    return "low_risk"


def month_windows(now: datetime, months: int = TREND_MONTHS) -> list[tuple[datetime, datetime]]:
    """
    Trailing calendar-month windows ending with the month of ``now``, oldest first.
    Each window is [month_start, next_month_start) in UTC.
    """
    now = Normalization.to_utc(now)
    windows = []
    for offset in range(months - 1, -1, -1):
        start = _shift_month(now.year, now.month, -offset)
        end = _shift_month(start.year, start.month, 1)
        windows.append((start, end))
    return windows


def calculate_decision_metrics(
    decisions: Iterable[Decision],
    now: Optional[datetime] = None,
    months: int = TREND_MONTHS,
    high_min: float = HIGH_RISK_MIN_IMPACT,
    medium_min: float = MEDIUM_RISK_MIN_IMPACT,
) -> DecisionMetrics:
    decisions = list(decisions)
    now = now or datetime.now(timezone.utc)

    risk: RiskAnalysis = {"high_risk": 0, "medium_risk": 0, "low_risk": 0}
    for d in decisions:
        risk[classify_risk(d.impact_score, high_min, medium_min)] += 1

    return {
        "total_decisions": len(decisions),
        "average_impact_score": mean_impact(decisions),
        "risk_analysis": risk,
        "monthly_trends": monthly_trends(decisions, now, months),
    }


def monthly_trends(decisions: list[Decision], now: datetime, months: int = TREND_MONTHS) -> list[MonthlyTrend]:
    trends: list[MonthlyTrend] = []
    for start, end in month_windows(now, months):
        bucket = [d for d in decisions if start <= Normalization.to_utc(d.created_at) < end]
        trends.append({
            "month": calendar.month_abbr[start.month],
            "count": len(bucket),
            "avg_impact": mean_impact(bucket),
        })
    return trends


def build_dashboard_summary(
    decisions: Iterable[Decision],
    goal_count: int,
    project_count: int,
    now: Optional[datetime] = None,
    months: int = TREND_MONTHS,
    high_min: float = HIGH_RISK_MIN_IMPACT,
) -> DashboardSummary:
    decisions = list(decisions)
    now = now or datetime.now(timezone.utc)
    recent = sorted(decisions, key=lambda d: Normalization.to_utc(d.created_at), reverse=True)
    return {
        "decisions": len(decisions),
        "goals": goal_count,
        "projects": project_count,
        "high_impact_decisions": sum(1 for d in decisions if d.impact_score >= high_min),
        "recent_decisions": recent[:RECENT_DECISIONS],
        "monthly_trends": monthly_trends(decisions, now, months),
    }


def build_timeline(decisions: Iterable[Decision]) -> list[TimelineEvent]:
    events: list[TimelineEvent] = [
        {
            "date": Normalization.to_utc(d.created_at),
            "title": d.title,
            "description": f"Created decision in {d.category} category with impact score {d.impact_score}",
        }
        for d in decisions
    ]
    events.sort(key=lambda e: e["date"], reverse=True)
    return events


def _shift_month(year: int, month: int, delta: int) -> datetime:
    index = year * 12 + (month - 1) + delta
    return datetime(index // 12, index % 12 + 1, 1, tzinfo=timezone.utc)
