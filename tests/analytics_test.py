# analytics tests

from datetime import datetime, timedelta, timezone

import pytest

from domain.services.analytics import (
    build_dashboard_summary,
    build_timeline,
    calculate_decision_metrics,
    classify_risk,
    mean_impact,
    month_windows,
    round_one_decimal,
)
from factories import make_decision, utc

NOW = utc(2024, 6, 15, 12)


@pytest.fixture
def decisions():
    return [
        make_decision(created_at=utc(2024, 6, 3), impact_score=2, title="Start running"),
        make_decision(created_at=utc(2024, 5, 10), impact_score=5, title="Refinance"),
        make_decision(created_at=utc(2024, 1, 20), impact_score=8, title="New course"),
        make_decision(created_at=utc(2023, 12, 31, 23, 59), impact_score=9, title="Staff offer"),
    ]


def test_empty_input_yields_zeroed_metrics():
    metrics = calculate_decision_metrics([], now=NOW)
    assert metrics["total_decisions"] == 0
    assert metrics["average_impact_score"] == 0.0
    assert metrics["risk_analysis"] == {"high_risk": 0, "medium_risk": 0, "low_risk": 0}
    assert [t["count"] for t in metrics["monthly_trends"]] == [0] * 6
    assert all(t["avg_impact"] == 0.0 for t in metrics["monthly_trends"])


def test_risk_buckets_and_average(decisions):
    metrics = calculate_decision_metrics(decisions, now=NOW)
    assert metrics["total_decisions"] == 4
    assert metrics["average_impact_score"] == 6.0
    assert metrics["risk_analysis"] == {"high_risk": 2, "medium_risk": 1, "low_risk": 1}


def test_monthly_trends_are_calendar_months_oldest_first(decisions):
    trends = calculate_decision_metrics(decisions, now=NOW)["monthly_trends"]
    assert [t["month"] for t in trends] == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
    assert [t["count"] for t in trends] == [1, 0, 0, 0, 1, 1]
    assert [t["avg_impact"] for t in trends] == [8, 0.0, 0.0, 0.0, 5, 2]


def test_month_windows_cross_year_boundary():
    windows = month_windows(utc(2024, 2, 10), months=3)
    assert windows[0] == (utc(2023, 12, 1), utc(2024, 1, 1))
    assert windows[-1] == (utc(2024, 2, 1), utc(2024, 3, 1))


def test_month_windows_use_utc_month_of_now():
    # 23:30 on Jan 31 at UTC-5 is already February in UTC
    eastern = timezone(timedelta(hours=-5))
    windows = month_windows(datetime(2024, 1, 31, 23, 30, tzinfo=eastern), months=1)
    assert windows == [(utc(2024, 2, 1), utc(2024, 3, 1))]


@pytest.mark.parametrize("score,bucket", [
    (10, "high_risk"), (8, "high_risk"), (7.9, "medium_risk"), (5, "medium_risk"), (4.5, "low_risk"), (1, "low_risk"),
])
def test_classify_risk_boundaries(score, bucket):
    assert classify_risk(score) == bucket


def test_rounding_is_half_up():
    assert round_one_decimal(2.25) == 2.3
    assert round_one_decimal(7.6666) == 7.7
    assert mean_impact([make_decision(impact_score=7), make_decision(impact_score=8), make_decision(impact_score=8)]) == 7.7


def test_dashboard_summary(decisions):
    extra = [make_decision(created_at=utc(2024, 6, day), impact_score=3) for day in (4, 5)]
    summary = build_dashboard_summary(decisions + extra, goal_count=2, project_count=1, now=NOW)
    assert summary["decisions"] == 6
    assert summary["goals"] == 2
    assert summary["projects"] == 1
    assert summary["high_impact_decisions"] == 2
    assert [d.created_at.day for d in summary["recent_decisions"]] == [5, 4, 3, 10, 20]
    assert len(summary["monthly_trends"]) == 6


def test_timeline_newest_first(decisions):
    events = build_timeline(decisions)
    assert [e["title"] for e in events] == ["Start running", "Refinance", "New course", "Staff offer"]
    assert events[0]["date"] == utc(2024, 6, 3)
    assert events[0]["description"] == "Created decision in career category with impact score 2"


def test_timeline_empty():
    assert build_timeline([]) == []


def test_dashboard_trend_window_follows_months(decisions):
    summary = build_dashboard_summary(decisions, goal_count=0, project_count=0, now=NOW, months=3)
    assert [t["month"] for t in summary["monthly_trends"]] == ["Apr", "May", "Jun"]
