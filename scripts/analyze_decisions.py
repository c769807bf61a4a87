#!/usr/bin/env python3
"""
Decision Analytics Report

Runs the analytics, timeline and similarity computations over decisions loaded
from a JSON file, without a database.

Usage:
    python scripts/analyze_decisions.py tests/data/decisions_sample.json
    python scripts/analyze_decisions.py tests/data/decisions_sample.json --similar-to <decision-id>
    python scripts/analyze_decisions.py tests/data/decisions_sample.json --now 2024-06-15T00:00:00Z --json

Arguments:
    file_path: Path to a JSON file shaped like {"decisions": [...]} (camelCase records)
    --similar-to: Also rank decisions similar to this id
    --now: Reference instant for the monthly trend windows
    --json: Output raw JSON instead of formatted text
"""
import argparse
import json
import os
import sys
from dataclasses import replace

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from pydantic import ValidationError

from app.schemas.decision_schema import DecisionPayload
from domain.entities import Decision
from domain.exceptions import ValidationFailed
from domain.services.analytics import build_timeline, calculate_decision_metrics
from domain.services.normalization import Normalization
from domain.services.similarity import rank_similar
from domain.services.validation import validate_decision


def load_decisions(file_path: str) -> tuple[list[Decision], list[str]]:
    """Load and validate decisions; invalid records are reported, not fatal."""
    with open(file_path, "r") as f:
        raw = json.load(f)

    records = raw["decisions"] if isinstance(raw, dict) else raw
    decisions: list[Decision] = []
    rejected: list[str] = []
    for index, record in enumerate(records):
        label = record.get("id") or f"#{index}"
        try:
            fields = validate_decision(DecisionPayload.model_validate(record).to_payload())
        except ValidationFailed as e:
            rejected.append(f"{label}: {'; '.join(e.errors)}")
            continue
        except ValidationError as e:
            rejected.append(f"{label}: {e.error_count()} malformed field(s)")
            continue

        decision = Decision.create(fields)
        created = Normalization.parse_datetime(record.get("createdAt")) or decision.created_at
        updated = Normalization.parse_datetime(record.get("updatedAt")) or created
        decisions.append(replace(decision, id=record.get("id") or decision.id, created_at=created, updated_at=updated))
    return decisions, rejected


def format_report(metrics: dict, timeline: list, similar: list, rejected: list[str]) -> str:
    """Format the report for human-readable output."""
    lines = []

    lines.append("=" * 60)
    lines.append("DECISION ANALYTICS")
    lines.append("=" * 60)

    lines.append(f"\nTotal Decisions: {metrics['total_decisions']}")
    lines.append(f"Average Impact: {metrics['average_impact_score']}")

    risk = metrics["risk_analysis"]
    lines.append("\n--- Risk ---")
    lines.append(f"High: {risk['high_risk']}  Medium: {risk['medium_risk']}  Low: {risk['low_risk']}")

    lines.append("\n--- Monthly Trends ---")
    for trend in metrics["monthly_trends"]:
        lines.append(f"  {trend['month']:<4} {trend['count']:>3} decisions  avg impact {trend['avg_impact']}")

    lines.append("\n--- Timeline ---")
    for event in timeline:
        lines.append(f"  {event['date']:%Y-%m-%d}  {event['title']}")

    if similar:
        lines.append("\n--- Similar Decisions ---")
        for scored in similar:
            lines.append(f"  {scored.similarity:.2f}  {scored.decision.title}")

    if rejected:
        lines.append("\n--- Rejected Records ---")
        for reason in rejected:
            lines.append(f"  • {reason}")

    lines.append("\n" + "=" * 60)

    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description="Summarize a set of decisions"
    )
    parser.add_argument(
        "file_path",
        help="Path to decisions JSON file"
    )
    parser.add_argument(
        "--similar-to",
        help="Rank decisions similar to this decision id",
        default=None
    )
    parser.add_argument(
        "--now",
        help="Reference instant (ISO-8601) for monthly trends",
        default=None
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output raw JSON"
    )

    args = parser.parse_args()

    try:
        decisions, rejected = load_decisions(args.file_path)
    except FileNotFoundError:
        print(f"Error: File not found: {args.file_path}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.file_path}: {e}")
        sys.exit(1)

    try:
        now = Normalization.parse_datetime(args.now)
    except ValueError:
        print(f"Error: --now is not an ISO-8601 date: {args.now}")
        sys.exit(1)

    metrics = calculate_decision_metrics(decisions, now=now)
    timeline = build_timeline(decisions)

    similar = []
    if args.similar_to:
        reference = next((d for d in decisions if d.id == args.similar_to), None)
        if reference is None:
            print(f"Error: No decision with id {args.similar_to}")
            sys.exit(1)
        similar = rank_similar(reference, decisions)

    if args.json:
        output = {
            "metrics": metrics,
            "timeline": timeline,
            "similar": [{"id": s.decision.id, "title": s.decision.title, "similarity": s.similarity} for s in similar],
            "rejected": rejected,
        }
        print(json.dumps(output, indent=2, default=str))
    else:
        print(format_report(metrics, timeline, similar, rejected))


if __name__ == "__main__":
    main()
