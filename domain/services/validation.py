"""
Record validation for decisions, goals and projects.

Each validator is a pure function: it takes a candidate payload (snake_case
field names, nested mappings for composites), collects every violation instead
of stopping at the first one, and either returns the normalized payload ready
for persistence or raises ValidationFailed with the full violation list.
"""
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from domain.entities import AffectedArea, Category, DecisionStatus
from domain.exceptions import ValidationFailed, Violation, ViolationCode
from .normalization import Normalization

CATEGORIES = tuple(c.value for c in Category)
STATUSES = tuple(s.value for s in DecisionStatus)
AFFECTED_AREAS = tuple(a.value for a in AffectedArea)
DEFAULT_STATUS = DecisionStatus.ACTIVE.value

# (field, label, max length)
DECISION_TEXT_FIELDS = (
    ("title", "Title", 200),
    ("description", "Description", 1000),
    ("rationale", "Rationale", 1000),
)
STAKEHOLDER_FIELDS = (
    ("key_stakeholders", "Key Stakeholders", 500),
    ("impact_analysis", "Impact Analysis", 1000),
    ("communication_plan", "Communication Plan", 1000),
)
OUTCOME_FIELDS = (
    ("expected", "Expected Outcome", 1000),
    ("success_metrics", "Success Metrics", 1000),
    ("potential_risks", "Potential Risks", 1000),
    ("risk_mitigation", "Risk Mitigation", 1000),
)
ACTUAL_OUTCOME_MAX = 1000

# (field, label, min, max)
DECISION_NUMERIC_FIELDS = (
    ("impact_score", "Impact Score", 1, 10),
    ("urgency_level", "Urgency Level", 1, 5),
    ("confidence_level", "Confidence Level", 1, 10),
    ("current_mood", "Current Mood", 1, 5),
)

# Composite name -> required sub-fields, used when merging partial updates
DECISION_COMPOSITES = {
    "stakeholders": tuple(name for name, _, _ in STAKEHOLDER_FIELDS),
    "outcomes": tuple(name for name, _, _ in OUTCOME_FIELDS),
}

GOAL_TITLE_MAX = 200
PROJECT_NAME_MAX = 200
AGGREGATE_DESCRIPTION_MAX = 1000


def is_valid_id(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


def validate_decision(payload: Mapping[str, Any]) -> dict[str, Any]:
    """
    Validate and normalize a full decision payload.

    Raises:
        ValidationFailed: with one violation per offending field (one per
            offending entry for affected areas).
    """
    violations: list[Violation] = []
    result: dict[str, Any] = {}

    for name, label, max_length in DECISION_TEXT_FIELDS:
        result[name] = _required_text(payload.get(name), name, label, max_length, violations)

    result["category"] = _choice(payload.get("category"), "category", "Category", CATEGORIES, violations)

    status = payload.get("status")
    if status is None:
        result["status"] = DEFAULT_STATUS
    else:
        result["status"] = _choice(status, "status", "Status", STATUSES, violations, required=False)

    for name, label, low, high in DECISION_NUMERIC_FIELDS:
        result[name] = _bounded_number(payload.get(name), name, label, low, high, violations)

    result["affected_areas"] = _affected_areas(payload.get("affected_areas"), violations)

    result["stakeholders"] = _composite(payload.get("stakeholders"), "stakeholders", STAKEHOLDER_FIELDS, violations)

    raw_outcomes = payload.get("outcomes")
    outcomes = _composite(raw_outcomes, "outcomes", OUTCOME_FIELDS, violations)
    actual = raw_outcomes.get("actual") if isinstance(raw_outcomes, Mapping) else None
    outcomes["actual"] = _optional_text(actual, "outcomes.actual", "Actual Outcome", ACTUAL_OUTCOME_MAX, violations) or ""
    result["outcomes"] = outcomes

    result["deadline"] = _optional_datetime(payload.get("deadline"), "deadline", "Deadline", violations)
    result["approval_required"] = _flag(payload.get("approval_required"), "approval_required", "Approval Required", violations)
    result["backup_plan"] = _flag(payload.get("backup_plan"), "backup_plan", "Backup Plan", violations)

    if violations:
        raise ValidationFailed(violations)
    return result


def validate_goal(payload: Mapping[str, Any]) -> dict[str, Any]:
    violations: list[Violation] = []
    result = {
        "title": _required_text(payload.get("title"), "title", "Title", GOAL_TITLE_MAX, violations),
        **_aggregate_common(payload, violations),
    }
    if violations:
        raise ValidationFailed(violations)
    return result


def validate_project(payload: Mapping[str, Any]) -> dict[str, Any]:
    violations: list[Violation] = []
    result = {
        "name": _required_text(payload.get("name"), "name", "Name", PROJECT_NAME_MAX, violations),
        **_aggregate_common(payload, violations),
    }

    team = payload.get("team")
    if team is None:
        result["team"] = 0
    else:
        number = Normalization.to_number(team)
        if number is None or not isinstance(number, int) or number < 0:
            violations.append(Violation("team", ViolationCode.OUT_OF_RANGE, "Team size must be a non-negative whole number"))
        result["team"] = number

    if violations:
        raise ValidationFailed(violations)
    return result


def _aggregate_common(payload: Mapping[str, Any], violations: list[Violation]) -> dict[str, Any]:
    progress = payload.get("progress")
    if progress is None:
        progress = 0
    else:
        progress = _bounded_number(progress, "progress", "Progress", 0, 100, violations)

    decision_ids: list[str] = []
    raw_ids = payload.get("decisions") or []
    if isinstance(raw_ids, (str, Mapping)) or not hasattr(raw_ids, "__iter__"):
        violations.append(Violation("decisions", ViolationCode.INVALID_FORMAT, "Decisions must be a list of decision ids"))
    else:
        for raw_id in raw_ids:
            if is_valid_id(raw_id):
                canonical = str(UUID(raw_id))
                if canonical not in decision_ids:
                    decision_ids.append(canonical)
            else:
                violations.append(Violation("decisions", ViolationCode.INVALID_FORMAT, f"Invalid decision id: {raw_id!r}"))

    return {
        "description": _optional_text(
            payload.get("description"), "description", "Description", AGGREGATE_DESCRIPTION_MAX, violations
        ),
        "deadline": _optional_datetime(payload.get("deadline"), "deadline", "Deadline", violations),
        "progress": progress,
        "decisions": decision_ids,
    }


def _required_text(value: Any, field: str, label: str, max_length: int, violations: list[Violation]) -> Optional[str]:
    text = Normalization.trim(value)
    if not isinstance(text, str) or not text:
        violations.append(Violation(field, ViolationCode.REQUIRED_FIELD_MISSING, f"{label} is required"))
        return None
    if len(text) > max_length:
        violations.append(Violation(field, ViolationCode.OUT_OF_RANGE, f"{label} cannot exceed {max_length} characters"))
    return text


def _optional_text(value: Any, field: str, label: str, max_length: int, violations: list[Violation]) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        violations.append(Violation(field, ViolationCode.INVALID_FORMAT, f"{label} must be text"))
        return None
    text = value.strip()
    if len(text) > max_length:
        violations.append(Violation(field, ViolationCode.OUT_OF_RANGE, f"{label} cannot exceed {max_length} characters"))
    return text or None


def _choice(
    value: Any,
    field: str,
    label: str,
    allowed: tuple[str, ...],
    violations: list[Violation],
    required: bool = True,
) -> Optional[str]:
    text = Normalization.trim(value)
    if required and (text is None or text == ""):
        violations.append(Violation(field, ViolationCode.REQUIRED_FIELD_MISSING, f"{label} is required"))
        return None
    if text not in allowed:
        violations.append(Violation(field, ViolationCode.INVALID_ENUM, f"Invalid {label.lower()}: {value!r}"))
        return None
    return text


def _bounded_number(value: Any, field: str, label: str, low: float, high: float, violations: list[Violation]) -> Optional[float]:
    number = Normalization.to_number(value)
    if number is None:
        violations.append(Violation(field, ViolationCode.OUT_OF_RANGE, f"{label} must be a number between {low} and {high}"))
        return None
    if number < low:
        violations.append(Violation(field, ViolationCode.OUT_OF_RANGE, f"{label} must be at least {low}"))
    elif number > high:
        violations.append(Violation(field, ViolationCode.OUT_OF_RANGE, f"{label} cannot exceed {high}"))
    return number


def _affected_areas(value: Any, violations: list[Violation]) -> list[str]:
    areas = Normalization.affected_areas(value)
    if not areas:
        violations.append(Violation(
            "affected_areas", ViolationCode.EMPTY_COLLECTION, "At least one affected area is required"
        ))
        return areas
    for area in areas:
        if area not in AFFECTED_AREAS:
            violations.append(Violation(
                "affected_areas", ViolationCode.INVALID_ENUM, f"Invalid affected area: {area!r}"
            ))
    return areas


def _composite(value: Any, name: str, fields: tuple, violations: list[Violation]) -> dict[str, Any]:
    raw = value if isinstance(value, Mapping) else {}
    return {
        sub: _required_text(raw.get(sub), f"{name}.{sub}", label, max_length, violations)
        for sub, label, max_length in fields
    }


def _optional_datetime(value: Any, field: str, label: str, violations: list[Violation]) -> Optional[datetime]:
    try:
        return Normalization.parse_datetime(value)
    except ValueError:
        violations.append(Violation(field, ViolationCode.INVALID_FORMAT, f"{label} must be an ISO-8601 date"))
        return None


def _flag(value: Any, field: str, label: str, violations: list[Violation]) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        violations.append(Violation(field, ViolationCode.INVALID_FORMAT, f"{label} must be true or false"))
        return False
    return value
