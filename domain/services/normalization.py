import math
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Optional


class Normalization:
    """Coercions shared by the validators, the merge logic and the repositories."""

    @staticmethod
    def trim(value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @staticmethod
    def to_number(value: Any) -> Optional[float]:
        """
        Coerce a candidate value to a finite number.

        Integral values come back as int. Returns None for anything that is not a
        finite number (bools, blank strings, NaN and infinities included).
        """
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            try:
                value = float(value)
            except ValueError:
                return None
        if not isinstance(value, (int, float)):
            return None
        if isinstance(value, float):
            if not math.isfinite(value):
                return None
            if value.is_integer():
                return int(value)
        return value

    @staticmethod
    def affected_areas(value: Any) -> list[str]:
        """
        Collapse a string, a list of strings or a mapping of strings to a
        deduplicated list of lower-cased, non-blank strings in first-seen order.
        """
        if value is None:
            return []
        if isinstance(value, str):
            raw = [value]
        elif isinstance(value, Mapping):
            raw = list(value.values())
        elif isinstance(value, (list, tuple, set, frozenset)):
            raw = list(value)
        else:
            return []

        areas: list[str] = []
        for item in raw:
            if not isinstance(item, str):
                continue
            area = item.strip().lower()
            if area and area not in areas:
                areas.append(area)
        return areas

    @staticmethod
    def to_utc(value: datetime) -> datetime:
        """Naive datetimes are treated as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @staticmethod
    def parse_datetime(value: Any) -> Optional[datetime]:
        """
        Parse an ISO-8601 string, date or datetime into an aware UTC datetime.

        Raises ValueError when the value cannot be interpreted.
        """
        if value is None:
            return None
        if isinstance(value, datetime):
            return Normalization.to_utc(value)
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            return Normalization.to_utc(datetime.fromisoformat(text))
        raise ValueError(f"unsupported date value: {value!r}")

    @staticmethod
    def merge_patch(
        current: dict[str, Any],
        patch: Mapping[str, Any],
        composites: Mapping[str, tuple[str, ...]],
    ) -> dict[str, Any]:
        """
        Merge a partial payload onto a stored record.

        Top-level fields are replaced one by one and omitted fields keep their
        value. A composite listed in ``composites`` (name -> required sub-fields)
        is merged sub-field by sub-field unless the patch supplies every required
        sub-field, in which case the composite is replaced wholesale.
        """
        merged = dict(current)
        for key, value in patch.items():
            if key in ("id", "created_at", "updated_at"):
                continue
            if key in composites and isinstance(value, Mapping):
                if all(sub in value for sub in composites[key]):
                    merged[key] = dict(value)
                else:
                    base = current.get(key)
                    nested = dict(base) if isinstance(base, Mapping) else {}
                    nested.update(value)
                    merged[key] = nested
            else:
                merged[key] = value
        return merged
