"""
Workout records exchanged between the HTTP layer and the store.

- WorkoutEntryInput: a validated submission, before the store assigns metadata
- WorkoutEntry: a stored workout, as persisted in the JSON document

Both map to the wire keys used by the web client: ``name``, ``workout``,
``duration``, ``calories`` (plus ``id`` and ``timestamp`` once stored).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from tracker.errors import ValidationError
from tracker.tools.activity_utils import normalize_label, parse_leading_int

INPUT_REQUIRED_FIELDS = ("name", "workout", "duration", "calories")
ENTRY_REQUIRED_FIELDS = {"id", "name", "workout", "duration", "calories", "timestamp"}


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def _require_text(payload: dict[str, Any], field: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"'{field}' is required and must be a non-empty string")
    return value.strip()


def _require_count(payload: dict[str, Any], field: str, minimum: int) -> int:
    value = parse_leading_int(payload.get(field))
    if value is None:
        raise ValidationError(f"'{field}' is required and must be a whole number")
    if value < minimum:
        raise ValidationError(f"'{field}' must be at least {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class WorkoutEntryInput:
    owner: str
    workout_type: str
    duration_min: int
    calories: int

    @classmethod
    def from_payload(cls, payload: Any) -> "WorkoutEntryInput":
        if not isinstance(payload, dict):
            raise ValidationError("Workout payload must be a JSON object")
        missing = [field for field in INPUT_REQUIRED_FIELDS if payload.get(field) is None]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        return cls(
            owner=_require_text(payload, "name"),
            workout_type=_require_text(payload, "workout"),
            duration_min=_require_count(payload, "duration", minimum=1),
            calories=_require_count(payload, "calories", minimum=0),
        )


@dataclass(frozen=True)
class WorkoutEntry:
    id: str
    owner: str
    workout_type: str
    duration_min: int
    calories: int
    created_at: str

    @property
    def type_key(self) -> str:
        return normalize_label(self.workout_type)

    def belongs_to(self, owner: str) -> bool:
        return self.owner.lower() == owner.lower()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.owner,
            "workout": self.workout_type,
            "duration": self.duration_min,
            "calories": self.calories,
            "timestamp": self.created_at,
        }
