"""
Per-owner workout statistics.

Stats are derived on every query from a snapshot of the store and never
persisted. Averages use round-half-up, the same rounding as the estimator.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from tracker.db.models import WorkoutEntry
from tracker.tools.activity_utils import round_half_up


@dataclass(frozen=True)
class TypeStats:
    count: int
    total_calories: int
    average_calories: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "totalCalories": self.total_calories,
            "averageCalories": self.average_calories,
        }


@dataclass(frozen=True)
class AggregateStats:
    total_workouts: int = 0
    total_calories: int = 0
    average_calories: int = 0
    per_type: dict[str, TypeStats] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalCalories": self.total_calories,
            "averageCalories": self.average_calories,
            "totalWorkouts": self.total_workouts,
            "workoutsByType": {key: stats.to_dict() for key, stats in self.per_type.items()},
        }


def group_by_type(entries: Iterable[WorkoutEntry]) -> dict[str, list[WorkoutEntry]]:
    """Partition entries by lower-cased workout type, keeping insertion order."""
    groups: dict[str, list[WorkoutEntry]] = defaultdict(list)
    for entry in entries:
        groups[entry.type_key].append(entry)
    return dict(groups)


def aggregate(entries: Sequence[WorkoutEntry]) -> AggregateStats:
    total_calories = sum(entry.calories for entry in entries)
    total_workouts = len(entries)

    per_type = {}
    for key, group in group_by_type(entries).items():
        group_total = sum(entry.calories for entry in group)
        per_type[key] = TypeStats(
            count=len(group),
            total_calories=group_total,
            average_calories=round_half_up(group_total / len(group)),
        )

    return AggregateStats(
        total_workouts=total_workouts,
        total_calories=total_calories,
        # An empty history averages to 0 rather than dividing by zero.
        average_calories=round_half_up(total_calories / (total_workouts or 1)),
        per_type=per_type,
    )
