from __future__ import annotations

from typing import Any, Optional

from loguru import logger

from tracker.config.constants import TrackerConfig
from tracker.db.models import WorkoutEntryInput
from tracker.db.store import WorkoutStore
from tracker.errors import ValidationError
from tracker.llm.calorie_gateway import CalorieGateway
from tracker.tools.activity_utils import parse_leading_int
from tracker.tools.stats import aggregate, group_by_type


class TrackerService:
    """Request-facing operations over one store and one calorie gateway.

    Built once at process start and handed to the HTTP layer and the CLI.
    """

    def __init__(self, store: WorkoutStore, gateway: CalorieGateway) -> None:
        self.store = store
        self.gateway = gateway

    @classmethod
    def from_config(cls, config: TrackerConfig) -> "TrackerService":
        return cls(WorkoutStore(config.data_path), CalorieGateway.from_config(config))

    def calculate_calories(self, payload: Any) -> dict[str, int]:
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")
        workout = payload.get("workout")
        if not isinstance(workout, str) or not workout.strip():
            raise ValidationError("'workout' is required and must be a non-empty string")
        duration = parse_leading_int(payload.get("duration"))
        if duration is None or duration < 0:
            raise ValidationError("'duration' is required and must be a whole number of minutes")
        calories = self.gateway.estimate(workout.strip(), duration)
        logger.debug(f"Estimated {calories} kcal for {duration} min of {workout!r}")
        return {"calories": calories}

    def record_workout(self, payload: Any) -> dict[str, Any]:
        entry = self.store.append(WorkoutEntryInput.from_payload(payload))
        return entry.to_dict()

    def list_workouts(self, name: Optional[str] = None) -> dict[str, Any]:
        if not name:
            return {"workouts": [entry.to_dict() for entry in self.store.list_all()]}
        entries = self.store.list_by_owner(name)
        return {
            "workouts": [entry.to_dict() for entry in entries],
            "groupedWorkouts": {
                key: [entry.to_dict() for entry in group]
                for key, group in group_by_type(entries).items()
            },
            "stats": aggregate(entries).to_dict(),
        }

    def delete_workout(self, workout_id: Optional[str]) -> dict[str, bool]:
        if not workout_id:
            raise ValidationError("Workout ID is required")
        # Deleting an unknown id is a successful no-op.
        self.store.remove_by_id(workout_id)
        return {"success": True}
