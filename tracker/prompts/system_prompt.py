from __future__ import annotations

CALORIE_SYSTEM_PROMPT = (
    "You are a fitness expert that calculates calories burned during workouts. "
    "Provide only the number, no explanation."
)


def calorie_user_prompt(workout: str, duration_min: int) -> str:
    return (
        f"Calculate how many calories would be burned during {duration_min} minutes of {workout}. "
        "Return only the number."
    )
