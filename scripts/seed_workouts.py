#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from tracker.config.constants import DATA_PATH
from tracker.db.models import WorkoutEntryInput
from tracker.db.store import WorkoutStore
from tracker.tools.activity_utils import estimate_calories
from tracker.tools.stats import aggregate


@dataclass(frozen=True)
class WorkoutSeed:
    name: str
    workout: str
    duration_min: int


SEEDS = (
    WorkoutSeed("Ann", "Running", 30),
    WorkoutSeed("Ann", "running", 20),
    WorkoutSeed("Ann", "Yoga", 45),
    WorkoutSeed("Ann", "HIIT", 25),
    WorkoutSeed("Ben", "Cycling", 60),
    WorkoutSeed("Ben", "Swimming", 40),
    WorkoutSeed("Ben", "Weightlifting", 50),
    WorkoutSeed("Cara", "Dancing", 35),
    WorkoutSeed("Cara", "Walking", 90),
    WorkoutSeed("Cara", "Rock climbing", 60),
)


def reset_store(data_path: Path) -> None:
    if data_path.exists():
        data_path.unlink()


def seed_store(store: WorkoutStore) -> None:
    for seed in SEEDS:
        store.append(
            WorkoutEntryInput(
                owner=seed.name,
                workout_type=seed.workout,
                duration_min=seed.duration_min,
                calories=estimate_calories(seed.workout, seed.duration_min),
            )
        )


def print_counts(store: WorkoutStore) -> None:
    owners = sorted({seed.name for seed in SEEDS})
    for owner in owners:
        stats = aggregate(store.list_by_owner(owner))
        print(f"{owner}: {stats.total_workouts} workouts, {stats.total_calories} kcal")


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the workout store with sample entries.")
    parser.add_argument(
        "--data-path",
        default=str(DATA_PATH),
        help="Path to the workouts JSON file.",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete the existing workouts file before seeding.",
    )
    args = parser.parse_args()

    data_path = Path(args.data_path).expanduser().resolve()
    if args.reset:
        reset_store(data_path)

    store = WorkoutStore(data_path)
    seed_store(store)
    print_counts(store)

    print(f"Sample workouts written to {data_path}")


if __name__ == "__main__":
    main()
