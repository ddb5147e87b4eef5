"""Tests for per-owner workout aggregation."""

from tracker.db.models import WorkoutEntry
from tracker.tools.stats import AggregateStats, TypeStats, aggregate, group_by_type


def _entry(idx, workout, calories, owner="Ann", duration=30):
    return WorkoutEntry(
        id=f"w{idx}",
        owner=owner,
        workout_type=workout,
        duration_min=duration,
        calories=calories,
        created_at=f"2024-05-01T08:00:0{idx}.000Z",
    )


def test_empty_history_has_zero_averages():
    stats = aggregate([])
    assert stats == AggregateStats(total_workouts=0, total_calories=0, average_calories=0, per_type={})
    assert stats.to_dict() == {
        "totalCalories": 0,
        "averageCalories": 0,
        "totalWorkouts": 0,
        "workoutsByType": {},
    }


def test_groups_case_insensitively():
    entries = [_entry(1, "Running", 345), _entry(2, "running", 230, duration=20)]
    stats = aggregate(entries)

    assert stats.total_workouts == 2
    assert stats.total_calories == 575
    assert stats.average_calories == 288
    assert stats.per_type == {"running": TypeStats(count=2, total_calories=575, average_calories=288)}


def test_group_totals_add_up_to_overall_totals():
    entries = [
        _entry(1, "Yoga", 180),
        _entry(2, "HIIT", 250),
        _entry(3, "yoga", 120),
        _entry(4, "Swimming", 333),
        _entry(5, "hiit", 101),
    ]
    stats = aggregate(entries)

    assert sum(group.total_calories for group in stats.per_type.values()) == stats.total_calories
    assert sum(group.count for group in stats.per_type.values()) == stats.total_workouts
    assert stats.per_type["yoga"] == TypeStats(count=2, total_calories=300, average_calories=150)
    assert stats.per_type["hiit"] == TypeStats(count=2, total_calories=351, average_calories=176)
    # 984 / 5 = 196.8
    assert stats.average_calories == 197


def test_group_by_type_preserves_insertion_order():
    entries = [_entry(1, "Cycling", 10), _entry(2, "Yoga", 20), _entry(3, "CYCLING", 30)]
    groups = group_by_type(entries)

    assert list(groups) == ["cycling", "yoga"]
    assert [entry.id for entry in groups["cycling"]] == ["w1", "w3"]


def test_aggregate_does_not_mutate_input():
    entries = [_entry(1, "Yoga", 180), _entry(2, "Walking", 150)]
    snapshot = list(entries)
    aggregate(entries)
    assert entries == snapshot


def test_to_dict_uses_wire_names():
    stats = aggregate([_entry(1, "Dancing", 201)])
    assert stats.to_dict()["workoutsByType"] == {
        "dancing": {"count": 1, "totalCalories": 201, "averageCalories": 201}
    }
