"""Tests for the deterministic calorie estimator."""

import pytest

from tracker.tools.activity_utils import (
    CALORIES_PER_MINUTE,
    DEFAULT_CALORIES_PER_MINUTE,
    estimate_calories,
    parse_leading_int,
    round_half_up,
)


@pytest.mark.parametrize("label", sorted(CALORIES_PER_MINUTE))
def test_known_labels_use_their_rate(label):
    for duration in (1, 17, 30, 61):
        assert estimate_calories(label, duration) == round_half_up(CALORIES_PER_MINUTE[label] * duration)


def test_unknown_label_uses_default_rate():
    assert DEFAULT_CALORIES_PER_MINUTE == 6.0
    assert estimate_calories("rock climbing", 25) == 150
    assert estimate_calories("", 10) == 60


def test_lookup_is_case_insensitive_and_trimmed():
    assert estimate_calories("Yoga", 45) == 180
    assert estimate_calories("  RUNNING ", 30) == 345
    assert estimate_calories("HiIt", 20) == 250


def test_zero_duration_is_zero_calories():
    for label in ("running", "unknown"):
        assert estimate_calories(label, 0) == 0


def test_estimate_rounds_to_nearest_integer():
    # 8.3 * 7 = 58.1
    assert estimate_calories("swimming", 7) == 58
    # 11.5 * 3 = 34.5 rounds up
    assert estimate_calories("running", 3) == 35


def test_round_half_up():
    assert round_half_up(287.5) == 288
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_half_up(0) == 0
    assert round_half_up(-2.5) == -3


@pytest.mark.parametrize(
    "value, expected",
    [
        (30, 30),
        ("30", 30),
        ("45 minutes", 45),
        ("  12", 12),
        (20.0, 20),
        (20.5, None),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
        ("-5", -5),
    ],
)
def test_parse_leading_int(value, expected):
    assert parse_leading_int(value) == expected
