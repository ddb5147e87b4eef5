"""Tests for the command line entry point."""

import json

import pytest

from tracker.cli import build_parser, main


def test_estimate_offline(service, capsys):
    main(["estimate", "Yoga", "45", "--offline"], service=service)
    assert capsys.readouterr().out.strip() == "180"


def test_estimate_through_gateway(service, capsys):
    main(["estimate", "rowing", "10"], service=service)
    assert capsys.readouterr().out.strip() == "60"


def test_stats_prints_json(service, capsys):
    service.record_workout({"name": "Ann", "workout": "Yoga", "duration": 45, "calories": 180})
    main(["stats", "ANN"], service=service)

    stats = json.loads(capsys.readouterr().out)
    assert stats["totalWorkouts"] == 1
    assert stats["workoutsByType"]["yoga"]["totalCalories"] == 180


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
