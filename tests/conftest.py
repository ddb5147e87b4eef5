"""Shared fixtures for the tracker test suite."""

from datetime import datetime, timedelta, timezone
from itertools import count
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from tracker.db.store import WorkoutStore
from tracker.llm.calorie_gateway import CalorieGateway
from tracker.service import TrackerService


def _completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "data" / "workouts.json"


@pytest.fixture
def store(data_path):
    """Store with predictable ids and a clock that ticks one second per entry."""
    ids = count(1)
    start = datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)
    ticks = count()
    return WorkoutStore(
        data_path,
        id_factory=lambda: f"w{next(ids)}",
        clock=lambda: start + timedelta(seconds=next(ticks)),
    )


@pytest.fixture
def offline_gateway():
    return CalorieGateway(client=None)


@pytest.fixture
def openai_client():
    client = MagicMock()
    client.chat.completions.create.return_value = _completion("420")
    return client


@pytest.fixture
def service(store, offline_gateway):
    return TrackerService(store, offline_gateway)
