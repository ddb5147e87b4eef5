"""
Flat-file workout store.

The whole collection lives in one JSON document of the shape
``{"workouts": [...]}``. Every operation re-reads the document from disk and
every mutation rewrites it wholesale. A process-wide lock serializes the
read-modify-write cycle and writes go through a temp file plus ``os.replace``
so readers never observe a half-written document.
"""

from __future__ import annotations

import json
import os
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from loguru import logger

from tracker.db.models import (
    ENTRY_REQUIRED_FIELDS,
    WorkoutEntry,
    WorkoutEntryInput,
    format_timestamp,
)
from tracker.errors import StoreCorruptError
from tracker.tools.activity_utils import parse_leading_int


def _new_id() -> str:
    return uuid.uuid4().hex


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_record(record: Any, index: int) -> WorkoutEntry:
    if not isinstance(record, dict):
        raise StoreCorruptError(f"Workout record {index}: expected an object, got {type(record).__name__}")
    missing = ENTRY_REQUIRED_FIELDS - set(record.keys())
    if missing:
        raise StoreCorruptError(
            f"Workout record {index}: missing required fields: {', '.join(sorted(missing))}"
        )
    for field in ("id", "name", "workout", "timestamp"):
        value = record[field]
        if not isinstance(value, str) or not value.strip():
            raise StoreCorruptError(
                f"Workout record {index}: '{field}' must be a non-empty string, got {value!r}"
            )
    # Older documents hold duration/calories as the form's digit strings.
    counts = {}
    for field in ("duration", "calories"):
        value = parse_leading_int(record[field])
        if value is None or value < 0:
            raise StoreCorruptError(
                f"Workout record {index}: '{field}' must be a non-negative integer, got {record[field]!r}"
            )
        counts[field] = value
    return WorkoutEntry(
        id=record["id"],
        owner=record["name"],
        workout_type=record["workout"],
        duration_min=counts["duration"],
        calories=counts["calories"],
        created_at=record["timestamp"],
    )


class WorkoutStore:
    def __init__(
        self,
        path: Path | str,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.path = Path(path)
        self._id_factory = id_factory
        self._clock = clock
        self._lock = threading.Lock()

    def _ensure_document(self) -> None:
        if not self.path.exists():
            logger.info(f"Initializing empty workout store at {self.path}")
            self._write([])

    def _read(self) -> list[WorkoutEntry]:
        self._ensure_document()
        raw = self.path.read_bytes()
        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StoreCorruptError(f"Invalid JSON in workout store {self.path}: {exc}") from exc
        if not isinstance(data, dict) or "workouts" not in data:
            raise StoreCorruptError(f"Workout store {self.path} must contain a 'workouts' key")
        records = data["workouts"]
        if not isinstance(records, list):
            raise StoreCorruptError(f"'workouts' must be a list, got {type(records).__name__}")
        return [_parse_record(record, idx) for idx, record in enumerate(records)]

    def _write(self, entries: list[WorkoutEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"workouts": [entry.to_dict() for entry in entries]}
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        os.replace(tmp, self.path)

    def append(self, entry: WorkoutEntryInput) -> WorkoutEntry:
        with self._lock:
            entries = self._read()
            stored = WorkoutEntry(
                id=self._id_factory(),
                owner=entry.owner,
                workout_type=entry.workout_type,
                duration_min=entry.duration_min,
                calories=entry.calories,
                created_at=format_timestamp(self._clock()),
            )
            entries.append(stored)
            self._write(entries)
        logger.info(f"Stored workout {stored.id} ({stored.workout_type}) for {stored.owner}")
        return stored

    def list_all(self) -> list[WorkoutEntry]:
        with self._lock:
            return self._read()

    def list_by_owner(self, owner: str) -> list[WorkoutEntry]:
        return [entry for entry in self.list_all() if entry.belongs_to(owner)]

    def remove_by_id(self, workout_id: str) -> bool:
        with self._lock:
            entries = self._read()
            remaining = [entry for entry in entries if entry.id != workout_id]
            if len(remaining) == len(entries):
                logger.debug(f"No workout with id {workout_id} to delete")
                return False
            self._write(remaining)
        logger.info(f"Deleted workout {workout_id}")
        return True
