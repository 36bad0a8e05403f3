import logging
from datetime import date
from typing import Optional

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import ASSIGNMENTS_KEY, LAST_REMINDER_KEY, SUBMISSIONS_KEY
from app.models.storage_entry import StorageEntry
from app.schemas.assignment import Assignment
from app.schemas.submission import Submission

logger = logging.getLogger(__name__)

# a stored null reads the same as a missing entry
_assignments = TypeAdapter(Optional[list[Assignment]])
_submissions = TypeAdapter(Optional[list[Submission]])


class CorruptStorageError(ValueError):
    """A stored entry could not be decoded into the expected shape."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"storage entry {key!r} is corrupt: {reason}")
        self.key = key
        self.reason = reason


class TrackerStore:
    """
    Durable key-value storage for the tracker.

    Each collection lives under a fixed key as one JSON array and is
    rewritten in full on every save.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # raw entries

    def read(self, key: str) -> Optional[str]:
        db: Session = self.session_factory()
        try:
            entry = db.get(StorageEntry, key)
            return entry.value if entry else None
        finally:
            db.close()

    def write(self, key: str, value: str) -> None:
        db: Session = self.session_factory()
        try:
            entry = db.get(StorageEntry, key)
            if entry is None:
                db.add(StorageEntry(key=key, value=value))
            else:
                entry.value = value

            try:
                db.commit()
            except Exception:
                db.rollback()
                logger.exception("Failed to write storage entry %r", key)
                raise
        finally:
            db.close()

    def _read_list(self, key: str, adapter: TypeAdapter) -> list:
        raw = self.read(key)
        if raw is None:
            return []

        try:
            return adapter.validate_json(raw) or []
        except ValidationError as exc:
            logger.error("Storage entry %r is not a valid collection", key)
            raise CorruptStorageError(key, str(exc)) from exc

    # collections

    def load_assignments(self) -> list[Assignment]:
        return self._read_list(ASSIGNMENTS_KEY, _assignments)

    def save_assignments(self, assignments: list[Assignment]) -> None:
        self.write(ASSIGNMENTS_KEY, _assignments.dump_json(assignments).decode())

    def load_submissions(self) -> list[Submission]:
        return self._read_list(SUBMISSIONS_KEY, _submissions)

    def save_submissions(self, submissions: list[Submission]) -> None:
        self.write(SUBMISSIONS_KEY, _submissions.dump_json(submissions).decode())

    # reminder cursor

    def last_reminder_date(self) -> Optional[str]:
        return self.read(LAST_REMINDER_KEY)

    def set_last_reminder_date(self, day: date) -> None:
        self.write(LAST_REMINDER_KEY, day.isoformat())
