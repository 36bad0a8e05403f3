import logging
import threading
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, Optional, Union

from app.core.config import (
    DEFAULT_VIEW,
    REMINDER_MAX_DAYS,
    REMINDER_MIN_DAYS,
    STUDENT_NAME,
    STUDENT_VIEW,
    TEACHER_VIEW,
)
from app.core.due_dates import classify, days_left
from app.core.stats import compute_stats, is_submitted
from app.db.store import TrackerStore
from app.schemas.assignment import Assignment, AssignmentCard, AssignmentCreate, ReminderItem
from app.schemas.dashboard import DashboardStats, StudentPanel, TeacherPanel
from app.schemas.submission import Submission, SubmissionRow

logger = logging.getLogger(__name__)

VIEWS = (STUDENT_VIEW, TEACHER_VIEW)
UNKNOWN_ASSIGNMENT_TITLE = "Unknown Assignment"

Clock = Callable[[], datetime]


def local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class TrackerState:
    assignments: list[Assignment] = field(default_factory=list)
    submissions: list[Submission] = field(default_factory=list)
    active_view: str = DEFAULT_VIEW


class TrackerController:
    """
    Owns the tracker state and every operation that changes it.

    Collections are loaded from the store once; each mutation appends in
    memory and then rewrites the whole collection. Sync handlers run in a
    threadpool, so every operation holds the lock for its whole duration.
    """

    def __init__(self, store: TrackerStore, clock: Clock = local_now):
        self.store = store
        self.clock = clock
        self.state = TrackerState()
        self.loaded = False
        self._lock = threading.RLock()

    def load(self) -> "TrackerController":
        with self._lock:
            self.state.assignments = self.store.load_assignments()
            self.state.submissions = self.store.load_submissions()
            self.loaded = True
            logger.info(
                "Loaded %d assignment(s) and %d submission(s)",
                len(self.state.assignments),
                len(self.state.submissions),
            )
            return self

    def ensure_loaded(self) -> "TrackerController":
        with self._lock:
            # a failed load (corrupt storage) is retried on the next request
            if not self.loaded:
                self.load()
            return self

    def today(self) -> date:
        return self.clock().date()

    # lookups

    def get_assignment(self, assignment_id: int) -> Optional[Assignment]:
        with self._lock:
            for a in self.state.assignments:
                if a.id == assignment_id:
                    return a
            return None

    def is_submitted(self, assignment_id: int) -> bool:
        with self._lock:
            return is_submitted(self.state.submissions, assignment_id)

    # mutations

    def _next_id(self, now: datetime) -> int:
        candidate = int(now.timestamp() * 1000)
        if self.state.assignments:
            candidate = max(candidate, max(a.id for a in self.state.assignments) + 1)
        return candidate

    def publish_assignment(self, payload: AssignmentCreate) -> Assignment:
        with self._lock:
            assignment = Assignment(
                id=self._next_id(self.clock()),
                title=payload.title,
                subject=payload.subject,
                description=payload.description,
                link=payload.link or None,
                due_date=payload.due_date,
            )
            self.state.assignments.append(assignment)
            self.store.save_assignments(self.state.assignments)

            self.state.active_view = DEFAULT_VIEW
            logger.info("Published assignment %d (%s)", assignment.id, assignment.title)
            return assignment

    def record_submission(self, assignment_id: int) -> Submission:
        with self._lock:
            # no duplicate check: marking twice stores two submissions
            submission = Submission(
                assignment_id=assignment_id,
                student_name=STUDENT_NAME,
                submitted_at=self.clock(),
            )
            self.state.submissions.append(submission)
            self.store.save_submissions(self.state.submissions)

            logger.info("Recorded submission for assignment %d", assignment_id)
            return submission

    def check_daily_reminders(self) -> list[ReminderItem]:
        """
        Return the assignments to remind about, at most once per calendar day.

        The stored cursor only moves when something was actually shown.
        """
        with self._lock:
            today = self.today()
            if self.store.last_reminder_date() == today.isoformat():
                return []

            due_soon = []
            for a in self.state.assignments:
                days = days_left(a.due_date, today)
                if REMINDER_MIN_DAYS <= days <= REMINDER_MAX_DAYS and not self.is_submitted(a.id):
                    due_soon.append(ReminderItem(assignment_id=a.id, title=a.title, days_left=days))

            if due_soon:
                self.store.set_last_reminder_date(today)
                logger.info("Showing %d reminder(s) for %s", len(due_soon), today.isoformat())

            return due_soon

    def switch_view(self, view: str) -> Union[StudentPanel, TeacherPanel]:
        with self._lock:
            if view not in VIEWS:
                raise ValueError(f"unknown view {view!r}")
            self.state.active_view = view
            return self.panel()

    # derived views

    def assignment_cards(self) -> list[AssignmentCard]:
        with self._lock:
            today = self.today()
            cards = []
            for a in self.state.assignments:
                days = days_left(a.due_date, today)
                cards.append(
                    AssignmentCard(
                        assignment=a,
                        days_left=days,
                        status=classify(days),
                        submitted=self.is_submitted(a.id),
                    )
                )
            return cards

    def submission_rows(self) -> list[SubmissionRow]:
        with self._lock:
            titles = {a.id: a.title for a in self.state.assignments}
            return [
                SubmissionRow(
                    assignment_id=s.assignment_id,
                    assignment_title=titles.get(s.assignment_id, UNKNOWN_ASSIGNMENT_TITLE),
                    student_name=s.student_name,
                    submitted_at=s.submitted_at,
                )
                for s in reversed(self.state.submissions)  # newest first
            ]

    def stats(self) -> DashboardStats:
        with self._lock:
            return compute_stats(self.state.assignments, self.state.submissions)

    def panel(self) -> Union[StudentPanel, TeacherPanel]:
        with self._lock:
            if self.state.active_view == TEACHER_VIEW:
                return TeacherPanel(
                    view=TEACHER_VIEW,
                    stats=self.stats(),
                    submissions=self.submission_rows(),
                )
            return StudentPanel(view=STUDENT_VIEW, cards=self.assignment_cards())
