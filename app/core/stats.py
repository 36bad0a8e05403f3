import math
from typing import Iterable, Sequence

from app.schemas.assignment import Assignment
from app.schemas.dashboard import DashboardStats
from app.schemas.submission import Submission


def completion_rate(total_assignments: int, total_submissions: int) -> int:
    """Whole percent of submissions per assignment, halves rounded up; 0 with no assignments."""
    if total_assignments == 0:
        return 0
    return int(math.floor(total_submissions * 100 / total_assignments + 0.5))


def compute_stats(
    assignments: Sequence[Assignment],
    submissions: Sequence[Submission],
) -> DashboardStats:
    total_assignments = len(assignments)
    total_submissions = len(submissions)

    # one student only, so every submission counts towards an assignment
    return DashboardStats(
        total_assignments=total_assignments,
        total_submissions=total_submissions,
        completion_rate=completion_rate(total_assignments, total_submissions),
        pending=total_assignments - total_submissions,
    )


def is_submitted(submissions: Iterable[Submission], assignment_id: int) -> bool:
    return any(s.assignment_id == assignment_id for s in submissions)
