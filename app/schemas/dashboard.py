from pydantic import BaseModel

from app.schemas.assignment import AssignmentCard
from app.schemas.submission import SubmissionRow


class DashboardStats(BaseModel):
    total_assignments: int
    total_submissions: int
    completion_rate: int  # percent
    pending: int  # may go negative when submissions outnumber assignments


class StudentPanel(BaseModel):
    view: str
    cards: list[AssignmentCard]


class TeacherPanel(BaseModel):
    view: str
    stats: DashboardStats
    submissions: list[SubmissionRow]
