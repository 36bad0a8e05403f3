from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.core.config import STUDENT_NAME


class Submission(BaseModel):
    assignment_id: int
    student_name: str = STUDENT_NAME
    submitted_at: Optional[datetime] = None


class SubmissionRow(BaseModel):
    assignment_id: int
    assignment_title: str  # "Unknown Assignment" for dangling references
    student_name: str
    submitted_at: Optional[datetime] = None
