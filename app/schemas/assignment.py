from datetime import date
from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel

from app.core.due_dates import DueStatus

SAFE_LINK_SCHEMES = ("http", "https")


class AssignmentCreate(BaseModel):
    title: str
    subject: str
    description: str
    link: Optional[str] = None
    due_date: date


class Assignment(BaseModel):
    # id and due_date are required; the rest default so older stored records still load
    id: int
    due_date: date
    title: str = ""
    subject: str = ""
    description: str = ""
    link: Optional[str] = None

    @property
    def href(self) -> Optional[str]:
        """The reference link, only when it is a plain web address."""
        if self.link and urlsplit(self.link.strip()).scheme.lower() in SAFE_LINK_SCHEMES:
            return self.link
        return None


class AssignmentCard(BaseModel):
    assignment: Assignment
    days_left: int
    status: DueStatus
    submitted: bool = False


class ReminderItem(BaseModel):
    assignment_id: int
    title: str
    days_left: int
