import math
from datetime import date, timedelta
from enum import Enum

from app.core.config import URGENT_BELOW_DAYS, WARNING_MAX_DAYS

ONE_DAY = timedelta(days=1)


class DueStatus(str, Enum):
    urgent = "urgent"
    warning = "warning"
    normal = "normal"

    @property
    def css_class(self) -> str:
        return _CSS_CLASSES[self]


_CSS_CLASSES = {
    DueStatus.urgent: "status-red",
    DueStatus.warning: "status-yellow",
    DueStatus.normal: "status-green",
}


def days_left(due: date, today: date) -> int:
    """
    Calendar days from today (local midnight) until the due date, rounded up.

    Overdue assignments give negative values.
    """
    return int(math.ceil((due - today) / ONE_DAY))


def classify(days: int) -> DueStatus:
    if days < URGENT_BELOW_DAYS:
        return DueStatus.urgent
    if days <= WARNING_MAX_DAYS:
        return DueStatus.warning
    return DueStatus.normal
