from typing import Union

from fastapi import APIRouter, Depends

from app.core.controller import TrackerController
from app.core.deps import ensure_view_exists, get_controller
from app.schemas.assignment import ReminderItem
from app.schemas.dashboard import DashboardStats, StudentPanel, TeacherPanel

router = APIRouter()


@router.get("/dashboard/stats", response_model=DashboardStats)
def dashboard_stats(controller: TrackerController = Depends(get_controller)):
    return controller.stats()


@router.post("/reminders/check", response_model=list[ReminderItem])
def check_reminders(controller: TrackerController = Depends(get_controller)):
    """Run the daily reminder check; an empty list means nothing to show today."""
    return controller.check_daily_reminders()


@router.post("/views/{view}", response_model=Union[TeacherPanel, StudentPanel])
def switch_view(view: str, controller: TrackerController = Depends(get_controller)):
    return controller.switch_view(ensure_view_exists(view))
