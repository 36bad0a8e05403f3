from datetime import date
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.core.config import TEACHER_VIEW
from app.core.controller import TrackerController
from app.core.deps import ensure_assignment_exists, ensure_view_exists, get_controller
from app.schemas.assignment import AssignmentCreate

router = APIRouter()

templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")


def _back_to_page(url: str = "/") -> RedirectResponse:
    # post/redirect/get: a reload never replays the form
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    published: bool = False,
    controller: TrackerController = Depends(get_controller),
):
    reminders = controller.check_daily_reminders()
    panel = controller.panel()

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "panel": panel,
            "stats": controller.stats(),
            "reminders": reminders,
            "published": published,
            "teacher_view": TEACHER_VIEW,
        },
    )


@router.get("/views/{view}")
def open_view(view: str, controller: TrackerController = Depends(get_controller)):
    controller.switch_view(ensure_view_exists(view))
    return _back_to_page()


@router.post("/assignments/publish")
def publish_from_form(
    title: str = Form(...),
    subject: str = Form(...),
    description: str = Form(...),
    due_date: date = Form(...),
    link: str = Form(""),
    controller: TrackerController = Depends(get_controller),
):
    controller.publish_assignment(
        AssignmentCreate(
            title=title,
            subject=subject,
            description=description,
            link=link,
            due_date=due_date,
        )
    )
    return _back_to_page("/?published=1")


@router.post("/assignments/{assignment_id}/done")
def mark_done(assignment_id: int, controller: TrackerController = Depends(get_controller)):
    ensure_assignment_exists(controller, assignment_id)
    controller.record_submission(assignment_id)
    return _back_to_page()
