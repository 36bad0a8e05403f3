from fastapi import HTTPException, Request

from app.core.controller import VIEWS, TrackerController
from app.schemas.assignment import Assignment


# every request works on the one controller the app was created with
def get_controller(request: Request) -> TrackerController:
    return request.app.state.controller.ensure_loaded()


def ensure_assignment_exists(controller: TrackerController, assignment_id: int) -> Assignment:
    a = controller.get_assignment(assignment_id)
    if not a:
        raise HTTPException(status_code=404, detail="Assignment not found")
    return a


def ensure_view_exists(view: str) -> str:
    if view not in VIEWS:
        raise HTTPException(status_code=404, detail="View not found")
    return view
