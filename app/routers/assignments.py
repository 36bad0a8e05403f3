from fastapi import APIRouter, Depends, status

from app.core.controller import TrackerController
from app.core.deps import get_controller
from app.schemas.assignment import Assignment, AssignmentCard, AssignmentCreate

router = APIRouter()


@router.get("/assignments", response_model=list[AssignmentCard])
def list_assignments(controller: TrackerController = Depends(get_controller)):
    return controller.assignment_cards()


@router.post(
    "/assignments",
    response_model=Assignment,
    status_code=status.HTTP_201_CREATED,
)
def create_assignment(
    payload: AssignmentCreate,
    controller: TrackerController = Depends(get_controller),
):
    return controller.publish_assignment(payload)
