from fastapi import APIRouter, Depends, status

from app.core.controller import TrackerController
from app.core.deps import ensure_assignment_exists, get_controller
from app.schemas.submission import Submission, SubmissionRow

router = APIRouter()


@router.post(
    "/assignments/{assignment_id}/submissions",
    response_model=Submission,
    status_code=status.HTTP_201_CREATED,
)
def submit_assignment(
    assignment_id: int,
    controller: TrackerController = Depends(get_controller),
):
    ensure_assignment_exists(controller, assignment_id)

    # marking done again is not rejected; see DESIGN.md
    return controller.record_submission(assignment_id)


@router.get("/submissions", response_model=list[SubmissionRow])
def list_submissions(controller: TrackerController = Depends(get_controller)):
    """Teacher view of submissions, newest first."""
    return controller.submission_rows()
