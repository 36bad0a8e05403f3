from datetime import timedelta

import pytest

from app.core.config import DEFAULT_VIEW, STUDENT_NAME, TEACHER_VIEW
from app.core.controller import TrackerController
from app.core.due_dates import DueStatus
from app.schemas.assignment import AssignmentCreate
from app.schemas.dashboard import StudentPanel, TeacherPanel

from tests.conftest import TODAY


def publish(controller: TrackerController, title: str, days: int, **fields):
    payload = AssignmentCreate(
        title=title,
        subject=fields.pop("subject", "General"),
        description=fields.pop("description", ""),
        due_date=TODAY.date() + timedelta(days=days),
        **fields,
    )
    return controller.publish_assignment(payload)


def test_publish_essay_due_tomorrow_is_urgent(controller):
    essay = publish(controller, "Essay", 1, subject="English")

    [card] = controller.assignment_cards()
    assert card.assignment == essay
    assert card.days_left == 1
    assert card.status is DueStatus.urgent
    assert card.submitted is False


def test_publish_persists_and_resets_view(controller, store):
    controller.switch_view(TEACHER_VIEW)
    essay = publish(controller, "Essay", 1, link="")

    assert controller.state.active_view == DEFAULT_VIEW
    assert essay.link is None
    assert store.load_assignments() == [essay]


def test_ids_come_from_the_clock_and_stay_unique(controller):
    first = publish(controller, "A", 3)
    second = publish(controller, "B", 3)  # same clock reading

    assert first.id == int(TODAY.timestamp() * 1000)
    assert second.id == first.id + 1


def test_record_submission_marks_assignment_done(controller, store):
    essay = publish(controller, "Essay", 1)
    assert not controller.is_submitted(essay.id)

    submission = controller.record_submission(essay.id)

    assert controller.is_submitted(essay.id)
    assert submission.student_name == STUDENT_NAME
    assert submission.submitted_at == TODAY
    assert store.load_submissions() == [submission]


def test_recording_twice_stores_two_submissions(controller, store):
    essay = publish(controller, "Essay", 1)
    controller.record_submission(essay.id)
    controller.record_submission(essay.id)

    assert len(store.load_submissions()) == 2
    assert controller.stats().pending == -1


def test_dangling_submission_shows_unknown_title(controller):
    controller.record_submission(12345)

    [row] = controller.submission_rows()
    assert row.assignment_title == "Unknown Assignment"


def test_submission_rows_are_newest_first(controller, clock):
    a = publish(controller, "A", 3)
    b = publish(controller, "B", 3)
    controller.record_submission(a.id)
    clock.now = TODAY + timedelta(hours=1)
    controller.record_submission(b.id)

    assert [row.assignment_title for row in controller.submission_rows()] == ["B", "A"]


def test_state_survives_a_reload(controller, store, clock):
    essay = publish(controller, "Essay", 2)
    controller.record_submission(essay.id)

    reloaded = TrackerController(store, clock=clock).load()
    assert reloaded.state.assignments == controller.state.assignments
    assert reloaded.state.submissions == controller.state.submissions
    assert reloaded.is_submitted(essay.id)


class TestDailyReminders:
    def test_prompt_fires_once_per_day(self, controller, store, clock):
        publish(controller, "Essay", 2)

        first_load = TrackerController(store, clock=clock).load()
        second_load = TrackerController(store, clock=clock).load()

        [item] = first_load.check_daily_reminders()
        assert item.title == "Essay"
        assert item.days_left == 2
        assert second_load.check_daily_reminders() == []
        assert store.last_reminder_date() == TODAY.date().isoformat()

    def test_prompt_fires_again_the_next_day(self, controller, clock):
        publish(controller, "Essay", 3)
        assert controller.check_daily_reminders()

        clock.now = TODAY + timedelta(days=1)
        [item] = controller.check_daily_reminders()
        assert item.days_left == 2

    @pytest.mark.parametrize("days", [-1, 4, 10])
    def test_outside_window_is_not_reminded(self, controller, days):
        publish(controller, "Far", days)
        assert controller.check_daily_reminders() == []

    @pytest.mark.parametrize("days", [0, 3])
    def test_window_edges_are_reminded(self, controller, days):
        publish(controller, "Edge", days)
        assert len(controller.check_daily_reminders()) == 1

    def test_submitted_assignments_are_skipped(self, controller):
        essay = publish(controller, "Essay", 1)
        controller.record_submission(essay.id)
        assert controller.check_daily_reminders() == []

    def test_nothing_due_leaves_cursor_alone(self, controller, store):
        publish(controller, "Later", 8)
        assert controller.check_daily_reminders() == []
        assert store.last_reminder_date() is None

        # something due later the same day still gets its one prompt
        publish(controller, "Soon", 1)
        assert len(controller.check_daily_reminders()) == 1


def test_switch_view_returns_fresh_panel(controller):
    publish(controller, "Essay", 6)

    teacher = controller.switch_view(TEACHER_VIEW)
    assert isinstance(teacher, TeacherPanel)
    assert teacher.stats.total_assignments == 1

    student = controller.switch_view("student")
    assert isinstance(student, StudentPanel)
    assert student.cards[0].status is DueStatus.normal


def test_switch_to_unknown_view_is_rejected(controller):
    with pytest.raises(ValueError):
        controller.switch_view("admin")
    assert controller.state.active_view == DEFAULT_VIEW
