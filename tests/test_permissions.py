import pytest

from appointments.exceptions import AlreadyTerminalError, UnauthorizedError, WrongPriorStateError
from appointments.models import Appointment
from appointments.permissions import BOOK, COMPLETE, CONFIRM, REJECT, can_transition
from users.models import User

PATIENT_ID, DOCTOR_ID, STRANGER_ID = 1, 2, 3


def appointment_in(status):
    return Appointment(patient_id=PATIENT_ID, doctor_id=DOCTOR_ID, status=status)


def test_book_only_needs_an_authenticated_caller():
    assert can_transition(PATIENT_ID, User.PATIENT, None, BOOK).allowed
    # doctors may book as patients too
    assert can_transition(DOCTOR_ID, User.DOCTOR, None, BOOK).allowed

    decision = can_transition(None, None, None, BOOK)
    assert not decision.allowed
    assert decision.error is UnauthorizedError


@pytest.mark.parametrize("action", [CONFIRM, COMPLETE])
@pytest.mark.parametrize("caller_id", [PATIENT_ID, STRANGER_ID])
def test_confirm_and_complete_are_doctor_only(action, caller_id):
    status = Appointment.WAITING_FOR_CONFIRMATION if action == CONFIRM else Appointment.PENDING
    decision = can_transition(caller_id, User.PATIENT, appointment_in(status), action)

    assert not decision.allowed
    assert decision.error is UnauthorizedError


def test_admin_gets_no_write_privilege():
    appointment = appointment_in(Appointment.WAITING_FOR_CONFIRMATION)

    for action in (CONFIRM, REJECT):
        decision = can_transition(STRANGER_ID, User.ADMIN, appointment, action)
        assert decision.error is UnauthorizedError


@pytest.mark.parametrize("caller_id", [PATIENT_ID, DOCTOR_ID])
@pytest.mark.parametrize("status", [Appointment.WAITING_FOR_CONFIRMATION, Appointment.PENDING])
def test_either_participant_may_reject_open_appointments(caller_id, status):
    assert can_transition(caller_id, User.PATIENT, appointment_in(status), REJECT).allowed


def test_stranger_cannot_reject():
    decision = can_transition(STRANGER_ID, User.PATIENT, appointment_in(Appointment.PENDING), REJECT)
    assert decision.error is UnauthorizedError


def test_confirm_requires_waiting_status():
    assert can_transition(DOCTOR_ID, User.DOCTOR, appointment_in(Appointment.WAITING_FOR_CONFIRMATION), CONFIRM).allowed

    decision = can_transition(DOCTOR_ID, User.DOCTOR, appointment_in(Appointment.PENDING), CONFIRM)
    assert decision.error is WrongPriorStateError
    assert decision.reason == "Appointment is not awaiting confirmation"


def test_complete_requires_pending_status():
    assert can_transition(DOCTOR_ID, User.DOCTOR, appointment_in(Appointment.PENDING), COMPLETE).allowed

    decision = can_transition(DOCTOR_ID, User.DOCTOR, appointment_in(Appointment.WAITING_FOR_CONFIRMATION), COMPLETE)
    assert decision.error is WrongPriorStateError


@pytest.mark.parametrize("status", Appointment.TERMINAL_STATUSES)
@pytest.mark.parametrize("action", [CONFIRM, COMPLETE, REJECT])
def test_terminal_states_deny_everything(status, action):
    appointment = appointment_in(status)
    assert appointment.is_terminal

    decision = can_transition(DOCTOR_ID, User.DOCTOR, appointment, action)

    assert not decision.allowed
    assert decision.error is AlreadyTerminalError
    with pytest.raises(AlreadyTerminalError):
        decision.raise_if_denied()


def test_reject_messages_distinguish_completed_from_rejected():
    completed = can_transition(PATIENT_ID, User.PATIENT, appointment_in(Appointment.COMPLETED), REJECT)
    rejected = can_transition(PATIENT_ID, User.PATIENT, appointment_in(Appointment.REJECTED), REJECT)

    assert completed.reason == "Cannot reject a completed appointment"
    assert rejected.reason == "Appointment is already rejected"


def test_unknown_action_is_a_programming_error():
    with pytest.raises(ValueError):
        can_transition(DOCTOR_ID, User.DOCTOR, appointment_in(Appointment.PENDING), "reschedule")
