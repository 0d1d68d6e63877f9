"""
Authorization guard for appointment transitions.

``can_transition`` is pure: it only looks at the caller and the appointment
row handed to it and never touches the database. Participant checks run
before status checks, so the assigned doctor confirming an appointment that
is not waiting gets a state error rather than an authorization error.
"""
from dataclasses import dataclass
from typing import Optional, Type

from .exceptions import (
    AlreadyTerminalError, AppointmentError, UnauthorizedError, WrongPriorStateError,
)
from .models import Appointment

BOOK = "book"
CONFIRM = "confirm"
COMPLETE = "complete"
REJECT = "reject"

# action -> (statuses it may start from, status it ends in)
TRANSITIONS = {
    CONFIRM: ((Appointment.WAITING_FOR_CONFIRMATION,), Appointment.PENDING),
    COMPLETE: ((Appointment.PENDING,), Appointment.COMPLETED),
    REJECT: ((Appointment.WAITING_FOR_CONFIRMATION, Appointment.PENDING), Appointment.REJECTED),
}

WRONG_PRIOR_STATE_MESSAGES = {
    CONFIRM: "Appointment is not awaiting confirmation",
    COMPLETE: "Appointment must be confirmed before it can be completed",
}


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: str = ""
    error: Optional[Type[AppointmentError]] = None

    def raise_if_denied(self):
        if not self.allowed:
            raise self.error(self.reason)


ALLOW = Decision(allowed=True)


def deny(error, reason):
    return Decision(allowed=False, reason=reason, error=error)


def can_transition(caller_id, caller_role, appointment, action) -> Decision:
    """
    Decide whether ``caller_id`` may perform ``action`` on ``appointment``.

    ``caller_role`` is accepted for symmetry with the query side but grants
    nothing here: admins may read every appointment, yet writes are decided
    by participation alone.
    """
    if caller_id is None:
        return deny(UnauthorizedError, "Authentication required")

    if action == BOOK:
        return ALLOW

    if action not in TRANSITIONS:
        raise ValueError(f"Unknown appointment action: {action}")

    if action in (CONFIRM, COMPLETE) and caller_id != appointment.doctor_id:
        return deny(UnauthorizedError, f"Only the assigned doctor can {action} this appointment")

    if action == REJECT and caller_id not in (appointment.doctor_id, appointment.patient_id):
        return deny(UnauthorizedError, "Only the patient or the doctor of this appointment can reject it")

    if appointment.is_terminal:
        if appointment.status == Appointment.REJECTED and action == REJECT:
            return deny(AlreadyTerminalError, "Appointment is already rejected")
        return deny(AlreadyTerminalError, f"Cannot {action} a {appointment.status.lower()} appointment")

    allowed_from, _ = TRANSITIONS[action]
    if appointment.status not in allowed_from:
        return deny(WrongPriorStateError, WRONG_PRIOR_STATE_MESSAGES[action])

    return ALLOW
