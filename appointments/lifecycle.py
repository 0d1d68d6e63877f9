"""
Appointment lifecycle engine.

    (none) --book--> Waiting_for_confirmation
    Waiting_for_confirmation --confirm--> Pending
    Waiting_for_confirmation, Pending --reject--> Rejected
    Pending --complete--> Completed

Every status change is a single conditional UPDATE filtered on the allowed
prior statuses, so two concurrent requests cannot both apply the same
transition. Each successful call then notifies both participants.
"""
import logging

from django.utils import timezone
from users.models import User
from notifications.utils import notify
from .exceptions import InvalidStateError, NotFoundError, SchedulingValidationError
from .models import Appointment
from .permissions import BOOK, COMPLETE, CONFIRM, REJECT, TRANSITIONS, can_transition
from .utils import resolve_time_range

logger = logging.getLogger(__name__)

GENDERS = {value for value, _ in Appointment.GENDER_CHOICES}


def _get_appointment(appointment_id):
    appointment = Appointment.objects.select_related("patient", "doctor").filter(id=appointment_id).first()
    if appointment is None:
        raise NotFoundError("Appointment not found")
    return appointment


def _apply_transition(appointment_id, caller, action):
    appointment = _get_appointment(appointment_id)
    can_transition(caller.id, caller.role, appointment, action).raise_if_denied()

    allowed_from, target = TRANSITIONS[action]
    now = timezone.now()
    updated = Appointment.objects.filter(id=appointment.id, status__in=allowed_from).update(
        status=target, updated_at=now
    )

    if not updated:
        # Someone else moved the row between our read and our write
        try:
            appointment.refresh_from_db(fields=["status"])
        except Appointment.DoesNotExist:
            raise NotFoundError("Appointment not found")
        logger.warning(
            "Lost race applying %s to appointment %s (now %s)", action, appointment.id, appointment.status
        )
        can_transition(caller.id, caller.role, appointment, action).raise_if_denied()
        raise InvalidStateError("Appointment status changed, please reload and try again")

    appointment.status = target
    appointment.updated_at = now
    logger.info("Appointment %s: %s by user %s -> %s", appointment.id, action, caller.id, target)
    return appointment


def book_appointment(patient_id, doctor_id, date, start_time=None, end_time=None, time_range=None,
                     age=None, gender=None, blood_group=None, number=None, family_diseases=None, email=None):
    """
    Create an appointment in ``Waiting_for_confirmation``.

    Missing intake details fall back to the patient's profile. Overlapping
    bookings for the same doctor are accepted; no slot check is made.
    """
    patient = User.objects.filter(id=patient_id).first()
    doctor = User.objects.filter(id=doctor_id).first()
    if patient is None or doctor is None:
        raise NotFoundError("User or doctor not found")

    can_transition(patient.id, patient.role, None, BOOK).raise_if_denied()

    start, end = resolve_time_range(start_time, end_time, time_range)

    age = age if age is not None else patient.age
    gender = (gender or patient.gender or "").lower()
    blood_group = blood_group or patient.blood_group or None
    number = number or patient.phone_number
    email = email or patient.email

    if age is None:
        raise SchedulingValidationError("Age is required")
    if gender not in GENDERS:
        raise SchedulingValidationError("Gender must be one of: male, female, other")
    if not number:
        raise SchedulingValidationError("Contact number is required")

    appointment = Appointment.objects.create(
        patient=patient,
        doctor=doctor,
        date=date,
        start_time=start,
        end_time=end,
        age=age,
        gender=gender,
        blood_group=blood_group,
        number=number,
        family_diseases=family_diseases or "",
        email=email,
        status=Appointment.WAITING_FOR_CONFIRMATION,
    )
    logger.info("Appointment %s booked by user %s with doctor %s", appointment.id, patient.id, doctor.id)

    when = f"on {appointment.date} from {start:%H:%M} to {end:%H:%M}"
    notify(
        doctor,
        f"New appointment request from {patient.display_name} {when}. "
        f"Patient details - Age: {age}, Blood group: {blood_group or 'Not specified'}, "
        f"Gender: {gender}, Phone: {number}, Family diseases: {appointment.family_diseases or 'None'}",
        source_appointment=appointment,
    )
    notify(
        patient,
        f"Your appointment request with Dr. {doctor.display_name} {when} has been sent and is awaiting confirmation",
        source_appointment=appointment,
    )
    return appointment


def confirm_appointment(appointment_id, caller):
    appointment = _apply_transition(appointment_id, caller, CONFIRM)

    when = f"on {appointment.date} at {appointment.time_range}"
    notify(
        appointment.patient,
        f"Your appointment with Dr. {appointment.doctor.display_name} {when} has been confirmed",
        source_appointment=appointment,
    )
    notify(
        appointment.doctor,
        f"You confirmed the appointment with {appointment.patient.display_name} {when}",
        source_appointment=appointment,
    )
    return appointment


def reject_appointment(appointment_id, caller):
    """Either participant may reject; the wording depends on who did it."""
    appointment = _apply_transition(appointment_id, caller, REJECT)

    patient, doctor = appointment.patient, appointment.doctor
    when = f"on {appointment.date} at {appointment.time_range}"
    if caller.id == appointment.doctor_id:
        notify(patient, f"Dr. {doctor.display_name} has rejected your appointment {when}",
               source_appointment=appointment)
        notify(doctor, f"You rejected the appointment with {patient.display_name} {when}",
               source_appointment=appointment)
    else:
        notify(doctor, f"{patient.display_name} has cancelled the appointment {when}",
               source_appointment=appointment)
        notify(patient, f"You cancelled your appointment with Dr. {doctor.display_name} {when}",
               source_appointment=appointment)
    return appointment


def complete_appointment(appointment_id, caller):
    appointment = _apply_transition(appointment_id, caller, COMPLETE)

    notify(
        appointment.patient,
        f"Your appointment with Dr. {appointment.doctor.display_name} has been completed",
        source_appointment=appointment,
    )
    notify(
        appointment.doctor,
        f"Your appointment with {appointment.patient.display_name} has been completed",
        source_appointment=appointment,
    )
    return appointment
