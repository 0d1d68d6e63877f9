from users.models import User
from .models import Appointment


def list_for_caller(caller_id, caller_role, is_doctor=False):
    """
    Appointments visible to the caller, newest first.

    Admins see everything, doctors (by role or approval flag) their own
    schedule, everyone else the appointments they booked.
    """
    appointments = Appointment.objects.select_related("patient", "doctor").order_by("-created_at", "-id")

    if caller_role == User.ADMIN:
        return appointments
    if caller_role == User.DOCTOR or is_doctor:
        return appointments.filter(doctor_id=caller_id)
    return appointments.filter(patient_id=caller_id)
