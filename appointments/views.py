from django.shortcuts import get_object_or_404
from ninja import Router
from users.models import User
from users.auth import AuthBearer
from .exceptions import AppointmentError
from .lifecycle import book_appointment, complete_appointment, confirm_appointment, reject_appointment
from .queries import list_for_caller
from .schemas import AppointmentAction, AppointmentComplete, AppointmentCreate, AppointmentOut

router = Router(tags=["Appointments"])


@router.get("/getallappointments", response={200: list[AppointmentOut], 404: dict}, auth=AuthBearer())
def get_all_appointments(request):
    """
    List appointments for the logged-in user (admins see all, doctors their schedule, patients their bookings).
    """
    user = get_object_or_404(User, id=request.auth.id)
    return list(list_for_caller(user.id, user.role, is_doctor=user.is_doctor))


# Book an appointment
@router.post("/bookappointment", response={201: AppointmentOut, 400: dict, 403: dict, 404: dict}, auth=AuthBearer())
def book(request, payload: AppointmentCreate):
    """
    Book a time slot with a doctor. Starts in Waiting_for_confirmation.
    """
    try:
        appointment = book_appointment(
            patient_id=request.auth.id,
            doctor_id=payload.doctor_id,
            date=payload.date,
            start_time=payload.start_time,
            end_time=payload.end_time,
            time_range=payload.time_range,
            age=payload.age,
            gender=payload.gender,
            blood_group=payload.blood_group,
            number=payload.number,
            family_diseases=payload.family_diseases,
            email=payload.email,
        )
    except AppointmentError as e:
        return e.status_code, {"error": e.message}

    return 201, appointment


@router.put("/confirmappointment", response={200: AppointmentOut, 400: dict, 403: dict, 404: dict}, auth=AuthBearer())
def confirm(request, payload: AppointmentAction):
    """
    Doctor accepts a booking request.
    """
    try:
        return confirm_appointment(payload.appointment_id, request.auth)
    except AppointmentError as e:
        return e.status_code, {"error": e.message}


@router.put("/completed", response={201: AppointmentOut, 400: dict, 403: dict, 404: dict}, auth=AuthBearer())
def completed(request, payload: AppointmentComplete):
    try:
        appointment = complete_appointment(payload.appointment_id, request.auth)
    except AppointmentError as e:
        return e.status_code, {"error": e.message}

    return 201, appointment


@router.put("/rejected", response={200: AppointmentOut, 400: dict, 403: dict, 404: dict}, auth=AuthBearer())
def rejected(request, payload: AppointmentAction):
    """
    Either participant rejects (doctor) or cancels (patient) the appointment.
    """
    try:
        return reject_appointment(payload.appointment_id, request.auth)
    except AppointmentError as e:
        return e.status_code, {"error": e.message}
