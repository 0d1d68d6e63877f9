import datetime

import pytest
from ninja_jwt.tokens import AccessToken

from appointments.lifecycle import book_appointment
from users.models import User


def make_user(username, role=User.PATIENT, **extra):
    return User.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password="s3cret-pass",
        first_name=username.capitalize(),
        last_name="Tester",
        role=role,
        **extra,
    )


@pytest.fixture
def patient(db):
    return make_user("paula", phone_number="0900000001", age=34, gender="female", blood_group="A+")


@pytest.fixture
def other_patient(db):
    return make_user("quentin", phone_number="0900000002", age=51, gender="male")


@pytest.fixture
def doctor(db):
    return make_user("drdre", role=User.DOCTOR, is_doctor=True, phone_number="0911111111")


@pytest.fixture
def other_doctor(db):
    return make_user("drwho", role=User.DOCTOR, is_doctor=True)


@pytest.fixture
def admin_user(db):
    return make_user("root", role=User.ADMIN, is_staff=True)


@pytest.fixture
def auth_header():
    def _header(user):
        return {"HTTP_AUTHORIZATION": f"Bearer {AccessToken.for_user(user)}"}
    return _header


@pytest.fixture
def booked(patient, doctor):
    """An appointment for 2024-06-01 09:00-09:30, still waiting for the doctor."""
    return book_appointment(
        patient_id=patient.id,
        doctor_id=doctor.id,
        date=datetime.date(2024, 6, 1),
        time_range="09:00 - 09:30",
    )
