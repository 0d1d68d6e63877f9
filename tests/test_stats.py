import pytest

pytestmark = pytest.mark.django_db


def test_public_stats_need_no_token(client, booked, patient, other_patient, doctor, admin_user):
    response = client.get("/api/stats/public")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {"patient_count": 2, "doctor_count": 1, "appointment_count": 1},
    }
