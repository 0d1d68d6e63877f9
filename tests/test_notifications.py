import pytest

from notifications import utils
from notifications.models import Notification
from notifications.utils import notify

pytestmark = pytest.mark.django_db

BASE = "/api/notification"


class RecordingLayer:
    def __init__(self, fail=False):
        self.sent = []
        self.fail = fail

    async def group_send(self, group, message):
        if self.fail:
            raise ConnectionError("redis is down")
        self.sent.append((group, message))


def test_notify_persists_and_pushes(patient, monkeypatch):
    layer = RecordingLayer()
    monkeypatch.setattr(utils, "get_channel_layer", lambda: layer)

    notification = notify(patient, "Your appointment has been confirmed")

    assert notification.recipient == patient
    assert notification.is_read is False
    assert layer.sent == [(f"user_{patient.id}", {
        "type": "send_notification",
        "notification_id": notification.id,
        "message": "Your appointment has been confirmed",
    })]


def test_failed_push_keeps_the_record(patient, monkeypatch):
    monkeypatch.setattr(utils, "get_channel_layer", lambda: RecordingLayer(fail=True))

    notification = notify(patient, "hello")

    assert Notification.objects.filter(id=notification.id).exists()


@pytest.fixture
def inbox(patient, doctor):
    for number in range(12):
        Notification.objects.create(recipient=patient, content=f"note {number}")
    Notification.objects.create(recipient=doctor, content="for the doctor")
    return patient


def test_paginated_listing(client, auth_header, inbox):
    first = client.get(f"{BASE}/getallnotifs", **auth_header(inbox)).json()
    second = client.get(f"{BASE}/getallnotifs?page=1&limit=10", **auth_header(inbox)).json()

    assert first["total_count"] == 12
    assert first["total_pages"] == 2
    assert first["current_page"] == 0
    assert [n["content"] for n in first["data"]][:2] == ["note 11", "note 10"]
    assert len(second["data"]) == 2
    assert second["current_page"] == 1


def test_unread_count_and_mark_read(client, auth_header, inbox):
    headers = auth_header(inbox)
    target = Notification.objects.filter(recipient=inbox).first()

    assert client.get(f"{BASE}/unreadcount", **headers).json() == {"count": 12}

    response = client.put(f"{BASE}/markread", {"notificationId": target.id}, content_type="application/json", **headers)
    assert response.status_code == 200
    assert response.json()["is_read"] is True
    assert client.get(f"{BASE}/unreadcount", **headers).json() == {"count": 11}


def test_cannot_touch_someone_elses_notification(client, auth_header, inbox, doctor):
    foreign = Notification.objects.get(recipient=doctor)
    headers = auth_header(inbox)

    assert client.put(f"{BASE}/markread", {"notificationId": foreign.id},
                      content_type="application/json", **headers).status_code == 404
    assert client.delete(f"{BASE}/delete/{foreign.id}", **headers).status_code == 404
    assert Notification.objects.get(id=foreign.id).is_read is False


def test_mark_all_read(client, auth_header, inbox, doctor):
    response = client.put(f"{BASE}/markallread", **auth_header(inbox))

    assert response.status_code == 200
    assert not Notification.objects.filter(recipient=inbox, is_read=False).exists()
    assert Notification.objects.filter(recipient=doctor, is_read=False).count() == 1


def test_delete_and_delete_all(client, auth_header, inbox, doctor):
    headers = auth_header(inbox)
    target = Notification.objects.filter(recipient=inbox).first()

    assert client.delete(f"{BASE}/delete/{target.id}", **headers).status_code == 200
    assert Notification.objects.filter(recipient=inbox).count() == 11

    assert client.delete(f"{BASE}/deleteall", **headers).status_code == 200
    assert not Notification.objects.filter(recipient=inbox).exists()
    assert Notification.objects.filter(recipient=doctor).exists()
