import pytest
from channels.db import database_sync_to_async
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator
from ninja_jwt.tokens import AccessToken

from notifications.consumers import NotificationConsumer
from users.models import User


def communicator_for(query=""):
    return WebsocketCommunicator(NotificationConsumer.as_asgi(), f"/ws/notifications/{query}")


@pytest.mark.asyncio
async def test_missing_token_is_refused():
    connected, code = await communicator_for().connect()

    assert not connected
    assert code == 4000


@pytest.mark.asyncio
async def test_garbage_token_is_refused():
    connected, code = await communicator_for("?token=not-a-jwt").connect()

    assert not connected
    assert code == 4001


@pytest.mark.asyncio
@pytest.mark.django_db(transaction=True)
async def test_pushes_reach_the_recipient():
    user = await database_sync_to_async(User.objects.create_user)(
        username="sockets", email="sockets@example.com", password="s3cret-pass",
    )
    communicator = communicator_for(f"?token={AccessToken.for_user(user)}")

    connected, _ = await communicator.connect()
    assert connected

    await get_channel_layer().group_send(
        f"user_{user.id}",
        {"type": "send_notification", "notification_id": 7, "message": "Your appointment has been confirmed"},
    )
    assert await communicator.receive_json_from() == {
        "notification_id": 7,
        "message": "Your appointment has been confirmed",
    }

    await communicator.disconnect()
