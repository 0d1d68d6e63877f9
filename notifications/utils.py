import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.db import DatabaseError, transaction

from .models import Notification

logger = logging.getLogger(__name__)


def user_group_name(user_id):
    return f"user_{user_id}"


def notify(recipient, content: str, source_appointment=None):
    """
    Persist a notification for ``recipient`` and push it to their websocket group.

    Best effort: a failed write is logged and ``None`` is returned so the
    appointment transition that triggered it stays committed. A failed push
    only loses the real-time copy; the row is still there to be polled.
    """
    try:
        with transaction.atomic():
            notification = Notification.objects.create(
                recipient=recipient,
                content=content,
                source_appointment=source_appointment,
            )
    except DatabaseError:
        logger.exception("Failed to store notification for user %s", recipient.pk)
        return None

    push_to_user(recipient.pk, content, notification_id=notification.pk)
    return notification


def push_to_user(user_id, message: str, notification_id=None):
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return

    try:
        async_to_sync(channel_layer.group_send)(
            user_group_name(user_id),
            {
                "type": "send_notification",
                "notification_id": notification_id,
                "message": message,
            },
        )
    except Exception:
        logger.warning("Real-time push to user %s failed", user_id, exc_info=True)
