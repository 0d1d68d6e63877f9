import json
import logging
from urllib.parse import parse_qs

from channels.generic.websocket import AsyncWebsocketConsumer

from .utils import user_group_name

logger = logging.getLogger(__name__)


class NotificationConsumer(AsyncWebsocketConsumer):
    async def connect(self):
        """
        Authenticate with the ``token`` query parameter and join the user's group.
        """
        from ninja_jwt.exceptions import TokenError
        from ninja_jwt.tokens import AccessToken
        from users.models import User

        query_params = parse_qs(self.scope["query_string"].decode())
        token = query_params.get("token", [None])[0]

        if not token:
            await self.close(code=4000)  # Missing token
            return

        try:
            user_id = AccessToken(token)["user_id"]
        except (TokenError, KeyError):
            logger.info("Rejected notification socket with invalid token")
            await self.close(code=4001)  # Invalid token
            return

        self.user = await User.objects.filter(id=user_id, is_active=True).afirst()
        if not self.user:
            await self.close(code=4001)
            return

        self.group_name = user_group_name(self.user.id)
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()

    async def disconnect(self, close_code):
        if hasattr(self, "group_name"):
            await self.channel_layer.group_discard(self.group_name, self.channel_name)

    async def send_notification(self, event):
        await self.send(text_data=json.dumps({
            "notification_id": event.get("notification_id"),
            "message": event["message"],
        }))
