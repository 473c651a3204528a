import logging
from typing import Any

from mipush.core.config import settings
from mipush.services.message_builder import build_from_options
from mipush.services.push_client import PushClient

logger = logging.getLogger(__name__)

COUNTERS_PATH = "stats/message/counters"


class MessageService:
    """
    Single-message API: push the same message to one device, an alias, a user account,
    one or more topics, or every device of the app.
    """

    _instance: "MessageService" = None

    def __init__(self, push_client: PushClient | None = None):
        if MessageService._instance is not None:
            raise Exception("This class is a singleton!")
        self._push_client = push_client

    @classmethod
    def get_instance(cls) -> "MessageService":
        if MessageService._instance is None:
            MessageService._instance = cls()
        return MessageService._instance

    @property
    def push_client(self) -> PushClient:
        if self._push_client is None:
            self._push_client = PushClient()
        return self._push_client

    async def send(self, **options: Any) -> dict:
        """
        Push a message.

        `options` must carry one of reg_id/alias/user/topic/topics/topic_op/all plus
        `message`, either an IOSMessage/AndroidMessage or a plain dict of fields.
        Raises InvalidTargetError before anything is sent when no target is given.
        """
        request = build_from_options(**options)
        logger.info("Sending push message to %s", request.path)
        return await self.push_client.post(request.path, request.params)

    async def counters(self, start_date: str, end_date: str, package_name: str) -> dict:
        """
        Message statistics for `package_name` between two yyyyMMdd dates (at most 30 days).
        """
        params = {
            "start_date": start_date,
            "end_date": end_date,
            "restricted_package_name": package_name,
        }
        return await self.push_client.get(
            COUNTERS_PATH, params, version=settings.STATS_API_VERSION
        )


message_service = MessageService.get_instance()
