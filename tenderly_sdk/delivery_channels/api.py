"""
Delivery Channels API

渠道既可以挂在 project 下，也可以挂在 account 下，两个列表分别查询。
"""

from typing import TYPE_CHECKING, List, Optional

from ..endpoint import ACCOUNT, Endpoint
from .models import DeliveryChannel, ListDeliveryChannelsResponse

if TYPE_CHECKING:
    from ..client import TenderlyClient


LIST_PROJECT_CHANNELS = Endpoint("GET", "/delivery-channels")
LIST_ACCOUNT_CHANNELS = Endpoint("GET", "/delivery-channels", ACCOUNT)


class DeliveryChannelsApi:
    """Delivery Channels API 客户端"""

    def __init__(self, client: "TenderlyClient"):
        self.client = client

    async def list(self) -> List[DeliveryChannel]:
        """当前项目的投递渠道"""
        response = await self.client.send(
            LIST_PROJECT_CHANNELS, response_model=ListDeliveryChannelsResponse
        )
        return response.delivery_channels

    async def list_account(self) -> List[DeliveryChannel]:
        """账户级投递渠道"""
        response = await self.client.send(
            LIST_ACCOUNT_CHANNELS, response_model=ListDeliveryChannelsResponse
        )
        return response.delivery_channels

    async def get(self, channel_id: str) -> Optional[DeliveryChannel]:
        """先查项目渠道，再查账户渠道"""
        for channel in await self.list():
            if channel.id == channel_id:
                return channel
        for channel in await self.list_account():
            if channel.id == channel_id:
                return channel
        return None
