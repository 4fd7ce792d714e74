"""
Delivery Channels - 告警投递渠道 API
"""

from .models import DeliveryChannelType, DeliveryChannel, ListDeliveryChannelsResponse
from .api import DeliveryChannelsApi

__all__ = [
    "DeliveryChannelType",
    "DeliveryChannel",
    "ListDeliveryChannelsResponse",
    "DeliveryChannelsApi",
]
