"""
Delivery Channel Data Models

告警的投递渠道（邮件、Slack、Webhook 等）。
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..base import ResponseModel


class DeliveryChannelType(str, Enum):
    EMAIL = "email"
    SLACK = "slack"
    TELEGRAM = "telegram"
    DISCORD = "discord"
    WEBHOOK = "webhook"
    PAGERDUTY = "pagerduty"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class DeliveryChannel(ResponseModel):
    """投递渠道"""
    id: str
    type: Optional[DeliveryChannelType] = None
    label: Optional[str] = None
    owner_id: Optional[str] = None
    owner_type: Optional[str] = None
    information: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None


class ListDeliveryChannelsResponse(ResponseModel):
    delivery_channels: List[DeliveryChannel] = Field(default_factory=list)
