"""
Alerts - 告警 API
"""

from .models import (
    AlertType,
    AlertTarget,
    AlertDeliveryChannel,
    CreateAlertRequest,
    UpdateAlertRequest,
    Alert,
    ListAlertsResponse,
)
from .api import AlertsApi

__all__ = [
    "AlertType",
    "AlertTarget",
    "AlertDeliveryChannel",
    "CreateAlertRequest",
    "UpdateAlertRequest",
    "Alert",
    "ListAlertsResponse",
    "AlertsApi",
]
