"""
Alerts API

告警规则的增删改查与启停。
"""

from typing import TYPE_CHECKING, List

from ..endpoint import Endpoint
from .models import Alert, CreateAlertRequest, ListAlertsResponse, UpdateAlertRequest

if TYPE_CHECKING:
    from ..client import TenderlyClient


LIST_ALERTS = Endpoint("GET", "/alerts")
CREATE_ALERT = Endpoint("POST", "/alert")
GET_ALERT = Endpoint("GET", "/alert/{id}")
UPDATE_ALERT = Endpoint("PUT", "/alert/{id}")
DELETE_ALERT = Endpoint("DELETE", "/alert/{id}")
ENABLE_ALERT = Endpoint("POST", "/alert/{id}/enable")
DISABLE_ALERT = Endpoint("POST", "/alert/{id}/disable")


class AlertsApi:
    """Alerts API 客户端"""

    def __init__(self, client: "TenderlyClient"):
        self.client = client

    async def list(self) -> List[Alert]:
        response = await self.client.send(LIST_ALERTS, response_model=ListAlertsResponse)
        return response.alerts

    async def get(self, alert_id: str) -> Alert:
        return await self.client.send(GET_ALERT.bind(id=alert_id), response_model=Alert)

    async def create(self, request: CreateAlertRequest) -> Alert:
        """
        创建告警

        用法:

            request = CreateAlertRequest(
                name="Failed txs",
                alert_type=AlertType.FAILED_TRANSACTION,
                network_id="1",
                addresses=["0x..."],
            ).with_delivery_channel(channel_id)
            alert = await client.alerts.create(request)
        """
        return await self.client.send(CREATE_ALERT, request, response_model=Alert)

    async def update(self, alert_id: str, request: UpdateAlertRequest) -> Alert:
        return await self.client.send(UPDATE_ALERT.bind(id=alert_id), request, response_model=Alert)

    async def delete(self, alert_id: str) -> None:
        await self.client.send(DELETE_ALERT.bind(id=alert_id))

    async def enable(self, alert_id: str) -> None:
        await self.client.send(ENABLE_ALERT.bind(id=alert_id))

    async def disable(self, alert_id: str) -> None:
        await self.client.send(DISABLE_ALERT.bind(id=alert_id))
