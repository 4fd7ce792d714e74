"""
Alerts API Unit Tests
"""

import asyncio

import pytest
from pydantic import ValidationError

from tenderly_sdk.alerts import AlertTarget, AlertType, CreateAlertRequest, UpdateAlertRequest

from conftest import PROJECT_PATH, TOKEN, body_of


ALERT_JSON = {
    "id": "alert-1",
    "name": "Failed txs",
    "enabled": True,
    "alert_type": "failed_transaction",
    "network_id": "1",
    "target": "address",
    "addresses": [TOKEN],
    "delivery_channels": [{"id": "dc-1", "enabled": True}],
}


class TestAlertModels:
    """测试告警模型"""

    def test_unknown_type(self):
        """测试服务端新增的告警类型解码为 UNKNOWN"""
        assert AlertType("quantum_event") is AlertType.UNKNOWN
        assert AlertTarget("galaxy") is AlertTarget.UNKNOWN

    def test_create_payload(self):
        request = CreateAlertRequest(
            name="Failed txs",
            alert_type=AlertType.FAILED_TRANSACTION,
            network_id="1",
            addresses=[TOKEN],
        ).with_delivery_channel("dc-1")
        payload = request.to_payload()
        assert payload["alert_type"] == "failed_transaction"
        assert payload["target"] == "address"
        assert payload["delivery_channels"] == [{"id": "dc-1", "enabled": True}]
        assert "tag" not in payload

    def test_create_rejects_unknown_values(self):
        """测试请求中的未知告警类型/作用范围被拒绝"""
        with pytest.raises(ValidationError):
            CreateAlertRequest(name="x", alert_type="failed_transacton")
        with pytest.raises(ValidationError):
            CreateAlertRequest(name="x", alert_type=AlertType.FAILED_TRANSACTION, target="galaxy")


class TestAlertsApi:
    """测试 Alerts API"""

    def test_list_unwraps(self, client, mock):
        mock.add(
            "GET",
            f"{PROJECT_PATH}/alerts",
            {"alerts": [ALERT_JSON, dict(ALERT_JSON, id="alert-2", alert_type="brand_new_type")]},
        )

        alerts = asyncio.run(client.alerts.list())
        assert [a.id for a in alerts] == ["alert-1", "alert-2"]
        assert alerts[0].alert_type is AlertType.FAILED_TRANSACTION
        assert alerts[1].alert_type is AlertType.UNKNOWN

    def test_list_null(self, client, mock):
        """测试 alerts 为 null 时返回空列表"""
        mock.add("GET", f"{PROJECT_PATH}/alerts", {"alerts": None})
        assert asyncio.run(client.alerts.list()) == []

    def test_create_get_update_delete(self, client, mock):
        mock.add("POST", f"{PROJECT_PATH}/alert", ALERT_JSON)
        mock.add("GET", f"{PROJECT_PATH}/alert/alert-1", ALERT_JSON)
        mock.add("PUT", f"{PROJECT_PATH}/alert/alert-1", dict(ALERT_JSON, enabled=False))
        mock.add("DELETE", f"{PROJECT_PATH}/alert/alert-1", None, status_code=204)

        request = CreateAlertRequest(name="Failed txs", alert_type=AlertType.FAILED_TRANSACTION)
        created = asyncio.run(client.alerts.create(request))
        assert created.id == "alert-1"

        fetched = asyncio.run(client.alerts.get("alert-1"))
        assert fetched.addresses == [TOKEN]

        updated = asyncio.run(client.alerts.update("alert-1", UpdateAlertRequest(enabled=False)))
        assert updated.enabled is False
        assert body_of(mock.last) == {"enabled": False}

        asyncio.run(client.alerts.delete("alert-1"))
        assert mock.last.method == "DELETE"

    def test_enable_disable(self, client, mock):
        mock.add("POST", f"{PROJECT_PATH}/alert/alert-1/enable", None, status_code=204)
        mock.add("POST", f"{PROJECT_PATH}/alert/alert-1/disable", None, status_code=204)

        asyncio.run(client.alerts.enable("alert-1"))
        asyncio.run(client.alerts.disable("alert-1"))
        assert [r.url.path.rsplit("/", 1)[-1] for r in mock.requests] == ["enable", "disable"]
