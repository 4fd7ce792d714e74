"""
Alerts Data Models

告警规则及其投递配置。
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from ..base import RequestModel, ResponseModel, reject_unknown


class AlertType(str, Enum):
    """告警类型（服务端新增类型解码为 UNKNOWN）"""
    SUCCESSFUL_TRANSACTION = "successful_transaction"
    FAILED_TRANSACTION = "failed_transaction"
    FUNCTION_CALL = "method_call"
    EVENT_EMITTED = "log_emitted"
    ERC20_TRANSFER = "erc20_transfer"
    ALLOWLISTED_CALLER = "whitelisted_caller"
    BLOCKLISTED_CALLER = "blacklisted_caller"
    BALANCE_CHANGE = "balance_change"
    STATE_CHANGE = "state_change"
    TRANSACTION_VALUE = "transaction_value"
    VIEW_FUNCTION = "view_function"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class AlertTarget(str, Enum):
    """告警作用范围"""
    ADDRESS = "address"
    NETWORK = "network"
    PROJECT = "project"
    TAG = "tag"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class AlertDeliveryChannel(RequestModel):
    """告警绑定的投递渠道"""
    id: str = Field(..., description="delivery channel ID")
    enabled: bool = True


class CreateAlertRequest(RequestModel):
    """创建告警"""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    alert_type: AlertType
    network_id: Optional[str] = None
    target: AlertTarget = AlertTarget.ADDRESS
    addresses: List[str] = Field(default_factory=list, description="target 为 address 时的监控地址")
    tag: Optional[str] = Field(None, description="target 为 tag 时的合约标签")
    parameters: Dict[str, Any] = Field(default_factory=dict, description="类型相关参数，如函数签名、阈值")
    delivery_channels: List[AlertDeliveryChannel] = Field(default_factory=list)
    enabled: bool = True

    @field_validator("alert_type", "target")
    @classmethod
    def known_enum_value(cls, v):
        return reject_unknown(v)

    def with_delivery_channel(self, channel_id: str, enabled: bool = True) -> "CreateAlertRequest":
        """追加投递渠道"""
        self.delivery_channels.append(AlertDeliveryChannel(id=channel_id, enabled=enabled))
        return self


class UpdateAlertRequest(RequestModel):
    """更新告警（只发送已设置的字段）"""
    name: Optional[str] = None
    description: Optional[str] = None
    enabled: Optional[bool] = None
    parameters: Optional[Dict[str, Any]] = None
    delivery_channels: Optional[List[AlertDeliveryChannel]] = None


class Alert(ResponseModel):
    """告警规则"""
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    enabled: Optional[bool] = None
    alert_type: Optional[AlertType] = None
    network_id: Optional[str] = None
    target: Optional[AlertTarget] = None
    addresses: List[str] = Field(default_factory=list)
    tag: Optional[str] = None
    parameters: Dict[str, Any] = Field(default_factory=dict)
    delivery_channels: List[Dict[str, Any]] = Field(default_factory=list)
    project_id: Optional[str] = None
    created_at: Optional[str] = None


class ListAlertsResponse(ResponseModel):
    """告警列表"""
    alerts: List[Alert] = Field(default_factory=list)
