"""
Web3 Actions Data Models

Action 及其执行记录。
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from ..base import PageQuery, RequestModel, ResponseModel


class ActionTrigger(str, Enum):
    """Action 触发方式（服务端新增类型解码为 UNKNOWN）"""
    PERIODIC = "periodic"
    WEBHOOK = "webhook"
    BLOCK = "block"
    TRANSACTION = "transaction"
    ALERT = "alert"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class Action(ResponseModel):
    """Web3 Action"""
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    trigger_type: Optional[ActionTrigger] = None
    runtime: Optional[str] = None
    function: Optional[str] = None
    is_paused: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ListActionsResponse(ResponseModel):
    actions: List[Action] = Field(default_factory=list)


class ActionExecution(ResponseModel):
    """单次执行记录"""
    id: str
    action_id: Optional[str] = None
    status: Optional[str] = None
    trigger_type: Optional[ActionTrigger] = None
    started_at: Optional[str] = None
    ended_at: Optional[str] = None
    error: Optional[str] = None
    logs: Optional[List[Dict[str, Any]]] = None


class ListActionExecutionsResponse(ResponseModel):
    executions: List[ActionExecution] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def accept_bare_array(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"executions": data}
        return data


class ListActionExecutionsQuery(PageQuery):
    """执行记录分页参数"""


class UpdateActionRequest(RequestModel):
    """更新 Action（只发送已设置的字段）"""
    name: Optional[str] = None
    description: Optional[str] = None


class ActionIdsRequest(RequestModel):
    """批量停止/恢复 Action"""
    action_ids: List[str] = Field(..., min_length=1)
