"""
Web3 Actions API

Action 的查询、更新、删除、手动触发、停止/恢复，以及执行记录。
"""

from typing import TYPE_CHECKING, Any, List, Sequence

from ..endpoint import Endpoint
from ..errors import InvalidParameterError
from .models import (
    Action,
    ActionExecution,
    ActionIdsRequest,
    ListActionExecutionsQuery,
    ListActionExecutionsResponse,
    ListActionsResponse,
    UpdateActionRequest,
)

if TYPE_CHECKING:
    from ..client import TenderlyClient


LIST_ACTIONS = Endpoint("GET", "/actions")
GET_ACTION = Endpoint("GET", "/actions/{id}")
UPDATE_ACTION = Endpoint("PATCH", "/actions/{id}")
DELETE_ACTION = Endpoint("DELETE", "/actions/{id}")
INVOKE_ACTION = Endpoint("POST", "/actions/{id}/invoke")
LIST_EXECUTIONS = Endpoint("GET", "/actions/{id}/executions")
GET_EXECUTION = Endpoint("GET", "/actions/{id}/executions/{execution_id}")
STOP_ACTIONS = Endpoint("POST", "/actions/stop")
RESUME_ACTIONS = Endpoint("POST", "/actions/resume")


def _action_ids(action_ids: Sequence[str]) -> ActionIdsRequest:
    ids = list(action_ids)
    if not ids:
        raise InvalidParameterError("action_ids 不能为空")
    return ActionIdsRequest(action_ids=ids)


class ActionsApi:
    """Web3 Actions API 客户端"""

    def __init__(self, client: "TenderlyClient"):
        self.client = client

    async def list(self) -> List[Action]:
        response = await self.client.send(LIST_ACTIONS, response_model=ListActionsResponse)
        return response.actions

    async def get(self, action_id: str) -> Action:
        return await self.client.send(GET_ACTION.bind(id=action_id), response_model=Action)

    async def update(self, action_id: str, request: UpdateActionRequest) -> Action:
        return await self.client.send(UPDATE_ACTION.bind(id=action_id), request, response_model=Action)

    async def delete(self, action_id: str) -> None:
        await self.client.send(DELETE_ACTION.bind(id=action_id))

    async def invoke(self, action_id: str, payload: Any = None) -> ActionExecution:
        """手动触发 Action，payload 原样作为请求体发送"""
        return await self.client.send(
            INVOKE_ACTION.bind(id=action_id),
            payload if payload is not None else {},
            response_model=ActionExecution,
        )

    # -------------------------------------------------------------------------
    # Executions
    # -------------------------------------------------------------------------

    async def list_executions(
        self, action_id: str, page: int = 0, per_page: int = 20
    ) -> List[ActionExecution]:
        response = await self.client.send(
            LIST_EXECUTIONS.bind(id=action_id),
            params=ListActionExecutionsQuery(page=page, per_page=per_page),
            response_model=ListActionExecutionsResponse,
        )
        return response.executions

    async def get_execution(self, action_id: str, execution_id: str) -> ActionExecution:
        return await self.client.send(
            GET_EXECUTION.bind(id=action_id, execution_id=execution_id),
            response_model=ActionExecution,
        )

    # -------------------------------------------------------------------------
    # Stop / resume
    # -------------------------------------------------------------------------

    async def stop_many(self, action_ids: Sequence[str]) -> None:
        """一次请求停止多个 Action"""
        await self.client.send(STOP_ACTIONS, _action_ids(action_ids))

    async def resume_many(self, action_ids: Sequence[str]) -> None:
        """一次请求恢复多个 Action"""
        await self.client.send(RESUME_ACTIONS, _action_ids(action_ids))

    async def stop(self, action_id: str) -> None:
        await self.stop_many([action_id])

    async def resume(self, action_id: str) -> None:
        await self.resume_many([action_id])
