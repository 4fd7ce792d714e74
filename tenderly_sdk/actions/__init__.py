"""
Web3 Actions - Serverless Action API
"""

from .models import (
    ActionTrigger,
    Action,
    ListActionsResponse,
    ActionExecution,
    ListActionExecutionsResponse,
    ListActionExecutionsQuery,
    UpdateActionRequest,
    ActionIdsRequest,
)
from .api import ActionsApi

__all__ = [
    "ActionTrigger",
    "Action",
    "ListActionsResponse",
    "ActionExecution",
    "ListActionExecutionsResponse",
    "ListActionExecutionsQuery",
    "UpdateActionRequest",
    "ActionIdsRequest",
    "ActionsApi",
]
