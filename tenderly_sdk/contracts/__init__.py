"""
Contracts - 项目合约 API
"""

from .models import (
    ContractTag,
    ContractDetails,
    Contract,
    ListContractsQuery,
    AddContractRequest,
    UpdateContractRequest,
    TagContractsRequest,
    DeleteContractsRequest,
)
from .api import ContractsApi

__all__ = [
    "ContractTag",
    "ContractDetails",
    "Contract",
    "ListContractsQuery",
    "AddContractRequest",
    "UpdateContractRequest",
    "TagContractsRequest",
    "DeleteContractsRequest",
    "ContractsApi",
]
