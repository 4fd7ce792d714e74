"""
Contracts API

项目合约的查询、添加、重命名、删除与打标签。
"""

from typing import TYPE_CHECKING, List, Optional, Sequence

from ..endpoint import Endpoint
from ..errors import InvalidParameterError
from ..utils import validate_address
from .models import (
    AddContractRequest,
    Contract,
    DeleteContractsRequest,
    ListContractsQuery,
    TagContractsRequest,
    UpdateContractRequest,
)

if TYPE_CHECKING:
    from ..client import TenderlyClient


LIST_CONTRACTS = Endpoint("GET", "/contracts")
GET_CONTRACT = Endpoint("GET", "/contract/{network}/{address}")
ADD_CONTRACT = Endpoint("POST", "/address")
RENAME_CONTRACT = Endpoint("POST", "/contract/{network}/{address}/rename")
DELETE_CONTRACT = Endpoint("DELETE", "/contract/{network}/{address}")
DELETE_CONTRACTS = Endpoint("DELETE", "/contracts")
ADD_TAG = Endpoint("POST", "/tag")
REMOVE_TAG = Endpoint("DELETE", "/tag")


class ContractsApi:
    """Contracts API 客户端"""

    def __init__(self, client: "TenderlyClient"):
        self.client = client

    async def list(self, query: Optional[ListContractsQuery] = None) -> List[Contract]:
        return await self.client.send(
            LIST_CONTRACTS,
            params=query or ListContractsQuery(),
            response_model=List[Contract],
        )

    async def get(self, network_id: str, address: str) -> Contract:
        validate_address(address)
        return await self.client.send(
            GET_CONTRACT.bind(network=network_id, address=address),
            response_model=Contract,
        )

    async def add(self, request: AddContractRequest) -> Contract:
        """把合约加入项目"""
        validate_address(request.address)
        return await self.client.send(ADD_CONTRACT, request, response_model=Contract)

    async def update(
        self, network_id: str, address: str, request: UpdateContractRequest
    ) -> None:
        """重命名合约"""
        validate_address(address)
        await self.client.send(RENAME_CONTRACT.bind(network=network_id, address=address), request)

    async def delete(self, network_id: str, address: str) -> None:
        validate_address(address)
        await self.client.send(DELETE_CONTRACT.bind(network=network_id, address=address))

    async def delete_many(self, contract_ids: Sequence[str]) -> None:
        """一次请求删除多个合约"""
        ids = list(contract_ids)
        if not ids:
            raise InvalidParameterError("contract_ids 不能为空")
        await self.client.send(DELETE_CONTRACTS, DeleteContractsRequest(account_ids=ids))

    async def add_tag(self, request: TagContractsRequest) -> None:
        await self.client.send(ADD_TAG, request)

    async def remove_tag(self, request: TagContractsRequest) -> None:
        await self.client.send(REMOVE_TAG, request)
