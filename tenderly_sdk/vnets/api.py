"""
Virtual TestNets API

VNet 的增删改查、分叉、交易发送/模拟，以及 Admin RPC 子客户端的入口。
"""

import logging
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from ..endpoint import Endpoint
from ..errors import InvalidParameterError
from .admin_rpc import AdminRpc
from .models import (
    CreateVNetRequest,
    DeleteVNetsRequest,
    ForkVNetRequest,
    ListVNetsQuery,
    ListVNetTransactionsQuery,
    ListVNetTransactionsResponse,
    SendVNetTransactionRequest,
    UpdateVNetRequest,
    VNet,
    VNetSimulationRequest,
    VNetTransaction,
)

if TYPE_CHECKING:
    from ..client import TenderlyClient


logger = logging.getLogger(__name__)


CREATE_VNET = Endpoint("POST", "/vnets")
LIST_VNETS = Endpoint("GET", "/vnets")
GET_VNET = Endpoint("GET", "/vnets/{id}")
UPDATE_VNET = Endpoint("PATCH", "/vnets/{id}")
DELETE_VNET = Endpoint("DELETE", "/vnets/{id}")
# 批量删除：对集合发 DELETE，ID 列表放在请求体中（不是查询参数）
DELETE_VNETS = Endpoint("DELETE", "/vnets")
FORK_VNET = Endpoint("POST", "/vnets/fork")
LIST_TRANSACTIONS = Endpoint("GET", "/vnets/{id}/transactions")
GET_TRANSACTION = Endpoint("GET", "/vnets/{id}/transactions/{hash}")
SEND_TRANSACTION = Endpoint("POST", "/vnets/{id}/transactions")
SIMULATE_TRANSACTION = Endpoint("POST", "/vnets/{id}/transactions/simulate")


class VNetsApi:
    """Virtual TestNets API 客户端"""

    def __init__(self, client: "TenderlyClient"):
        self.client = client

    async def create(self, request: CreateVNetRequest) -> VNet:
        """
        创建 VNet

        用法:

            request = CreateVNetRequest.for_network("my-vnet", "My VNet", 1).with_block_number(18_000_000)
            vnet = await client.vnets.create(request)
        """
        return await self.client.send(CREATE_VNET, request, response_model=VNet)

    async def list(self, query: Optional[ListVNetsQuery] = None) -> List[VNet]:
        """列出 VNet（服务端直接返回数组）"""
        return await self.client.send(LIST_VNETS, params=query, response_model=List[VNet])

    async def get(self, vnet_id: str) -> VNet:
        return await self.client.send(GET_VNET.bind(id=vnet_id), response_model=VNet)

    async def update(self, vnet_id: str, request: UpdateVNetRequest) -> VNet:
        return await self.client.send(UPDATE_VNET.bind(id=vnet_id), request, response_model=VNet)

    async def delete(self, vnet_id: str) -> None:
        await self.client.send(DELETE_VNET.bind(id=vnet_id))

    async def delete_many(self, vnet_ids: Sequence[str]) -> None:
        """一次请求删除多个 VNet"""
        ids = list(vnet_ids)
        if not ids:
            raise InvalidParameterError("vnet_ids 不能为空")
        logger.info(f"批量删除 {len(ids)} 个 VNet")
        await self.client.send(DELETE_VNETS, DeleteVNetsRequest(ids=ids))

    async def fork(self, request: ForkVNetRequest) -> VNet:
        """从已有 VNet 分叉出新的 VNet"""
        return await self.client.send(FORK_VNET, request, response_model=VNet)

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    async def list_transactions(
        self,
        vnet_id: str,
        query: Optional[ListVNetTransactionsQuery] = None,
    ) -> ListVNetTransactionsResponse:
        return await self.client.send(
            LIST_TRANSACTIONS.bind(id=vnet_id),
            params=query,
            response_model=ListVNetTransactionsResponse,
        )

    async def get_transaction(self, vnet_id: str, tx_hash: str) -> VNetTransaction:
        return await self.client.send(
            GET_TRANSACTION.bind(id=vnet_id, hash=tx_hash),
            response_model=VNetTransaction,
        )

    async def send_transaction(
        self, vnet_id: str, request: SendVNetTransactionRequest
    ) -> VNetTransaction:
        """在 VNet 上发送交易（会改变 VNet 状态）"""
        return await self.client.send(
            SEND_TRANSACTION.bind(id=vnet_id), request, response_model=VNetTransaction
        )

    async def simulate_transaction(self, vnet_id: str, request: VNetSimulationRequest) -> Any:
        """在 VNet 当前状态上模拟交易（原始 JSON）"""
        return await self.client.send(
            SIMULATE_TRANSACTION.bind(id=vnet_id), request, response_model=Any
        )

    # -------------------------------------------------------------------------
    # Admin RPC
    # -------------------------------------------------------------------------

    def admin_rpc(self, rpc_url: str) -> AdminRpc:
        """绑定到指定 Admin RPC URL 的子客户端"""
        return AdminRpc(self.client, rpc_url)

    async def admin_rpc_for(self, vnet_id: str) -> AdminRpc:
        """查询 VNet 并绑定到它的 Admin RPC 端点"""
        vnet = await self.get(vnet_id)
        url = vnet.admin_rpc_url
        if url is None:
            raise InvalidParameterError(f"VNet {vnet_id} 没有 Admin RPC 端点")
        return AdminRpc(self.client, url)
