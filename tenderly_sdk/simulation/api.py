"""
Simulation API

单笔/批量交易模拟，以及已保存模拟的查询、分享。
"""

from typing import TYPE_CHECKING, Any

from ..base import PageQuery
from ..endpoint import Endpoint
from ..utils import encode_path_segment
from .models import (
    BundleSimulationRequest,
    BundleSimulationResponse,
    SimulationListResponse,
    SimulationRequest,
    SimulationResponse,
)

if TYPE_CHECKING:
    from ..client import TenderlyClient


SHARED_SIMULATION_URL = "https://dashboard.tenderly.co/shared/simulation/{id}"

SIMULATE = Endpoint("POST", "/simulate")
SIMULATE_BUNDLE = Endpoint("POST", "/simulate-bundle")
LIST_SIMULATIONS = Endpoint("GET", "/simulations")
GET_SIMULATION = Endpoint("GET", "/simulations/{id}")
SIMULATION_INFO = Endpoint("GET", "/simulations/{id}/info")
SHARE_SIMULATION = Endpoint("POST", "/simulations/{id}/share")
UNSHARE_SIMULATION = Endpoint("POST", "/simulations/{id}/unshare")
TRACE_TRANSACTION = Endpoint("GET", "/trace/{hash}")


class SimulationApi:
    """Simulation API 客户端"""

    def __init__(self, client: "TenderlyClient"):
        self.client = client

    async def simulate(self, request: SimulationRequest) -> SimulationResponse:
        """
        模拟单笔交易

        用法:

            request = SimulationRequest(
                network_id="1",
                from_="0x0000000000000000000000000000000000000000",
                to="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
                input="0x70a08231...",
            )
            result = await client.simulation.simulate(request)
        """
        return await self.client.send(SIMULATE, request, response_model=SimulationResponse)

    async def simulate_bundle(self, request: BundleSimulationRequest) -> BundleSimulationResponse:
        """顺序模拟一组交易，每笔交易基于前一笔的状态变更"""
        return await self.client.send(
            SIMULATE_BUNDLE, request, response_model=BundleSimulationResponse
        )

    async def list(self, page: int = 0, per_page: int = 20) -> SimulationListResponse:
        """
        列出已保存的模拟

        Args:
            page: 页码（从 0 开始）
            per_page: 每页条数（最大 100）
        """
        return await self.client.send(
            LIST_SIMULATIONS,
            params=PageQuery(page=page, per_page=per_page),
            response_model=SimulationListResponse,
        )

    async def get(self, simulation_id: str) -> SimulationResponse:
        """获取已保存的模拟"""
        return await self.client.send(
            GET_SIMULATION.bind(id=simulation_id), response_model=SimulationResponse
        )

    async def info(self, simulation_id: str) -> Any:
        """获取模拟元信息（原始 JSON）"""
        return await self.client.send(SIMULATION_INFO.bind(id=simulation_id), response_model=Any)

    async def share(self, simulation_id: str) -> str:
        """公开分享模拟，返回公开访问 URL"""
        await self.client.send(SHARE_SIMULATION.bind(id=simulation_id), {})
        return SHARED_SIMULATION_URL.format(id=encode_path_segment(simulation_id))

    async def unshare(self, simulation_id: str) -> None:
        """取消分享"""
        await self.client.send(UNSHARE_SIMULATION.bind(id=simulation_id), {})

    async def trace(self, tx_hash: str) -> Any:
        """获取已上链交易的 trace（原始 JSON）"""
        return await self.client.send(TRACE_TRANSACTION.bind(hash=tx_hash), response_model=Any)
