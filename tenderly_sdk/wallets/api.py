"""
Wallets API

钱包按 (address, network) 标识，地址在发请求前校验。
"""

from typing import TYPE_CHECKING, List

from ..endpoint import Endpoint
from ..utils import validate_address
from .models import AddWalletRequest, UpdateWalletRequest, Wallet

if TYPE_CHECKING:
    from ..client import TenderlyClient


LIST_WALLETS = Endpoint("GET", "/wallets")
ADD_WALLET = Endpoint("POST", "/wallet")
GET_WALLET = Endpoint("GET", "/wallet/{address}/network/{network}")
UPDATE_WALLET = Endpoint("PATCH", "/wallet/{address}/network/{network}")
DELETE_WALLET = Endpoint("DELETE", "/wallet/{address}/network/{network}")


class WalletsApi:
    """Wallets API 客户端"""

    def __init__(self, client: "TenderlyClient"):
        self.client = client

    async def list(self) -> List[Wallet]:
        return await self.client.send(LIST_WALLETS, response_model=List[Wallet])

    async def get(self, address: str, network_id: str) -> Wallet:
        validate_address(address)
        return await self.client.send(
            GET_WALLET.bind(address=address, network=network_id),
            response_model=Wallet,
        )

    async def add(self, request: AddWalletRequest) -> Wallet:
        validate_address(request.address)
        return await self.client.send(ADD_WALLET, request, response_model=Wallet)

    async def update(
        self, address: str, network_id: str, request: UpdateWalletRequest
    ) -> Wallet:
        validate_address(address)
        return await self.client.send(
            UPDATE_WALLET.bind(address=address, network=network_id),
            request,
            response_model=Wallet,
        )

    async def delete(self, address: str, network_id: str) -> None:
        validate_address(address)
        await self.client.send(DELETE_WALLET.bind(address=address, network=network_id))
