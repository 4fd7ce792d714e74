"""
Admin RPC - VNet 状态操控

通过 VNet 的 Admin RPC 端点发送 JSON-RPC 2.0 请求：时间推进、余额/存储/字节码修改、
快照与回滚。每次调用一个请求，不做批处理，也不在本地记录快照。
"""

import itertools
import logging
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Union

from ..codec import validate_python
from ..utils import Quantity, to_hex_quantity, to_hex_word, validate_address

if TYPE_CHECKING:
    from ..client import TenderlyClient


logger = logging.getLogger(__name__)


class AdminRpc:
    """
    VNet Admin RPC 客户端

    用法:

        admin = await client.vnets.admin_rpc_for(vnet_id)
        snapshot_id = await admin.snapshot()
        await admin.set_balance("0x...", 10**18)
        await admin.revert(snapshot_id)
    """

    def __init__(self, client: "TenderlyClient", rpc_url: str):
        self.client = client
        self.rpc_url = rpc_url
        self._ids = itertools.count(1)

    def __repr__(self) -> str:
        # URL 中包含访问凭证
        return "AdminRpc(rpc_url=<redacted>)"

    async def call(self, method: str, params: Sequence[Any] = (), result_type: Any = Any) -> Any:
        """
        发送任意 Admin RPC 方法并按 result_type 解码 result

        Raises:
            NetworkError, RpcError, ApiError, DecodeError
        """
        result = await self.client.rpc_call(
            self.rpc_url, method, params, request_id=next(self._ids)
        )
        return validate_python(result_type, result)

    # -------------------------------------------------------------------------
    # Time control
    # -------------------------------------------------------------------------

    async def increase_time(self, seconds: Quantity) -> str:
        """将链上时间推进 seconds 秒"""
        return await self.call(
            "evm_increaseTime", [to_hex_quantity(seconds, "seconds")], str
        )

    async def set_next_block_timestamp(self, timestamp: Quantity) -> str:
        """设置下一个区块的时间戳"""
        return await self.call(
            "tenderly_setNextBlockTimestamp", [to_hex_quantity(timestamp, "timestamp")], str
        )

    async def increase_blocks(self, blocks: Quantity) -> str:
        """额外挖出 blocks 个区块"""
        return await self.call(
            "evm_increaseBlocks", [to_hex_quantity(blocks, "blocks")], str
        )

    # -------------------------------------------------------------------------
    # Balance control
    # -------------------------------------------------------------------------

    @staticmethod
    def _addresses(addresses: Union[str, Sequence[str]]) -> List[str]:
        if isinstance(addresses, str):
            addresses = [addresses]
        return [validate_address(a, "addresses") for a in addresses]

    async def set_balance(self, addresses: Union[str, Sequence[str]], wei: Quantity) -> str:
        """设置一个或多个地址的原生币余额，返回交易哈希"""
        params = [self._addresses(addresses), to_hex_quantity(wei, "wei")]
        return await self.call("tenderly_setBalance", params, str)

    async def add_balance(self, addresses: Union[str, Sequence[str]], wei: Quantity) -> str:
        """增加一个或多个地址的原生币余额，返回交易哈希"""
        params = [self._addresses(addresses), to_hex_quantity(wei, "wei")]
        return await self.call("tenderly_addBalance", params, str)

    async def set_erc20_balance(self, token: str, wallet: str, amount: Quantity) -> str:
        """设置钱包的 ERC-20 余额，返回交易哈希"""
        params = [
            validate_address(token, "token"),
            validate_address(wallet, "wallet"),
            to_hex_quantity(amount, "amount"),
        ]
        return await self.call("tenderly_setErc20Balance", params, str)

    # -------------------------------------------------------------------------
    # Storage control
    # -------------------------------------------------------------------------

    async def set_storage_at(self, address: str, slot: Quantity, value: Quantity) -> str:
        """写入原始 storage slot（slot/value 均编码为 32 字节）"""
        params = [
            validate_address(address),
            to_hex_word(slot, "slot"),
            to_hex_word(value, "value"),
        ]
        return await self.call("tenderly_setStorageAt", params, str)

    async def set_code(self, address: str, code: str) -> str:
        """替换地址上的字节码"""
        return await self.call("tenderly_setCode", [validate_address(address), code], str)

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    async def snapshot(self) -> str:
        """创建快照，返回不透明的快照 ID"""
        snapshot_id = await self.call("evm_snapshot", [], str)
        logger.debug(f"Admin RPC 快照: {snapshot_id}")
        return snapshot_id

    async def revert(self, snapshot_id: str) -> bool:
        """
        回滚到快照

        未知或已被消费的快照 ID 由服务端以 JSON-RPC error 返回（RpcError）。
        """
        return await self.call("evm_revert", [snapshot_id], bool)

    async def get_latest(self) -> Optional[str]:
        """最近一笔交易的 ID"""
        return await self.call("evm_getLatest", [], Optional[str])
