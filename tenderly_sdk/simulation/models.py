"""
Simulation API Data Models

交易模拟请求/响应的数据结构。
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, field_validator

from ..base import AccessListItem, RequestModel, ResponseModel, reject_unknown
from ..utils import to_hex_quantity


class SimulationType(str, Enum):
    """模拟类型"""
    FULL = "full"
    QUICK = "quick"
    ABI = "abi"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class StateOverride(RequestModel):
    """单个地址的状态覆盖"""
    balance: Optional[str] = Field(None, description="余额（wei）")
    nonce: Optional[int] = Field(None, description="nonce")
    code: Optional[str] = Field(None, description="合约字节码")
    storage: Optional[Dict[str, str]] = Field(None, description="storage slot -> value")


class BlockHeaderOverride(RequestModel):
    """区块头覆盖"""
    number: Optional[str] = Field(None, description="区块号（十六进制）")
    timestamp: Optional[str] = Field(None, description="时间戳（十六进制）")


class SimulationRequest(RequestModel):
    """单笔交易模拟请求"""

    network_id: str = Field(default="1", description="网络 ID")
    from_: str = Field(..., alias="from", description="发送方地址")
    to: str = Field(..., description="接收方地址")
    input: str = Field(default="0x", description="calldata")

    value: Optional[str] = Field(None, description="value（wei）")
    gas: Optional[int] = Field(None, description="gas 限制")
    gas_price: Optional[str] = Field(None, description="gas 价格")
    block_number: Optional[int] = Field(None, description="模拟所在区块（默认最新）")
    transaction_index: Optional[int] = Field(None, description="区块内交易位置")

    simulation_type: Optional[SimulationType] = Field(SimulationType.FULL)
    save: bool = Field(default=False, description="是否保存到 dashboard")
    save_if_fails: bool = Field(default=False, description="失败时是否保存")
    estimate_gas: Optional[bool] = None
    generate_access_list: Optional[bool] = None
    access_list: Optional[List[AccessListItem]] = None

    state_objects: Optional[Dict[str, StateOverride]] = Field(None, description="状态覆盖")
    block_header: Optional[BlockHeaderOverride] = None

    @field_validator("simulation_type")
    @classmethod
    def known_simulation_type(cls, v: Optional[SimulationType]) -> Optional[SimulationType]:
        return reject_unknown(v)

    def with_value_wei(self, wei: Union[int, str]) -> "SimulationRequest":
        """设置 value（编码为十六进制）"""
        self.value = to_hex_quantity(wei, "value")
        return self

    def _override(self, address: str) -> StateOverride:
        if self.state_objects is None:
            self.state_objects = {}
        return self.state_objects.setdefault(address, StateOverride())

    def override_balance(self, address: str, balance: Union[int, str]) -> "SimulationRequest":
        """覆盖地址余额"""
        self._override(address).balance = str(balance)
        return self

    def override_storage(self, address: str, slot: str, value: str) -> "SimulationRequest":
        """覆盖 storage slot"""
        override = self._override(address)
        if override.storage is None:
            override.storage = {}
        override.storage[slot] = value
        return self

    def override_code(self, address: str, code: str) -> "SimulationRequest":
        """覆盖合约字节码"""
        self._override(address).code = code
        return self


class BundleSimulationRequest(RequestModel):
    """批量（顺序）模拟请求，后一笔交易基于前一笔的状态"""
    simulations: List[SimulationRequest] = Field(..., min_length=1)


class TransactionInfo(ResponseModel):
    """模拟交易的执行细节"""
    contract_id: Optional[str] = None
    block_number: Optional[int] = None
    transaction_id: Optional[str] = None
    contract_address: Optional[str] = None
    method: Optional[str] = None
    call_trace: Optional[Any] = None
    logs: Optional[List[Any]] = None
    state_diff: Optional[List[Any]] = None
    asset_changes: Optional[List[Any]] = None
    balance_changes: Optional[List[Any]] = None


class Transaction(ResponseModel):
    """模拟结果中的交易"""
    hash: Optional[str] = None
    block_hash: Optional[str] = None
    block_number: Optional[int] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    gas: Optional[int] = None
    gas_price: Optional[Union[int, str]] = None
    gas_used: Optional[int] = None
    input: Optional[str] = None
    nonce: Optional[int] = None
    value: Optional[str] = None
    network_id: Optional[str] = None
    status: Optional[bool] = None
    error_message: Optional[str] = None
    transaction_info: Optional[TransactionInfo] = None


class Simulation(ResponseModel):
    """已保存的模拟记录"""
    id: str
    project_id: Optional[str] = None
    owner_id: Optional[str] = None
    network_id: Optional[str] = None
    block_number: Optional[int] = None
    transaction_index: Optional[int] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    input: Optional[str] = None
    gas: Optional[int] = None
    gas_price: Optional[Union[int, str]] = None
    gas_used: Optional[int] = None
    value: Optional[str] = None
    status: Optional[bool] = None
    shared: Optional[bool] = None
    created_at: Optional[str] = None


class SimulationResponse(ResponseModel):
    """单笔模拟响应"""
    transaction: Optional[Transaction] = None
    simulation: Optional[Simulation] = None
    contracts: List[Dict[str, Any]] = Field(default_factory=list)
    generated_access_list: Optional[List[AccessListItem]] = None

    @property
    def succeeded(self) -> Optional[bool]:
        """交易是否执行成功（无 transaction 时为 None）"""
        if self.transaction is None:
            return None
        return self.transaction.status


class BundleSimulationResponse(ResponseModel):
    """批量模拟响应"""
    simulation_results: List[SimulationResponse] = Field(default_factory=list)


class SimulationListResponse(ResponseModel):
    """模拟列表"""
    simulations: List[Simulation] = Field(default_factory=list)
