"""
Virtual TestNets Data Models

VNet 的创建、更新、分叉、交易相关请求/响应结构。
"""

from typing import Any, List, Optional, Union

from pydantic import Field, field_validator, model_validator

from ..base import AccessListItem, RequestModel, ResponseModel
from ..errors import InvalidParameterError


# =============================================================================
# Shared configuration blocks
# =============================================================================


class ForkConfig(RequestModel):
    """分叉配置"""
    network_id: int = Field(..., description="被分叉的网络 ID")
    block_number: Optional[int] = Field(None, description="分叉区块（默认最新）")


class ChainConfig(RequestModel):
    """链配置（在 virtual_network_config 中嵌套）"""
    chain_id: int = Field(..., description="链 ID")


class VirtualNetworkConfig(RequestModel):
    """虚拟网络配置"""
    chain_config: ChainConfig
    base_fee_per_gas: Optional[int] = Field(None, description="EIP-1559 base fee")


class SyncStateConfig(RequestModel):
    """状态同步配置"""
    enabled: bool = Field(..., description="是否与父网络同步状态")


class ExplorerPageConfig(RequestModel):
    """Explorer 页面配置"""
    enabled: bool
    verification_visibility: str = Field(default="bytecode", description="源码可见性")


# =============================================================================
# Requests
# =============================================================================


class CreateVNetRequest(RequestModel):
    """创建 VNet 请求"""

    slug: str = Field(..., min_length=1, description="唯一 slug")
    display_name: str = Field(..., description="显示名称")
    fork_config: ForkConfig
    virtual_network_config: VirtualNetworkConfig
    sync_state_config: Optional[SyncStateConfig] = None
    explorer_page_config: Optional[ExplorerPageConfig] = None

    @classmethod
    def for_network(cls, slug: str, display_name: str, network_id: int) -> "CreateVNetRequest":
        """最小配置：分叉 network_id 的最新区块，chain_id 与 network_id 相同"""
        return cls(
            slug=slug,
            display_name=display_name,
            fork_config=ForkConfig(network_id=network_id),
            virtual_network_config=VirtualNetworkConfig(
                chain_config=ChainConfig(chain_id=network_id),
            ),
        )

    def with_block_number(self, block_number: int) -> "CreateVNetRequest":
        """从指定区块分叉"""
        self.fork_config.block_number = block_number
        return self

    def with_chain_id(self, chain_id: int) -> "CreateVNetRequest":
        """自定义 chain ID"""
        self.virtual_network_config.chain_config.chain_id = chain_id
        return self

    def with_base_fee_per_gas(self, fee: int) -> "CreateVNetRequest":
        self.virtual_network_config.base_fee_per_gas = fee
        return self

    def with_sync_state(self, enabled: bool) -> "CreateVNetRequest":
        self.sync_state_config = SyncStateConfig(enabled=enabled)
        return self

    def with_explorer_page(
        self, enabled: bool, verification_visibility: str = "bytecode"
    ) -> "CreateVNetRequest":
        self.explorer_page_config = ExplorerPageConfig(
            enabled=enabled, verification_visibility=verification_visibility
        )
        return self


class UpdateVNetRequest(RequestModel):
    """更新 VNet 请求（只发送已设置的字段）"""
    display_name: Optional[str] = None
    slug: Optional[str] = None
    sync_state_config: Optional[SyncStateConfig] = None
    explorer_page_config: Optional[ExplorerPageConfig] = None


def _checked_page(page: int) -> int:
    # 赋值不经过 pydantic 校验，这里手动保持与字段约束一致
    if isinstance(page, bool) or not isinstance(page, int) or page < 0:
        raise InvalidParameterError(f"page 必须是非负整数: {page!r}")
    return page


def _checked_per_page(per_page: int) -> int:
    if isinstance(per_page, bool) or not isinstance(per_page, int) or per_page < 1:
        raise InvalidParameterError(f"per_page 必须是正整数: {per_page!r}")
    return per_page


class ListVNetsQuery(RequestModel):
    """VNet 列表查询参数"""
    slug: Optional[str] = Field(None, description="按 slug 模糊匹配")
    page: Optional[int] = Field(None, ge=0)
    per_page: Optional[int] = Field(None, ge=1)

    def with_slug(self, slug: str) -> "ListVNetsQuery":
        self.slug = slug
        return self

    def with_page(self, page: int) -> "ListVNetsQuery":
        self.page = _checked_page(page)
        return self

    def with_per_page(self, per_page: int) -> "ListVNetsQuery":
        self.per_page = _checked_per_page(per_page)
        return self


class DeleteVNetsRequest(RequestModel):
    """批量删除 VNet，ID 放在 DELETE 请求体中"""
    ids: List[str] = Field(..., min_length=1)


class ForkVNetRequest(RequestModel):
    """分叉已有 VNet"""
    source_vnet_id: str = Field(..., alias="srcTestnetId", description="源 VNet ID")
    slug: str
    display_name: str
    block_number: Optional[int] = Field(None, description="源 VNet 上的区块号")


class ListVNetTransactionsQuery(RequestModel):
    """VNet 交易列表查询参数"""
    address: Optional[str] = Field(None, description="按发送方/接收方过滤")
    status: Optional[bool] = None
    page: Optional[int] = Field(None, ge=0)
    per_page: Optional[int] = Field(None, ge=1)

    def with_address(self, address: str) -> "ListVNetTransactionsQuery":
        """只看与该地址相关的交易"""
        self.address = address
        return self

    def with_status(self, succeeded: bool) -> "ListVNetTransactionsQuery":
        self.status = succeeded
        return self

    def with_page(self, page: int) -> "ListVNetTransactionsQuery":
        self.page = _checked_page(page)
        return self

    def with_per_page(self, per_page: int) -> "ListVNetTransactionsQuery":
        self.per_page = _checked_per_page(per_page)
        return self


class VNetSimulationRequest(RequestModel):
    """在 VNet 上模拟交易"""

    from_: str = Field(..., alias="from")
    to: str
    input: str = "0x"
    value: Optional[str] = None
    gas: Optional[int] = None
    gas_price: Optional[str] = None
    max_fee_per_gas: Optional[str] = None
    max_priority_fee_per_gas: Optional[str] = None
    transaction_type: Optional[int] = Field(None, alias="type", description="0=legacy, 1=access list, 2=EIP-1559")
    nonce: Optional[int] = None

    def with_max_fee_per_gas(self, fee: str) -> "VNetSimulationRequest":
        """设置 max fee（自动切换为 type 2 交易）"""
        self.max_fee_per_gas = fee
        self.transaction_type = 2
        return self

    def with_max_priority_fee_per_gas(self, fee: str) -> "VNetSimulationRequest":
        """设置 priority fee（自动切换为 type 2 交易）"""
        self.max_priority_fee_per_gas = fee
        self.transaction_type = 2
        return self


class SendVNetTransactionRequest(RequestModel):
    """在 VNet 上发送交易"""

    from_: str = Field(..., alias="from")
    to: str = Field(..., description="合约创建时可为空字符串")
    input: Optional[str] = None
    value: Optional[str] = None
    gas: Optional[int] = None
    gas_price: Optional[str] = None
    max_fee_per_gas: Optional[str] = None
    max_priority_fee_per_gas: Optional[str] = None
    access_list: Optional[List[AccessListItem]] = None

    @classmethod
    def transfer(cls, from_: str, to: str, value: str) -> "SendVNetTransactionRequest":
        """原生币转账"""
        return cls(from_=from_, to=to, value=value)


# =============================================================================
# Responses
# =============================================================================


class ForkConfigResponse(ResponseModel):
    """响应中的分叉配置"""
    network_id: int
    block_number: Optional[Union[int, str]] = Field(None, description="可能是十六进制字符串，如 0x170abab")


class VirtualNetworkConfigResponse(ResponseModel):
    """响应中的虚拟网络配置"""
    chain_config: Optional[ChainConfig] = None
    base_fee_per_gas: Optional[int] = None
    accounts: Optional[List[Any]] = None

    @property
    def chain_id(self) -> Optional[int]:
        if self.chain_config is None:
            return None
        return self.chain_config.chain_id


class RpcEndpoint(ResponseModel):
    """单个 RPC 端点"""
    name: str = Field(..., description="如 'Admin RPC'、'Public RPC'")
    url: str


class VNetRpcs(ResponseModel):
    """VNet 的 RPC 端点集合"""
    endpoints: List[RpcEndpoint] = Field(default_factory=list)

    def _find(self, keyword: str) -> Optional[str]:
        for endpoint in self.endpoints:
            if keyword in endpoint.name.lower():
                return endpoint.url
        return None

    @property
    def public(self) -> Optional[str]:
        """Public RPC URL"""
        return self._find("public")

    @property
    def admin(self) -> Optional[str]:
        """Admin RPC URL"""
        return self._find("admin")


class VNet(ResponseModel):
    """Virtual TestNet"""

    id: str
    slug: str
    display_name: str
    fork_config: ForkConfigResponse
    virtual_network_config: VirtualNetworkConfigResponse
    rpcs: Optional[VNetRpcs] = None
    sync_state_config: Optional[SyncStateConfig] = None
    explorer_page_config: Optional[ExplorerPageConfig] = None
    created_at: Optional[str] = None
    status: Optional[str] = None

    @field_validator("rpcs", mode="before")
    @classmethod
    def wrap_rpc_array(cls, v: Any) -> Any:
        """服务端返回 [{name, url}] 数组"""
        if isinstance(v, list):
            return {"endpoints": v}
        return v

    @property
    def admin_rpc_url(self) -> Optional[str]:
        return self.rpcs.admin if self.rpcs else None

    @property
    def public_rpc_url(self) -> Optional[str]:
        return self.rpcs.public if self.rpcs else None


class VNetTransaction(ResponseModel):
    """VNet 上的交易"""
    hash: Optional[str] = None
    tx_hash: Optional[str] = None
    block_number: Optional[Union[int, str]] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    value: Optional[str] = None
    gas_used: Optional[Union[int, str]] = None
    status: Optional[Union[bool, str]] = None
    kind: Optional[str] = None
    timestamp: Optional[str] = None
    created_at: Optional[str] = None


class ListVNetTransactionsResponse(ResponseModel):
    """VNet 交易列表"""
    transactions: List[VNetTransaction] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def accept_bare_array(cls, data: Any) -> Any:
        """兼容直接返回数组的响应"""
        if isinstance(data, list):
            return {"transactions": data}
        return data
