"""
Virtual TestNets - 虚拟测试网 API

托管的可分叉模拟链，以及通过 Admin RPC 直接操控其状态。
"""

from .models import (
    ForkConfig,
    ChainConfig,
    VirtualNetworkConfig,
    SyncStateConfig,
    ExplorerPageConfig,
    CreateVNetRequest,
    UpdateVNetRequest,
    ListVNetsQuery,
    DeleteVNetsRequest,
    ForkVNetRequest,
    ListVNetTransactionsQuery,
    VNetSimulationRequest,
    SendVNetTransactionRequest,
    ForkConfigResponse,
    VirtualNetworkConfigResponse,
    RpcEndpoint,
    VNetRpcs,
    VNet,
    VNetTransaction,
    ListVNetTransactionsResponse,
)
from .admin_rpc import AdminRpc
from .api import VNetsApi

__all__ = [
    # Models
    "ForkConfig",
    "ChainConfig",
    "VirtualNetworkConfig",
    "SyncStateConfig",
    "ExplorerPageConfig",
    "CreateVNetRequest",
    "UpdateVNetRequest",
    "ListVNetsQuery",
    "DeleteVNetsRequest",
    "ForkVNetRequest",
    "ListVNetTransactionsQuery",
    "VNetSimulationRequest",
    "SendVNetTransactionRequest",
    "ForkConfigResponse",
    "VirtualNetworkConfigResponse",
    "RpcEndpoint",
    "VNetRpcs",
    "VNet",
    "VNetTransaction",
    "ListVNetTransactionsResponse",
    # API
    "AdminRpc",
    "VNetsApi",
]
