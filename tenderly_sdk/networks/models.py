"""
Network Data Models
"""

from typing import Any, Dict, Optional

from ..base import ResponseModel


class NetworkMetadata(ResponseModel):
    color: Optional[str] = None
    icon: Optional[str] = None
    explorer_base_url: Optional[str] = None
    native_currency: Optional[Any] = None


class Network(ResponseModel):
    """Tenderly 支持的公共网络"""
    id: str
    slug: Optional[str] = None
    name: Optional[str] = None
    chain_id: Optional[int] = None
    ethereum_network_id: Optional[str] = None
    sort_order: Optional[int] = None
    metadata: Optional[NetworkMetadata] = None
    features: Optional[Dict[str, Any]] = None

    def matches(self, network_id: str) -> bool:
        """按网络 ID 或 chain ID 匹配"""
        key = str(network_id)
        return self.id == key or (self.chain_id is not None and str(self.chain_id) == key)
