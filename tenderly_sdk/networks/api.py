"""
Networks API

公共网络列表不属于任何 account / project，走 root 作用域。
"""

from typing import TYPE_CHECKING, List, Optional, Union

from ..endpoint import ROOT, Endpoint
from .models import Network

if TYPE_CHECKING:
    from ..client import TenderlyClient


LIST_NETWORKS = Endpoint("GET", "/public-networks", ROOT)


class NetworksApi:
    """Networks API 客户端"""

    def __init__(self, client: "TenderlyClient"):
        self.client = client

    async def list(self) -> List[Network]:
        return await self.client.send(LIST_NETWORKS, response_model=List[Network])

    async def get(self, network_id: Union[str, int]) -> Optional[Network]:
        """在公共网络列表中查找，找不到返回 None"""
        for network in await self.list():
            if network.matches(str(network_id)):
                return network
        return None
