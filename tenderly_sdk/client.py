"""
Tenderly Core Client

持有 HTTP 传输和配置，负责 URL 拼接、鉴权头、请求体序列化、
错误映射和响应解码。所有 API 子客户端都通过 send() / rpc_call() 发请求。
"""

import logging
from typing import Any, Dict, Optional, Sequence

import httpx
from pydantic import ValidationError

from . import __version__
from .actions.api import ActionsApi
from .alerts.api import AlertsApi
from .codec import JsonRpcResponse, api_error, decode_json, to_json, to_params
from .config import TenderlyConfig
from .contracts.api import ContractsApi
from .delivery_channels.api import DeliveryChannelsApi
from .endpoint import ACCOUNT, PROJECT, ROOT, Endpoint
from .errors import DecodeError, InvalidParameterError, NetworkError, RpcError
from .networks.api import NetworksApi
from .simulation.api import SimulationApi
from .vnets.api import VNetsApi
from .wallets.api import WalletsApi


logger = logging.getLogger(__name__)

USER_AGENT = f"tenderly-sdk-python/{__version__}"


# =============================================================================
# Client
# =============================================================================


class TenderlyClient:
    """
    Tenderly API 客户端

    构造过程不发起任何网络请求；实例在并发调用间只读共享。

    用法:

        async with TenderlyClient.from_env() as client:
            vnet = await client.vnets.get("vnet-id")
    """

    def __init__(
        self,
        config: TenderlyConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            config: 访问配置
            http_client: 自定义 httpx.AsyncClient（不传则内部创建并负责关闭）
        """
        self.config = config
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout_seconds),
            headers={"User-Agent": USER_AGENT},
        )

    @classmethod
    def from_env(
        cls,
        http_client: Optional[httpx.AsyncClient] = None,
        **overrides: Any,
    ) -> "TenderlyClient":
        """从 TENDERLY_* 环境变量构造客户端"""
        return cls(TenderlyConfig.from_env(**overrides), http_client=http_client)

    def __repr__(self) -> str:
        return (
            f"TenderlyClient(account={self.config.account_slug!r}, "
            f"project={self.config.project_slug!r})"
        )

    async def aclose(self) -> None:
        """关闭内部创建的 HTTP 客户端"""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "TenderlyClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # -------------------------------------------------------------------------
    # API families
    # -------------------------------------------------------------------------

    @property
    def simulation(self) -> SimulationApi:
        return SimulationApi(self)

    @property
    def vnets(self) -> VNetsApi:
        return VNetsApi(self)

    @property
    def contracts(self) -> ContractsApi:
        return ContractsApi(self)

    @property
    def alerts(self) -> AlertsApi:
        return AlertsApi(self)

    @property
    def actions(self) -> ActionsApi:
        return ActionsApi(self)

    @property
    def wallets(self) -> WalletsApi:
        return WalletsApi(self)

    @property
    def networks(self) -> NetworksApi:
        return NetworksApi(self)

    @property
    def delivery_channels(self) -> DeliveryChannelsApi:
        return DeliveryChannelsApi(self)

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def url_for(self, endpoint: Endpoint) -> str:
        """根据作用域拼接完整 URL"""
        if endpoint.scope == PROJECT:
            prefix = self.config.project_prefix
        elif endpoint.scope == ACCOUNT:
            prefix = self.config.account_prefix
        elif endpoint.scope == ROOT:
            prefix = self.config.base_url
        else:
            raise InvalidParameterError(f"未知的 endpoint 作用域: {endpoint.scope}")
        return f"{prefix}{endpoint.path}"

    def _auth_headers(self) -> Dict[str, str]:
        return {
            "X-Access-Key": self.config.access_key.get_secret_value(),
            "Accept": "application/json",
        }

    async def send(
        self,
        endpoint: Endpoint,
        body: Any = None,
        *,
        params: Any = None,
        response_model: Any = None,
    ) -> Any:
        """
        发送 REST 请求并解码响应

        Args:
            endpoint: 已绑定路径参数的 Endpoint
            body: 请求体（pydantic 模型或 JSON 数据）
            params: 查询参数（pydantic 模型或 dict，None 值会被丢弃）
            response_model: 响应类型；为 None 时忽略响应体并返回 None

        Raises:
            NetworkError, ApiError, DecodeError
        """
        url = self.url_for(endpoint)
        logger.debug(f"Tenderly 请求: {endpoint.method} {url}")

        try:
            response = await self._http.request(
                endpoint.method,
                url,
                json=to_json(body),
                params=to_params(params),
                headers=self._auth_headers(),
            )
        except httpx.RequestError as e:
            logger.warning(f"Tenderly 请求失败: {endpoint.method} {url}: {e}")
            raise NetworkError(f"{endpoint.method} {url} 请求失败: {e}") from e

        if not response.is_success:
            error = api_error(response)
            logger.warning(f"Tenderly 返回错误: {endpoint.method} {url} -> {error}")
            raise error

        if response_model is None:
            return None
        return decode_json(response_model, response.content)

    async def rpc_call(
        self,
        url: str,
        method: str,
        params: Sequence[Any] = (),
        request_id: int = 1,
    ) -> Any:
        """
        发送单个 JSON-RPC 2.0 请求，返回 result 字段

        RPC URL 本身即凭证，因此不附带 X-Access-Key，也不写入日志。

        Raises:
            NetworkError, RpcError, ApiError, DecodeError
        """
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": list(params),
            "id": request_id,
        }
        logger.debug(f"Admin RPC 请求: {method} (id={request_id})")

        try:
            response = await self._http.post(
                url,
                json=payload,
                headers={"Accept": "application/json"},
            )
        except httpx.RequestError as e:
            logger.warning(f"Admin RPC 请求失败: {method}: {e}")
            raise NetworkError(f"{method} 请求失败: {e}") from e

        try:
            envelope = JsonRpcResponse.model_validate_json(response.content)
        except ValidationError as e:
            if not response.is_success:
                raise api_error(response) from None
            raise DecodeError(f"{method} 返回了无法解析的 JSON-RPC 响应") from e

        if envelope.error is not None:
            logger.warning(f"Admin RPC 错误: {method} -> {envelope.error.code} {envelope.error.message}")
            raise RpcError(
                envelope.error.code,
                envelope.error.message,
                data=envelope.error.data,
                method=method,
            )
        if not response.is_success:
            raise api_error(response)
        return envelope.result
