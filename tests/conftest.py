"""
Shared fixtures: 用 httpx.MockTransport 模拟 Tenderly，不发出真实网络请求
"""

import json
from typing import Any, Callable, Dict, List, Tuple, Union

import httpx
import pytest

from tenderly_sdk import TenderlyClient, TenderlyConfig


ACCESS_KEY = "test-access-key"
ROOT_PATH = "/api/v1"
ACCOUNT_PATH = f"{ROOT_PATH}/account/acme"
PROJECT_PATH = f"{ACCOUNT_PATH}/project/demo"

ADMIN_RPC_URL = "https://virtual.mainnet.rpc.tenderly.co/admin-secret"
PUBLIC_RPC_URL = "https://virtual.mainnet.rpc.tenderly.co/public-key"

ALICE = "0x1234567890123456789012345678901234567890"
TOKEN = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"

Route = Union[Tuple[int, Any], Callable[[httpx.Request], httpx.Response]]


class MockTenderly:
    """按 (method, path) 注册响应，并记录收到的所有请求"""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, body: Any = None, status_code: int = 200) -> None:
        self.routes[(method, path)] = (status_code, body)

    def add_handler(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[(method, path)] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(
                404,
                json={"error": {"id": "missing", "slug": "not_found", "message": "no mock route"}},
            )
        if callable(route):
            return route(request)

        status_code, body = route
        if body is None:
            return httpx.Response(status_code)
        if isinstance(body, (bytes, str)):
            return httpx.Response(status_code, content=body)
        return httpx.Response(status_code, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def body_of(request: httpx.Request) -> Any:
    """解析请求体 JSON"""
    return json.loads(request.content)


def vnet_json(**overrides: Any) -> Dict[str, Any]:
    data = {
        "id": "vnet-1",
        "slug": "my-vnet",
        "display_name": "My VNet",
        "fork_config": {"network_id": 1, "block_number": "0x112a880"},
        "virtual_network_config": {"chain_config": {"chain_id": 73571}},
        "rpcs": [
            {"name": "Admin RPC", "url": ADMIN_RPC_URL},
            {"name": "Public RPC", "url": PUBLIC_RPC_URL},
        ],
        "created_at": "2024-05-01T10:00:00Z",
    }
    data.update(overrides)
    return data


@pytest.fixture
def config():
    return TenderlyConfig(
        access_key=ACCESS_KEY,
        account_slug="acme",
        project_slug="demo",
    )


@pytest.fixture
def mock():
    return MockTenderly()


@pytest.fixture
def client(config, mock):
    http = httpx.AsyncClient(transport=httpx.MockTransport(mock.handler))
    return TenderlyClient(config, http_client=http)
