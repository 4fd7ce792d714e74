"""
VNet Admin RPC Unit Tests
"""

import asyncio
import json

import httpx
import pytest

from tenderly_sdk import ApiError, DecodeError, InvalidAddressError, RpcError

from conftest import ADMIN_RPC_URL, ALICE, TOKEN, body_of


ADMIN_PATH = "/admin-secret"


class FakeVNetNode:
    """最小的 Admin RPC 节点：记录调用，实现快照/回滚"""

    def __init__(self):
        self.calls = []
        self.snapshots = set()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.calls.append(payload)
        method, params = payload["method"], payload["params"]

        if method == "evm_snapshot":
            snapshot_id = f"0x{len(self.snapshots) + 1:x}"
            self.snapshots.add(snapshot_id)
            return self._result(payload, snapshot_id)
        if method == "evm_revert":
            if params[0] not in self.snapshots:
                return self._error(payload, -32000, "snapshot not found")
            self.snapshots.discard(params[0])
            return self._result(payload, True)
        if method == "evm_getLatest":
            return self._result(payload, None)
        return self._result(payload, "0x" + "ab" * 32)

    @staticmethod
    def _result(payload, result):
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": payload["id"], "result": result})

    @staticmethod
    def _error(payload, code, message):
        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": payload["id"], "error": {"code": code, "message": message}},
        )


@pytest.fixture
def node(mock):
    fake = FakeVNetNode()
    mock.add_handler("POST", ADMIN_PATH, fake)
    return fake


@pytest.fixture
def admin(client):
    return client.vnets.admin_rpc(ADMIN_RPC_URL)


class TestAdminRpc:
    """测试 Admin RPC 方法的参数编码与结果解码"""

    def test_envelope_and_no_access_key(self, admin, node, mock):
        """测试 JSON-RPC 信封，且不附带 X-Access-Key"""
        asyncio.run(admin.increase_time(3600))

        request = mock.last
        assert str(request.url) == ADMIN_RPC_URL
        assert "X-Access-Key" not in request.headers
        assert body_of(request) == {
            "jsonrpc": "2.0",
            "method": "evm_increaseTime",
            "params": ["0xe10"],
            "id": 1,
        }

    def test_request_ids_increase(self, admin, node):
        """测试同一子客户端的请求 ID 递增"""
        asyncio.run(admin.snapshot())
        asyncio.run(admin.increase_blocks(2))
        asyncio.run(admin.set_next_block_timestamp(1_700_000_000))
        assert [call["id"] for call in node.calls] == [1, 2, 3]
        assert node.calls[1]["params"] == ["0x2"]

    def test_snapshot_and_revert(self, admin, node):
        """测试快照后回滚成功，重复回滚返回 RpcError"""
        snapshot_id = asyncio.run(admin.snapshot())
        assert snapshot_id == "0x1"
        assert asyncio.run(admin.revert(snapshot_id)) is True

        with pytest.raises(RpcError) as excinfo:
            asyncio.run(admin.revert(snapshot_id))
        assert excinfo.value.rpc_code == -32000
        assert excinfo.value.method == "evm_revert"

    def test_revert_unknown_snapshot(self, admin, node):
        with pytest.raises(RpcError):
            asyncio.run(admin.revert("0xdead"))

    def test_set_balance(self, admin, node):
        """测试单个地址也会被包装成数组"""
        tx_hash = asyncio.run(admin.set_balance(ALICE, 10**18))
        assert tx_hash.startswith("0x")
        assert node.calls[0]["method"] == "tenderly_setBalance"
        assert node.calls[0]["params"] == [[ALICE], "0xde0b6b3a7640000"]

    def test_add_balance_many(self, admin, node):
        asyncio.run(admin.add_balance([ALICE, TOKEN], "1000"))
        assert node.calls[0]["params"] == [[ALICE, TOKEN], "0x3e8"]

    def test_set_erc20_balance(self, admin, node):
        asyncio.run(admin.set_erc20_balance(TOKEN, ALICE, 5_000_000))
        assert node.calls[0]["method"] == "tenderly_setErc20Balance"
        assert node.calls[0]["params"] == [TOKEN, ALICE, "0x4c4b40"]

    def test_set_storage_at(self, admin, node):
        """测试 slot/value 编码为 32 字节"""
        asyncio.run(admin.set_storage_at(TOKEN, 0, 1))
        _, slot, value = node.calls[0]["params"]
        assert slot == "0x" + "0" * 64
        assert value == "0x" + "0" * 63 + "1"

    def test_set_code(self, admin, node):
        asyncio.run(admin.set_code(TOKEN, "0x6080"))
        assert node.calls[0]["params"] == [TOKEN, "0x6080"]

    def test_get_latest_none(self, admin, node):
        assert asyncio.run(admin.get_latest()) is None

    def test_invalid_address_fails_before_request(self, admin, node, mock):
        """测试地址非法时不发出任何请求"""
        with pytest.raises(InvalidAddressError):
            asyncio.run(admin.set_balance(["0x123"], 1))
        with pytest.raises(InvalidAddressError):
            asyncio.run(admin.set_erc20_balance(TOKEN, "not-an-address", 1))
        assert mock.requests == []


class TestAdminRpcTransportErrors:
    """测试非 JSON-RPC 响应"""

    def test_http_error_without_envelope(self, admin, mock):
        mock.add("POST", ADMIN_PATH, "forbidden", status_code=403)

        with pytest.raises(ApiError) as excinfo:
            asyncio.run(admin.snapshot())
        assert excinfo.value.status_code == 403

    def test_malformed_response(self, admin, mock):
        mock.add("POST", ADMIN_PATH, b"<html>")

        with pytest.raises(DecodeError):
            asyncio.run(admin.snapshot())

    def test_unexpected_result_type(self, admin, mock):
        mock.add("POST", ADMIN_PATH, {"jsonrpc": "2.0", "id": 1, "result": {"not": "a string"}})

        with pytest.raises(DecodeError):
            asyncio.run(admin.snapshot())

    @pytest.mark.parametrize("body", [{}, {"foo": "bar"}, {"id": 1, "result": "0x1"}])
    def test_non_envelope_object_is_decode_error(self, admin, mock, body):
        """测试缺少 jsonrpc/result/error 的 JSON 对象不会被当作 null 结果"""
        mock.add("POST", ADMIN_PATH, body)

        with pytest.raises(DecodeError):
            asyncio.run(admin.get_latest())
        with pytest.raises(DecodeError):
            asyncio.run(admin.call("eth_chainId"))

    def test_error_envelope_on_http_error(self, admin, mock):
        """测试非 2xx 状态下的 JSON-RPC error 仍然抛出 RpcError"""
        mock.add(
            "POST",
            ADMIN_PATH,
            {"jsonrpc": "2.0", "id": 1, "error": {"code": -32603, "message": "internal error"}},
            status_code=500,
        )

        with pytest.raises(RpcError) as excinfo:
            asyncio.run(admin.snapshot())
        assert excinfo.value.rpc_code == -32603
