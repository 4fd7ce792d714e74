"""
Contracts API Unit Tests
"""

import asyncio

import pytest

from tenderly_sdk import InvalidAddressError, InvalidParameterError
from tenderly_sdk.contracts import (
    AddContractRequest,
    ListContractsQuery,
    TagContractsRequest,
    UpdateContractRequest,
)

from conftest import PROJECT_PATH, TOKEN, body_of


CONTRACT_JSON = {
    "id": f"eth:1:{TOKEN.lower()}",
    "account_type": "contract",
    "display_name": "USDC",
    "network_id": "1",
    "address": TOKEN.lower(),
    "contract": {"contract_name": "FiatTokenProxy", "standards": ["erc20"]},
    "tags": [{"tag": "stablecoin"}],
    "verification_type": None,
}


class TestContractsApi:
    """测试 Contracts API"""

    def test_list_default_query(self, client, mock):
        """测试默认只列出合约"""
        mock.add("GET", f"{PROJECT_PATH}/contracts", [CONTRACT_JSON])

        contracts = asyncio.run(client.contracts.list())
        assert contracts[0].display_name == "USDC"
        assert contracts[0].contract.contract_name == "FiatTokenProxy"
        assert contracts[0].tags[0].tag == "stablecoin"
        assert mock.last.url.params["accountType"] == "contract"

    def test_list_with_tag(self, client, mock):
        mock.add("GET", f"{PROJECT_PATH}/contracts", [])

        query = ListContractsQuery(tag="stablecoin", page=1, per_page=10)
        assert asyncio.run(client.contracts.list(query)) == []
        params = mock.last.url.params
        assert params["tag"] == "stablecoin"
        assert params["perPage"] == "10"

    def test_get(self, client, mock):
        mock.add("GET", f"{PROJECT_PATH}/contract/1/{TOKEN}", CONTRACT_JSON)

        contract = asyncio.run(client.contracts.get("1", TOKEN))
        assert contract.network_id == "1"

    def test_get_invalid_address(self, client, mock):
        """测试地址非法时不发出请求"""
        with pytest.raises(InvalidAddressError):
            asyncio.run(client.contracts.get("1", "0xnope"))
        assert mock.requests == []

    def test_add(self, client, mock):
        mock.add("POST", f"{PROJECT_PATH}/address", CONTRACT_JSON)

        request = AddContractRequest(network_id="1", address=TOKEN, display_name="USDC")
        asyncio.run(client.contracts.add(request))
        assert body_of(mock.last) == {"network_id": "1", "address": TOKEN, "display_name": "USDC"}

    def test_rename(self, client, mock):
        mock.add("POST", f"{PROJECT_PATH}/contract/1/{TOKEN}/rename", None, status_code=204)

        asyncio.run(client.contracts.update("1", TOKEN, UpdateContractRequest(display_name="Circle USD")))
        assert body_of(mock.last) == {"display_name": "Circle USD"}

    def test_delete_and_delete_many(self, client, mock):
        mock.add("DELETE", f"{PROJECT_PATH}/contract/1/{TOKEN}", None, status_code=204)
        mock.add("DELETE", f"{PROJECT_PATH}/contracts", None, status_code=204)

        asyncio.run(client.contracts.delete("1", TOKEN))
        asyncio.run(client.contracts.delete_many(["eth:1:0xabc", "eth:1:0xdef"]))
        assert body_of(mock.last) == {"account_ids": ["eth:1:0xabc", "eth:1:0xdef"]}

        with pytest.raises(InvalidParameterError):
            asyncio.run(client.contracts.delete_many([]))

    def test_tags(self, client, mock):
        """测试添加/移除标签"""
        mock.add("POST", f"{PROJECT_PATH}/tag", None, status_code=204)
        mock.add("DELETE", f"{PROJECT_PATH}/tag", None, status_code=204)

        request = TagContractsRequest(contract_ids=[CONTRACT_JSON["id"]], tag="stablecoin")
        asyncio.run(client.contracts.add_tag(request))
        assert mock.last.method == "POST"
        asyncio.run(client.contracts.remove_tag(request))
        assert mock.last.method == "DELETE"
        assert body_of(mock.last) == {"contract_ids": [CONTRACT_JSON["id"]], "tag": "stablecoin"}
