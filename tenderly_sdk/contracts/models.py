"""
Contracts Data Models

项目中被监控合约的数据结构。
"""

from typing import List, Optional

from pydantic import Field

from ..base import RequestModel, ResponseModel


class ContractTag(ResponseModel):
    """合约标签"""
    tag: str
    created_at: Optional[str] = None


class ContractDetails(ResponseModel):
    """合约本身的信息（编译器、名称、验证状态等）"""
    id: Optional[str] = None
    contract_id: Optional[str] = None
    network_id: Optional[str] = None
    address: Optional[str] = None
    contract_name: Optional[str] = None
    compiler_version: Optional[str] = None
    language: Optional[str] = None
    verification_date: Optional[str] = None
    standards: Optional[List[str]] = None
    evm_version: Optional[str] = None


class Contract(ResponseModel):
    """项目中的合约（Tenderly 中称为 account）"""
    id: Optional[str] = None
    account_type: Optional[str] = None
    display_name: Optional[str] = None
    network_id: Optional[str] = None
    address: Optional[str] = None
    contract: Optional[ContractDetails] = None
    tags: List[ContractTag] = Field(default_factory=list)
    balance: Optional[str] = None
    verification_type: Optional[str] = None
    added_by_id: Optional[str] = None
    created_at: Optional[str] = None


class ListContractsQuery(RequestModel):
    """合约列表查询参数"""
    account_type: str = Field(default="contract", alias="accountType")
    tag: Optional[str] = None
    page: Optional[int] = Field(None, ge=0)
    per_page: Optional[int] = Field(None, ge=1, alias="perPage")


class AddContractRequest(RequestModel):
    """把合约加入项目"""
    network_id: str = Field(..., description="网络 ID")
    address: str = Field(..., description="合约地址")
    display_name: Optional[str] = None


class UpdateContractRequest(RequestModel):
    """重命名合约"""
    display_name: str


class TagContractsRequest(RequestModel):
    """为一组合约添加/移除标签"""
    contract_ids: List[str] = Field(..., min_length=1, description="形如 eth:1:0x... 的合约 ID")
    tag: str = Field(..., min_length=1)


class DeleteContractsRequest(RequestModel):
    """批量删除合约"""
    account_ids: List[str] = Field(..., min_length=1)
