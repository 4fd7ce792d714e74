"""
Wallet Data Models
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from ..base import RequestModel, ResponseModel


class Wallet(ResponseModel):
    """项目中监控的钱包"""
    id: Optional[str] = None
    address: str
    display_name: Optional[str] = None
    network_id: Optional[str] = None
    balance: Optional[str] = None
    tags: Optional[List[str]] = None
    created_at: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class AddWalletRequest(RequestModel):
    """添加钱包到项目（可同时监控多个网络）"""
    address: str = Field(..., description="钱包地址")
    display_name: Optional[str] = Field(None, description="显示名称")
    network_ids: List[str] = Field(default_factory=list, description="监控的网络 ID")


class UpdateWalletRequest(RequestModel):
    display_name: Optional[str] = None
    tags: Optional[List[str]] = None
