"""
Base models shared by every API family

请求模型按别名序列化并省略 None 字段；响应模型容忍服务端新增字段。
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RequestModel(BaseModel):
    """请求体 / 查询参数基类"""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """转换为发送给 Tenderly 的 JSON 结构"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def reject_unknown(value: Any) -> Any:
    """UNKNOWN 只用于解码服务端新增的枚举值，不能出现在请求中"""
    if isinstance(value, Enum) and value.value == "unknown":
        raise ValueError(f"不支持的 {type(value).__name__} 取值")
    return value


class ResponseModel(BaseModel):
    """响应模型基类"""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """服务端用 null 表示缺省，交给字段默认值处理"""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class AccessListItem(RequestModel):
    """EIP-2930 access list 条目"""
    address: str = Field(..., description="被访问的地址")
    storage_keys: List[str] = Field(default_factory=list, description="被访问的 storage key")


class PageQuery(RequestModel):
    """分页查询参数"""
    page: Optional[int] = Field(None, ge=0, description="页码")
    per_page: Optional[int] = Field(None, ge=1, alias="perPage", description="每页条数")
