"""
Wire codec

请求体/查询参数的序列化，响应、错误体和 JSON-RPC 信封的解码。
"""

from functools import lru_cache
from typing import Any, Dict, Literal, Optional

import httpx
from pydantic import BaseModel, Field, TypeAdapter, ValidationError, model_validator

from .base import RequestModel
from .errors import ApiError, DecodeError


# =============================================================================
# Wire envelopes
# =============================================================================


class ApiErrorDetail(BaseModel):
    """Tenderly 错误体中的 error 对象"""
    id: Optional[str] = None
    slug: Optional[str] = None
    message: Optional[str] = None


class ApiErrorBody(BaseModel):
    """Tenderly 错误响应 {"error": {...}}"""
    error: ApiErrorDetail


class JsonRpcErrorObject(BaseModel):
    """JSON-RPC error 对象"""
    code: int
    message: str = ""
    data: Any = None


class JsonRpcResponse(BaseModel):
    """
    JSON-RPC 2.0 响应信封

    必须带 jsonrpc="2.0"，且包含 result 或 error；result 可以是 null（如 evm_getLatest）。
    """
    jsonrpc: Literal["2.0"]
    id: Any = None
    result: Any = None
    error: Optional[JsonRpcErrorObject] = Field(None)

    @model_validator(mode="after")
    def require_result_or_error(self) -> "JsonRpcResponse":
        if self.error is None and "result" not in self.model_fields_set:
            raise ValueError("JSON-RPC 响应缺少 result 或 error")
        return self


@lru_cache(maxsize=None)
def _adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


def decode_json(response_model: Any, content: bytes) -> Any:
    """按 response_model 解析 JSON，失败时抛出 DecodeError"""
    try:
        return _adapter(response_model).validate_json(content)
    except ValidationError as e:
        name = getattr(response_model, "__name__", repr(response_model))
        raise DecodeError(f"无法将响应解析为 {name} ({e.error_count()} 个错误)") from e


def validate_python(response_model: Any, value: Any) -> Any:
    """按 response_model 校验已解析的 Python 对象，失败时抛出 DecodeError"""
    try:
        return _adapter(response_model).validate_python(value)
    except ValidationError as e:
        name = getattr(response_model, "__name__", repr(response_model))
        raise DecodeError(f"无法将结果解析为 {name} ({e.error_count()} 个错误)") from e


def _dump(model: BaseModel) -> Any:
    if isinstance(model, RequestModel):
        return model.to_payload()
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_json(body: Any) -> Any:
    """请求体转换为 JSON 数据"""
    if isinstance(body, BaseModel):
        return _dump(body)
    return body


def to_params(params: Any) -> Optional[Dict[str, Any]]:
    """查询参数转换为 dict，丢弃 None 值"""
    if params is None:
        return None
    if isinstance(params, BaseModel):
        params = _dump(params)
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        # httpx 会把 True 渲染成 "True"
        cleaned[key] = str(value).lower() if isinstance(value, bool) else value
    return cleaned


def api_error(response: httpx.Response) -> ApiError:
    """把非 2xx 响应转换为 ApiError"""
    text = response.text
    try:
        detail = ApiErrorBody.model_validate_json(response.content).error
    except ValidationError:
        detail = None

    if detail is not None and detail.message:
        return ApiError(
            response.status_code,
            detail.message,
            slug=detail.slug,
            error_id=detail.id,
            body=text,
        )
    return ApiError(
        response.status_code,
        text.strip() or response.reason_phrase,
        slug=detail.slug if detail is not None else None,
        error_id=detail.id if detail is not None else None,
        body=text,
    )

