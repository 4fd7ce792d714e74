"""
Tenderly SDK errors

所有可失败操作只抛出这里定义的异常，调用方可以按类别区分处理：
- InvalidParameterError / InvalidAddressError: 本地参数校验失败（未发出请求）
- NetworkError: 网络/传输层失败
- ApiError: 服务端返回非 2xx 状态
- DecodeError: 响应无法解析为预期结构
- RpcError: JSON-RPC 响应中携带 error 对象
"""

from typing import Any, Optional


class TenderlyError(Exception):
    """SDK 异常基类"""

    default_code = "tenderly_error"

    def __init__(self, message: str = "", *, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __str__(self) -> str:
        if self.message:
            return f"{self.code}: {self.message}"
        return self.code


class NetworkError(TenderlyError):
    """请求未能到达服务端（连接失败、超时等）"""

    default_code = "network_error"


class ApiError(TenderlyError):
    """服务端返回非 2xx 状态码"""

    default_code = "api_error"

    def __init__(
        self,
        status_code: int,
        message: str = "",
        *,
        slug: Optional[str] = None,
        error_id: Optional[str] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message or f"HTTP {status_code}", code=slug)
        self.status_code = status_code
        self.slug = slug
        self.error_id = error_id
        self.body = body

    def __str__(self) -> str:
        return f"HTTP {self.status_code} {self.code}: {self.message}"


class DecodeError(TenderlyError):
    """响应体不是合法 JSON，或与预期模型不匹配"""

    default_code = "decode_error"


class RpcError(TenderlyError):
    """JSON-RPC error 响应"""

    default_code = "rpc_error"

    def __init__(
        self,
        rpc_code: int,
        message: str = "",
        *,
        data: Any = None,
        method: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        # code 保持为 "rpc_error"，JSON-RPC 数字错误码放在 rpc_code
        self.rpc_code = rpc_code
        self.data = data
        self.method = method

    def __str__(self) -> str:
        prefix = f"{self.method} " if self.method else ""
        return f"{prefix}JSON-RPC error {self.rpc_code}: {self.message}"


class InvalidParameterError(TenderlyError):
    """本地参数校验失败"""

    default_code = "invalid_parameter"


class InvalidAddressError(InvalidParameterError):
    """地址格式错误"""

    default_code = "invalid_address"

    def __init__(self, address: Any, field: str = "address") -> None:
        super().__init__(f"无效的以太坊地址 ({field}): {address!r}")
        self.address = address
        self.field = field
