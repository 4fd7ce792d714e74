"""
Tenderly SDK - Tenderly REST API 与 Virtual TestNet Admin RPC 的异步 Python 客户端

用法:

    from tenderly_sdk import TenderlyClient

    async with TenderlyClient.from_env() as client:
        vnets = await client.vnets.list()
"""

__version__ = "0.1.0"

from .config import TenderlyConfig
from .errors import (
    TenderlyError,
    NetworkError,
    ApiError,
    DecodeError,
    RpcError,
    InvalidParameterError,
    InvalidAddressError,
)
from .utils import is_valid_address, validate_address, to_hex_quantity, to_hex_word
from .client import TenderlyClient

__all__ = [
    "__version__",
    # Client
    "TenderlyClient",
    "TenderlyConfig",
    # Errors
    "TenderlyError",
    "NetworkError",
    "ApiError",
    "DecodeError",
    "RpcError",
    "InvalidParameterError",
    "InvalidAddressError",
    # Utils
    "is_valid_address",
    "validate_address",
    "to_hex_quantity",
    "to_hex_word",
]
