"""
Tenderly SDK utilities

地址校验与 JSON-RPC 数值编码等无状态工具函数。
"""

import re
from typing import Union
from urllib.parse import quote

from web3 import Web3

from .errors import InvalidAddressError, InvalidParameterError


_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
_HEX_RE = re.compile(r"^0x[0-9a-fA-F]*$")

Quantity = Union[int, str]


def is_valid_address(address: object) -> bool:
    """是否为 0x 前缀的 20 字节十六进制地址（不校验 checksum）"""
    return isinstance(address, str) and _ADDRESS_RE.match(address) is not None


def validate_address(address: object, field: str = "address") -> str:
    """校验地址格式，失败时抛出 InvalidAddressError"""
    if not is_valid_address(address):
        raise InvalidAddressError(address, field)
    return address  # type: ignore[return-value]


def _to_int(value: Quantity, field: str) -> int:
    if isinstance(value, bool):
        raise InvalidParameterError(f"{field} 不能是布尔值")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if text.startswith("0x"):
            if not _HEX_RE.match(text) or len(text) == 2:
                raise InvalidParameterError(f"无效的十六进制数值 ({field}): {value!r}")
            number = int(text, 16)
        elif text.isdigit():
            number = int(text)
        else:
            raise InvalidParameterError(f"无效的数值 ({field}): {value!r}")
    else:
        raise InvalidParameterError(f"不支持的数值类型 ({field}): {type(value).__name__}")

    if number < 0:
        raise InvalidParameterError(f"{field} 不能为负数: {value!r}")
    return number


def to_hex_quantity(value: Quantity, field: str = "value") -> str:
    """
    编码为 JSON-RPC quantity（最短十六进制，如 0x0、0xde0b6b3a7640000）

    接受 int、十进制字符串或 0x 前缀的十六进制字符串。
    """
    return Web3.to_hex(_to_int(value, field))


def to_hex_word(value: Quantity, field: str = "value") -> str:
    """编码为左侧补零的 32 字节十六进制字（storage slot / value）"""
    number = _to_int(value, field)
    if number >= 1 << 256:
        raise InvalidParameterError(f"{field} 超出 32 字节范围")
    return "0x" + format(number, "064x")


def encode_path_segment(segment: object) -> str:
    """URL 路径段编码，'/' 也会被转义"""
    return quote(str(segment), safe="")
