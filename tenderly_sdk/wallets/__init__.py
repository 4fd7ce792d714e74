"""
Wallets - 钱包监控 API
"""

from .models import Wallet, AddWalletRequest, UpdateWalletRequest
from .api import WalletsApi

__all__ = [
    "Wallet",
    "AddWalletRequest",
    "UpdateWalletRequest",
    "WalletsApi",
]
