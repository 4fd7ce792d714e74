"""
Simulation - 交易模拟 API

在任意网络/区块上 dry-run 单笔或一组交易，返回执行效果而不上链。
"""

from .models import (
    SimulationType,
    StateOverride,
    BlockHeaderOverride,
    SimulationRequest,
    BundleSimulationRequest,
    TransactionInfo,
    Transaction,
    Simulation,
    SimulationResponse,
    BundleSimulationResponse,
    SimulationListResponse,
)
from .api import SimulationApi

__all__ = [
    # Models
    "SimulationType",
    "StateOverride",
    "BlockHeaderOverride",
    "SimulationRequest",
    "BundleSimulationRequest",
    "TransactionInfo",
    "Transaction",
    "Simulation",
    "SimulationResponse",
    "BundleSimulationResponse",
    "SimulationListResponse",
    # API
    "SimulationApi",
]
