"""
Networks - 公共网络 API
"""

from .models import NetworkMetadata, Network
from .api import NetworksApi

__all__ = [
    "NetworkMetadata",
    "Network",
    "NetworksApi",
]
