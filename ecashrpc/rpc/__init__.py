"""RPC client for communicating with an eCash node."""

from .client import ECashClient
from .config import Config
from .methods import RPC_METHODS, NodeMethods

__all__ = [
    "ECashClient",
    "Config",
    "NodeMethods",
    "RPC_METHODS",
]
