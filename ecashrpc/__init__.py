"""
Python client for the eCash node JSON-RPC interface.

This package exposes the node's blockchain, wallet and avalanche RPC
procedures as asynchronous method calls, plus a small CLI for calling
them from a shell.
"""

from .errors import RPCError
from .rpc import RPC_METHODS, Config, ECashClient

__version__ = "0.1.0"
__all__ = ["ECashClient", "Config", "RPCError", "RPC_METHODS"]
