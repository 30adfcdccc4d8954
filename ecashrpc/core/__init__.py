"""Core data models for the eCash RPC client."""

from .models import RPCErrorDetail, RPCRequest, RPCResponse

__all__ = [
    "RPCRequest",
    "RPCResponse",
    "RPCErrorDetail",
]
