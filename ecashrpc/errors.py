"""Errors raised by the eCash RPC client."""

import json
from typing import Any, Optional


class RPCError(Exception):
    """A failed RPC call.

    Every failure mode (node-reported error, unrecognized failure response,
    transport error) is raised as this one type with a composed message.
    """

    def __init__(
        self,
        method: str,
        message: str,
        code: Optional[int] = None,
        rpc_message: Optional[str] = None,
        response: Any = None,
    ) -> None:
        self.method = method
        self.code = code
        self.rpc_message = rpc_message
        self.response = response
        super().__init__(message)

    @classmethod
    def from_node_error(cls, method: str, error: Any, response: Any = None) -> "RPCError":
        """Build from the ``error`` object of a JSON-RPC response."""
        code = error.get("code")
        rpc_message = error.get("message")
        return cls(
            method,
            f"failed in {method} code={code} message={rpc_message}",
            code=code,
            rpc_message=rpc_message,
            response=response,
        )

    @classmethod
    def from_response(cls, method: str, response: Any) -> "RPCError":
        """Build from a failure response that carries no ``error`` object."""
        return cls(method, f"failed in {method}: {json.dumps(response)}", response=response)

    @classmethod
    def from_transport_error(cls, method: str, exc: BaseException) -> "RPCError":
        """Build from an error raised before any response arrived."""
        detail = str(exc)
        reason = f"{type(exc).__name__}: {detail}" if detail else type(exc).__name__
        return cls(method, f"failed in {method}: {reason}")
