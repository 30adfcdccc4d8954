"""Data models for JSON-RPC envelopes exchanged with the node."""

import json
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict


class RPCRequest(BaseModel):
    """JSON-RPC 1.0 request envelope."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: Literal["1.0"] = "1.0"
    id: int
    method: str
    params: Optional[List[Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id, "method": self.method}
        if self.params:
            body["params"] = self.params
        return body

    def to_json(self) -> str:
        """Serialize the envelope, leaving out ``params`` when there are none."""
        return json.dumps(self.to_dict())


class RPCErrorDetail(BaseModel):
    """Error object reported by the node."""

    code: Optional[int] = None
    message: Optional[str] = None


class RPCResponse(BaseModel):
    """JSON-RPC 1.0 response envelope."""

    result: Any = None
    error: Optional[RPCErrorDetail] = None
    id: Any = None
