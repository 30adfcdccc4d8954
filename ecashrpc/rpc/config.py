"""Configuration for the RPC client."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Connection parameters for an eCash node's JSON-RPC endpoint."""

    host: str
    username: str
    password: str
    port: int
    timeout: int = 3000
    debug: bool = True

    @property
    def url(self) -> str:
        """Endpoint the requests are POSTed to."""
        return f"{self.host}:{self.port}/"

    @property
    def timeout_seconds(self) -> Optional[float]:
        """Timeout for httpx; a non-positive ``timeout`` disables it."""
        if self.timeout <= 0:
            return None
        return self.timeout / 1000
