"""Main RPC client for an eCash node."""

import logging
import time
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ..core.models import RPCRequest, RPCResponse
from ..errors import RPCError
from .config import Config
from .methods import NodeMethods


logger = logging.getLogger(__name__)


class ECashClient(NodeMethods):
    """Async JSON-RPC client for an eCash node."""

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        """Initialize the client with configuration.

        Args:
            config: Connection parameters
            transport: Optional httpx transport, replacing the default network one
        """
        self.config = config
        self._last_id = 0
        self.client = httpx.AsyncClient(
            auth=httpx.BasicAuth(config.username, config.password),
            headers={"Content-Type": "text/plain"},
            timeout=config.timeout_seconds,
            transport=transport,
        )

    def _next_id(self) -> int:
        # Millisecond timestamp, bumped so ids from one client never repeat.
        request_id = max(int(time.time() * 1000), self._last_id + 1)
        self._last_id = request_id
        return request_id

    def build_request(self, method: str, *params: Any) -> RPCRequest:
        """Build the request envelope for ``method``."""
        return RPCRequest(
            id=self._next_id(),
            method=method.lower(),
            params=list(params) if params else None,
        )

    def build_body(self, method: str, *params: Any) -> str:
        """Build the plaintext body POSTed to the node."""
        return self.build_request(method, *params).to_json()

    async def call(self, method: str, *params: Any) -> Any:
        """Call ``method`` on the node and return its ``result``.

        Args:
            method: Procedure name, sent lower-cased
            params: Positional parameters, sent verbatim

        Returns:
            The ``result`` field of the response, untouched

        Raises:
            RPCError: If the node reports an error, answers with an
                unrecognized failure, or cannot be reached
        """
        request = self.build_request(method, *params)
        rpc_method = request.method

        logger.debug(f"POST {self.config.url} {rpc_method} (id={request.id})")
        try:
            response = await self.client.post(self.config.url, content=request.to_json())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            if self.config.debug:
                logger.error(f"{rpc_method}: {e!r}")
            raise RPCError.from_transport_error(rpc_method, e) from e

        return self._unwrap(rpc_method, response)

    def _unwrap(self, rpc_method: str, response: httpx.Response) -> Any:
        """Extract ``result`` from a response or raise a normalized error."""
        try:
            data = response.json()
        except ValueError:
            data = response.text

        try:
            parsed = RPCResponse.model_validate(data)
        except ValidationError:
            parsed = None

        if parsed is not None and parsed.error is not None:
            self._log_failure(rpc_method, response, data)
            raise RPCError.from_node_error(rpc_method, parsed.error.model_dump(), response=data)

        if parsed is None or not response.is_success:
            self._log_failure(rpc_method, response, data)
            raise RPCError.from_response(rpc_method, data)

        return parsed.result

    def _log_failure(self, rpc_method: str, response: httpx.Response, data: Any) -> None:
        if self.config.debug:
            logger.error(f"{rpc_method} failed with HTTP {response.status_code}: {data}")

    async def aclose(self) -> None:
        """Asynchronously close the client."""
        await self.client.aclose()

    async def __aenter__(self) -> "ECashClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        del exc_type
        del exc_val
        del exc_tb
        await self.aclose()
