import json

import httpx
import pytest
import pytest_asyncio

from ecashrpc.rpc.client import ECashClient
from ecashrpc.rpc.config import Config


class FakeNode:
    """Records requests and answers them with a canned handler."""

    def __init__(self, handler=None):
        self.requests = []
        self.handler = handler or (lambda request: httpx.Response(200, json={"result": None, "error": None}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def bodies(self):
        return [json.loads(request.content) for request in self.requests]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def config():
    return Config(
        host="http://127.0.0.1",
        username="user",
        password="pass",
        port=8332,
    )


@pytest.fixture
def node():
    return FakeNode()


@pytest_asyncio.fixture
async def client(config, node):
    async with ECashClient(config, transport=node.transport()) as c:
        yield c
