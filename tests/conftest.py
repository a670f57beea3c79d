"""Shared fixtures: a Tana client wired to an in-process fake endpoint."""

import json

import httpx
import pytest

from tana_mcp.client import TanaClient


class FakeEndpoint:
    """Records requests and replies with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = b'{"children": []}'
        self.error: Exception | None = None

    def reply(self, status_code: int = 200, body: object = None, raw: bytes | str | None = None) -> None:
        self.status_code = status_code
        if raw is not None:
            self.body = raw.encode() if isinstance(raw, str) else raw
        else:
            self.body = json.dumps(body).encode()

    def echo_nodes(self) -> None:
        """Reply with one child per requested node, ids assigned in order."""
        self.body = None  # type: ignore[assignment]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is None:
            nodes = json.loads(request.content).get("nodes", [])
            children = [
                {"name": n["name"], "description": n.get("description", ""), "nodeId": f"id-{i}"}
                for i, n in enumerate(nodes)
            ]
            return httpx.Response(self.status_code, json={"children": children})
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def endpoint() -> FakeEndpoint:
    return FakeEndpoint()


@pytest.fixture
def tana(endpoint: FakeEndpoint):
    client = TanaClient.from_token("secret-token", transport=httpx.MockTransport(endpoint.handler))
    yield client
    client.close()
