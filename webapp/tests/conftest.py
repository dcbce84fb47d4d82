"""Shared fixtures: a fake conversion service behind httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest


class FakeConversionService:
    """Answers /convert and /convert-currency with queued or default responses."""

    def __init__(self) -> None:
        self.requests: list[tuple[str, dict]] = []
        self.responses: dict[str, list] = {"/convert": [], "/convert-currency": []}
        self.default = httpx.Response(200, json={"result": 1.0})

    def queue(self, path: str, response) -> None:
        """Queue an httpx.Response, or an exception instance to raise."""
        self.responses[path].append(response)

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else {}
        self.requests.append((request.url.path, body))
        queued = self.responses.get(request.url.path)
        if queued:
            response = queued.pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        return self.default

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url="http://converter.test", transport=self.transport)


@pytest.fixture
def service() -> FakeConversionService:
    return FakeConversionService()
