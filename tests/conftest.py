import json
import os
from typing import Callable

# Must be set before config.settings is imported anywhere
os.environ["APP_ENV"] = "test"
os.environ["TRANSCRIPTION_API_URL"] = "https://provider.test/v2"
os.environ["TRANSCRIPTION_API_KEY"] = "test-transcription-key"
os.environ["OPENAI_API_KEY"] = "test-openai-key"

import httpx
import pytest

PROVIDER_URL = "https://provider.test/v2"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_response(status_code: int, body) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(body).encode("utf-8"),
        headers={"content-type": "application/json"},
    )


@pytest.fixture
async def make_http():
    clients: list[httpx.AsyncClient] = []

    def _make(handler, base_url: str = PROVIDER_URL):
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport, base_url=base_url)
        clients.append(client)
        return client, transport

    yield _make

    for c in clients:
        await c.aclose()
