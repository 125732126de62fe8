"""
Pytest fixtures for e2e helper tests
"""

import os
import pytest
from typing import Callable, Dict, Iterator

# Set test environment before imports
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import httpx

from helpers.config import Settings


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_client() -> Iterator[Callable[[Dict[str, httpx.Response]], httpx.Client]]:
    """Build httpx clients answering from a url -> response table."""
    clients = []

    def factory(routes: Dict[str, httpx.Response]) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            response = routes.get(str(request.url))
            if response is None:
                return httpx.Response(404, content=b"not found")
            return response

        client = httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at a local artifact server."""
    return Settings(
        BINARY_URL_TEMPLATE="http://artifacts.test/wallet-{os}64/latest/binary-dist",
        CONFIGS_BASE_URL="http://artifacts.test/configs/latest/",
    )
