"""Pytest configuration and fixtures."""

import json
from typing import Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from deployer.api.deps import get_http_client
from deployer.config import Settings, get_settings
from deployer.main import create_app

GITHUB_API = "https://api.github.com"
GITHUB_RAW = "https://raw.githubusercontent.com"
RENDER_API = "https://api.render.com/v1/services"


class FakeUpstream:
    """Serves GitHub and Render over ``httpx.MockTransport``.

    Records every outbound request so tests can assert on what was sent.
    """

    def __init__(self):
        self.default_branch: str | None = "main"
        self.branch_error: Exception | None = None
        self.files: set[str] = set()
        self.render_status = 201
        self.render_body: object = {"id": "srv-1", "name": "app-123-foo"}
        self.render_error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)

        if url.startswith(f"{GITHUB_API}/repos/"):
            if self.branch_error:
                raise self.branch_error
            if self.default_branch is None:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json={"default_branch": self.default_branch})

        if url.startswith(GITHUB_RAW):
            filename = url.rsplit("/", 1)[-1]
            if filename in self.files:
                return httpx.Response(200, text="contents")
            return httpx.Response(404, text="404: Not Found")

        if url == RENDER_API:
            if self.render_error:
                raise self.render_error
            return httpx.Response(self.render_status, json=self.render_body)

        return httpx.Response(500, text=f"unexpected request: {url}")

    @property
    def render_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url) == RENDER_API]

    def sent_payload(self) -> dict:
        (request,) = self.render_requests
        return json.loads(request.content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        render_api_key="rnd_test_key",
        render_owner_id=None,
        github_api_url=GITHUB_API,
        github_raw_url=GITHUB_RAW,
        render_api_url=RENDER_API,
    )


@pytest.fixture
def app_factory(test_settings: Settings, upstream: FakeUpstream) -> Callable:
    """Build an app whose outbound calls go to ``upstream``."""

    def factory(settings: Settings | None = None):
        settings = settings or test_settings
        app = create_app(settings)

        async def http_client_override():
            async with upstream.client() as client:
                yield client

        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_http_client] = http_client_override
        return app

    return factory


@pytest.fixture
async def client(app_factory: Callable) -> AsyncClient:
    """Create an async test client backed by the fake upstream."""
    transport = ASGITransport(app=app_factory())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
