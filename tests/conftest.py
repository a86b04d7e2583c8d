from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from starkinfra import config, defaults, key
from starkinfra.user import Organization, Project
from starkinfra.utils import request as request_module
from starkinfra.utils.cache import public_keys

Handler = Callable[[httpx.Request], httpx.Response]


class FakeApi:
    """Records every request and answers from a queue or a custom handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Handler | None = None
        self._queue: list[httpx.Response] = []

    def reply(
        self,
        json_body: Any = None,
        status: int = 200,
        content: bytes | None = None,
    ) -> None:
        if content is None:
            content = json.dumps(json_body).encode("utf-8")
        self._queue.append(httpx.Response(status, content=content))

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        if not self._queue:
            raise AssertionError(f"unexpected request {request.method} {request.url}")
        return self._queue.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(config.ENV_KEYS.values()):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda **_: None)
    config._load_settings_cached.cache_clear()
    defaults.reset()
    public_keys.clear()
    yield
    defaults.reset()
    public_keys.clear()
    config._load_settings_cached.cache_clear()


@pytest.fixture
def api(monkeypatch: pytest.MonkeyPatch) -> FakeApi:
    fake = FakeApi()
    client = httpx.Client(transport=httpx.MockTransport(fake.handle))
    monkeypatch.setattr(request_module, "_get_client", lambda: client)
    yield fake
    client.close()


@pytest.fixture(scope="session")
def key_pair() -> tuple[str, str]:
    return key.create()


@pytest.fixture(scope="session")
def server_key_pair() -> tuple[str, str]:
    return key.create()


@pytest.fixture
def project(key_pair: tuple[str, str]) -> Project:
    private_pem, _ = key_pair
    return Project(environment="sandbox", id="9999999999999999", private_key=private_pem)


@pytest.fixture
def organization(key_pair: tuple[str, str]) -> Organization:
    private_pem, _ = key_pair
    return Organization(environment="production", id="5656565656565656", private_key=private_pem)


@pytest.fixture
def default_user(project: Project) -> Project:
    defaults.set_user(project)
    return project
