import json
from http import HTTPStatus
from typing import Any

import httpx


class MockResponse:
    def __init__(self, status_code: int = HTTPStatus.OK, text: str = "") -> None:
        self.status_code = status_code
        self.text = text

    def json(self) -> Any:
        return json.loads(self.text)


class MockClient:
    """Minimal context-manager mock for httpx.Client that records requested URLs."""

    def __init__(self, response: MockResponse, *args: Any, **kwargs: Any) -> None:
        self._response = response
        self.kwargs = kwargs
        self.requested_urls: list[str] = []

    def __enter__(self) -> "MockClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def get(self, url: str) -> MockResponse:
        self.requested_urls.append(url)
        return self._response


class MockAsyncClient(MockClient):
    """Async counterpart of MockClient for httpx.AsyncClient."""

    async def __aenter__(self) -> "MockAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str) -> MockResponse:  # type: ignore[override]
        return super().get(url)


class FailingClient:
    """Client whose GET raises the configured httpx error, simulating a network failure."""

    def __init__(self, error: type[httpx.RequestError] = httpx.ConnectError, *args: Any, **kwargs: Any) -> None:
        self._error = error

    def __enter__(self) -> "FailingClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    async def __aenter__(self) -> "FailingClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    def _raise(self, url: str) -> None:
        request = httpx.Request("GET", url)
        raise self._error("Connection refused", request=request)

    def get(self, url: str) -> MockResponse:
        self._raise(url)
        return MockResponse()


class FailingAsyncClient(FailingClient):
    async def get(self, url: str) -> MockResponse:  # type: ignore[override]
        self._raise(url)
        return MockResponse()


class ClientRecorder:
    """Stands in for the httpx client class and keeps every instance it creates."""

    def __init__(self, response: MockResponse, client_cls: type[MockClient] = MockClient) -> None:
        self._response = response
        self._client_cls = client_cls
        self.instances: list[MockClient] = []

    def __call__(self, *args: Any, **kwargs: Any) -> MockClient:
        client = self._client_cls(self._response, *args, **kwargs)
        self.instances.append(client)
        return client

    @property
    def requested_urls(self) -> list[str]:
        return [url for client in self.instances for url in client.requested_urls]
