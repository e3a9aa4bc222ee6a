"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from jsonapi_repository.domain.entities import TransportResponse
from jsonapi_repository.domain.value_objects import RepositoryConfig
from jsonapi_repository.services.jsonapi_deserializer import JsonApiDeserializer
from jsonapi_repository.services.repository import JsonApiRepository

BASE_URI = "https://api.example.com/users"


class FakeTransport:
    """In-memory Transport: records each call and replays queued responses."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.responses: list[TransportResponse] = []

    def queue(self, status_code: int, body: Any = None) -> None:
        self.responses.append(TransportResponse(status_code=status_code, body=body))

    def _reply(self, **call: Any) -> TransportResponse:
        self.calls.append(call)
        if self.responses:
            return self.responses.pop(0)
        return TransportResponse(status_code=200, body={"data": []})

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]

    def get(self, uri, query=None, *, headers=None):
        return self._reply(method="GET", uri=uri, query=list(query or []), headers=headers)

    def post(self, uri, body=None, *, headers=None):
        return self._reply(method="POST", uri=uri, body=body, headers=headers)

    def put(self, uri, body=None, *, headers=None):
        return self._reply(method="PUT", uri=uri, body=body, headers=headers)

    def patch(self, uri, body=None, *, headers=None):
        return self._reply(method="PATCH", uri=uri, body=body, headers=headers)

    def delete(self, uri, *, headers=None):
        return self._reply(method="DELETE", uri=uri, headers=headers)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def config():
    return RepositoryConfig(base_uri=BASE_URI, deserializer=JsonApiDeserializer())


@pytest.fixture
def repo(transport, config):
    return JsonApiRepository(transport, config)
