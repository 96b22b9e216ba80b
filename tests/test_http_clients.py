"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from user_directory.adapters.jsonplaceholder_client import HttpxJsonPlaceholderClient
from user_directory.domain.errors import ResourceNotFoundError, UpstreamError
from tests.conftest import ERVIN, LEANNE


def _client(handler) -> HttpxJsonPlaceholderClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxJsonPlaceholderClient(
        base_url="https://jsonplaceholder.test",
        http_client=httpx.AsyncClient(transport=transport),
        timeout=1.0,
    )


def test_list_and_get_users() -> None:
    seen_paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_paths.append(request.url.path)
        if request.url.path == "/users":
            return httpx.Response(200, json=[LEANNE, ERVIN])
        return httpx.Response(200, json=LEANNE)

    client = _client(handler)

    users = asyncio.run(client.list_users())
    user = asyncio.run(client.get_user(1))

    assert len(users) == 2
    assert user["name"] == "Leanne Graham"
    assert seen_paths == ["/users", "/users/1"]


def test_get_user_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={})

    client = _client(handler)

    with pytest.raises(ResourceNotFoundError):
        asyncio.run(client.get_user(999))


def test_empty_object_is_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    client = _client(handler)

    with pytest.raises(ResourceNotFoundError):
        asyncio.run(client.get_user(11))


def test_server_error_is_upstream_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    client = _client(handler)

    with pytest.raises(UpstreamError, match="503"):
        asyncio.run(client.list_users())


def test_timeout_is_upstream_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = _client(handler)

    with pytest.raises(UpstreamError):
        asyncio.run(client.get_user(1))


def test_invalid_json_is_upstream_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>")

    client = _client(handler)

    with pytest.raises(UpstreamError):
        asyncio.run(client.list_users())


def test_create_strips_trailing_slash() -> None:
    client = HttpxJsonPlaceholderClient.create(
        base_url="https://jsonplaceholder.test/", timeout=2.5
    )

    assert client.base_url == "https://jsonplaceholder.test"
    assert client.timeout == 2.5
    asyncio.run(client.close())
