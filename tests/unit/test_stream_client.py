"""Unit tests for the Stream chat-service client."""

import json

import httpx
import jwt
import pytest

from streamify.core.exceptions import ConfigurationError
from streamify.services import StreamClient

USER = {"_id": "64b7f0c2a1b2c3d4e5f60718", "fullName": "Alice", "profilePic": "https://img/1.png"}


def test_create_token():
    client = StreamClient(api_key="key", api_secret="secret")
    token = client.create_token("abc")
    assert jwt.decode(token, "secret", algorithms=["HS256"]) == {"user_id": "abc"}


def test_create_token_unconfigured():
    client = StreamClient(api_key=None, api_secret=None)
    with pytest.raises(ConfigurationError):
        client.create_token("abc")


async def test_upsert_user():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"users": {}})

    client = StreamClient(
        api_key="key",
        api_secret="secret",
        base_url="https://stream.test/",
        transport=httpx.MockTransport(handler),
    )
    result = await client.upsert_user(USER)

    assert result == {"users": {}}
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/users"
    assert request.url.params["api_key"] == "key"
    assert request.headers["stream-auth-type"] == "jwt"
    assert jwt.decode(request.headers["Authorization"], "secret", algorithms=["HS256"]) == {"server": True}
    body = json.loads(request.content)
    assert body["users"][USER["_id"]] == {
        "id": USER["_id"],
        "name": "Alice",
        "image": "https://img/1.png",
    }


async def test_upsert_user_failure_is_not_fatal(log_messages):
    client = StreamClient(
        api_key="key",
        api_secret="secret",
        transport=httpx.MockTransport(lambda request: httpx.Response(500)),
    )
    assert await client.upsert_user(USER) is None
    assert any("Error upserting Stream user" in m for m in log_messages)


async def test_upsert_user_skipped_without_credentials():
    def handler(request):
        raise AssertionError("no request expected")

    client = StreamClient(api_key=None, api_secret=None, transport=httpx.MockTransport(handler))
    assert await client.upsert_user(USER) is None
