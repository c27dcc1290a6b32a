"""Tests for the marketplace registry client."""

from __future__ import annotations

import json
from typing import List

import pytest

from marketsync.config import SyncConfig
from marketsync.errors import NetworkError, RemoteError
from marketsync.models import ListingMetadata, SubmissionPayload
from marketsync.registry import (
    USER_AGENT,
    FailClosedPolicy,
    HttpRequest,
    HttpResponse,
    RegistryClient,
)


class FakeTransport:
    """Replays queued responses (or raises queued errors) and records requests."""

    def __init__(self, *responses) -> None:
        self.responses = list(responses)
        self.requests: List[HttpRequest] = []

    def __call__(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        outcome = self.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _json(status: int, body) -> HttpResponse:
    return HttpResponse(status=status, body=json.dumps(body).encode("utf-8"))


def _config(**changes) -> SyncConfig:
    values = dict(api_key="secret", marketplace_url="https://mock.example/v1", request_timeout=5.0)
    values.update(changes)
    return SyncConfig(**values)


def _payload() -> SubmissionPayload:
    return SubmissionPayload(
        name="my tool",
        version="1.0.0",
        description="d",
        category="development",
        repository="https://github.com/a/b",
        metadata=ListingMetadata(author="a", release_tag="refs/tags/v1.0.0", submitted_at="t"),
    )


def _client(transport, **changes) -> RegistryClient:
    return RegistryClient(
        _config(**changes),
        transport=transport,
        submit_policy=FailClosedPolicy(retries=1, backoff=0.0, sleep=lambda _: None),
    )


def test_find_by_name_returns_first_match() -> None:
    transport = FakeTransport(_json(200, {"data": [{"id": "abc"}, {"id": "def"}]}))

    listing_id = _client(transport).find_by_name("my tool")

    assert listing_id == "abc"
    request = transport.requests[0]
    assert request.method == "GET"
    assert request.url == "https://mock.example/v1/listings?name=my%20tool"
    assert request.body is None
    assert request.timeout == 5.0


def test_find_by_name_returns_none_for_empty_data() -> None:
    transport = FakeTransport(_json(200, {"data": []}))

    assert _client(transport).find_by_name("x") is None


def test_find_by_name_fails_open_on_network_error() -> None:
    transport = FakeTransport(NetworkError("connection refused"))

    assert _client(transport).find_by_name("x") is None


def test_find_by_name_fails_open_on_remote_error() -> None:
    transport = FakeTransport(_json(500, {"error": "boom"}))

    assert _client(transport).find_by_name("x") is None


def test_find_by_name_fails_open_on_unexpected_shape() -> None:
    transport = FakeTransport(HttpResponse(status=200, body=b"<html>"))

    assert _client(transport).find_by_name("x") is None


def test_submit_creates_when_no_existing_id() -> None:
    transport = FakeTransport(_json(201, {"id": "new-id"}))

    result = _client(transport).submit(_payload())

    assert result.status == "created"
    assert result.listing_id == "new-id"
    assert result.listing_url == "https://mock.example/listing/new-id"
    request = transport.requests[0]
    assert request.method == "POST"
    assert request.url == "https://mock.example/v1/listings"
    assert json.loads(request.body.decode("utf-8")) == _payload().to_dict()


def test_submit_updates_existing_listing() -> None:
    transport = FakeTransport(_json(200, {"data": {"id": "abc"}}))

    result = _client(transport).submit(_payload(), "abc")

    assert result.status == "updated"
    assert result.listing_id == "abc"
    assert transport.requests[0].method == "PUT"
    assert transport.requests[0].url == "https://mock.example/v1/listings/abc"


def test_submit_falls_back_to_existing_id_then_unknown() -> None:
    transport = FakeTransport(_json(200, {}), HttpResponse(status=201, body=b"created"))
    client = _client(transport)

    assert client.submit(_payload(), "abc").listing_id == "abc"
    assert client.submit(_payload()).listing_id == "unknown"


def test_requests_carry_auth_and_user_agent() -> None:
    transport = FakeTransport(_json(201, {"id": "x"}))

    _client(transport).submit(_payload())

    headers = transport.requests[0].headers
    assert headers["Authorization"] == "Bearer secret"
    assert headers["Content-Type"] == "application/json"
    assert headers["User-Agent"] == USER_AGENT


def test_conflict_raises_remote_error_with_detail() -> None:
    transport = FakeTransport(_json(409, {"message": "duplicate"}))

    with pytest.raises(RemoteError) as excinfo:
        _client(transport).submit(_payload())

    assert excinfo.value.status == 409
    assert "409" in str(excinfo.value)
    assert "duplicate" in str(excinfo.value)
    assert len(transport.requests) == 1


def test_remote_error_detail_falls_back_to_error_field_and_raw_body() -> None:
    transport = FakeTransport(
        _json(400, {"error": "bad category"}),
        HttpResponse(status=502, body=b"x" * 500),
    )
    client = _client(transport, submit_retries=0)

    with pytest.raises(RemoteError, match="bad category"):
        client.submit(_payload())
    with pytest.raises(RemoteError) as excinfo:
        client.submit(_payload())

    assert excinfo.value.detail == "x" * 200


def test_remote_error_detail_serialises_other_objects() -> None:
    transport = FakeTransport(_json(422, {"fields": ["name"]}))

    with pytest.raises(RemoteError) as excinfo:
        _client(transport).submit(_payload())

    assert excinfo.value.detail == '{"fields": ["name"]}'


def test_submit_retries_network_error_once() -> None:
    transport = FakeTransport(NetworkError("reset"), _json(201, {"id": "x"}))

    result = _client(transport).submit(_payload())

    assert result.listing_id == "x"
    assert len(transport.requests) == 2


def test_submit_gives_up_after_bounded_retry() -> None:
    transport = FakeTransport(NetworkError("reset"), NetworkError("reset again"))

    with pytest.raises(NetworkError, match="reset again"):
        _client(transport).submit(_payload())

    assert len(transport.requests) == 2


@pytest.mark.parametrize(
    ("base", "expected"),
    [
        ("https://market.near.ai/v1", "https://market.near.ai/listing/7"),
        ("https://market.near.ai/v1/", "https://market.near.ai/listing/7"),
        ("https://api.example/v10", "https://api.example/v10/listing/7"),
    ],
)
def test_listing_url_strips_version_suffix(base: str, expected: str) -> None:
    client = RegistryClient(_config(marketplace_url=base), transport=FakeTransport())

    assert client.listing_url("7") == expected
