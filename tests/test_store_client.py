"""Tests for PoemStoreClient: fetch-or-fallback and poem submission."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from core.exceptions import SubmitFailure, ValidationError
from helpers import ENDPOINT, FakeApi, RecordingLogger, build_store_client, raw_record
from schemas.poems import Entry, EntryKind, LoadOutcome
from services import store_client


def _json(payload, status_code: int = 200):
    return lambda request: httpx.Response(status_code, json=payload)


def _load(api: FakeApi, **kwargs):
    return asyncio.run(build_store_client(api, **kwargs).load_entries())


def test_load_bare_list_scenario():
    api = FakeApi(_json([raw_record()]))

    result = _load(api)

    assert result.outcome is LoadOutcome.LOADED
    assert result.entries == [Entry(kind=EntryKind.POEM, title="A", lines=["x", "y"])]
    assert result.error_kind is None
    assert api.requests[0].method == "GET"
    assert str(api.requests[0].url) == ENDPOINT


def test_load_accepts_poems_object():
    api = FakeApi(_json({"poems": [raw_record(slug="b", title="B", body="uno")]}))

    result = _load(api)

    assert result.outcome is LoadOutcome.LOADED
    assert [entry.title for entry in result.entries] == ["B"]


def test_http_500_falls_back_to_seed(seed):
    result = _load(FakeApi(_json({"error": "boom"}, status_code=500)))

    assert result.outcome is LoadOutcome.FALLBACK
    assert result.entries == seed
    assert result.error_kind == "NetworkFailure"


def test_transport_error_falls_back_to_seed(seed):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    result = _load(FakeApi(handler))

    assert result.outcome is LoadOutcome.FALLBACK
    assert result.entries == seed
    assert result.error_kind == "NetworkFailure"


def test_non_json_body_falls_back(seed):
    result = _load(FakeApi(lambda request: httpx.Response(200, text="<html>oops</html>")))

    assert result.outcome is LoadOutcome.FALLBACK
    assert result.entries == seed
    assert result.error_kind == "MalformedPayload"


@pytest.mark.parametrize("payload", [{"items": [raw_record()]}, "poems", 3, None, {"poems": "x"}])
def test_unexpected_shape_falls_back(payload, seed):
    result = _load(FakeApi(lambda request: httpx.Response(200, content=json.dumps(payload))))

    assert result.outcome is LoadOutcome.FALLBACK
    assert result.entries == seed
    assert result.error_kind == "MalformedPayload"


@pytest.mark.parametrize(
    "payload",
    [[], {"poems": []}, [{"slug": 1}, "junk", raw_record(created_at=None)]],
)
def test_empty_or_all_malformed_records_fall_back(payload, seed):
    result = _load(FakeApi(_json(payload)))

    assert result.outcome is LoadOutcome.FALLBACK
    assert result.entries == seed
    assert result.error_kind == "EmptyNormalizedResult"


def test_partial_remote_data_is_never_mixed_into_fallback(seed):
    untyped = raw_record()
    del untyped["type"]

    result = _load(FakeApi(_json([untyped])), require_kind=True)

    assert result.outcome is LoadOutcome.FALLBACK
    assert result.entries == seed


def test_untyped_records_load_as_poems_by_default():
    untyped = raw_record()
    del untyped["type"]

    result = _load(FakeApi(_json([untyped])))

    assert result.outcome is LoadOutcome.LOADED
    assert result.entries[0].kind is EntryKind.POEM


def test_fallback_is_logged_with_error_kind(monkeypatch):
    log = RecordingLogger()
    monkeypatch.setattr(store_client, "LOG", log)

    _load(FakeApi(_json({}, status_code=503)))

    assert any(
        r["level"] == "warning" and "NetworkFailure" in r["message"] for r in log.records
    )


def test_invalid_url_falls_back_to_seed(seed):
    api = FakeApi(_json([raw_record()]))

    result = _load(api, endpoint="http://[::1")

    assert result.outcome is LoadOutcome.FALLBACK
    assert result.entries == seed
    assert result.error_kind == "NetworkFailure"
    assert api.requests == []


def test_submit_invalid_url_raises_submit_failure():
    api = FakeApi(_json({}, status_code=201))

    with pytest.raises(SubmitFailure):
        asyncio.run(build_store_client(api, endpoint="http://[::1").submit_entry("Niebla", "x"))

    assert api.requests == []


def test_submit_blank_title_is_rejected_without_request():
    api = FakeApi(_json({}, status_code=201))
    client = build_store_client(api)

    with pytest.raises(ValidationError):
        asyncio.run(client.submit_entry("  ", "x"))

    assert api.requests == []


def test_submit_blank_body_is_rejected_without_request():
    api = FakeApi(_json({}, status_code=201))

    with pytest.raises(ValidationError):
        asyncio.run(build_store_client(api).submit_entry("Niebla", " \n "))

    assert api.requests == []


def test_submit_posts_slug_and_builds_local_entry():
    api = FakeApi(_json({"ignored": True}, status_code=201))

    entry = asyncio.run(build_store_client(api).submit_entry("  Niebla ", "linea1\nlinea2\n"))

    assert entry == Entry(kind=EntryKind.POEM, title="Niebla", lines=["linea1", "linea2"])
    request = api.requests[0]
    assert request.method == "POST"
    assert str(request.url) == ENDPOINT
    assert json.loads(request.content) == {
        "slug": "niebla-1700000000000",
        "title": "Niebla",
        "body": "linea1\nlinea2",
    }


def test_submit_non_2xx_raises_submit_failure():
    api = FakeApi(_json({"error": "nope"}, status_code=400))

    with pytest.raises(SubmitFailure):
        asyncio.run(build_store_client(api).submit_entry("Niebla", "x"))


def test_submit_transport_error_raises_submit_failure():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(SubmitFailure):
        asyncio.run(build_store_client(FakeApi(handler)).submit_entry("Niebla", "x"))


def test_load_cancellation_propagates_and_is_not_a_fallback():
    async def hang(request):
        await asyncio.sleep(60)

    api = FakeApi(hang)
    client = build_store_client(api)

    async def scenario():
        task = asyncio.create_task(client.load_entries())
        while not api.requests:
            await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
