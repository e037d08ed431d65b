"""Test helpers: a PoemStoreClient wired to an in-process fake API."""

from __future__ import annotations

from typing import Callable, List

import httpx

from core.seed import SEED_ENTRIES
from services.store_client import PoemStoreClient

ENDPOINT = "http://poems.test/api/poems"
FIXED_NONCE = 1700000000000


class FakeApi:
    """Records every request and answers with the configured handler."""

    def __init__(self, handler: Callable[[httpx.Request], object]) -> None:
        self.handler = handler
        self.requests: List[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def build_store_client(
    api: FakeApi, *, require_kind: bool = False, endpoint: str = ENDPOINT
) -> PoemStoreClient:
    return PoemStoreClient(
        api.http_client(),
        SEED_ENTRIES,
        endpoint=endpoint,
        require_kind=require_kind,
        nonce=lambda: FIXED_NONCE,
    )


def raw_record(**overrides):
    record = {
        "slug": "a",
        "title": "A",
        "body": "x\ny",
        "type": "poem",
        "created_at": "2024-01-01T00:00:00Z",
    }
    record.update(overrides)
    return record




class RecordingLogger:
    """Logger stub that keeps every call for assertions."""

    def __init__(self) -> None:
        self.records: List[dict] = []

    def _record(self, level: str, message: str, *args) -> None:
        self.records.append({"level": level, "message": message % args if args else message})

    def debug(self, message: str, *args) -> None:
        self._record("debug", message, *args)

    def info(self, message: str, *args) -> None:
        self._record("info", message, *args)

    def warning(self, message: str, *args) -> None:
        self._record("warning", message, *args)

    def exception(self, message: str, *args) -> None:
        self._record("exception", message, *args)
