"""Клиент удалённого хранилища стихов.

Читает список записей с API и откатывается на локальные стихи при любой
ошибке; создаёт новый стих через POST. Отмена загрузки делается отменой
asyncio-задачи: httpx обрывает запрос, а CancelledError уходит наверх без
изменения состояния.
"""
from typing import Callable, List, Optional, Sequence

import httpx

from core.exceptions import (
    EmptyNormalizedResult,
    LoadFailure,
    MalformedPayload,
    NetworkFailure,
    SubmitFailure,
    ValidationError,
)
from core.logging import get_logger
from schemas.poems import Entry, EntryKind, LoadOutcome, LoadResult, PoemCreate
from services.poem_service import PoemService

LOG = get_logger("poems.store_client")


class PoemStoreClient:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        seed: Sequence[Entry],
        *,
        endpoint: str,
        require_kind: bool = False,
        nonce: Optional[Callable[[], int]] = None,
    ):
        self._http = http_client
        self._seed = tuple(seed)
        self.endpoint = endpoint
        self.require_kind = require_kind
        self._nonce = nonce

    @property
    def seed(self) -> List[Entry]:
        return list(self._seed)

    async def load_entries(self) -> LoadResult:
        try:
            entries = await self._fetch_entries()
        except LoadFailure as exc:
            LOG.warning("load failed kind=%s detail=%s", type(exc).__name__, exc)
            return LoadResult(
                entries=self.seed,
                outcome=LoadOutcome.FALLBACK,
                error_kind=type(exc).__name__,
            )
        LOG.info("loaded %d entries from %s", len(entries), self.endpoint)
        return LoadResult(entries=entries, outcome=LoadOutcome.LOADED)

    async def _fetch_entries(self) -> List[Entry]:
        try:
            response = await self._http.get(self.endpoint)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkFailure(str(exc)) from exc
        if not response.is_success:
            raise NetworkFailure(f"status {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedPayload("response body is not JSON") from exc

        records = PoemService.extract_records(payload)
        if records is None:
            raise MalformedPayload(f"unexpected payload type {type(payload).__name__}")

        entries = PoemService.normalize_entries(records, self.require_kind)
        if not entries:
            raise EmptyNormalizedResult(f"0 of {len(records)} records survived")
        return entries

    async def submit_entry(self, title: str, body: str) -> Entry:
        title = (title or "").strip()
        body = (body or "").strip()
        if not title or not body:
            raise ValidationError("title and body are required")

        poem = PoemCreate(slug=PoemService.slugify(title, self._nonce), title=title, body=body)
        try:
            response = await self._http.post(self.endpoint, json=poem.model_dump())
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            LOG.warning("submit failed slug=%s error=%s", poem.slug, exc)
            raise SubmitFailure(str(exc)) from exc
        if not response.is_success:
            LOG.warning("submit rejected slug=%s status=%s", poem.slug, response.status_code)
            raise SubmitFailure(f"status {response.status_code}")

        LOG.info("submitted slug=%s", poem.slug)
        return Entry(kind=EntryKind.POEM, title=title, lines=PoemService.split_lines(body))
