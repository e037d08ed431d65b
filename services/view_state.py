"""Состояние страницы: что показываем и что происходит с формой."""
import asyncio
from typing import List, Optional, Sequence

from core.exceptions import SubmitFailure, ValidationError
from core.logging import get_logger
from schemas.poems import Entry, LoadOutcome, LoadResult
from schemas.view import DisplayState, FormSnapshot, FormStatus, ViewSnapshot
from services.store_client import PoemStoreClient

LOG = get_logger("poems.view_state")

LOAD_ADVISORY = "No se pudo conectar con la API, mostrando poemas locales."
SUBMIT_ADVISORY = "No se pudo guardar el poema."
VALIDATION_ADVISORY = "El título y el poema son obligatorios."


class ViewStateController:
    def __init__(self, client: PoemStoreClient, seed: Sequence[Entry]):
        self.client = client
        self._seed = tuple(seed)
        self._load_task: Optional[asyncio.Task] = None

        self.state = DisplayState.IDLE
        self.entries: List[Entry] = list(self._seed)
        self.outcome: Optional[LoadOutcome] = None
        self.advisory: Optional[str] = None

        self.form_status = FormStatus.CLOSED
        self.form_title = ""
        self.form_body = ""
        self.form_message: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.state == DisplayState.LOADING

    # --- загрузка ---

    def mount(self) -> asyncio.Task:
        """Запускает загрузку, отменяя предыдущую, если она ещё идёт."""
        self._cancel_pending()
        self.state = DisplayState.LOADING
        self._load_task = asyncio.create_task(self._run_load())
        return self._load_task

    def reload(self) -> asyncio.Task:
        return self.mount()

    async def teardown(self):
        task = self._cancel_pending()
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                pass

    async def wait_loaded(self):
        """Ждёт текущую загрузку; если её заменили новой, ждёт новую."""
        while self._load_task is not None and not self._load_task.done():
            task = self._load_task
            try:
                await asyncio.shield(task)
            except asyncio.CancelledError:
                if not task.cancelled():
                    raise

    def _cancel_pending(self) -> Optional[asyncio.Task]:
        task = self._load_task
        if task is None or task.done():
            return None
        task.cancel()
        return task

    async def _run_load(self):
        try:
            result = await self.client.load_entries()
        except asyncio.CancelledError:
            LOG.debug("load cancelled")
            raise
        except Exception:
            LOG.exception("load crashed, showing local poems")
            result = LoadResult(entries=list(self._seed), outcome=LoadOutcome.FALLBACK)

        self.entries = list(result.entries)
        self.outcome = result.outcome
        self.state = DisplayState.DISPLAYING
        if result.outcome == LoadOutcome.LOADED:
            self.advisory = None
        else:
            self.advisory = LOAD_ADVISORY

    # --- форма ---

    def open_form(self):
        if self.form_status == FormStatus.CLOSED:
            self.form_status = FormStatus.OPEN

    def close_form(self):
        if self.form_status == FormStatus.SUBMITTING:
            return
        self._reset_form()

    def _reset_form(self):
        self.form_status = FormStatus.CLOSED
        self.form_title = ""
        self.form_body = ""
        self.form_message = None

    async def submit(self, title: str, body: str) -> Optional[Entry]:
        """Отправляет стих; при успехе добавляет его в начало списка."""
        if self.form_status == FormStatus.SUBMITTING:
            return None

        self.form_status = FormStatus.OPEN
        self.form_title = title or ""
        self.form_body = body or ""
        if not self.form_title.strip() or not self.form_body.strip():
            self.form_message = VALIDATION_ADVISORY
            return None

        self.form_status = FormStatus.SUBMITTING
        self.form_message = None
        try:
            entry = await self.client.submit_entry(title, body)
        except ValidationError:
            self.form_status = FormStatus.OPEN
            self.form_message = VALIDATION_ADVISORY
            return None
        except SubmitFailure:
            self.form_status = FormStatus.OPEN
            self.form_message = SUBMIT_ADVISORY
            return None
        except Exception:
            LOG.exception("submit crashed")
            self.form_status = FormStatus.OPEN
            self.form_message = SUBMIT_ADVISORY
            return None

        self.entries = [entry] + self.entries
        self._reset_form()
        return entry

    # --- для шаблона ---

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(
            state=self.state,
            entries=list(self.entries),
            outcome=self.outcome,
            is_loading=self.is_loading,
            # Пока идёт загрузка, предупреждение не показывается
            advisory=None if self.is_loading else self.advisory,
            form=FormSnapshot(
                status=self.form_status,
                title=self.form_title,
                body=self.form_body,
                message=self.form_message,
            ),
        )
