import re
import time
import unicodedata
from typing import Any, Callable, Iterable, List, Optional

from pydantic import ValidationError as SchemaError

from schemas.poems import Entry, EntryKind, RawEntry

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")
DEFAULT_SLUG = "poema"


def _millis() -> int:
    return int(time.time() * 1000)


class PoemService:
    @staticmethod
    def split_lines(body: str) -> List[str]:
        """Разбивает текст на непустые строки; если строк нет, оставляет текст как есть."""
        lines = [line.strip() for line in _LINE_BREAK.split(body)]
        lines = [line for line in lines if line]
        return lines or [body]

    @staticmethod
    def extract_records(payload: Any) -> Optional[list]:
        """Возвращает список записей из ответа API или None, если форма не подходит."""
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict) and isinstance(payload.get("poems"), list):
            return payload["poems"]
        return None

    @staticmethod
    def parse_raw_entry(record: Any, require_kind: bool = False) -> Optional[RawEntry]:
        if not isinstance(record, dict):
            return None
        try:
            raw = RawEntry.model_validate(record)
        except SchemaError:
            return None
        if require_kind and raw.type is None:
            return None
        return raw

    @staticmethod
    def to_entry(raw: RawEntry) -> Entry:
        kind = raw.type or EntryKind.POEM
        title = raw.title.strip() or None
        return Entry(kind=kind, title=title, lines=PoemService.split_lines(raw.body))

    @staticmethod
    def normalize_entries(records: Iterable[Any], require_kind: bool = False) -> List[Entry]:
        """Отбрасывает битые записи и приводит остальные к Entry, сохраняя порядок."""
        entries = []
        for record in records:
            raw = PoemService.parse_raw_entry(record, require_kind)
            if raw is not None:
                entries.append(PoemService.to_entry(raw))
        return entries

    @staticmethod
    def slugify(title: str, nonce: Optional[Callable[[], int]] = None) -> str:
        """Строит slug вида "niebla-1718000000000" из заголовка."""
        ascii_title = (
            unicodedata.normalize("NFKD", title.lower())
            .encode("ascii", "ignore")
            .decode("ascii")
        )
        base = _SLUG_SEPARATORS.sub("-", ascii_title).strip("-") or DEFAULT_SLUG
        return f"{base}-{(nonce or _millis)()}"
