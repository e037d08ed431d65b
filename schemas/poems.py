from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictStr


class EntryKind(str, Enum):
    POEM = "poem"
    QUOTE = "quote"


class Entry(BaseModel):
    """Запись в том виде, в котором её показывает страница."""

    model_config = ConfigDict(frozen=True)

    kind: EntryKind = EntryKind.POEM
    title: Optional[str] = None
    lines: List[str] = Field(min_length=1)

    def display_key(self, index: int) -> str:
        return f"{self.kind.value}-{self.title or index}"


class RawEntry(BaseModel):
    """Запись в том виде, в котором её отдаёт API."""

    slug: StrictStr
    title: StrictStr
    body: StrictStr
    created_at: StrictStr
    type: Optional[EntryKind] = Field(
        default=None, validation_alias=AliasChoices("type", "kind")
    )


class PoemCreate(BaseModel):
    slug: str
    title: str
    body: str


class LoadOutcome(str, Enum):
    LOADED = "loaded"
    FALLBACK = "fallback"


class LoadResult(BaseModel):
    entries: List[Entry]
    outcome: LoadOutcome
    # Имя ошибки, из-за которой показаны локальные стихи; пользователю не показывается
    error_kind: Optional[str] = None
