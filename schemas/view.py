from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from .poems import Entry, LoadOutcome


class DisplayState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    DISPLAYING = "displaying"


class FormStatus(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    SUBMITTING = "submitting"


class FormSnapshot(BaseModel):
    status: FormStatus
    title: str = ""
    body: str = ""
    message: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.status != FormStatus.CLOSED

    @property
    def is_submitting(self) -> bool:
        return self.status == FormStatus.SUBMITTING


class ViewSnapshot(BaseModel):
    state: DisplayState
    entries: List[Entry]
    outcome: Optional[LoadOutcome] = None
    is_loading: bool = False
    advisory: Optional[str] = None
    form: FormSnapshot
