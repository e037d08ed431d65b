from .poems import Entry, EntryKind, RawEntry, PoemCreate, LoadOutcome, LoadResult
from .view import DisplayState, FormStatus, FormSnapshot, ViewSnapshot

__all__ = [
    "Entry", "EntryKind", "RawEntry", "PoemCreate", "LoadOutcome", "LoadResult",
    "DisplayState", "FormStatus", "FormSnapshot", "ViewSnapshot",
]
