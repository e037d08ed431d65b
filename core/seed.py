"""Локальные стихи, которые показываются, когда API недоступен."""
from typing import Tuple

from schemas.poems import Entry, EntryKind


def _poem(title: str, *lines: str) -> Entry:
    return Entry(kind=EntryKind.POEM, title=title, lines=list(lines))


SEED_ENTRIES: Tuple[Entry, ...] = (
    _poem(
        "Ruido de taza",
        "La manana cabe en una taza pequena,",
        "humea lento sobre la mesa,",
        "y en el borde del silencio",
        "se despierta mi nombre.",
    ),
    _poem(
        "Ventana de febrero",
        "La luz entra en puntillas,",
        "como quien no quiere romper nada.",
        "Todo parece quieto,",
        "menos el pulso de las cortinas.",
    ),
    _poem(
        "Papel doblado",
        "Guardo palabras en el bolsillo,",
        "por si el dia se vuelve invierno.",
        "Cuando cae la tarde,",
        "las desdoblo y vuelve el fuego.",
    ),
)
