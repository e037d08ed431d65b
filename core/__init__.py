# core/__init__.py
from .config import settings
from .remote import create_http_client
from .seed import SEED_ENTRIES

__all__ = ["settings", "create_http_client", "SEED_ENTRIES"]
