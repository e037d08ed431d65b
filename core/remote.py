import httpx

from core.config import settings


def create_http_client(transport: httpx.AsyncBaseTransport = None) -> httpx.AsyncClient:
    """Создаёт общий клиент для API стихов."""
    return httpx.AsyncClient(
        timeout=settings.POEMS_API_TIMEOUT,
        headers={"Accept": "application/json"},
        transport=transport,
    )
