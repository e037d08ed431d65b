import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from core.config import settings
from core.logging import get_logger
from core.remote import create_http_client
from core.seed import SEED_ENTRIES
from routers import health_router, poems_router
from services.store_client import PoemStoreClient
from services.view_state import ViewStateController

# Запросы httpx не должны засорять консоль
logging.getLogger("httpx").setLevel(logging.WARNING)

LOG = get_logger("poems.main")
BASE_DIR = Path(__file__).resolve().parent


def build_controller(http_client) -> ViewStateController:
    client = PoemStoreClient(
        http_client,
        SEED_ENTRIES,
        endpoint=settings.POEMS_API_URL,
        require_kind=settings.POEMS_REQUIRE_KIND,
    )
    return ViewStateController(client, SEED_ENTRIES)


def create_app(http_client=None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = http_client is None
        client = create_http_client() if owned else http_client
        app.state.controller = build_controller(client)
        app.state.controller.mount()
        LOG.info("loading poems from %s", settings.POEMS_API_URL)
        try:
            yield
        finally:
            await app.state.controller.teardown()
            if owned:
                await client.aclose()

    app = FastAPI(title=settings.SITE_TITLE, lifespan=lifespan)
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
    app.include_router(poems_router)
    app.include_router(health_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
