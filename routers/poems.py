from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from core.config import settings
from dependencies.state import get_controller
from schemas import ViewSnapshot
from services.view_state import ViewStateController

router = APIRouter(prefix="", tags=["poems"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

# Через сколько секунд страница перезагрузится, пока стихи ещё грузятся
LOADING_REFRESH_SECONDS = 2


def render_page(request: Request, controller: ViewStateController):
    context = {
        "request": request,
        "view": controller.snapshot(),
        "site": settings.SITE_TEXTS,
        "refresh_seconds": LOADING_REFRESH_SECONDS,
    }
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/", response_class=HTMLResponse)
async def read_root(request: Request, controller: ViewStateController = Depends(get_controller)):
    return render_page(request, controller)


@router.post("/reload")
async def reload_entries(controller: ViewStateController = Depends(get_controller)):
    controller.reload()
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/poems/new", response_class=HTMLResponse)
async def open_form(request: Request, controller: ViewStateController = Depends(get_controller)):
    controller.open_form()
    return render_page(request, controller)


@router.post("/poems/new/close")
async def close_form(controller: ViewStateController = Depends(get_controller)):
    controller.close_form()
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/poems", response_class=HTMLResponse)
async def submit_poem(
    request: Request,
    title: str = Form(""),
    body: str = Form(""),
    controller: ViewStateController = Depends(get_controller),
):
    entry = await controller.submit(title, body)
    if entry is None:
        # Форма остаётся открытой с сообщением об ошибке
        return render_page(request, controller)
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/api/state", response_model=ViewSnapshot)
async def read_state(wait: bool = False, controller: ViewStateController = Depends(get_controller)):
    if wait:
        await controller.wait_loaded()
    return controller.snapshot()
