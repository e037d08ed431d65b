from fastapi import Request

from services.view_state import ViewStateController


def get_controller(request: Request) -> ViewStateController:
    """Возвращает контроллер страницы, созданный при старте приложения."""
    return request.app.state.controller
