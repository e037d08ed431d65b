from .state import get_controller

__all__ = ["get_controller"]
