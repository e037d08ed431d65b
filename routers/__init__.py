from .poems import router as poems_router
from .health import router as health_router

__all__ = ["poems_router", "health_router"]
