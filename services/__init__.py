from .poem_service import PoemService
from .store_client import PoemStoreClient
from .view_state import ViewStateController

__all__ = ["PoemService", "PoemStoreClient", "ViewStateController"]
