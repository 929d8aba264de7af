from catalog.api.http.health import router as health_router
from catalog.api.http.items import router as items_router
from catalog.api.http.movies import router as movies_router

__all__ = [
    "health_router",
    "items_router",
    "movies_router"
]
