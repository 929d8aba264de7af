from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.http.health import router as health_router
from catalog.api.http.items import router as items_router
from catalog.api.http.movies import router as movies_router
from catalog.core.config import settings
from catalog.core.logging_config import setup_logging

setup_logging(settings.log_level, settings.log_file)

app = FastAPI(
    title=settings.app_title,
    description="Каталог элементов и список фильмов с операциями над коллекциями",
    version=settings.app_version
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(items_router)
app.include_router(movies_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": f"{settings.app_title} API",
        "version": settings.app_version,
        "docs": "/docs",
        "health": "/health"
    }
