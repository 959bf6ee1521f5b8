"""
API application factory

create_app() builds the control API without touching any device; the
ServiceContainer that the routes depend on is installed separately via
api.dependencies.set_service_container(), so tests can substitute their own.
"""

from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware.error_handler import register_exception_handlers
from api.routes import device, matrix, state
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.API)

API_PREFIX = "/api/v1"
SERVICE_NAME = "bitdoglab-matrix-api"

# Vite and CRA dev servers
DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def create_app(
    title: str = "BitDogLab Matrix Controller",
    description: str = "Control the BitDogLab 5x5 LED matrix, OLED, buzzer and RGB LED",
    version: str = "1.0.0",
    docs_enabled: bool = True,
    cors_origins: Optional[List[str]] = None
) -> FastAPI:
    """
    Args:
        title: Shown in the OpenAPI docs and on /
        description: OpenAPI description
        version: Reported by /api/health
        docs_enabled: Serve /docs, /redoc and /openapi.json
        cors_origins: Allowed browser origins; None means DEFAULT_CORS_ORIGINS
    """
    docs = {
        "docs_url": "/docs",
        "redoc_url": "/redoc",
        "openapi_url": "/openapi.json",
    }
    if not docs_enabled:
        docs = {key: None for key in docs}

    app = FastAPI(title=title, description=description, version=version, **docs)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins if cors_origins is not None else DEFAULT_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for module in (matrix, device, state):
        app.include_router(module.router, prefix=API_PREFIX)

    @app.get("/api/health", tags=["System"], summary="Liveness check")
    async def health_check():
        return {"status": "healthy", "service": SERVICE_NAME, "version": version}

    @app.get("/", include_in_schema=False)
    async def index():
        return {"message": title, "docs": docs["docs_url"], "health": "/api/health"}

    log.debug("API app created", title=title, version=version, prefix=API_PREFIX)
    return app
