"""
AlgoConfig Backend - FastAPI Application

REST API for managing algorithm configurations, persisted to a JSON file.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, get_settings
from app.routers import configs, health
from app.services.config_store import ConfigStore

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": ...}`` or ``{"errors": {...}}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
            message = "Route not found"
        elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            message = "Method not allowed"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Only reachable for malformed bodies; field rules are applied by the service
        errors = {}
        for err in exc.errors():
            if err.get("type") == "json_invalid":
                field = "body"
            else:
                field = ".".join(str(part) for part in err.get("loc", ())) or "body"
            errors[field] = err.get("msg", "Invalid value")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"errors": errors},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application around a configuration store."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Startup:
        - Create the configuration store and load the backing file

        Shutdown:
        - Nothing to flush; every mutation has already persisted
        """
        logger.info(f"Starting up {settings.app_name}...")
        store = ConfigStore(settings.data_file)
        store.load()
        app.state.config_store = store

        yield

        logger.info(f"Shutting down {settings.app_name}...")

    app = FastAPI(
        title=settings.app_name,
        description="""
## Algorithm Configuration API

Create, inspect and edit the parameter sets used by the trading algorithms.

### Resources
- **Configs**: `GET/POST /configs`, `GET/PUT/DELETE /configs/{id}`, `GET /configs/stats`
- **Health**: `GET /health`

### Errors
- `404 {"error": "..."}` for unknown ids and routes
- `422 {"errors": {"field": "message"}}` for invalid payloads
        """,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(configs.router)

    @app.get("/", tags=["Root"])
    def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()
