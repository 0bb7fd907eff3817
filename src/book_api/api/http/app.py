"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from loguru import logger
from starlette.responses import JSONResponse

from src.book_api.api.http.app_data import ApplicationDependencies
from src.book_api.api.http.errors import register_exception_handlers
from src.book_api.api.http.routers.books import router as books_router
from src.book_api.api.http.routers.health import router as health_router
from src.book_api.api.utils.app_startup import configure_logging
from src.book_api.core.services import DbSessionService
from src.book_api.runtime.context import get_config

__all__ = ["app", "create_app", "startup", "shutdown"]


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"error": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


# --- Lifecycle hooks ---
async def startup(app: FastAPI) -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    deps: ApplicationDependencies | None = getattr(app.state, "app_dependencies", None)
    if deps is None:
        deps = ApplicationDependencies(
            database_service=DbSessionService(config.database)
        )
        app.state.app_dependencies = deps

    if config.database.create_tables:
        deps.database_service.create_all()


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    deps: ApplicationDependencies | None = getattr(app.state, "app_dependencies", None)
    if deps is not None:
        deps.database_service.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


def create_app(database_service: DbSessionService | None = None) -> FastAPI:
    """Build the application.

    ``database_service`` is used as the store when given; otherwise one is
    built from the configuration during startup.
    """
    config = get_config()
    configure_logging(config)

    docs_enabled = config.docs_enabled
    application = FastAPI(
        title=config.app.title,
        version=config.app.version,
        description=config.app.description,
        servers=[{"url": config.app.base_url, "description": "Local server"}],
        lifespan=lifespan,
        docs_url=config.docs.url if docs_enabled else None,
        redoc_url=config.docs.redoc_url if docs_enabled else None,
    )

    if database_service is not None:
        application.state.app_dependencies = ApplicationDependencies(
            database_service=database_service
        )

    application.middleware("http")(log_requests)
    register_exception_handlers(application)

    application.include_router(health_router)
    application.include_router(books_router)

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # We handle access logging in middleware
    )
