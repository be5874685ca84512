"""
Argo Explorer Backend API

FastAPI application entry point.  ``create_app`` builds one entity store,
history log and query executor per application and keeps them on
``app.state``; routers reach them through ``argo_explorer.api.deps``.

Run with:
    uvicorn argo_explorer.main:app
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Optional

import sentry_sdk
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration

from argo_explorer import __version__
from argo_explorer.api.v1 import router as v1_router
from argo_explorer.config import settings
from argo_explorer.query.classifier import Classifier, classify
from argo_explorer.query.executor import QueryExecutor
from argo_explorer.store.entity_store import EntityStore
from argo_explorer.store.history import HistoryLog
from argo_explorer.store.seed import seed_sample_data


# =============================================================================
# Logging
# =============================================================================
def configure_logging() -> None:
    """
    Route structlog and stdlib records through one JSON renderer on stdout.

    Store events carry ``float_id`` / ``depth``, executor events carry
    ``query_type``; ``store_op`` timings only show at ``LOG_LEVEL=DEBUG``.
    """
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.LOG_LEVEL.upper())
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def configure_sentry() -> None:
    """Report unhandled route errors to Sentry when ``SENTRY_DSN`` is set."""
    if not settings.SENTRY_DSN:
        return
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        integrations=[FastApiIntegration(transaction_style="endpoint")],
        traces_sample_rate=0.1,
        environment="development" if settings.DEBUG else "production",
        release=f"argo-explorer@{__version__}",
    )
    structlog.get_logger().info("sentry_initialized", service=settings.SERVICE_NAME)


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler for startup and shutdown events.
    """
    configure_logging()
    configure_sentry()

    if app.state.seed_on_startup:
        seed_sample_data(app.state.store)

    logger = structlog.get_logger()
    logger.info(
        "application_startup",
        app_name=settings.SERVICE_NAME,
        debug=settings.DEBUG,
        floats=app.state.store.count_floats(),
        measurements=app.state.store.count_measurements(),
    )

    yield

    logger.info("application_shutdown")


# =============================================================================
# Application Factory
# =============================================================================
def create_app(
    store: Optional[EntityStore] = None,
    history: Optional[HistoryLog] = None,
    classifier: Classifier = classify,
    seed: Optional[bool] = None,
) -> FastAPI:
    """
    Build the FastAPI application around one set of store objects.

    When *store* is omitted a fresh ``EntityStore`` is created and, if
    *seed* (default ``SEED_SAMPLE_DATA``) is true, loaded with sample data
    at startup, after logging is configured.
    """
    app = FastAPI(
        title=settings.SERVICE_NAME,
        description="Argo float data store with chat-style query routing",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    if seed is None:
        seed = settings.SEED_SAMPLE_DATA
    app.state.seed_on_startup = seed and store is None
    store = store if store is not None else EntityStore()
    history = history if history is not None else HistoryLog()

    app.state.store = store
    app.state.history = history
    app.state.executor = QueryExecutor(store, history, classifier=classifier)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    async def health_check() -> JSONResponse:
        """
        Health check endpoint for load balancers and monitoring.
        """
        return JSONResponse(
            content={
                "status": "ok",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "service": settings.SERVICE_NAME,
            },
            status_code=200,
        )

    app.add_api_route("/health", health_check, methods=["GET"], tags=["Health"])
    app.add_api_route("/api/v1/health", health_check, methods=["GET"], include_in_schema=False)
    app.include_router(v1_router, prefix="/api/v1")
    return app


app = create_app()
