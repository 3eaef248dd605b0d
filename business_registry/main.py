from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging

from business_registry.config import Settings, get_settings
from business_registry.logging_config import setup_logging
from business_registry.storage import JsonRecordStore
from business_registry.core.concurrency import MutationGate
from business_registry.core.identifiers import IdentifierGenerator
from business_registry.core.mutation_engine import MutationEngine
from business_registry.core.query_engine import QueryEngine
from business_registry.api import businesses, system
from business_registry.api.errors import register_exception_handlers
from business_registry.middleware.request_logger import log_requests
from business_registry.seed import sample_businesses

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, ids: Optional[IdentifierGenerator] = None) -> FastAPI:
    """Build the registry API for the given settings"""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    store = JsonRecordStore(
        settings.data_path,
        read_failure_as_empty=settings.STORE_READ_FAILURE_AS_EMPTY,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events"""
        # Startup
        if settings.SEED_ON_START:
            await store.ensure_initialized(sample_businesses())
        logger.info(f"Business registry serving {store.path} ({settings.ENVIRONMENT})")
        yield
        # Shutdown
        logger.info("Business registry stopped")

    app = FastAPI(
        title="Business Registry API",
        description="Udyam business registration directory",
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store
    app.state.mutation_engine = MutationEngine(store, MutationGate(), ids or IdentifierGenerator())
    app.state.query_engine = QueryEngine()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    app.include_router(businesses.router, prefix="/api", tags=["Businesses"])
    app.include_router(system.router, prefix="/api", tags=["System"])

    return app


app = create_app()


def run():
    """Console entry point: serve the module-level app with uvicorn"""
    import uvicorn

    settings = get_settings()
    uvicorn.run("business_registry.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
