"""Todo API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoApiError → JSON responses
    - CORS and body limit configured from settings (not hardcoded)
    - MongoDB client opened on startup and closed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app factory: tests build an app with their own Settings
    - Client manager and repository live on app.state, injected through
      api/dependencies.py (no module-level connection)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api import __version__
from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.middleware import BodySizeLimitMiddleware
from todo_api.api.routes import health, todos
from todo_api.config import Settings, get_settings
from todo_api.infrastructure.database import MongoClientManager
from todo_api.infrastructure.observability import setup_logging
from todo_api.infrastructure.todo_repository import MongoTodoRepository

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app for the given settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = MongoClientManager(
            settings.mongo_url,
            settings.mongo_database,
            server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
        )
        await db_manager.connect()
        app.state.db_manager = db_manager
        app.state.todo_repository = MongoTodoRepository(
            db_manager.collection(settings.mongo_collection),
        )
        logger.info(f"Server is running on port {settings.port}")
        try:
            yield
        finally:
            logger.info("Todo API shutting down")
            await db_manager.close()

    app = FastAPI(title="Todo API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes,
    )
    # CORS outermost so error responses carry the headers too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.include_router(health.router)
    app.include_router(todos.router)

    register_error_handlers(app)
    return app


app = create_app()
