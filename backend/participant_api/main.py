"""Participant API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ParticipantServiceError → {"error": ...} responses
    - CORS configured from settings (not hardcoded)
    - Store handle built once in the lifespan, kept on app.state, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Health router registered before participants so /health is not
      swallowed by the participant routes
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from participant_api.api.error_handlers import register_error_handlers
from participant_api.api.routes import health, participants
from participant_api.config import get_settings
from participant_api.infrastructure.database import init_db
from participant_api.infrastructure.observability import setup_logging
from participant_api.infrastructure.participant_collection import (
    SqlParticipantCollection,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await db_manager.create_tables()
    app.state.db_manager = db_manager
    app.state.collection = SqlParticipantCollection(
        db_manager, timeout_seconds=settings.store_timeout_seconds,
    )
    logger.info("Participant API started")
    yield
    logger.info("Participant API shutting down")
    await db_manager.close()


app = FastAPI(
    title="Participant API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(participants.router)

register_error_handlers(app)
