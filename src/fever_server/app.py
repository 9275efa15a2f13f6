"""Application factory and CLI entry point.

``create_app()`` builds the FastAPI application with:
  - Lifespan handler that loads guideline tables and builds the tracker once
  - CORS middleware
  - Global exception handlers (engine ValueError → 422/409/404/502/400)
  - All API routes mounted under ``/api/v1``
  - A ``/health`` endpoint for readiness probes

The ``cli()`` function is the ``fever-server`` console-script entry point.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fever_engine.guidelines import GuidelineStore
from fever_engine.interfaces import AlertSink
from fever_engine.orchestrator import RiskEscalationOrchestrator
from fever_engine.phase import PhaseAdvisor
from fever_engine.tracker import EpisodeTracker

from fever_server.alerts import LoggingAlertSink, WebhookAlertSink
from fever_server.config import ServerSettings, load_settings
from fever_server.errors import generic_error_handler, value_error_handler
from fever_server.prediction import HttpPredictionService
from fever_server.routes import register_routes
from fever_server.store import InMemoryEpisodeStore

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Lifespan — runs once at startup/shutdown
# ------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialise shared resources at startup, tear down on shutdown.

    Startup:
      1. Load disease-phase YAML tables into a ``GuidelineStore``
      2. Build the orchestrator, prediction client and alert sink
      3. Stash the tracker and episode store on ``app.state``

    Shutdown:
      1. Close the HTTP clients owned by the prediction service and webhook
    """
    settings: ServerSettings = app.state.settings

    # --- Load guidelines ---
    guidelines = GuidelineStore(guideline_dir=settings.guideline_dir)
    guidelines.load()
    logger.info("GuidelineStore loaded successfully")

    # --- Collaborators ---
    predictor = None
    if settings.predict_url:
        predictor = HttpPredictionService(
            settings.predict_url, timeout=settings.predict_timeout,
        )
        logger.info("Prediction service enabled at %s", settings.predict_url)
    else:
        logger.info("No PREDICT_URL configured; phase guidance disabled")

    alert_sink: AlertSink
    if settings.alert_webhook_url:
        alert_sink = WebhookAlertSink(settings.alert_webhook_url)
    else:
        alert_sink = LoggingAlertSink()

    # --- Build tracker ---
    orchestrator = RiskEscalationOrchestrator(PhaseAdvisor(guidelines))
    app.state.guidelines = guidelines
    app.state.tracker = EpisodeTracker(
        orchestrator, predictor=predictor, alert_sink=alert_sink,
    )
    app.state.episode_store = InMemoryEpisodeStore()

    yield

    # --- Shutdown ---
    if predictor is not None:
        await predictor.aclose()
    if isinstance(alert_sink, WebhookAlertSink):
        await alert_sink.aclose()
    logger.info("HTTP clients closed")


# ------------------------------------------------------------------
# Factory
# ------------------------------------------------------------------

def create_app(settings: ServerSettings | None = None) -> FastAPI:
    """Build and return the configured FastAPI application."""
    if settings is None:
        settings = load_settings()

    # --- Configure logging ---
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title="Fever Tracker API Server",
        description="REST API for fever-episode tracking and risk escalation",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store settings so the lifespan handler can read them
    app.state.settings = settings

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Exception handlers ---
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # --- Health check (outside /api/v1 prefix) ---
    @app.get("/health")
    async def health() -> dict:
        """Readiness probe."""
        return {"status": "ok"}

    # --- Mount all API routes ---
    register_routes(app)

    return app


# ------------------------------------------------------------------
# Module-level ASGI export (for uvicorn fever_server.app:app)
# ------------------------------------------------------------------
app = create_app()


# ------------------------------------------------------------------
# CLI entry point
# ------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point: ``fever-server``."""
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        "fever_server.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )
