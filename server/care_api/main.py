"""Care Companion API - FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .database import DatabaseManager
from .routes import (
    ai,
    appointments,
    auth,
    dashboard,
    medications,
    reports,
    sos,
    vitals,
    womens,
)

load_dotenv()

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API with its own settings and database manager."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.db.initialize()
        logger.info(f"[STARTUP] Care API ready, data at {settings.data_path}")
        yield

    app = FastAPI(
        title="Care Companion API",
        description="Medication, vitals, appointments, reports and SOS tracking",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = DatabaseManager(settings)

    # Configure CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(auth.router)
    app.include_router(medications.router)
    app.include_router(vitals.router)
    app.include_router(appointments.router)
    app.include_router(reports.router)
    app.include_router(sos.router)
    app.include_router(dashboard.router)
    app.include_router(womens.router)
    app.include_router(ai.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint for the API."""
        return {"status": "healthy", "service": "care-api"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "server.care_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
