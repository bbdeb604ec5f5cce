"""
FastAPI application factory for the Outbreak Sandbox API.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from outbreak.api.sessions import SessionManager
from outbreak.api.routers import simulation, metrics, world, experiments

# Load .env from the project root first, then CWD
_project_root = Path(__file__).resolve().parents[3]  # src/outbreak/api/app.py → project root
load_dotenv(_project_root / ".env")
load_dotenv(Path.cwd() / ".env")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title="Outbreak Sandbox API",
        description="REST API for the Outbreak Sandbox epidemic simulation",
        version="0.1.0",
    )

    origins = os.environ.get("OUTBREAK_CORS_ORIGINS", "*").split(",")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in origins if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    max_step_ticks = int(os.environ.get("OUTBREAK_MAX_STEP_TICKS", "10000"))
    application.state.session_manager = SessionManager(max_step_ticks=max_step_ticks)

    application.include_router(simulation.router, prefix="/api/simulation", tags=["simulation"])
    application.include_router(world.router, prefix="/api/world", tags=["world"])
    application.include_router(metrics.router, prefix="/api/metrics", tags=["metrics"])
    application.include_router(experiments.router, prefix="/api/experiments", tags=["experiments"])

    @application.get("/api/health")
    def health_check():
        return {"status": "ok"}

    return application


app = create_app()
