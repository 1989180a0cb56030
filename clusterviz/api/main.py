"""FastAPI application entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import LLM_MODEL, has_openai
from ..orchestrator import AnalysisOrchestrator


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle events."""
    # Startup: one orchestrator holds the current run state
    app.state.orchestrator = AnalysisOrchestrator()
    if has_openai():
        print(f"AI commentary enabled (model: {LLM_MODEL})")
    else:
        print("OPENAI_API_KEY not set. Analyses will run without AI commentary.")

    yield

    # Shutdown
    print("Shutting down Clustering Visualizer API.")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Clustering Visualizer API",
        description="Compare clustering algorithms on 2-D datasets with AI-powered analysis.",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS - allow the front-end dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",  # Vite dev server
            "http://localhost:3000",  # Alternative
            "http://127.0.0.1:5173",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    from .routes import analysis, datasets
    app.include_router(datasets.router, prefix="/api")
    app.include_router(analysis.router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Clustering Visualizer API",
            "version": __version__,
            "status": "running",
            "docs": "/docs",
            "health": "/api/health",
            "endpoints": {
                "datasets": "/api/datasets",
                "analyze": "/api/analyze",
                "upload": "/api/analyze/upload",
                "analysis": "/api/analysis",
            },
        }

    @app.get("/api/health")
    async def health():
        return {
            "status": "ok",
            "llm_configured": has_openai(),
            "run_status": app.state.orchestrator.state.status.value,
        }

    return app


# For uvicorn direct run
app = create_app()
