"""
Main application module for the overlap analyzer backend.

This file sets up the FastAPI application, configures CORS so browser
clients can call the API, and exposes a simple health check endpoint.
The overlap router is included under the ``/api`` namespace.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes_overlap import router as overlap_router

# init_db creates the analysis history tables in the SQLite database if
# they do not already exist.
from .services.analyses_store import init_db  # type: ignore


def create_app() -> FastAPI:
    """Factory to create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance.
    """
    app = FastAPI(title="Polygon Overlap Analyzer")

    # Make sure the schema exists before any request is processed.
    # init_db is idempotent.
    @app.on_event("startup")  # type: ignore[misc]
    async def startup_event() -> None:
        init_db()

    # Allow all origins by default.  Restrict this in production.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint for monitoring and deployment probes.
    @app.get("/api/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(overlap_router, prefix="/api", tags=["overlap"])

    return app


# Create the application instance.  Uvicorn will import this when
# running `uvicorn app.main:app` from within the backend directory.
app = create_app()
