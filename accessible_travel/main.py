"""
FastAPI Application Entry Point.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router
from .config import settings


def configure_logging() -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging()

# Create FastAPI app
app = FastAPI(
    title="Accessible Travel API",
    description="Accessible destinations, travel support directory and AI trip planning",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "llm_provider": settings.llm_provider
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "accessible_travel.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
