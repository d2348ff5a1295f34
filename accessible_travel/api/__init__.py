"""HTTP API for the accessible travel app."""
from .routes import router

__all__ = ["router"]
