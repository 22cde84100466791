"""HTTP layer - FastAPI application for route queries."""

from .app import create_app
from .schemas import ErrorResponse, RouteResponse

__all__ = ["create_app", "RouteResponse", "ErrorResponse"]
