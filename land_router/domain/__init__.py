"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    CountryDataError,
    LandRouterError,
    NoRouteError,
    NoRouteKind,
)
from .models import CountryRecord, RouteResult, SearchState

__all__ = [
    # Models
    "CountryRecord",
    "SearchState",
    "RouteResult",
    # Errors
    "LandRouterError",
    "NoRouteError",
    "NoRouteKind",
    "CountryDataError",
    "ConfigurationError",
]
