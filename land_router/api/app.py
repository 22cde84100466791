"""HTTP API exposing land route queries.

GET /routing/{origin}/{destination} returns ``{"route": [...]}``.
Rejected queries answer 400 with ``{"error": message}``; a missing
country dataset answers 503.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..domain.errors import CountryDataError, NoRouteError
from ..services import RoutingService
from .schemas import ErrorResponse, RouteResponse

logger = logging.getLogger(__name__)


def create_app(service: Optional[RoutingService] = None) -> FastAPI:
    """Build the FastAPI application around a routing service.

    Args:
        service: Routing service to query. Defaults to the one from the
            application container.

    Returns:
        The configured FastAPI app. The border graph is loaded when the
        app starts.
    """
    if service is None:
        from ..container import get_container

        service = get_container().resolve(RoutingService)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.routing_service.load()
        logger.info(
            "Routing API ready",
            extra={"countries": app.state.routing_service.country_count},
        )
        yield

    app = FastAPI(title="Land Router API", version="0.1.0", lifespan=lifespan)
    app.state.routing_service = service

    @app.exception_handler(NoRouteError)
    async def handle_no_route(request: Request, exc: NoRouteError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=exc.message).model_dump(),
        )

    @app.exception_handler(CountryDataError)
    async def handle_country_data(request: Request, exc: CountryDataError) -> JSONResponse:
        logger.error("Country data unavailable", extra={"error": str(exc)})
        return JSONResponse(
            status_code=503,
            content=ErrorResponse(error=exc.message).model_dump(),
        )

    @app.get(
        "/routing/{origin}/{destination}",
        response_model=RouteResponse,
        responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    )
    def get_route(origin: str, destination: str, request: Request) -> RouteResponse:
        """Shortest land route between two countries (codes are case-insensitive)."""
        routing_service: RoutingService = request.app.state.routing_service
        route = routing_service.find_route(origin, destination)
        return RouteResponse(route=list(route.path))

    return app
