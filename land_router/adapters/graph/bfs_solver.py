"""BFS Route Solver adapter.

This adapter wraps graph/bfs.py and adds:
- Raising errors at the boundary (the core returns them as values)
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoRouteError
from ...domain.models import RouteResult
from ...graph.bfs import find_route
from ...ports.graph import AdjacencyGraph, RouteOutcome


@dataclass
class BfsRouteSolver:
    """Route solver using breadth-first search.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: AdjacencyGraph,
        origin: str,
        destination: str,
    ) -> RouteResult:
        """Find the shortest land route between two countries.

        Args:
            graph: The border graph.
            origin: Origin country code.
            destination: Destination country code.

        Returns:
            RouteResult with the path from origin to destination.

        Raises:
            NoRouteError: If a code is unknown or no land route exists.
        """
        outcome = self.try_solve(graph, origin, destination)
        if isinstance(outcome, NoRouteError):
            raise outcome
        return outcome

    def try_solve(
        self,
        graph: AdjacencyGraph,
        origin: str,
        destination: str,
    ) -> RouteOutcome:
        """Find the shortest land route, returning the error on failure.

        Args:
            graph: The border graph.
            origin: Origin country code.
            destination: Destination country code.

        Returns:
            RouteResult, or NoRouteError describing why there is no route.
        """
        self._logger.debug(
            "Solving route",
            extra={"origin": origin, "destination": destination},
        )

        outcome = find_route(graph, origin, destination)

        if isinstance(outcome, NoRouteError):
            self._logger.info(
                "No route",
                extra={
                    "origin": origin,
                    "destination": destination,
                    "kind": outcome.kind.value,
                },
            )
        else:
            self._logger.info(
                "Route found",
                extra={
                    "origin": origin,
                    "destination": destination,
                    "hops": outcome.num_hops,
                },
            )
        return outcome
