"""Routing service - Main orchestrator.

Owns the current border graph and answers route queries against it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from ..domain.models import RouteResult
from ..ports.graph import AdjacencyGraph, CountryRepositoryPort, RouteSolverPort


def canonical_code(code: str) -> str:
    """Normalize a user-supplied country code (e.g. ' fra' -> 'FRA')."""
    return code.strip().upper()


@dataclass
class RoutingService:
    """Main service for land route queries.

    The graph is held behind a single reference. Queries read it once
    and keep using that snapshot; refresh() builds a new graph aside and
    replaces the reference in one assignment, so readers never see a
    partially built graph and never take the lock.

    Attributes:
        repository: Loads country data and builds the graph
        route_solver: Computes shortest routes
    """

    repository: CountryRepositoryPort
    route_solver: RouteSolverPort

    _graph: Optional[AdjacencyGraph] = field(default=None, init=False, repr=False)
    _refresh_lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def is_loaded(self) -> bool:
        return self._graph is not None

    @property
    def country_count(self) -> int:
        graph = self._graph
        return len(graph) if graph is not None else 0

    @property
    def graph(self) -> AdjacencyGraph:
        """Return the current graph, loading it on first access."""
        graph = self._graph
        if graph is None:
            graph = self.load()
        return graph

    def load(self) -> AdjacencyGraph:
        """Load the graph if no graph has been loaded yet.

        Raises:
            CountryDataError: If the country data cannot be obtained.
        """
        with self._refresh_lock:
            if self._graph is None:
                self._graph = self.repository.load()
                self._logger.info(
                    "Loaded border graph",
                    extra={"countries": len(self._graph)},
                )
            return self._graph

    def refresh(self) -> AdjacencyGraph:
        """Rebuild the graph from fresh data and swap it in.

        On failure the previous graph stays in place and the error is
        re-raised.

        Raises:
            CountryDataError: If the country data cannot be obtained.
        """
        with self._refresh_lock:
            self.repository.clear_cache()
            try:
                graph = self.repository.load()
            except Exception:
                self._logger.exception("Failed to refresh border graph")
                raise
            self._graph = graph
            self._logger.info(
                "Refreshed border graph",
                extra={"countries": len(graph)},
            )
            return graph

    def find_route(self, origin: str, destination: str) -> RouteResult:
        """Find the shortest land route between two countries.

        Codes are stripped and upper-cased before the lookup.

        Args:
            origin: Origin country code, any case.
            destination: Destination country code, any case.

        Returns:
            RouteResult with the route.

        Raises:
            NoRouteError: If a code is unknown or no land route exists.
            CountryDataError: If the graph has to be loaded and that fails.
        """
        return self.route_solver.solve(
            self.graph,
            canonical_code(origin),
            canonical_code(destination),
        )
