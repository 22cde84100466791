"""Graph ports - Abstractions for country data and routing.

These protocols define the contracts for graph operations, including
loading the border network and computing shortest land routes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, Sequence, Union

if TYPE_CHECKING:
    from ..domain.errors import NoRouteError
    from ..domain.models import CountryRecord, RouteResult

# Maps country code -> neighbour codes, in source order
AdjacencyGraph = Mapping[str, Sequence[str]]

# Tagged result of a route query: the route, or the reason there is none
RouteOutcome = Union["RouteResult", "NoRouteError"]


class CountryRepositoryPort(Protocol):
    """Port for loading country border data.

    Implementations: adapters/graph/http_repository.py,
    adapters/graph/file_repository.py

    The repository fetches raw country records and builds the
    adjacency graph from them.
    """

    def fetch(self) -> Sequence[CountryRecord]:
        """Fetch raw country records from the data source.

        Returns:
            Country records in source order.
        """
        ...

    def load(self) -> AdjacencyGraph:
        """Load the border graph.

        Returns:
            The graph as a mapping of country codes to neighbours.
        """
        ...

    def clear_cache(self) -> None:
        """Forget any previously loaded graph."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/bfs.py

    The solver computes minimum-hop paths through the border network.
    """

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
        """
        ...

    def try_solve(
        self,
        graph: AdjacencyGraph,
        origin: str,
        destination: str,
    ) -> RouteOutcome:
        """Like solve(), but return the failure instead of raising it."""
        ...
