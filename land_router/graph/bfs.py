"""Shortest land route using breadth-first search.

Every border crossing costs the same, so the first time BFS reaches the
destination it does so through a path with the fewest hops.
"""

from collections import deque
from typing import Deque, Set

from ..domain.errors import NoRouteError
from ..domain.models import RouteResult, SearchState
from ..ports.graph import AdjacencyGraph, RouteOutcome


def find_route(graph: AdjacencyGraph, origin: str, destination: str) -> RouteOutcome:
    """Compute the shortest land route between two countries.

    Parameters
    ----------
    graph:
        Border graph as produced by ``build_graph``.
    origin:
        Code of the departure country.
    destination:
        Code of the arrival country.

    Returns
    -------
    RouteResult or NoRouteError
        The route from ``origin`` to ``destination`` (inclusive), or the
        error describing why there is none. Errors are returned, not
        raised. Codes are compared as given; callers canonicalize them.
    """
    for code in (origin, destination):
        if code not in graph:
            return NoRouteError.unknown_country(code, origin, destination)

    if origin == destination:
        return RouteResult(path=(origin,))

    visited: Set[str] = {origin}
    queue: Deque[SearchState] = deque([SearchState.start(origin)])

    # each code is enqueued at most once, so the loop is bounded by len(graph)
    while queue:
        state = queue.popleft()

        if state.country == destination:
            return RouteResult(path=state.path)

        for neighbour in graph.get(state.country, ()):
            if neighbour in visited:
                continue
            visited.add(neighbour)
            queue.append(state.step(neighbour))

    return NoRouteError.no_path(origin, destination)
