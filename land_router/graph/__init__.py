"""Graph-related utilities for representing the land border network.

This subpackage contains modules to build an in-memory graph from
country records and to run path-finding on top of that graph.
"""

from .bfs import find_route
from .build_graph import build_graph

__all__ = ["build_graph", "find_route"]
