"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- HttpCountryRepository: Downloads countries.json over HTTP
- JsonFileCountryRepository: Reads countries.json from disk
- BfsRouteSolver: Finds minimum-hop routes using breadth-first search
"""

from .bfs_solver import BfsRouteSolver
from .file_repository import JsonFileCountryRepository
from .http_repository import HttpCountryRepository

__all__ = ["HttpCountryRepository", "JsonFileCountryRepository", "BfsRouteSolver"]
