"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.

This module follows the Hexagonal Architecture pattern:
- Input ports: How the application is driven (services)
- Output ports: How the application drives external systems (adapters)
"""

from .graph import (
    AdjacencyGraph,
    CountryRepositoryPort,
    RouteOutcome,
    RouteSolverPort,
)

__all__ = [
    "AdjacencyGraph",
    "RouteOutcome",
    "CountryRepositoryPort",
    "RouteSolverPort",
]
