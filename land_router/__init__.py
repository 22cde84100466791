"""Top-level package for the Land Router project.

This package answers "shortest land route between two countries"
queries. Country border data is turned into an adjacency graph which
is then searched breadth-first for the route with the fewest border
crossings.
"""

__version__ = "0.1.0"
