"""Immutable domain models for the Land Router.

All models are frozen dataclasses with slots. These models have no
external dependencies and represent the core concepts of the
application.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True, slots=True)
class CountryRecord:
    """A country as read from the source dataset.

    Attributes:
        code: Canonical country code (e.g. 'FRA'); may be blank in raw data
        neighbours: Codes of countries sharing a land border, in source order
    """

    code: Optional[str]
    neighbours: Optional[Sequence[str]] = ()

    def __post_init__(self) -> None:
        # Null border lists are stored as an empty tuple
        object.__setattr__(self, "neighbours", tuple(self.neighbours or ()))


@dataclass(frozen=True, slots=True)
class SearchState:
    """A frontier entry of the breadth-first search.

    Attributes:
        country: Code of the country reached by this state
        path: Codes from the origin to ``country`` inclusive
    """

    country: str
    path: tuple[str, ...]

    @classmethod
    def start(cls, origin: str) -> SearchState:
        return cls(country=origin, path=(origin,))

    def step(self, neighbour: str) -> SearchState:
        """Derive the state reached by crossing into ``neighbour``."""
        return SearchState(country=neighbour, path=self.path + (neighbour,))


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Shortest land route between two countries.

    Attributes:
        path: Ordered tuple of country codes, origin and destination included
    """

    path: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("A route contains at least the origin country")

    @property
    def origin(self) -> str:
        return self.path[0]

    @property
    def destination(self) -> str:
        return self.path[-1]

    @property
    def num_hops(self) -> int:
        """Return the number of border crossings."""
        return len(self.path) - 1
