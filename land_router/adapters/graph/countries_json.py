"""Mapping of the ``countries.json`` dataset to country records.

The dataset is a JSON array of country objects. Only two keys matter
here: ``cca3`` (the country code) and ``borders`` (the codes of its land
neighbours). Everything else is ignored.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from ...domain.errors import CountryDataError
from ...domain.models import CountryRecord
from ...graph.build_graph import build_graph
from ...ports.graph import AdjacencyGraph


def parse_countries(raw: Any, source: Optional[str] = None) -> List[CountryRecord]:
    """Map decoded JSON to country records.

    Raises:
        CountryDataError: If the payload is not a JSON array.
    """
    if not isinstance(raw, list):
        raise CountryDataError(
            f"Expected a JSON array of countries, got {type(raw).__name__}",
            source=source,
        )
    return [_to_record(item) for item in raw if isinstance(item, dict)]


def _to_record(item: dict) -> CountryRecord:
    code = item.get("cca3")
    if not isinstance(code, str):
        code = None

    borders = item.get("borders")
    if not isinstance(borders, list):
        borders = []

    return CountryRecord(
        code=code,
        neighbours=[b for b in borders if isinstance(b, str)],
    )


@dataclass
class CachingCountryRepository(ABC):
    """Base repository that builds and caches the graph.

    Subclasses provide fetch().
    """

    _logger: logging.Logger = field(init=False, repr=False)
    _graph: Optional[AdjacencyGraph] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(type(self).__module__)

    @abstractmethod
    def fetch(self) -> Sequence[CountryRecord]:
        """Read the raw country records from the data source."""

    def load(self) -> AdjacencyGraph:
        """Load the border graph, fetching the data on first use.

        Returns:
            The graph as a mapping of country codes to neighbours.

        Raises:
            CountryDataError: If the data cannot be fetched or parsed.
        """
        if self._graph is not None:
            return self._graph

        records = self.fetch()
        graph = build_graph(records)
        self._graph = graph
        self._logger.info(
            "Border graph built",
            extra={"records": len(records), "countries": len(graph)},
        )
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
