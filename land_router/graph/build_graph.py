"""Graph construction from country records.

The adjacency graph is a read-only mapping built in a single pass.
Duplicate codes keep their first occurrence; records without a code
are dropped.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Tuple

from ..domain.models import CountryRecord
from ..ports.graph import AdjacencyGraph


def build_graph(records: Iterable[CountryRecord]) -> AdjacencyGraph:
    """Build the border graph from country records.

    Parameters
    ----------
    records:
        Country records in source order.

    Returns
    -------
    AdjacencyGraph
        Read-only mapping from country code to its neighbour codes.
        Records whose code is missing or blank are dropped. When a code
        appears more than once, the first record wins and later ones are
        discarded, not merged. Missing neighbour lists become empty.
        Neighbour codes are not required to be keys of the graph.
    """
    graph: Dict[str, Tuple[str, ...]] = {}

    for record in records:
        code = record.code
        if not code or not code.strip():
            continue
        # first occurrence wins, later duplicates are discarded
        if code in graph:
            continue
        graph[code] = tuple(record.neighbours or ())

    return MappingProxyType(graph)
