from __future__ import annotations

"""
Career path search over the occupation pay gap table.

Each occupation record links a broad job type to one of its subtypes. The
resulting undirected graph is weighted by the size of the gender pay gap, so
the cheapest path between two occupations is the route that crosses the
smallest gaps.

Main entry points:
- build_career_graph(records)
- shortest_career_path(graph, start, end)
"""

from typing import Any, Iterable, List, Mapping, Sequence

import logging
import networkx as nx

from .preprocessing import parse_number

logger = logging.getLogger(__name__)

JOB_TYPE_KEY = "job_type"
JOB_SUBTYPE_KEY = "job_subtype"
PAY_GAP_KEY = "pay_gap"


def _clean_name(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def build_career_graph(records: Iterable[Mapping[str, Any]]) -> nx.Graph:
    """
    Build the occupation graph from pay gap records.

    Every record adds an edge job_type <-> job_subtype whose weight is the
    absolute pay gap; negative gaps are stored by magnitude since Dijkstra
    needs non-negative weights. Records missing either name are skipped.
    A later record for the same pair replaces the earlier weight.
    """
    G = nx.Graph()
    skipped = 0

    for record in records:
        job_type = _clean_name(record.get(JOB_TYPE_KEY))
        job_subtype = _clean_name(record.get(JOB_SUBTYPE_KEY))

        if not job_type or not job_subtype:
            skipped += 1
            continue

        pay_gap = parse_number(record.get(PAY_GAP_KEY))
        G.add_edge(job_type, job_subtype, weight=abs(pay_gap), pay_gap=pay_gap)

    if skipped:
        logger.warning(
            "Skipped %d occupation records without job_type or job_subtype",
            skipped,
        )

    logger.info(
        "Built career graph with %d occupations and %d links",
        G.number_of_nodes(),
        G.number_of_edges(),
    )

    return G


def shortest_career_path(G: nx.Graph, start: str, end: str) -> List[str]:
    """
    Return the lowest-cost path from start to end, both included.

    Returns an empty list if the two occupations are not connected.

    Raises
    ------
    KeyError
        If start or end is not an occupation in the graph.
    """
    for name in (start, end):
        if name not in G:
            raise KeyError(f"Unknown occupation: {name!r}")

    try:
        path = nx.dijkstra_path(G, start, end, weight="weight")
    except nx.NetworkXNoPath:
        logger.info("No career path from %r to %r", start, end)
        return []

    logger.debug("Career path %r -> %r: %s", start, end, " > ".join(path))

    return list(path)


def career_path_cost(G: nx.Graph, path: Sequence[str]) -> float:
    """Total edge weight along a path returned by shortest_career_path."""
    return float(
        sum(G[u][v]["weight"] for u, v in zip(path[:-1], path[1:]))
    )
