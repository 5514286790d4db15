from __future__ import annotations

"""
Graph construction for the diversitygraph project.

This module defines the node and edge types of the diversity-similarity
graph and builds the complete candidate graph the MST is selected from.

Responsibilities:
- Node and Edge value types
- All N(N-1)/2 candidate edges weighted by attribute distance
- Conversion to a networkx Graph for analysis and export

The complete graph is quadratic in the number of companies. That is fine for
the tens of companies in the source tables, and this module is not meant to
be used on data sets where N(N-1)/2 edges would not fit in memory.

Main entry points:
- build_complete_graph(nodes)
- to_networkx(nodes, edges)
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import logging
import networkx as nx

from .similarity import distance

logger = logging.getLogger(__name__)

Position = Tuple[float, float, float]


@dataclass(frozen=True)
class Node:
    """A company placed in the scene."""

    id: int
    company: str
    position: Position
    attributes: Tuple[float, ...]
    diversity_score: float


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two node ids."""

    a: int
    b: int
    weight: float


def build_complete_graph(nodes: Sequence[Node]) -> List[Edge]:
    """
    Build every candidate edge between the given nodes.

    Edges are produced in (i, j) order with i < j, and the weight of each is
    the Euclidean distance between the two nodes' attribute vectors. Node ids
    are taken from the nodes themselves.

    Returns
    -------
    list of Edge
        Exactly len(nodes) * (len(nodes) - 1) / 2 edges.
    """
    edges: List[Edge] = []
    n = len(nodes)

    for i in range(n):
        for j in range(i + 1, n):
            weight = distance(nodes[i].attributes, nodes[j].attributes)
            edges.append(Edge(a=nodes[i].id, b=nodes[j].id, weight=weight))

    logger.info("Built complete graph: %d nodes, %d edges", n, len(edges))

    return edges


def total_weight(edges: Iterable[Edge]) -> float:
    """Sum of edge weights."""
    return float(sum(e.weight for e in edges))


def to_networkx(nodes: Sequence[Node], edges: Iterable[Edge]) -> nx.Graph:
    """
    Convert nodes and edges into a networkx Graph.

    Nodes are keyed by id and carry `company`, `position` and
    `diversity_score` attributes; edges carry `weight`.
    """
    G = nx.Graph()

    for node in nodes:
        G.add_node(
            node.id,
            company=node.company,
            position=node.position,
            diversity_score=node.diversity_score,
        )

    for edge in edges:
        if edge.a not in G or edge.b not in G:
            logger.warning(
                "Skipping edge (%d, %d) with an endpoint outside the node set",
                edge.a,
                edge.b,
            )
            continue
        G.add_edge(edge.a, edge.b, weight=edge.weight)

    logger.debug(
        "Converted to networkx graph with %d nodes and %d edges",
        G.number_of_nodes(),
        G.number_of_edges(),
    )

    return G
