from __future__ import annotations

"""
Minimum spanning tree construction for the diversitygraph project.

Kruskal's algorithm over the complete candidate graph, backed by a small
union-find structure.

Ties between equal-weight edges are broken by the (lower id, higher id) pair
of the edge, so for the output of `graph.build_complete_graph` the earliest
generated edge wins. This keeps the tree identical across runs and platforms.

Main entry point:
- kruskal_mst(edges, n_nodes)
"""

from typing import Iterable, List

import logging

from .graph import Edge, total_weight

logger = logging.getLogger(__name__)


class DisconnectedGraphError(RuntimeError):
    """Raised when the candidate edges cannot connect every node."""

    def __init__(self, n_nodes: int, accepted: int) -> None:
        super().__init__(
            f"Graph with {n_nodes} nodes is disconnected: only {accepted} of "
            f"{max(n_nodes - 1, 0)} spanning tree edges could be selected"
        )
        self.n_nodes = n_nodes
        self.accepted = accepted


class UnionFind:
    """
    Disjoint-set forest over the integers 0..n-1.

    `find` compresses paths as it walks; `union` attaches the root of the
    first set to the root of the second.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.parent: List[int] = list(range(n))

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, i: int) -> int:
        root = i
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]

        return root

    def union(self, i: int, j: int) -> bool:
        """Merge the sets of i and j. Returns False if they were already joined."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return False
        self.parent[root_i] = root_j
        return True

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)


def _tie_break_key(edge: Edge):
    return (edge.weight, min(edge.a, edge.b), max(edge.a, edge.b))


def kruskal_mst(edges: Iterable[Edge], n_nodes: int) -> List[Edge]:
    """
    Select a minimum spanning tree from the candidate edges.

    Parameters
    ----------
    edges
        Candidate edges between node ids in [0, n_nodes).
    n_nodes
        Number of nodes the tree has to span.

    Returns
    -------
    list of Edge
        Exactly n_nodes - 1 edges in the order they were accepted (ascending
        weight). Empty for zero or one node.

    Raises
    ------
    ValueError
        If n_nodes is negative or an edge refers to a node outside the range.
    DisconnectedGraphError
        If the edges do not connect all nodes.
    """
    if n_nodes < 0:
        raise ValueError("n_nodes must be non-negative")

    edge_list = list(edges)
    for edge in edge_list:
        if not (0 <= edge.a < n_nodes and 0 <= edge.b < n_nodes):
            raise ValueError(
                f"Edge ({edge.a}, {edge.b}) refers to a node outside 0..{n_nodes - 1}"
            )

    target = max(n_nodes - 1, 0)
    if target == 0:
        return []

    ordered = sorted(edge_list, key=_tie_break_key)
    components = UnionFind(n_nodes)
    tree: List[Edge] = []

    for edge in ordered:
        if components.union(edge.a, edge.b):
            tree.append(edge)
            if len(tree) == target:
                break

    if len(tree) < target:
        raise DisconnectedGraphError(n_nodes, len(tree))

    logger.info(
        "Selected %d MST edges out of %d candidates (total weight %.3f)",
        len(tree),
        len(edge_list),
        total_weight(tree),
    )

    return tree
