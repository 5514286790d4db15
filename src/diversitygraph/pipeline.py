from __future__ import annotations

"""
Scene pipeline for the diversitygraph project.

This module runs the full data to scene pipeline:

1. Merge the gender and race record sets on company
2. Build one node per company (attribute vector, circle position, score)
3. Build the complete candidate graph
4. Select the minimum spanning tree
5. Compute the stats panel entries and nearest peers

Everything produced is collected in a SceneContext owned by the caller. The
pipeline keeps no state between calls; rebuilding means calling it again.

Main entry points:
- build_scene(gender_records, race_records, cfg)
- build_scene_from_config(cfg)
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Sequence

import logging

from .config import DiversityGraphConfig
from .data_io import load_tables
from .graph import Edge, Node, build_complete_graph
from .layout import circle_positions
from .mst import kruskal_mst
from .preprocessing import build_attribute_matrix
from .records import merge_records, to_company_records
from .scoring import StatItem, build_stats, diversity_score
from .similarity import build_distance_matrix, nearest_peers

logger = logging.getLogger(__name__)


@dataclass
class SceneContext:
    """All data needed to draw the MST scene."""

    records: List[Mapping[str, Any]] = field(default_factory=list)
    nodes: List[Node] = field(default_factory=list)
    candidate_edges: List[Edge] = field(default_factory=list)
    mst_edges: List[Edge] = field(default_factory=list)
    stats: List[StatItem] = field(default_factory=list)
    peers: List[int] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def clear(self) -> None:
        """Drop everything built for this scene."""
        self.records.clear()
        self.nodes.clear()
        self.candidate_edges.clear()
        self.mst_edges.clear()
        self.stats.clear()
        self.peers.clear()


def _record_fields(cfg: DiversityGraphConfig) -> List[str]:
    """Attribute, gender and race fields in order, each listed once."""
    fields: List[str] = []
    for name in (*cfg.attribute_fields, *cfg.gender_fields, *cfg.race_fields):
        if name not in fields:
            fields.append(name)
    return fields


def build_nodes(
    records: Sequence[Mapping[str, Any]],
    cfg: Optional[DiversityGraphConfig] = None,
) -> List[Node]:
    """
    Build one node per merged record, in record order.

    Records are first parsed into CompanyRecord objects; node i gets id i,
    the i-th circle position, the record's vector in cfg.attribute_fields
    order and its diversity score.
    """
    if cfg is None:
        cfg = DiversityGraphConfig()

    company_records = to_company_records(records, _record_fields(cfg))
    positions = circle_positions(len(company_records), cfg.radius_per_node, cfg.min_radius)
    nodes: List[Node] = []

    for i, (record, position) in enumerate(zip(company_records, positions)):
        nodes.append(
            Node(
                id=i,
                company=record.company,
                position=position,
                attributes=record.vector(cfg.attribute_fields),
                diversity_score=diversity_score(
                    record.attributes,
                    epsilon=cfg.score_epsilon,
                    gender_fields=cfg.gender_fields,
                    race_fields=cfg.race_fields,
                ),
            )
        )

    logger.info("Built %d nodes", len(nodes))

    return nodes


def build_scene(
    gender_records: Iterable[Mapping[str, Any]],
    race_records: Iterable[Mapping[str, Any]],
    cfg: Optional[DiversityGraphConfig] = None,
) -> SceneContext:
    """
    Run the pipeline over already loaded record sets.

    An empty gender table gives an empty SceneContext.
    """
    if cfg is None:
        cfg = DiversityGraphConfig()

    records = merge_records(gender_records, race_records)
    if not records:
        logger.warning("No company records to build a scene from")
        return SceneContext()

    nodes = build_nodes(records, cfg)
    candidate_edges = build_complete_graph(nodes)
    mst_edges = kruskal_mst(candidate_edges, len(nodes))
    stats = build_stats(nodes, mst_edges)
    matrix = build_attribute_matrix(records, cfg.attribute_fields)
    peers = nearest_peers(build_distance_matrix(matrix))

    logger.info(
        "Scene built: %d nodes, %d candidate edges, %d MST edges",
        len(nodes),
        len(candidate_edges),
        len(mst_edges),
    )

    return SceneContext(
        records=records,
        nodes=nodes,
        candidate_edges=candidate_edges,
        mst_edges=mst_edges,
        stats=stats,
        peers=peers,
    )


def build_scene_from_config(cfg: Optional[DiversityGraphConfig] = None) -> SceneContext:
    """Load the gender and race tables named in cfg and build the scene."""
    if cfg is None:
        cfg = DiversityGraphConfig()

    tables = load_tables(cfg)
    return build_scene(tables.gender, tables.race, cfg)
