from __future__ import annotations

"""
Diversity scoring and summary statistics for the diversitygraph project.

The diversity score is a heuristic: the inverse of how far a company's
gender split is from 50/50 plus how far its race split is from an equal
share across the race categories. Higher means closer to balanced.

    gender_deviation = |female - 50| + |male - 50|
    ideal_race       = sum(race) / len(race categories)
    race_deviation   = sum(|race_k - ideal_race|)
    score            = 1 / (gender_deviation + race_deviation + epsilon)

Main entry points:
- diversity_score(record)
- build_stats(nodes, mst_edges)
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence

import logging

import numpy as np

from .config import (
    DEFAULT_SCORE_EPSILON,
    GENDER_FIELDS,
    IDEAL_GENDER_SHARE,
    RACE_FIELDS,
)
from .graph import Edge, Node
from .preprocessing import parse_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatItem:
    """One entry of the stats panel."""

    icon: str
    value: str
    label: str


# ---------------------------------------------------------------------------
# Diversity score
# ---------------------------------------------------------------------------


def gender_deviation(
    record: Mapping[str, Any],
    gender_fields: Sequence[str] = GENDER_FIELDS,
) -> float:
    """Sum of absolute distances of each gender share from 50%."""
    return float(
        sum(abs(parse_number(record.get(f)) - IDEAL_GENDER_SHARE) for f in gender_fields)
    )


def race_deviation(
    record: Mapping[str, Any],
    race_fields: Sequence[str] = RACE_FIELDS,
) -> float:
    """Sum of absolute distances of each race share from an equal split."""
    if not race_fields:
        return 0.0

    values = [parse_number(record.get(f)) for f in race_fields]
    ideal = sum(values) / len(values)

    return float(sum(abs(v - ideal) for v in values))


def diversity_score(
    record: Mapping[str, Any],
    epsilon: float = DEFAULT_SCORE_EPSILON,
    gender_fields: Sequence[str] = GENDER_FIELDS,
    race_fields: Sequence[str] = RACE_FIELDS,
) -> float:
    """
    Balance score of one merged company record.

    A perfectly balanced record scores 1 / epsilon, which is the maximum.
    """
    if epsilon <= 0:
        raise ValueError("epsilon must be positive")

    total = gender_deviation(record, gender_fields) + race_deviation(record, race_fields)
    return 1.0 / (total + epsilon)


# ---------------------------------------------------------------------------
# Summary statistics
# ---------------------------------------------------------------------------


def build_stats(nodes: Sequence[Node], mst_edges: Sequence[Edge]) -> List[StatItem]:
    """
    Summarize a built scene for the stats panel.

    Returns three items: average diversity score (2 decimals), total MST
    length and largest MST edge weight (1 decimal each). A scene with a
    single node has no edges and reports 0.0 for the last two.
    """
    if not nodes:
        raise ValueError("Cannot summarize a scene without nodes")

    scores = np.array([n.diversity_score for n in nodes], dtype=float)
    weights = np.array([e.weight for e in mst_edges], dtype=float)

    average_score = float(scores.mean())
    total_length = float(weights.sum()) if weights.size else 0.0
    longest_edge = float(weights.max()) if weights.size else 0.0

    logger.info(
        "Scene stats: average score %.4f, MST length %.3f, longest edge %.3f",
        average_score,
        total_length,
        longest_edge,
    )

    return [
        StatItem(icon="star", value=f"{average_score:.2f}", label="Average Diversity Score"),
        StatItem(icon="timeline", value=f"{total_length:.1f}", label="Total MST Length"),
        StatItem(icon="arrow_upward", value=f"{longest_edge:.1f}", label="Largest Difference"),
    ]
