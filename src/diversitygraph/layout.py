from __future__ import annotations

"""
Node layout for the diversitygraph project.

Companies are placed evenly around a circle in the x-z plane (y = 0), in
record order, starting on the positive x axis. The radius grows with the
number of companies so crowded scenes stay readable, but never drops below
a minimum so small scenes do not collapse onto the origin.

Positions carry no meaning beyond ordering: similarity is shown by the MST
edges drawn between them, not by distance on the circle.

Main entry point:
- circle_positions(n, radius_per_node, min_radius)
"""

from typing import List, Tuple

import logging

import numpy as np

from .config import DEFAULT_MIN_RADIUS, DEFAULT_RADIUS_PER_NODE

logger = logging.getLogger(__name__)


def layout_radius(
    n: int,
    radius_per_node: float = DEFAULT_RADIUS_PER_NODE,
    min_radius: float = DEFAULT_MIN_RADIUS,
) -> float:
    """Circle radius for n nodes: grows with n but never below min_radius."""
    return max(n * radius_per_node, min_radius)


def circle_positions(
    n: int,
    radius_per_node: float = DEFAULT_RADIUS_PER_NODE,
    min_radius: float = DEFAULT_MIN_RADIUS,
) -> List[Tuple[float, float, float]]:
    """
    Place n nodes evenly on a circle in the x-z plane.

    Node i sits at angle i * 2*pi / n with y = 0.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return []

    radius = layout_radius(n, radius_per_node, min_radius)
    angles = np.arange(n) * (2.0 * np.pi / n)

    positions = [
        (float(radius * np.cos(angle)), 0.0, float(radius * np.sin(angle)))
        for angle in angles
    ]

    logger.debug("Placed %d nodes on a circle of radius %.2f", n, radius)

    return positions
