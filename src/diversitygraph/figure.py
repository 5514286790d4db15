from __future__ import annotations

"""
Plotly figure construction for the diversitygraph project.

This module builds the interactive 3D figure of the MST scene:

- one marker per company at its circle position
- one line segment per MST edge
- hover text with the company's diversity score, attribute values and
  nearest peer

The main entry point is `build_plotly_figure`, which takes a SceneContext and
a DiversityGraphConfig and returns a Plotly Figure ready for serialization.
"""

from typing import List

import logging
import plotly.graph_objs as go

from .config import DiversityGraphConfig
from .graph import to_networkx
from .pipeline import SceneContext

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_edge_trace(scene: SceneContext, cfg: DiversityGraphConfig) -> go.Scatter3d:
    """
    Build a Scatter3d trace with one segment per MST edge.

    The tree is converted to a networkx graph first so segment endpoints are
    read from node attributes. Segments are separated by None so they render
    as one trace.
    """
    G = to_networkx(scene.nodes, scene.mst_edges)
    edge_x: List = []
    edge_y: List = []
    edge_z: List = []

    for u, v in G.edges():
        x0, y0, z0 = G.nodes[u]["position"]
        x1, y1, z1 = G.nodes[v]["position"]
        edge_x.extend([x0, x1, None])
        edge_y.extend([y0, y1, None])
        edge_z.extend([z0, z1, None])

    return go.Scatter3d(
        x=edge_x,
        y=edge_y,
        z=edge_z,
        mode="lines",
        line=dict(width=3, color=cfg.edge_color),
        hoverinfo="skip",
        name="MST edges",
    )


def _node_hover_text(scene: SceneContext, cfg: DiversityGraphConfig) -> List[str]:
    meta = cfg.attribute_meta_by_code()
    texts: List[str] = []

    for node in scene.nodes:
        parts = [f"<b>{node.company}</b>", f"Diversity score: {node.diversity_score:.3f}"]

        for code, value in zip(cfg.attribute_fields, node.attributes):
            label = meta[code].name if code in meta else code
            parts.append(f"{label}: {value:.1f}%")

        if node.id < len(scene.peers) and scene.peers[node.id] >= 0:
            peer = scene.nodes[scene.peers[node.id]]
            parts.append(f"Most similar: {peer.company}")

        texts.append("<br>".join(parts))

    return texts


def _build_node_trace(scene: SceneContext, cfg: DiversityGraphConfig) -> go.Scatter3d:
    """Build a Scatter3d trace of company markers with labels."""
    return go.Scatter3d(
        x=[n.position[0] for n in scene.nodes],
        y=[n.position[1] for n in scene.nodes],
        z=[n.position[2] for n in scene.nodes],
        mode="markers+text",
        text=[n.company for n in scene.nodes],
        textposition="top center",
        textfont=dict(color=cfg.label_color, size=10),
        hovertext=_node_hover_text(scene, cfg),
        hoverinfo="text",
        marker=dict(size=6, color=cfg.node_color),
        customdata=[n.diversity_score for n in scene.nodes],
        name="companies",
    )


def _build_layout(cfg: DiversityGraphConfig) -> go.Layout:
    hidden_axis = dict(showgrid=False, zeroline=False, showticklabels=False, title="")
    return go.Layout(
        title=dict(text=cfg.plot_title, x=0.5),
        showlegend=cfg.show_legend,
        margin=dict(b=20, l=20, r=20, t=40),
        paper_bgcolor="#ffffff",
        scene=dict(
            xaxis=hidden_axis,
            yaxis=hidden_axis,
            zaxis=hidden_axis,
            aspectmode="data",
            camera=dict(eye=dict(x=0.0, y=0.5, z=1.0)),
        ),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_plotly_figure(scene: SceneContext, cfg: DiversityGraphConfig) -> go.Figure:
    """
    Build the full Plotly figure for a built scene.

    Parameters
    ----------
    scene
        SceneContext returned by pipeline.build_scene.
    cfg
        DiversityGraphConfig with plot title, colors and attribute fields.

    Returns
    -------
    plotly.graph_objs.Figure
        Figure with the edge trace first and the node trace second.
    """
    logger.info(
        "Building Plotly figure for %d nodes and %d MST edges",
        len(scene.nodes),
        len(scene.mst_edges),
    )

    fig = go.Figure(
        data=[_build_edge_trace(scene, cfg), _build_node_trace(scene, cfg)],
        layout=_build_layout(cfg),
    )

    logger.info("Plotly figure construction complete")

    return fig
