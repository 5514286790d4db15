from __future__ import annotations

"""
HTML builder for the diversitygraph project.

This module provides the top level pipeline that:

1. Loads the gender and race tables
2. Builds the MST scene (nodes, edges, stats)
3. Constructs a Plotly figure
4. Wraps the figure JSON and the stats panel into a standalone HTML string

Main public entry point:
    build_diversity_html(cfg: DiversityGraphConfig | None = None) -> str
"""

import html
import logging
from typing import List, Optional

from .config import DiversityGraphConfig
from .figure import build_plotly_figure
from .pipeline import SceneContext, build_scene_from_config
from .scoring import StatItem

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# HTML template
# ---------------------------------------------------------------------------

_HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>{title}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <script src="https://cdn.plot.ly/plotly-2.35.2.min.js"></script>
  <link href="https://fonts.googleapis.com/icon?family=Material+Icons" rel="stylesheet" />
  <style>
    html, body {{
      margin: 0;
      padding: 0;
      height: 100%;
      font-family: system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI",
                   sans-serif;
      background: #ffffff;
      color: #1e2230;
    }}
    #root {{
      display: flex;
      flex-direction: column;
      height: 100vh;
    }}
    #stats {{
      display: flex;
      gap: 12px;
      padding: 12px 16px;
      border-bottom: 1px solid #e3e6ef;
    }}
    .stat {{
      display: flex;
      align-items: center;
      gap: 8px;
      padding: 8px 12px;
      border-radius: 8px;
      background: #f4f1fa;
    }}
    .stat .value {{
      font-size: 18px;
      font-weight: 600;
    }}
    .stat .label {{
      font-size: 12px;
      color: #5c6075;
    }}
    #diversity-mst-plot {{
      flex: 1;
      min-height: 0;
    }}
  </style>
</head>
<body>
  <div id="root">
    <section id="stats">
{stats_html}
    </section>
    <div id="diversity-mst-plot"></div>
  </div>

  <script id="plot-data" type="application/json">
{plot_json}
  </script>
  <script>
    var figure = JSON.parse(document.getElementById("plot-data").textContent);
    Plotly.newPlot("diversity-mst-plot", figure.data, figure.layout, {{responsive: true}});
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def _stats_to_html(stats: List[StatItem]) -> str:
    items = []
    for item in stats:
        items.append(
            "      <div class=\"stat\">"
            f"<span class=\"material-icons\">{html.escape(item.icon)}</span>"
            f"<div><div class=\"value\">{html.escape(item.value)}</div>"
            f"<div class=\"label\">{html.escape(item.label)}</div></div>"
            "</div>"
        )
    return "\n".join(items)


def render_scene_html(scene: SceneContext, cfg: DiversityGraphConfig) -> str:
    """
    Serialize the scene's Plotly figure and wrap it in the HTML template.
    """
    fig = build_plotly_figure(scene, cfg)
    plot_json_str = fig.to_json().replace("</", "<\\/")

    plot_json_indented = "\n".join(
        "    " + line for line in plot_json_str.splitlines()
    )

    return _HTML_TEMPLATE.format(
        title=html.escape(cfg.plot_title),
        stats_html=_stats_to_html(scene.stats),
        plot_json=plot_json_indented,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_diversity_html(cfg: Optional[DiversityGraphConfig] = None) -> str:
    """
    Run the full pipeline and return a standalone HTML document as a string.

    Parameters
    ----------
    cfg
        Optional DiversityGraphConfig. If None, a default config is created.

    Returns
    -------
    str
        Complete HTML suitable for writing directly to an index.html file.
    """
    if cfg is None:
        cfg = DiversityGraphConfig()

    logger.info("Starting diversity MST pipeline with config: %s", cfg)

    scene = build_scene_from_config(cfg)
    if scene.is_empty:
        raise ValueError("No company records found; nothing to render")

    document = render_scene_html(scene, cfg)

    logger.info("Diversity MST HTML build complete")

    return document
