"""
diversitygraph package.

This package builds a diversity-similarity graph of technology companies from
their gender and race breakdowns. It is organized into small modules for:

- loading the gender, race and occupation tables (data_io)
- merging and reshaping company records (records)
- parsing numbers and building attribute vectors (preprocessing)
- distance calculations (similarity)
- node/edge types and the complete candidate graph (graph)
- Kruskal minimum spanning tree with union-find (mst)
- circular node layout (layout)
- diversity scores and stats panel entries (scoring)
- the end to end scene pipeline (pipeline)
- visualisation lifecycle and gallery (visualisation)
- career path search over occupation pay gaps (career_path)
- Plotly figure construction (figure)
- building a complete HTML document for the visualization (html_builder)

The main public entry points are `build_scene`, which runs the pipeline over
in-memory record sets, and `build_diversity_html`, which loads the configured
tables and returns an HTML string ready to write to index.html.
"""

from .html_builder import build_diversity_html
from .pipeline import SceneContext, build_scene

__all__ = ["SceneContext", "build_diversity_html", "build_scene"]
