from __future__ import annotations

"""
Configuration and shared metadata for the diversitygraph project.

This module defines:

- Paths to data files relative to the project root
- Attribute metadata for the gender and race columns
- Layout and scoring constants used when building the MST scene

Most code in the package should import configuration values from here rather
than hard coding paths or constants.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

# Project root is two levels up from this file.
#   project_root/
#     src/
#       diversitygraph/
#         config.py
ROOT_DIR: Path = Path(__file__).resolve().parents[2]
DATA_DIR: Path = ROOT_DIR / "data"

DEFAULT_GENDER_DATA_PATH: Path = DATA_DIR / "tech_diversity_gender.csv"
DEFAULT_RACE_DATA_PATH: Path = DATA_DIR / "tech_diversity_race.csv"
DEFAULT_OCCUPATION_DATA_PATH: Path = DATA_DIR / "occupation_pay_gap.csv"


# ---------------------------------------------------------------------------
# Attribute metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AttributeMeta:
    """Metadata for a single demographic column of a company record."""

    code: str    # Column name in the source tables, e.g. "female"
    name: str    # Human friendly name
    kind: str    # gender or race
    color: str   # Hex color code for visualization


ATTRIBUTES: List[AttributeMeta] = [
    AttributeMeta(code="female", name="Female", kind="gender", color="#3278a0"),
    AttributeMeta(code="male", name="Male", kind="gender", color="#46468c"),
    AttributeMeta(code="white", name="White", kind="race", color="#f4a261"),
    AttributeMeta(code="asian", name="Asian", kind="race", color="#2a9d8f"),
    AttributeMeta(code="latino", name="Latino", kind="race", color="#e76f51"),
    AttributeMeta(code="black", name="Black", kind="race", color="#264653"),
    AttributeMeta(code="multi", name="Multiracial", kind="race", color="#9b5de5"),
    AttributeMeta(code="other", name="Other", kind="race", color="#8d99ae"),
]

# The order of this tuple is the coordinate order of every attribute vector.
ATTRIBUTE_FIELDS: Tuple[str, ...] = tuple(a.code for a in ATTRIBUTES)
GENDER_FIELDS: Tuple[str, ...] = tuple(a.code for a in ATTRIBUTES if a.kind == "gender")
RACE_FIELDS: Tuple[str, ...] = tuple(a.code for a in ATTRIBUTES if a.kind == "race")

ATTRIBUTE_BY_CODE: Dict[str, AttributeMeta] = {a.code: a for a in ATTRIBUTES}

COMPANY_KEY: str = "company"
UNKNOWN_COMPANY: str = "Unknown"


# ---------------------------------------------------------------------------
# Layout and scoring
# ---------------------------------------------------------------------------

DEFAULT_RADIUS_PER_NODE: float = 0.6
DEFAULT_MIN_RADIUS: float = 10.0

# Added to the total deviation so a perfectly balanced company does not
# divide by zero.
DEFAULT_SCORE_EPSILON: float = 0.001

# Ideal share for each gender column, in percent.
IDEAL_GENDER_SHARE: float = 50.0


# ---------------------------------------------------------------------------
# Pipeline configuration
# ---------------------------------------------------------------------------

@dataclass
class DiversityGraphConfig:
    """
    Top level configuration object for the diversity graph pipeline.

    Pass this into the pipeline functions so that tests, scripts, and the
    visualisation lifecycle share the same settings.
    """

    gender_data_path: Path = DEFAULT_GENDER_DATA_PATH
    race_data_path: Path = DEFAULT_RACE_DATA_PATH
    occupation_data_path: Path = DEFAULT_OCCUPATION_DATA_PATH

    attribute_fields: Tuple[str, ...] = ATTRIBUTE_FIELDS
    gender_fields: Tuple[str, ...] = GENDER_FIELDS
    race_fields: Tuple[str, ...] = RACE_FIELDS

    # Layout
    radius_per_node: float = DEFAULT_RADIUS_PER_NODE
    min_radius: float = DEFAULT_MIN_RADIUS

    # Diversity score
    score_epsilon: float = DEFAULT_SCORE_EPSILON

    # Plot and HTML options
    plot_title: str = "Tech Diversity by Gender and Race Minimum Spanning Tree"
    node_color: str = "#ab52d5"
    edge_color: str = "#84d7d9"
    label_color: str = "#a9b5c6"
    show_legend: bool = False

    def attribute_meta_by_code(self) -> Dict[str, AttributeMeta]:
        """Return AttributeMeta for each configured attribute field."""
        return {
            code: ATTRIBUTE_BY_CODE[code]
            for code in self.attribute_fields
            if code in ATTRIBUTE_BY_CODE
        }
