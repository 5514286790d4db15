from __future__ import annotations

"""
Data loading utilities for the diversitygraph project.

This module reads the gender, race and occupation tables from disk and turns
them into the flat record sequences the rest of the pipeline consumes (one
dict per row, empty cells as None).

Responsibilities:
- Load CSV or Excel tables with pandas
- Convert DataFrames to lists of flat records
- Accept race tables stored either per company or per race

All file paths are taken from DiversityGraphConfig in config.py. Call
`load_tables(cfg)` as the main entry point.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import logging
import pandas as pd

from .config import COMPANY_KEY, DiversityGraphConfig
from .records import RACE_KEY, group_by_company, invert_race_table

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


@dataclass(frozen=True)
class LoadedTables:
    """Container for the gender and race record sets before merging."""

    gender: List[Record]
    race: List[Record]


# ---------------------------------------------------------------------------
# Low level loaders
# ---------------------------------------------------------------------------


def _load_table_any(path: Path) -> pd.DataFrame:
    """
    Load a table from an Excel or CSV file based on its extension.

    Supported formats:
      - .xlsx / .xls via pandas.read_excel
      - .csv via pandas.read_csv

    Raises FileNotFoundError if the file does not exist, and ValueError for
    unsupported suffixes.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in {".xlsx", ".xls"}:
        logger.info("Loading Excel table from %s", path)
        return pd.read_excel(path)
    if suffix == ".csv":
        logger.info("Loading CSV table from %s", path)
        return pd.read_csv(path)

    raise ValueError(f"Unsupported data file extension '{suffix}' for {path}")


def frame_to_records(df: pd.DataFrame) -> List[Record]:
    """Convert a DataFrame to a list of dicts, with missing cells as None."""
    cleaned = df.astype(object).where(df.notna(), None)
    return cleaned.to_dict(orient="records")


def load_records(path: Path) -> List[Record]:
    """Load any supported table and return its rows as flat records."""
    df = _load_table_any(Path(path))

    logger.info("Loaded table with %d rows and %d columns from %s",
                len(df), df.shape[1], path)

    return frame_to_records(df)


# ---------------------------------------------------------------------------
# Dataset loaders
# ---------------------------------------------------------------------------


def load_gender_records(cfg: DiversityGraphConfig) -> List[Record]:
    """Load the per-company gender table."""
    return load_records(cfg.gender_data_path)


def load_race_records(cfg: DiversityGraphConfig) -> List[Record]:
    """
    Load the race table as per-company records.

    If the table has a `race` column and no `company` column, each row is a
    race and each other column a company; it is inverted with
    records.invert_race_table. If it has both columns, each row is one race
    of one company; rows are summed per company with
    records.group_by_company.
    """
    records = load_records(cfg.race_data_path)
    if not records:
        return records

    columns = set(records[0].keys())
    if RACE_KEY in columns and COMPANY_KEY not in columns:
        logger.info("Race table is stored per race; inverting to per company")
        return invert_race_table(records)
    if RACE_KEY in columns:
        logger.info("Race table has one row per company and race; grouping by company")
        return group_by_company(records)

    return records


def load_occupation_records(cfg: DiversityGraphConfig) -> List[Record]:
    """Load the occupation pay gap table used by the career path graph."""
    return load_records(cfg.occupation_data_path)


def load_tables(cfg: DiversityGraphConfig) -> LoadedTables:
    """
    Load both the gender and race tables according to the configuration.

    Returns
    -------
    LoadedTables
        A simple container with .gender and .race record lists.
    """
    gender = load_gender_records(cfg)
    race = load_race_records(cfg)

    logger.info(
        "Loaded %d gender records and %d race records",
        len(gender),
        len(race),
    )

    return LoadedTables(gender=gender, race=race)
