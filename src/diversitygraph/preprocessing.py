from __future__ import annotations

"""
Preprocessing utilities for the diversitygraph project.

This module is responsible for:

- Parsing loosely formatted numeric values from the source tables
- Extracting a fixed-order attribute vector from each merged company record
- Stacking those vectors into a numeric matrix for distance calculations

The source tables store percentages as strings ("36.33", " 12 ", "4.1%"),
numbers, or leave cells empty. Everything that cannot be read as a finite
number is treated as zero; sparse company data relies on that.

The main public entry points are `attribute_vector` and
`build_attribute_matrix`.
"""

from typing import Any, Iterable, Mapping, Sequence, Tuple

import logging
import math
import re

import numpy as np

from .config import ATTRIBUTE_FIELDS

logger = logging.getLogger(__name__)

# Leading decimal number, optionally signed and with an exponent.
_LEADING_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


# ---------------------------------------------------------------------------
# Number parsing
# ---------------------------------------------------------------------------


def parse_number(value: Any) -> float:
    """
    Parse a single cell value into a float, returning 0.0 when it is invalid.

    Strings are read from their leading numeric prefix after stripping
    whitespace, so "12.5%" becomes 12.5 and "abc" becomes 0.0. Booleans,
    None, NaN and infinities all map to 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float, np.integer, np.floating)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value.strip())
        if not match:
            return 0.0
        number = float(match.group(0))
    else:
        return 0.0

    if not math.isfinite(number):
        return 0.0

    return number


# ---------------------------------------------------------------------------
# Attribute vectors
# ---------------------------------------------------------------------------


def attribute_vector(
    record: Mapping[str, Any],
    fields: Sequence[str] = ATTRIBUTE_FIELDS,
) -> Tuple[float, ...]:
    """
    Extract the attribute vector of one merged company record.

    Parameters
    ----------
    record
        Flat mapping of column name to raw value, usually the output of
        `records.merge_records`.
    fields
        Ordered column names. Coordinate i of the result is always
        fields[i], so the same sequence must be used for every record that
        will be compared.

    Returns
    -------
    tuple of float
        One value per field; absent or unparseable values are 0.0.
    """
    values = []
    for name in fields:
        if name not in record:
            logger.debug(
                "Record %r has no '%s' field; using 0",
                record.get("company"),
                name,
            )
        values.append(parse_number(record.get(name)))

    return tuple(values)


def build_attribute_matrix(
    records: Iterable[Mapping[str, Any]],
    fields: Sequence[str] = ATTRIBUTE_FIELDS,
) -> np.ndarray:
    """
    Build a (n_records, n_fields) matrix of attribute vectors.

    Rows follow the order of `records`; columns follow `fields`.
    """
    if not fields:
        raise ValueError("fields must not be empty")

    rows = [attribute_vector(record, fields) for record in records]

    if not rows:
        return np.zeros((0, len(fields)), dtype=float)

    matrix = np.asarray(rows, dtype=float)

    logger.info(
        "Built attribute matrix for %d records with %d fields",
        matrix.shape[0],
        matrix.shape[1],
    )

    return matrix
