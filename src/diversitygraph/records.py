from __future__ import annotations

"""
Record merging and reshaping for the diversitygraph project.

The gender and race tables arrive as sequences of flat records (one dict per
row) keyed by a `company` column. This module joins them into one record per
company and provides the reshaping helpers needed when the race table is
stored per race instead of per company.

Responsibilities:
- Join the gender and race record sets on the trimmed company name
- Group per-company race documents by summing their numeric fields
- Invert per-race documents into per-company records
- Wrap merged records in a typed CompanyRecord

Main entry point:
- merge_records(primary, secondary)
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import logging

from .config import ATTRIBUTE_FIELDS, COMPANY_KEY, UNKNOWN_COMPANY
from .preprocessing import parse_number

logger = logging.getLogger(__name__)

RACE_KEY = "race"


@dataclass(frozen=True)
class CompanyRecord:
    """
    A merged company row with its attribute values parsed to floats.

    `attributes` holds exactly the fields the record was built with, in that
    order; fields absent from the source row are 0.0.
    """

    company: str
    attributes: Dict[str, float]

    @classmethod
    def from_mapping(
        cls,
        record: Mapping[str, Any],
        fields: Sequence[str] = ATTRIBUTE_FIELDS,
    ) -> "CompanyRecord":
        company = str(record.get(COMPANY_KEY) or "").strip() or UNKNOWN_COMPANY
        return cls(
            company=company,
            attributes={name: parse_number(record.get(name)) for name in fields},
        )

    def vector(self, fields: Sequence[str] = ATTRIBUTE_FIELDS) -> Tuple[float, ...]:
        """
        Attribute values in `fields` order.

        Raises KeyError for a field the record was not built with, so two
        vectors taken with the same fields always line up.
        """
        return tuple(self.attributes[name] for name in fields)


# ---------------------------------------------------------------------------
# Join
# ---------------------------------------------------------------------------


def _company_key(record: Mapping[str, Any]) -> Optional[str]:
    """Return the trimmed company name, or None if it cannot be matched."""
    company = record.get(COMPANY_KEY)
    if not isinstance(company, str) or not company.strip():
        return None
    return company.strip()


def merge_records(
    primary: Iterable[Mapping[str, Any]],
    secondary: Iterable[Mapping[str, Any]],
) -> List[Dict[str, Any]]:
    """
    Join two record sets on the company name.

    Each primary record yields exactly one output record, in primary order.
    The first secondary record whose trimmed company name equals the
    primary's (case sensitive) is overlaid on top of it, so secondary values
    win on shared keys. Unmatched primary records keep only their own fields.

    Neither input is modified.
    """
    secondary_list = list(secondary)

    lookup: Dict[str, Mapping[str, Any]] = {}
    for record in secondary_list:
        key = _company_key(record)
        if key is not None and key not in lookup:
            lookup[key] = record

    merged: List[Dict[str, Any]] = []
    unmatched = 0

    for record in primary:
        combined = dict(record)
        key = _company_key(record)
        match = lookup.get(key) if key is not None else None

        if match is None:
            unmatched += 1
            logger.debug("No secondary record for company %r", record.get(COMPANY_KEY))
        else:
            combined.update(match)

        merged.append(combined)

    logger.info(
        "Merged %d primary records against %d secondary records (%d unmatched)",
        len(merged),
        len(secondary_list),
        unmatched,
    )

    return merged


def to_company_records(
    records: Iterable[Mapping[str, Any]],
    fields: Sequence[str] = ATTRIBUTE_FIELDS,
) -> List[CompanyRecord]:
    """Wrap merged flat records as CompanyRecord objects."""
    return [CompanyRecord.from_mapping(r, fields) for r in records]


# ---------------------------------------------------------------------------
# Race table reshaping
# ---------------------------------------------------------------------------


def group_by_company(docs: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Group documents by company, summing every other field as a number.

    The `company` and `race` keys are not summed. Companies are returned in
    the order they are first seen.

    Example
    -------
    >>> group_by_company([
    ...     {"race": "white", "company": "A", "white": "50"},
    ...     {"race": "black", "company": "A", "white": "50"},
    ... ])
    [{'company': 'A', 'white': 100.0}]
    """
    companies: Dict[Any, Dict[str, Any]] = {}

    for doc in docs:
        company = doc.get(COMPANY_KEY)
        entry = companies.setdefault(company, {COMPANY_KEY: company})

        for key, value in doc.items():
            if key in (COMPANY_KEY, RACE_KEY):
                continue
            entry[key] = entry.get(key, 0.0) + parse_number(value)

    logger.info("Grouped documents into %d companies", len(companies))

    return list(companies.values())


def invert_race_table(race_docs: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Turn per-race documents into per-company records.

    Input rows look like ``{"race": "white", "AirBnB": "36.33", ...}``; the
    output has one record per company column, e.g.
    ``{"company": "AirBnB", "white": 36.33, ...}``. Rows without a race name
    are skipped.
    """
    companies: Dict[str, Dict[str, Any]] = {}

    for doc in race_docs:
        race_name = doc.get(RACE_KEY)
        if not isinstance(race_name, str) or not race_name.strip():
            logger.warning("Skipping race document without a race name: %r", doc)
            continue
        race_name = race_name.strip()

        for key, value in doc.items():
            if key == RACE_KEY:
                continue
            entry = companies.setdefault(key, {COMPANY_KEY: key})
            entry[race_name] = parse_number(value)

    logger.info("Inverted race table into %d company records", len(companies))

    return list(companies.values())
