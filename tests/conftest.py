"""Shared fixtures for the diversitygraph test suite."""

import sys
from pathlib import Path

import pytest

# Make the src/ layout importable without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from diversitygraph.config import DiversityGraphConfig  # noqa: E402


GENDER_CSV = """company,female,male
Alpha,40,60
Beta,45,55
Gamma,50,50
Delta,30,70
"""

RACE_CSV = """company,white,asian,latino,black,multi,other
Alpha,50,20,10,10,5,5
Beta,48,22,9,11,5,5
 Gamma ,20,20,15,15,15,15
Delta,70,10,5,5,5,5
"""

OCCUPATION_CSV = """job_type,job_subtype,pay_gap
Administrative occupations,Finance administration,5.8
Administrative occupations,Secretarial occupations,-1.6
Managers and directors,Finance administration,15.3
Managers and directors,Chief executives,12.9
"""


@pytest.fixture
def company_a():
    return {
        "company": "A",
        "female": 40, "male": 60,
        "white": 50, "asian": 20, "latino": 10, "black": 10, "multi": 5, "other": 5,
    }


@pytest.fixture
def company_b():
    return {
        "company": "B",
        "female": 45, "male": 55,
        "white": 48, "asian": 22, "latino": 9, "black": 11, "multi": 5, "other": 5,
    }


@pytest.fixture
def balanced_company():
    return {
        "company": "Balanced",
        "female": 50, "male": 50,
        "white": 10, "asian": 10, "latino": 10, "black": 10, "multi": 10, "other": 10,
    }


@pytest.fixture
def gender_records():
    return [
        {"company": "Alpha", "female": "40", "male": "60"},
        {"company": "Beta", "female": "45", "male": "55"},
        {"company": "Gamma ", "female": "50", "male": "50"},
        {"company": "Delta", "female": "30", "male": "70"},
    ]


@pytest.fixture
def race_records():
    return [
        {"company": "Alpha", "white": "50", "asian": "20", "latino": "10",
         "black": "10", "multi": "5", "other": "5"},
        {"company": "Beta", "white": "48", "asian": "22", "latino": "9",
         "black": "11", "multi": "5", "other": "5"},
        {"company": " Gamma", "white": "20", "asian": "20", "latino": "15",
         "black": "15", "multi": "15", "other": "15"},
        {"company": "Delta", "white": "70", "asian": "10", "latino": "5",
         "black": "5", "multi": "5", "other": "5"},
    ]


@pytest.fixture
def chain_records():
    """Four companies differing only in the gender split, 5 points apart."""
    races = {"white": 40, "asian": 30, "latino": 10, "black": 10, "multi": 5, "other": 5}
    return [
        {"company": "A", "female": 40, "male": 60, **races},
        {"company": "B", "female": 45, "male": 55, **races},
        {"company": "C", "female": 50, "male": 50, **races},
        {"company": "D", "female": 55, "male": 45, **races},
    ]


@pytest.fixture
def data_config(tmp_path):
    """A config pointing at small CSV tables in a temporary directory."""
    gender_path = tmp_path / "gender.csv"
    race_path = tmp_path / "race.csv"
    occupation_path = tmp_path / "occupation.csv"

    gender_path.write_text(GENDER_CSV, encoding="utf-8")
    race_path.write_text(RACE_CSV, encoding="utf-8")
    occupation_path.write_text(OCCUPATION_CSV, encoding="utf-8")

    return DiversityGraphConfig(
        gender_data_path=gender_path,
        race_data_path=race_path,
        occupation_data_path=occupation_path,
    )
