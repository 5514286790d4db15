"""Tests for the occupation graph and Dijkstra career path."""

import pytest

from diversitygraph.career_path import (
    build_career_graph,
    career_path_cost,
    shortest_career_path,
)


@pytest.fixture
def occupation_records():
    return [
        {"job_type": "Administrative occupations", "job_subtype": "Finance administration", "pay_gap": "5.8"},
        {"job_type": "Administrative occupations", "job_subtype": "Secretarial occupations", "pay_gap": "-1.6"},
        {"job_type": "Managers and directors", "job_subtype": "Finance administration", "pay_gap": "15.3"},
        {"job_type": "Managers and directors", "job_subtype": "Chief executives", "pay_gap": "12.9"},
        {"job_type": "Administrative occupations", "job_subtype": "Chief executives", "pay_gap": "40"},
        {"job_type": "Sales occupations", "job_subtype": "Retail cashiers", "pay_gap": "2.0"},
        {"job_type": "", "job_subtype": "Orphan", "pay_gap": "1"},
        {"job_subtype": "Orphan", "pay_gap": "1"},
    ]


def test_build_career_graph(occupation_records):
    G = build_career_graph(occupation_records)

    assert G.number_of_nodes() == 7
    assert G.number_of_edges() == 6
    assert "Orphan" not in G
    # Stored by magnitude for Dijkstra, raw gap kept alongside
    edge = G["Administrative occupations"]["Secretarial occupations"]
    assert edge["weight"] == pytest.approx(1.6)
    assert edge["pay_gap"] == pytest.approx(-1.6)


def test_shortest_career_path(occupation_records):
    G = build_career_graph(occupation_records)

    path = shortest_career_path(G, "Administrative occupations", "Chief executives")

    assert path == [
        "Administrative occupations",
        "Finance administration",
        "Managers and directors",
        "Chief executives",
    ]
    assert career_path_cost(G, path) == pytest.approx(5.8 + 15.3 + 12.9)


def test_path_to_self(occupation_records):
    G = build_career_graph(occupation_records)

    path = shortest_career_path(G, "Sales occupations", "Sales occupations")

    assert path == ["Sales occupations"]
    assert career_path_cost(G, path) == 0.0


def test_no_path_returns_empty(occupation_records):
    G = build_career_graph(occupation_records)

    assert shortest_career_path(G, "Administrative occupations", "Retail cashiers") == []


def test_unknown_occupation_raises(occupation_records):
    G = build_career_graph(occupation_records)

    with pytest.raises(KeyError):
        shortest_career_path(G, "Astronaut", "Chief executives")
