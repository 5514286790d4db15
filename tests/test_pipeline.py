"""Tests for the end to end scene pipeline."""

import pytest

from diversitygraph.config import DiversityGraphConfig
from diversitygraph.layout import layout_radius
from diversitygraph.pipeline import (
    SceneContext,
    build_nodes,
    build_scene,
    build_scene_from_config,
)
from diversitygraph.preprocessing import build_attribute_matrix
from diversitygraph.records import to_company_records
from diversitygraph.scoring import diversity_score
from diversitygraph.similarity import build_distance_matrix, nearest_peers


def test_build_nodes(gender_records, race_records):
    from diversitygraph.records import merge_records

    records = merge_records(gender_records, race_records)
    nodes = build_nodes(records)

    assert [n.id for n in nodes] == [0, 1, 2, 3]
    assert [n.company for n in nodes] == ["Alpha", "Beta", "Gamma", "Delta"]
    assert nodes[0].attributes == (40.0, 60.0, 50.0, 20.0, 10.0, 10.0, 5.0, 5.0)
    assert nodes[0].position == pytest.approx((layout_radius(4), 0.0, 0.0))
    assert nodes[2].diversity_score == pytest.approx(diversity_score(records[2]))


def test_build_nodes_unknown_company():
    nodes = build_nodes([{"female": 50}, {"company": "  ", "male": 50}])

    assert [n.company for n in nodes] == ["Unknown", "Unknown"]


def test_build_scene(gender_records, race_records):
    scene = build_scene(gender_records, race_records)

    assert len(scene.nodes) == 4
    assert len(scene.candidate_edges) == 6
    assert len(scene.mst_edges) == 3
    assert [s.label for s in scene.stats] == [
        "Average Diversity Score",
        "Total MST Length",
        "Largest Difference",
    ]
    assert len(scene.peers) == 4
    # Alpha and Beta are the sample companies at distance sqrt(60)
    assert scene.peers[0] == 1


def test_build_scene_stats_match_edges(gender_records, race_records):
    scene = build_scene(gender_records, race_records)

    total = sum(e.weight for e in scene.mst_edges)
    longest = max(e.weight for e in scene.mst_edges)
    assert scene.stats[1].value == f"{total:.1f}"
    assert scene.stats[2].value == f"{longest:.1f}"


def test_build_scene_single_company():
    scene = build_scene([{"company": "Solo", "female": 50, "male": 50}], [])

    assert len(scene.nodes) == 1
    assert scene.mst_edges == []
    assert scene.peers == [-1]
    assert scene.stats[1].value == "0.0"


def test_build_scene_empty():
    scene = build_scene([], [{"company": "Orphan"}])

    assert scene.is_empty
    assert scene.mst_edges == []


def test_rebuild_gives_identical_scene(gender_records, race_records):
    first = build_scene(gender_records, race_records)
    second = build_scene(gender_records, race_records)

    assert first.nodes == second.nodes
    assert first.mst_edges == second.mst_edges


def test_scene_clear(gender_records, race_records):
    scene = build_scene(gender_records, race_records)

    scene.clear()

    assert scene.is_empty
    assert scene.mst_edges == [] and scene.stats == [] and scene.records == []


def test_build_scene_from_config(data_config):
    scene = build_scene_from_config(data_config)

    assert [n.company for n in scene.nodes] == ["Alpha", "Beta", "Gamma", "Delta"]
    assert len(scene.mst_edges) == 3


def test_custom_layout_config(gender_records, race_records):
    cfg = DiversityGraphConfig(radius_per_node=5.0, min_radius=1.0)

    scene = build_scene(gender_records, race_records, cfg)

    assert scene.nodes[0].position == pytest.approx((20.0, 0.0, 0.0))
    assert isinstance(scene, SceneContext)


def test_build_nodes_match_company_records():
    records = [
        {"company": " Padded ", "female": "40%", "male": "60", "white": "50", "asian": "n/a"},
        {"company": "Plain", "female": 45, "male": 55, "white": 48, "asian": 22},
    ]

    nodes = build_nodes(records)
    expected = to_company_records(records)

    assert [n.company for n in nodes] == ["Padded", "Plain"]
    assert [n.attributes for n in nodes] == [r.vector() for r in expected]
    assert nodes[0].attributes[:4] == (40.0, 60.0, 50.0, 0.0)


def test_build_nodes_score_uses_all_fields_when_vector_is_narrowed(company_a, company_b):
    cfg = DiversityGraphConfig(attribute_fields=("female", "male"))

    nodes = build_nodes([company_a, company_b], cfg)

    assert nodes[0].attributes == (40.0, 60.0)
    assert nodes[0].diversity_score == pytest.approx(diversity_score(company_a))
    assert nodes[1].diversity_score == pytest.approx(diversity_score(company_b))


def test_build_scene_peers_follow_attribute_matrix(chain_records):
    scene = build_scene(chain_records, [])

    matrix = build_attribute_matrix(scene.records, DiversityGraphConfig().attribute_fields)
    assert scene.peers == nearest_peers(build_distance_matrix(matrix))
    # Ties go to the lower index: B is equally close to A and C
    assert scene.peers == [1, 0, 1, 2]
