"""Tests for the visualisation lifecycle and gallery."""

import pytest

from diversitygraph.visualisation import DiversityMST, Gallery


class RecordingVisual:
    def __init__(self, vis_id):
        self.id = vis_id
        self.name = vis_id
        self.calls = []

    def preload(self):
        self.calls.append("preload")

    def setup(self):
        self.calls.append("setup")

    def destroy(self):
        self.calls.append("destroy")


def test_setup_without_data_returns_none():
    vis = DiversityMST()

    assert vis.setup() is None
    assert vis.stats == []


def test_preload_setup_destroy(gender_records, race_records):
    vis = DiversityMST()
    vis.preload(gender_records, race_records)

    scene = vis.setup()

    assert vis.loaded
    assert scene is vis.scene
    assert len(scene.mst_edges) == 3
    assert [s.icon for s in vis.stats] == ["star", "timeline", "arrow_upward"]

    vis.destroy()

    assert vis.scene is None
    assert scene.is_empty
    assert vis.stats == []


def test_preload_from_config(data_config):
    vis = DiversityMST(data_config)
    vis.preload()

    assert len(vis.gender_records) == 4
    assert len(vis.setup().nodes) == 4


def test_preload_without_arguments_keeps_supplied_records(gender_records, race_records):
    vis = DiversityMST()
    vis.preload(gender_records[:2], race_records)

    vis.preload()

    assert len(vis.gender_records) == 2


def test_gallery_add_and_select():
    gallery = Gallery()
    first = RecordingVisual("first")
    second = RecordingVisual("second")

    gallery.add_visual(first)
    gallery.add_visual(second)

    assert gallery.find_visual_index("second") == 1
    assert gallery.find_visual_index("missing") is None

    assert gallery.select_visual("first") is first
    gallery.select_visual("second")

    assert first.calls == ["preload", "setup", "destroy"]
    assert second.calls == ["preload", "setup"]
    assert gallery.selected_visual is second


def test_gallery_rejects_bad_visuals():
    gallery = Gallery()
    gallery.add_visual(RecordingVisual("one"))

    with pytest.raises(ValueError):
        gallery.add_visual(RecordingVisual("one"))

    with pytest.raises(ValueError):
        gallery.add_visual(object())

    with pytest.raises(KeyError):
        gallery.select_visual("two")


def test_gallery_with_diversity_mst(gender_records, race_records):
    vis = DiversityMST()
    vis.preload(gender_records, race_records)
    gallery = Gallery()
    gallery.add_visual(vis)

    gallery.select_visual(DiversityMST.id)

    assert vis.scene is not None
    assert len(vis.scene.nodes) == 4
