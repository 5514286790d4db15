from __future__ import annotations

"""
Visualisation lifecycle for the diversitygraph project.

A visualisation is an object with an `id`, a `name` and optional
`preload`, `setup` and `destroy` hooks. The Gallery keeps a list of them and
makes sure only one is set up at a time: selecting a new one destroys the
previous one first.

DiversityMST is the visualisation backed by the scene pipeline. It owns its
SceneContext; setup builds it and destroy drops it.
"""

from typing import Any, Iterable, List, Mapping, Optional

import logging

from .config import DiversityGraphConfig
from .data_io import load_tables
from .pipeline import SceneContext, build_scene
from .scoring import StatItem

logger = logging.getLogger(__name__)


class DiversityMST:
    """Tech diversity MST visualisation."""

    id = "tech-diversity-mst-3d"
    name = "Tech Diversity MST"
    title = "Tech Diversity by Gender and Race Minimum Spanning Tree"

    def __init__(self, cfg: Optional[DiversityGraphConfig] = None) -> None:
        self.cfg = cfg or DiversityGraphConfig()
        self.loaded = False
        self.gender_records: List[Mapping[str, Any]] = []
        self.race_records: List[Mapping[str, Any]] = []
        self.scene: Optional[SceneContext] = None

    # Lifecycle ---------------------------------------------------------------

    def preload(
        self,
        gender_records: Optional[Iterable[Mapping[str, Any]]] = None,
        race_records: Optional[Iterable[Mapping[str, Any]]] = None,
    ) -> None:
        """
        Store the input record sets.

        With no arguments the tables named in the configuration are loaded
        from disk, unless records were already supplied.
        """
        if gender_records is None and race_records is None:
            if self.loaded:
                return
            tables = load_tables(self.cfg)
            gender_records, race_records = tables.gender, tables.race

        self.gender_records = list(gender_records or [])
        self.race_records = list(race_records or [])
        self.loaded = True

        logger.info(
            "%s: preloaded %d gender and %d race records",
            self.name,
            len(self.gender_records),
            len(self.race_records),
        )

    def setup(self) -> Optional[SceneContext]:
        """Build a fresh scene. Returns None if there is nothing to show."""
        if not self.loaded or not self.gender_records:
            logger.info("%s: no data loaded yet", self.name)
            return None

        self.scene = build_scene(self.gender_records, self.race_records, self.cfg)
        return self.scene

    def destroy(self) -> None:
        if self.scene is not None:
            self.scene.clear()
        self.scene = None
        logger.debug("%s: scene destroyed", self.name)

    @property
    def stats(self) -> List[StatItem]:
        if self.scene is None:
            return []
        return list(self.scene.stats)


class Gallery:
    """Holds the visualisations and the currently selected one."""

    def __init__(self) -> None:
        self.visuals: List[Any] = []
        self.selected_visual: Optional[Any] = None

    def add_visual(self, vis: Any) -> None:
        """
        Register a visualisation and run its preload hook if it has one.

        Raises ValueError if the visualisation has no id or its id is
        already registered.
        """
        vis_id = getattr(vis, "id", None)
        if not vis_id:
            raise ValueError("Visualisation must have an id")
        if self.find_visual_index(vis_id) is not None:
            raise ValueError(
                f"Visualisation '{getattr(vis, 'name', vis_id)}' has a duplicate id: '{vis_id}'"
            )

        self.visuals.append(vis)
        logger.info("Added visualisation '%s'", vis_id)

        preload = getattr(vis, "preload", None)
        if callable(preload):
            preload()

    def find_visual_index(self, vis_id: str) -> Optional[int]:
        for i, vis in enumerate(self.visuals):
            if vis.id == vis_id:
                return i
        return None

    def select_visual(self, vis_id: str) -> Any:
        """Destroy the current visualisation and set up the one with vis_id."""
        index = self.find_visual_index(vis_id)
        if index is None:
            raise KeyError(f"No visualisation with id '{vis_id}'")

        current = self.selected_visual
        if current is not None and callable(getattr(current, "destroy", None)):
            current.destroy()

        self.selected_visual = self.visuals[index]

        setup = getattr(self.selected_visual, "setup", None)
        if callable(setup):
            setup()

        logger.info("Selected visualisation '%s'", vis_id)

        return self.selected_visual
