"""Mini README: Dynamic plugin loading helpers.

Structure:
    * load_entry_point_plugins - load objects registered under an entry point group.

Third-party packages expose additional tour strategies through the
``surveyplan.tour_strategies`` group; the registry calls this helper and
keeps whatever loads successfully.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import List

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

TOUR_STRATEGY_GROUP = "surveyplan.tour_strategies"


def load_entry_point_plugins(group: str = TOUR_STRATEGY_GROUP) -> List[object]:
    """Load and return the objects registered under ``group``."""

    loaded_plugins: List[object] = []
    for entry_point in entry_points(group=group):
        try:
            plugin = entry_point.load()
        except Exception as exc:  # pragma: no cover - broken third-party install
            LOGGER.exception("Failed to load plugin '%s': %s", entry_point.name, exc)
            continue
        loaded_plugins.append(plugin)
        LOGGER.info("Loaded plugin '%s'", entry_point.name)
    return loaded_plugins
