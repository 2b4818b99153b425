"""Mini README: Registry of tour strategies.

Structure:
    * StrategyRegistry - maps identifiers to ``TourStrategy`` subclasses.

Built-in strategies register themselves when ``strategies`` is imported;
third-party ones are pulled in by ``discover_plugins`` from entry points.
"""

from __future__ import annotations

from typing import Dict, Iterable, Type

from .base import TourStrategy
from ..logging_utils import get_logger
from ..utils.plugin_loader import load_entry_point_plugins

LOGGER = get_logger(__name__)


class StrategyRegistry:
    """Simple registry for mapping strategy identifiers to classes."""

    def __init__(self) -> None:
        self._strategies: Dict[str, Type[TourStrategy]] = {}

    def register(self, strategy: Type[TourStrategy]) -> None:
        """Register a new strategy class with the registry."""

        identifier = strategy.strategy_name.lower()
        LOGGER.debug("Registering tour strategy '%s'", identifier)
        self._strategies[identifier] = strategy

    def available_strategies(self) -> Iterable[str]:
        return sorted(self._strategies.keys())

    def create(self, identifier: str, **options: object) -> TourStrategy:
        """Instantiate the strategy matching ``identifier``."""

        strategy_cls = self._strategies.get(identifier.lower())
        if not strategy_cls:
            raise KeyError(f"Unknown tour strategy '{identifier}'")
        LOGGER.debug("Creating tour strategy '%s'", identifier)
        return strategy_cls(**options)

    def discover_plugins(self) -> int:
        """Register strategies exposed through entry points; return how many."""

        registered = 0
        for plugin in load_entry_point_plugins():
            if isinstance(plugin, type) and issubclass(plugin, TourStrategy):
                self.register(plugin)
                registered += 1
            else:
                LOGGER.warning("Ignoring plugin %r: not a TourStrategy subclass", plugin)
        return registered


REGISTRY = StrategyRegistry()
