"""Mini README: Built-in tour strategies.

Importing this package registers every bundled strategy with ``REGISTRY``.
New heuristics should subclass ``TourStrategy`` and call
``REGISTRY.register`` at import time, or ship as an entry point plugin.
"""

from .local_search import LocalSearchStrategy
from .two_opt import TwoOptStrategy

__all__ = ["LocalSearchStrategy", "TwoOptStrategy"]
