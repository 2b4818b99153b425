"""Mini README: Utility helper functions for Surveyplan.

Currently exports the entry point loader used to discover third-party tour
strategies at runtime.
"""

from .plugin_loader import load_entry_point_plugins

__all__ = ["load_entry_point_plugins"]
