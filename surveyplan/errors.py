"""Mini README: Exception hierarchy shared by the planners and file helpers.

Structure:
    * SurveyPlanError - base class for every error raised by the package.
    * ConfigurationError - invalid camera, overlap or distance parameters.
    * MeshLoadError - the proxy mesh could not be read.
    * TrajectoryFormatError - a trajectory file is unreadable or malformed.

The command line layer is the only place these are turned into messages and
exit codes; library code raises and lets them propagate.
"""

from __future__ import annotations


class SurveyPlanError(Exception):
    """Base class for Surveyplan failures."""


class ConfigurationError(SurveyPlanError, ValueError):
    """Raised before any geometry is computed when parameters are invalid."""


class MeshLoadError(SurveyPlanError):
    """Raised when a proxy mesh cannot be loaded."""


class TrajectoryFormatError(SurveyPlanError):
    """Raised when a trajectory file cannot be read back."""
