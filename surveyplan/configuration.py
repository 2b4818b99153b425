"""Mini README: Centralised configuration for Surveyplan command line tools.

Structure:
    * SurveyPlanSettings - Pydantic model describing tunable defaults.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    The CLI reads ``get_settings()`` to fill option defaults, so operators can
    set e.g. ``SURVEYPLAN_SIDE_OVERLAP=70`` instead of repeating flags. The
    planners themselves take explicit arguments and never consult settings.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class SurveyPlanSettings(BaseSettings):
    """Runtime defaults for grid generation and tour shortening."""

    focal_length: float = Field(
        0.86,
        description="Camera focal length normalised by the larger sensor dimension.",
        gt=0,
    )
    max_distance: float = Field(
        80.0,
        description="Maximum stand-off distance from the proxy surface in metres.",
        gt=0,
    )
    forward_overlap: float = Field(
        80.0,
        description="Image overlap along the flight direction in percent.",
        ge=0,
        lt=100,
    )
    side_overlap: float = Field(
        60.0,
        description="Image overlap between neighbouring scan lines in percent.",
        ge=0,
        lt=100,
    )
    neighbour_count: int = Field(
        64,
        description="Candidate list size per waypoint used by the tour optimizer.",
        ge=1,
    )
    max_passes: int = Field(
        1000,
        description="Upper bound on improvement passes of the tour optimizer.",
        ge=1,
    )
    tour_strategy: str = Field(
        "local-search",
        description="Registered tour strategy used by the shorten command.",
    )
    log_level: str = Field("INFO", description="Root logging level.")

    class Config:
        env_prefix = "SURVEYPLAN_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def _check_log_level(cls, value: str) -> str:
        """Only accept level names understood by the logging module."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level '{value}'")
        return normalised


@lru_cache()
def get_settings() -> SurveyPlanSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SurveyPlanSettings()
