"""Mini README: Shared pytest fixtures.

Structure:
    * isolated_settings - clears cached settings and ``SURVEYPLAN_*`` variables.
    * survey_bounds - 200 x 150 m region used by planner and CLI tests.
    * ply_writer - helper writing vertex-only PLY files.
    * proxy_mesh - PLY file whose vertices span ``survey_bounds``.
"""

from __future__ import annotations

import os
from pathlib import Path

import numpy as np
import pytest
from plyfile import PlyData, PlyElement

from surveyplan.configuration import get_settings
from surveyplan.geometry import AxisAlignedBoundingBox


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in list(os.environ):
        if name.upper().startswith("SURVEYPLAN_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def survey_bounds() -> AxisAlignedBoundingBox:
    return AxisAlignedBoundingBox(minimum=(0.0, 0.0, 0.0), maximum=(200.0, 150.0, 10.0))


def _write_ply(path: Path, points, *, text: bool = True) -> Path:
    vertices = np.array(
        [tuple(point) for point in points],
        dtype=[("x", "f4"), ("y", "f4"), ("z", "f4")],
    )
    PlyData([PlyElement.describe(vertices, "vertex")], text=text).write(str(path))
    return path


@pytest.fixture
def ply_writer():
    return _write_ply


@pytest.fixture
def proxy_mesh(tmp_path: Path) -> Path:
    return _write_ply(
        tmp_path / "proxy.ply",
        [(0.0, 0.0, 0.0), (200.0, 0.0, 4.0), (200.0, 150.0, 10.0), (0.0, 150.0, 2.0)],
    )
