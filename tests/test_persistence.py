"""Mini README: Tests for trajectory files and proxy mesh loading.

Structure:
    * round trip of poses through the binary record layout.
    * rejection of truncated or missing trajectory files.
    * PLY vertex loading, bounds and error reporting.
"""

from __future__ import annotations

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from plyfile import PlyData, PlyElement

from surveyplan.errors import MeshLoadError, TrajectoryFormatError
from surveyplan.geometry import CameraPose, Trajectory
from surveyplan.persistence import (
    load_proxy_bounds,
    load_proxy_vertices,
    load_trajectory,
    save_trajectory,
)


def _yaw(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def _sample_trajectory() -> Trajectory:
    return Trajectory(
        poses=[
            CameraPose(orientation=_yaw(0.3 * index), position=[12.5 * index, -4.0, 72.0], focal_length=0.86)
            for index in range(5)
        ]
    )


def test_round_trip_preserves_records(tmp_path) -> None:
    trajectory = _sample_trajectory()
    path = save_trajectory(trajectory, tmp_path / "nested" / "grid.traj")

    assert path.stat().st_size == len(trajectory) * 13 * 4
    loaded = load_trajectory(path)

    assert len(loaded) == len(trajectory)
    for original, restored in zip(trajectory, loaded):
        assert_allclose(restored.orientation, original.orientation, rtol=1e-6, atol=1e-7)
        assert_allclose(restored.translation, original.translation, rtol=1e-6, atol=1e-5)
        assert_allclose(restored.position, original.position, rtol=1e-6, atol=1e-4)
        assert restored.focal_length == pytest.approx(original.focal_length, rel=1e-6)


def test_record_layout_is_rotation_translation_focal(tmp_path) -> None:
    pose = CameraPose(orientation=np.diag([1.0, -1.0, -1.0]), position=[1.0, 2.0, 3.0], focal_length=0.5)
    path = save_trajectory(Trajectory(poses=[pose]), tmp_path / "one.traj")

    values = np.fromfile(path, dtype="<f4")
    assert values.tolist() == [1, 0, 0, 0, -1, 0, 0, 0, -1, -1, 2, 3, 0.5]


def test_empty_trajectory_round_trips(tmp_path) -> None:
    path = save_trajectory(Trajectory(), tmp_path / "empty.traj")
    assert path.stat().st_size == 0
    assert len(load_trajectory(path)) == 0


def test_truncated_trajectory_is_rejected(tmp_path) -> None:
    path = save_trajectory(_sample_trajectory(), tmp_path / "grid.traj")
    path.write_bytes(path.read_bytes()[:-4])

    with pytest.raises(TrajectoryFormatError):
        load_trajectory(path)


def test_missing_trajectory_is_rejected(tmp_path) -> None:
    with pytest.raises(TrajectoryFormatError):
        load_trajectory(tmp_path / "absent.traj")


@pytest.mark.parametrize("text", [True, False])
def test_proxy_mesh_bounds(tmp_path, ply_writer, text) -> None:
    path = ply_writer(tmp_path / "mesh.ply", [(-5.0, 2.0, 1.0), (10.0, 8.0, 3.0), (0.0, -1.0, 7.0)], text=text)

    assert load_proxy_vertices(path).shape == (3, 3)
    bounds = load_proxy_bounds(path)
    assert bounds.minimum == (-5.0, -1.0, 1.0)
    assert bounds.maximum == (10.0, 8.0, 7.0)
    assert bounds.width == pytest.approx(15.0)
    assert bounds.height == pytest.approx(9.0)


def test_mesh_without_z_is_rejected(tmp_path) -> None:
    vertices = np.array([(0.0, 0.0), (1.0, 1.0)], dtype=[("x", "f4"), ("y", "f4")])
    path = tmp_path / "flat.ply"
    PlyData([PlyElement.describe(vertices, "vertex")], text=True).write(str(path))

    with pytest.raises(MeshLoadError):
        load_proxy_vertices(path)


def test_unreadable_mesh_is_rejected(tmp_path) -> None:
    garbage = tmp_path / "garbage.ply"
    garbage.write_text("this is not a mesh\n")

    with pytest.raises(MeshLoadError):
        load_proxy_vertices(garbage)
    with pytest.raises(MeshLoadError):
        load_proxy_vertices(tmp_path / "absent.ply")


def test_mesh_with_non_finite_vertex_is_rejected(tmp_path, ply_writer) -> None:
    path = ply_writer(tmp_path / "nan.ply", [(0.0, 0.0, 0.0), (float("nan"), 1.0, 1.0)])

    with pytest.raises(MeshLoadError, match="non-finite"):
        load_proxy_vertices(path)
