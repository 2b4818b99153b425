"""Mini README: Binary trajectory files.

Structure:
    * save_trajectory - write poses as fixed-size little-endian records.
    * load_trajectory - read records back into a ``Trajectory``.

Layout: no header; each waypoint is 13 ``float32`` values (row-major 3x3
orientation, translation, focal length) in flight order, so the waypoint
count is the file size divided by 52 bytes.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Union

import numpy as np

from ..errors import TrajectoryFormatError
from ..geometry import CameraPose, Trajectory
from ..geometry.pose import RECORD_SIZE
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

RECORD_DTYPE = np.dtype("<f4")
RECORD_BYTES = RECORD_SIZE * RECORD_DTYPE.itemsize


def save_trajectory(trajectory: Trajectory, destination: Union[str, Path]) -> Path:
    """Persist ``trajectory`` to ``destination`` and return the path."""

    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    records = trajectory.as_records().astype(RECORD_DTYPE)
    LOGGER.info("Saving trajectory with %s waypoints to %s", len(trajectory), destination)
    handle, temporary = tempfile.mkstemp(dir=destination.parent, suffix=".tmp")
    try:
        with os.fdopen(handle, "wb") as stream:
            stream.write(records.tobytes())
        os.replace(temporary, destination)
    except BaseException:
        Path(temporary).unlink(missing_ok=True)
        raise
    return destination


def load_trajectory(source: Union[str, Path]) -> Trajectory:
    """Read a trajectory written by ``save_trajectory``."""

    source = Path(source)
    try:
        payload = source.read_bytes()
    except OSError as error:
        raise TrajectoryFormatError(f"Could not read trajectory {source}: {error}") from error
    if len(payload) % RECORD_BYTES:
        raise TrajectoryFormatError(
            f"Trajectory {source} has {len(payload)} bytes, not a multiple of {RECORD_BYTES}"
        )
    records = np.frombuffer(payload, dtype=RECORD_DTYPE).astype(float).reshape(-1, RECORD_SIZE)
    if not np.all(np.isfinite(records)):
        raise TrajectoryFormatError(f"Trajectory {source} contains non-finite values")

    poses = [
        CameraPose.from_translation(
            orientation=record[:9].reshape(3, 3),
            translation=record[9:12],
            focal_length=record[12],
        )
        for record in records
    ]
    LOGGER.info("Loaded trajectory with %s waypoints from %s", len(poses), source)
    return Trajectory(poses=poses, description=source.stem)
