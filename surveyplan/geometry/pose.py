"""Mini README: Camera poses and ordered trajectories.

Structure:
    * NADIR_ORIENTATION - immutable rotation for a straight-down camera.
    * nadir_orientation - fresh array copy of that rotation.
    * CameraPose - orientation, position and focal length of one waypoint.
    * Trajectory - ordered collection of poses forming the flight order.

Poses store their world position; the translation used by the persisted
format is derived as ``-R @ position`` and converted back with the transpose
since every orientation is orthonormal. Trajectories are treated as values:
reordering returns a new trajectory holding copies of the poses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence

import numpy as np

NADIR_ORIENTATION = (
    (1.0, 0.0, 0.0),
    (0.0, -1.0, 0.0),
    (0.0, 0.0, -1.0),
)

RECORD_SIZE = 13


def nadir_orientation() -> np.ndarray:
    """Return a new array holding the nadir rotation."""

    return np.array(NADIR_ORIENTATION, dtype=float)


@dataclass(slots=True)
class CameraPose:
    """Single survey waypoint."""

    orientation: np.ndarray
    position: np.ndarray
    focal_length: float

    def __post_init__(self) -> None:
        self.orientation = np.array(self.orientation, dtype=float).reshape(3, 3)
        self.position = np.array(self.position, dtype=float).reshape(3)
        self.focal_length = float(self.focal_length)

    @classmethod
    def from_translation(
        cls, orientation: np.ndarray, translation: np.ndarray, focal_length: float
    ) -> "CameraPose":
        """Build a pose from its persisted rotation/translation form."""

        rotation = np.asarray(orientation, dtype=float).reshape(3, 3)
        position = -rotation.T @ np.asarray(translation, dtype=float).reshape(3)
        return cls(orientation=rotation, position=position, focal_length=focal_length)

    @property
    def translation(self) -> np.ndarray:
        return -self.orientation @ self.position

    def copy(self) -> "CameraPose":
        return CameraPose(
            orientation=self.orientation.copy(),
            position=self.position.copy(),
            focal_length=self.focal_length,
        )

    def as_record(self) -> np.ndarray:
        """Return the 13 values stored per waypoint on disk."""

        return np.concatenate(
            [self.orientation.ravel(), self.translation, [self.focal_length]]
        )


@dataclass(slots=True)
class Trajectory:
    """Ordered collection of camera poses; the order is the flight order."""

    poses: List[CameraPose] = field(default_factory=list)
    description: str = ""

    def __len__(self) -> int:
        return len(self.poses)

    def __iter__(self) -> Iterator[CameraPose]:
        return iter(self.poses)

    def __getitem__(self, index: int) -> CameraPose:
        return self.poses[index]

    def positions(self) -> np.ndarray:
        """Return waypoint positions as an ``(N, 3)`` array."""

        if not self.poses:
            return np.empty((0, 3), dtype=float)
        return np.stack([pose.position for pose in self.poses])

    def length(self) -> float:
        """Summed distance between consecutive waypoints."""

        positions = self.positions()
        if len(positions) < 2:
            return 0.0
        return float(np.linalg.norm(np.diff(positions, axis=0), axis=1).sum())

    def reordered(self, order: Sequence[int]) -> "Trajectory":
        """Return a new trajectory visiting the poses in ``order``."""

        order = [int(index) for index in order]
        if sorted(order) != list(range(len(self.poses))):
            raise ValueError("Order must be a permutation of the trajectory indices")
        return Trajectory(
            poses=[self.poses[index].copy() for index in order],
            description=self.description,
        )

    def as_records(self) -> np.ndarray:
        """Return an ``(N, 13)`` array of persisted waypoint records."""

        if not self.poses:
            return np.empty((0, RECORD_SIZE), dtype=float)
        return np.stack([pose.as_record() for pose in self.poses])
