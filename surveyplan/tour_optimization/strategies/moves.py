"""Mini README: Neighbour-list local search moves on open paths.

Structure:
    * two_opt_pass - segment reversals restricted to candidate pairs.
    * or_opt_pass - relocation of short segments next to candidate waypoints.

Both passes edit ``tour`` in place and report whether any move was applied.
A move is applied only when it shortens the path by more than ``epsilon``.
The path is open: a missing neighbour beyond either end contributes zero
length, which lets reversals and relocations reach the first and last
waypoint as well.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from ..base import Point


def _distance(points: Sequence[Point], first: Optional[int], second: Optional[int]) -> float:
    if first is None or second is None:
        return 0.0
    return math.dist(points[first], points[second])


def _neighbour(tour: List[int], index: int) -> Optional[int]:
    if 0 <= index < len(tour):
        return tour[index]
    return None


def _index(tour: List[int], size: int) -> List[int]:
    position = [0] * size
    for index, city in enumerate(tour):
        position[city] = index
    return position


def _reverse(tour: List[int], position: List[int], low: int, high: int) -> None:
    tour[low : high + 1] = tour[low : high + 1][::-1]
    for index in range(low, high + 1):
        position[tour[index]] = index


def two_opt_pass(
    points: Sequence[Point],
    tour: List[int],
    candidates: Sequence[Sequence[int]],
    epsilon: float,
) -> bool:
    """Apply improving 2-opt reversals; return True if the tour changed."""

    position = _index(tour, len(points))
    improved = False
    for a in tour[:]:
        for step in (1, -1):
            i = position[a]
            b = _neighbour(tour, i + step)
            if b is None:
                continue
            d_ab = _distance(points, a, b)
            for c in candidates[a]:
                d_ac = _distance(points, a, c)
                if d_ac >= d_ab:
                    break
                j = position[c]
                d = _neighbour(tour, j + step)
                if c == b or d == a:
                    continue
                gain = d_ab + _distance(points, c, d) - d_ac - _distance(points, b, d)
                if gain <= epsilon:
                    continue
                if step == 1:
                    _reverse(tour, position, min(i, j) + 1, max(i, j))
                else:
                    _reverse(tour, position, min(i, j), max(i, j) - 1)
                improved = True
                break
    return improved


def or_opt_pass(
    points: Sequence[Point],
    tour: List[int],
    candidates: Sequence[Sequence[int]],
    epsilon: float,
    max_segment: int = 3,
) -> bool:
    """Relocate segments of up to ``max_segment`` waypoints; return True if changed."""

    size = len(tour)
    position = _index(tour, len(points))
    improved = False
    for first in tour[:]:
        for length in range(1, max_segment + 1):
            i = position[first]
            if i + length > size:
                break
            segment = tour[i : i + length]
            head, tail = segment[0], segment[-1]
            before = _neighbour(tour, i - 1)
            after = _neighbour(tour, i + length)
            removal = (
                _distance(points, before, head)
                + _distance(points, tail, after)
                - _distance(points, before, after)
            )
            if removal <= epsilon:
                continue
            move = _best_insertion(points, tour, position, candidates, segment, removal, epsilon)
            if move is None:
                continue
            target, reverse = move
            rest = tour[:i] + tour[i + length :]
            if target is None:
                insert_at = len(rest)
            else:
                insert_at = position[target] - (length if position[target] > i else 0)
            rest[insert_at:insert_at] = segment[::-1] if reverse else segment
            tour[:] = rest
            position = _index(tour, len(points))
            improved = True
            break
    return improved


def _best_insertion(
    points: Sequence[Point],
    tour: List[int],
    position: List[int],
    candidates: Sequence[Sequence[int]],
    segment: List[int],
    removal: float,
    epsilon: float,
):
    """Return ``(insert_before, reversed)`` for the best improving slot, or None.

    ``insert_before`` is the waypoint that will follow the segment, ``None``
    meaning the end of the path.
    """

    members = set(segment)
    head, tail = segment[0], segment[-1]
    best_gain = epsilon
    best = None
    for end in (head, tail):
        for c in candidates[end]:
            if c in members:
                continue
            if _distance(points, end, c) >= removal:
                break
            j = position[c]
            for u, v in ((c, _neighbour(tour, j + 1)), (_neighbour(tour, j - 1), c)):
                if u in members or v in members:
                    continue
                base = _distance(points, u, v)
                forward = _distance(points, u, head) + _distance(points, tail, v) - base
                backward = _distance(points, u, tail) + _distance(points, head, v) - base
                cost, reverse = (forward, False) if forward <= backward else (backward, True)
                gain = removal - cost
                if gain > best_gain:
                    best_gain = gain
                    best = (v, reverse)
    return best
