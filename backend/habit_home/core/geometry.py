"""
Geometry Utilities

NumPy-based helpers for the 3-D spatial operations used by the placement
core:
- Applying a 4x4 world transform to a local point
- Euclidean distances and mean distances to point sets
- Weighted distance terms that stay finite when a weight is zero
"""

import math
from typing import Iterable, Sequence, Tuple

import numpy as np


Point3 = Tuple[float, float, float]


def transform_point(matrix: Sequence[Sequence[float]], point: Point3) -> Point3:
    """
    Apply a row-major 4x4 homogeneous transform to a 3-D point.

    Args:
        matrix: 4x4 transform (rows), translation in the last column
        point: Local-space point (x, y, z)

    Returns:
        World-space point

    Example:
        >>> shift = ((1, 0, 0, 2), (0, 1, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1))
        >>> transform_point(shift, (0.0, 1.0, 0.0))
        (2.0, 1.0, 0.0)
    """
    m = np.asarray(matrix, dtype=float)
    homogeneous = m @ np.array([point[0], point[1], point[2], 1.0])
    w = homogeneous[3] if homogeneous[3] != 0 else 1.0
    x, y, z = homogeneous[:3] / w
    return (float(x), float(y), float(z))


def bounding_box_center(box_min: Point3, box_max: Point3) -> Point3:
    """Geometric mid-point of an axis-aligned box."""
    return tuple(float((lo + hi) / 2) for lo, hi in zip(box_min, box_max))


def euclidean_distance(a: Point3, b: Point3) -> float:
    """Straight-line distance between two 3-D points."""
    return float(np.linalg.norm(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)))


def mean_distance(origin: Point3, points: Iterable[Point3]) -> float:
    """
    Average Euclidean distance from ``origin`` to every point.

    Returns:
        Mean distance, or ``+inf`` when ``points`` is empty so that an
        empty set is always the least favorable outcome.

    Example:
        >>> mean_distance((0, 0, 0), [(0, 0, 0.1), (0, 0, -0.1)])
        0.1
    """
    pts = np.asarray(list(points), dtype=float)
    if pts.size == 0:
        return math.inf
    deltas = pts.reshape(-1, 3) - np.asarray(origin, dtype=float)
    return float(np.linalg.norm(deltas, axis=1).mean())


def weighted_term(distance: float, weight: float) -> float:
    """
    ``distance * weight`` with ``inf * 0`` defined as 0.

    IEEE arithmetic gives NaN for that product; a zero weight means the
    term does not participate at all, whatever its distance.
    """
    if weight == 0:
        return 0.0
    return distance * weight
