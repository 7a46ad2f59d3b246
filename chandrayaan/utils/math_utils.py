# chandrayaan/utils/math_utils.py
"""Distance helpers for grid coordinates."""

import numpy as np


def to_array(coordinate):
    """Convert a Coordinate (or anything with x, y, z) to an int64 numpy vector."""
    return np.array([coordinate.x, coordinate.y, coordinate.z], dtype=np.int64)


def manhattan_distance(a, b):
    """Number of unit moves separating two grid points.

    Args:
        a: First coordinate
        b: Second coordinate

    Returns:
        int: Sum of absolute per-axis differences
    """
    return int(np.abs(to_array(a) - to_array(b)).sum())


def euclidean_distance(a, b):
    """Straight-line distance between two grid points.

    Args:
        a: First coordinate
        b: Second coordinate

    Returns:
        float: Euclidean distance
    """
    return float(np.linalg.norm((to_array(a) - to_array(b)).astype(float)))
