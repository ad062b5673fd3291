"""
Vector algebra shared by every other module.

All vectors are 3-element float64 arrays expressed in global coordinates.

Conventions:
    - Right-handed coordinate system
    - Cross products follow the right-hand rule
      (forefinger = first, middle finger = second, thumb = result)
"""

import numpy as np


def _constant(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64)
    array.flags.writeable = False
    return array


# Global reference frame
GLOBAL_ORIGIN = _constant([0, 0, 0])
GLOBAL_X_AXIS = _constant([1, 0, 0])
GLOBAL_Y_AXIS = _constant([0, 1, 0])
GLOBAL_Z_AXIS = _constant([0, 0, 1])


def normalize_vector(vector) -> np.ndarray:
    """
    Scale a vector to unit length.

    A zero vector is not special-cased: the division yields NaN components
    and numpy emits a RuntimeWarning.

    Args:
        vector: 3-element vector

    Returns:
        New unit vector pointing in the same direction
    """
    vector = np.asarray(vector, dtype=np.float64)
    extent = np.sqrt(vector[0] ** 2 + vector[1] ** 2 + vector[2] ** 2)
    return vector[:3] / extent


def cross_product(first, second) -> np.ndarray:
    """Right-hand-rule cross product of two 3-vectors (not normalised)."""
    a = np.asarray(first, dtype=np.float64)
    b = np.asarray(second, dtype=np.float64)
    return np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ])


def create_perpendicular_unit_vector(first, second) -> np.ndarray:
    """
    Unit vector perpendicular to two vectors.

    Args:
        first: Vector along the forefinger
        second: Vector along the middle finger

    Returns:
        Unit vector along the thumb, i.e. normalised first x second
    """
    return normalize_vector(cross_product(first, second))


def create_unit_vector_from_points(first, second) -> np.ndarray:
    """
    Unit vector pointing from one point to another.

    Args:
        first: Start point (x, y, z)
        second: End point (x, y, z)

    Returns:
        Normalised direction from first to second
    """
    a = np.asarray(first, dtype=np.float64)
    b = np.asarray(second, dtype=np.float64)
    return normalize_vector(b[:3] - a[:3])


def create_unit_vector_from_transforms(first, second) -> np.ndarray:
    """Unit vector from the translation of one transform to that of another."""
    a = np.asarray(first, dtype=np.float64)
    b = np.asarray(second, dtype=np.float64)
    return create_unit_vector_from_points(a[:3, 3], b[:3, 3])


def _position(value) -> np.ndarray:
    array = np.asarray(value, dtype=np.float64)
    if array.ndim == 2:
        # transform matrix: use its translation column
        return array[:3, 3]
    return array[:3]


def measure_distance(first, second) -> float:
    """
    Euclidean distance between two points in global space.

    Each argument may be either a 3-vector or a 4x4 transform, in which
    case its translation component is used.

    Args:
        first: Point or transform
        second: Point or transform

    Returns:
        Distance in global units
    """
    a = _position(first)
    b = _position(second)
    x = a[0] - b[0]
    y = a[1] - b[1]
    z = a[2] - b[2]
    return float(np.sqrt(x * x + y * y + z * z))
