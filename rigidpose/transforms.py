"""
Transform algebra for rigid bodies.

This module composes rotations and translations of 4x4 transform matrices:
    1. Assembly and decomposition (rotation block + translation column)
    2. Rotation around an arbitrary axis (axis-angle / Rodrigues)
    3. Rotation around global, local or foreign axes
    4. Translation along an arbitrary axis or global, local or foreign axes

Transform Layout:
    [[xx, xy, xz, tx],
     [yx, yy, yz, ty],
     [zx, zy, zz, tz],
     [ 0,  0,  0,  1]]

    - Rows of the rotation block are the local X, Y, Z axes in global space
    - Columns of the rotation block are the global axes in local space
    - The translation column is the position in global space

Rotation Conventions:
    - Right-handed coordinate system
    - Rotation around an axis is clockwise when looking along the axis from
      the origin towards positive infinity
    - Angles are given in degrees
    - Euler angles are applied in X, Y, Z order

Every operation returns a new array. Inputs are never modified.
"""

import numpy as np

from .vectors import (
    GLOBAL_ORIGIN,
    create_perpendicular_unit_vector,
    create_unit_vector_from_points,
    measure_distance,
)

_TRANSFORM_IDENTITY = np.eye(4, dtype=np.float64)
_TRANSFORM_IDENTITY.flags.writeable = False

_ROTATION_IDENTITY = np.eye(3, dtype=np.float64)
_ROTATION_IDENTITY.flags.writeable = False


def identity_transform() -> np.ndarray:
    """Transform at the global origin, aligned with the global axes."""
    return _TRANSFORM_IDENTITY.copy()


def transform_from(rotation, translation) -> np.ndarray:
    """
    Assemble a transform from a rotation block and a translation vector.

    No validation is performed; see validation.validate_rotation_matrix().

    Args:
        rotation: 3x3 rotation matrix
        translation: Position (x, y, z) in global space

    Returns:
        4x4 transform matrix
    """
    rotation = np.asarray(rotation, dtype=np.float64)
    translation = np.asarray(translation, dtype=np.float64)

    transform = np.eye(4, dtype=np.float64)
    transform[:3, :3] = rotation[:3, :3]
    transform[:3, 3] = translation[:3]
    return transform


def transform_for_rotation(rotation) -> np.ndarray:
    """Transform with the given rotation, located at the global origin."""
    return transform_from(rotation, GLOBAL_ORIGIN)


def transform_for_translation(translation) -> np.ndarray:
    """Transform at the given position, aligned with the global axes."""
    return transform_from(_ROTATION_IDENTITY, translation)


def rotation_of(transform) -> np.ndarray:
    """Copy of the 3x3 rotation block of a transform."""
    return np.array(np.asarray(transform, dtype=np.float64)[:3, :3])


def translation_of(transform) -> np.ndarray:
    """Copy of the translation column of a transform."""
    return np.array(np.asarray(transform, dtype=np.float64)[:3, 3])


def local_x_axis(transform) -> np.ndarray:
    """Unit vector along the local X axis, in global space."""
    return rotation_of(transform)[0]


def local_y_axis(transform) -> np.ndarray:
    """Unit vector along the local Y axis, in global space."""
    return rotation_of(transform)[1]


def local_z_axis(transform) -> np.ndarray:
    """Unit vector along the local Z axis, in global space."""
    return rotation_of(transform)[2]


def multiply_rotations(first, second) -> np.ndarray:
    """
    Product of two 3x3 rotation matrices.

    Row i of the result is row i of `first` transformed by `second`, i.e.
    the local axes of `first` re-expressed through `second`.
    """
    first = np.asarray(first, dtype=np.float64)
    second = np.asarray(second, dtype=np.float64)
    return first[:3, :3] @ second[:3, :3]


def _axis_rotation(angle: float, axis) -> np.ndarray:
    """
    Rotation matrix for a clockwise rotation around a unit axis.

    For axis (x, y, z), s = sin(angle), c = cos(angle) and m = 1 - c:

        [m*x*x + c,   m*x*y + s*z, m*x*z - s*y]
        [m*x*y - s*z, m*y*y + c,   m*y*z + s*x]
        [m*x*z + s*y, m*y*z - s*x, m*z*z + c  ]
    """
    x, y, z = (float(value) for value in np.asarray(axis, dtype=np.float64)[:3])
    radians = np.deg2rad(angle)
    s = np.sin(radians)
    c = np.cos(radians)
    m = 1 - c

    return np.array([
        [m * x * x + c, m * x * y + s * z, m * x * z - s * y],
        [m * x * y - s * z, m * y * y + c, m * y * z + s * x],
        [m * x * z + s * y, m * y * z - s * x, m * z * z + c],
    ])


def rotate_around_arbitrary_axis(transform, angle: float, axis) -> np.ndarray:
    """
    Rotate a transform around an arbitrary axis through its own origin.

    The axis is not validated; pass a unit vector.

    Args:
        transform: 4x4 transform matrix
        angle: Rotation in degrees
        axis: Unit vector (x, y, z) in global space

    Returns:
        New transform with rotated orientation and unchanged translation
    """
    rotation = multiply_rotations(rotation_of(transform), _axis_rotation(angle, axis))
    return transform_from(rotation, translation_of(transform))


def rotate_around_foreign_axes(
    transform,
    x_angle: float,
    y_angle: float,
    z_angle: float,
    foreign,
) -> np.ndarray:
    """
    Rotate a transform around the axes of another (foreign) transform.

    The three foreign axes are read once up front, then each non-zero angle
    is applied in X, Y, Z order, each step building on the previous one.
    Zero angles are skipped.

    Args:
        transform: 4x4 transform to rotate
        x_angle: Rotation around the foreign X axis in degrees
        y_angle: Rotation around the foreign Y axis in degrees
        z_angle: Rotation around the foreign Z axis in degrees
        foreign: 4x4 transform whose orientation supplies the axes

    Returns:
        New transform; a copy of the input if all angles are zero
    """
    axes = rotation_of(foreign)
    rotated = np.array(transform, dtype=np.float64)

    for angle, axis in zip((x_angle, y_angle, z_angle), axes):
        if angle != 0:
            rotated = rotate_around_arbitrary_axis(rotated, angle, axis)

    return rotated


def rotate_around_global_axes(transform, x_angle: float, y_angle: float, z_angle: float) -> np.ndarray:
    """Rotate a transform around the global X, Y, Z axes (angles in degrees)."""
    return rotate_around_foreign_axes(transform, x_angle, y_angle, z_angle, _TRANSFORM_IDENTITY)


def rotate_around_local_axes(transform, x_angle: float, y_angle: float, z_angle: float) -> np.ndarray:
    """Rotate a transform around its own local X, Y, Z axes (angles in degrees)."""
    return rotate_around_foreign_axes(transform, x_angle, y_angle, z_angle, transform)


def translate_along_arbitrary_axis(transform, units: float, axis) -> np.ndarray:
    """
    Move a transform along an arbitrary axis.

    Args:
        transform: 4x4 transform matrix
        units: Distance to move in global units
        axis: Unit vector (x, y, z) in global space

    Returns:
        New transform with moved translation and unchanged rotation
    """
    axis = np.asarray(axis, dtype=np.float64)
    translated = translation_of(transform) + units * axis[:3]
    return transform_from(rotation_of(transform), translated)


def translate_along_foreign_axes(
    transform,
    x_units: float,
    y_units: float,
    z_units: float,
    foreign,
) -> np.ndarray:
    """
    Move a transform along the axes of another (foreign) transform.

    Same policy as rotate_around_foreign_axes(): axes are read once and the
    non-zero components are applied in X, Y, Z order.

    Returns:
        New transform; a copy of the input if all components are zero
    """
    axes = rotation_of(foreign)
    translated = np.array(transform, dtype=np.float64)

    for units, axis in zip((x_units, y_units, z_units), axes):
        if units != 0:
            translated = translate_along_arbitrary_axis(translated, units, axis)

    return translated


def translate_along_global_axes(transform, x_units: float, y_units: float, z_units: float) -> np.ndarray:
    """Move a transform along the global X, Y, Z axes."""
    return translate_along_foreign_axes(transform, x_units, y_units, z_units, _TRANSFORM_IDENTITY)


def translate_along_local_axes(transform, x_units: float, y_units: float, z_units: float) -> np.ndarray:
    """Move a transform along its own local X, Y, Z axes."""
    return translate_along_foreign_axes(transform, x_units, y_units, z_units, transform)


__all__ = [
    "identity_transform",
    "transform_from",
    "transform_for_rotation",
    "transform_for_translation",
    "rotation_of",
    "translation_of",
    "local_x_axis",
    "local_y_axis",
    "local_z_axis",
    "multiply_rotations",
    "rotate_around_arbitrary_axis",
    "rotate_around_foreign_axes",
    "rotate_around_global_axes",
    "rotate_around_local_axes",
    "translate_along_arbitrary_axis",
    "translate_along_foreign_axes",
    "translate_along_global_axes",
    "translate_along_local_axes",
    "measure_distance",
    "create_unit_vector_from_points",
    "create_perpendicular_unit_vector",
]
