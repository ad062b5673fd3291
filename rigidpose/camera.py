"""
Follow-camera derivation.

Computes the transform of a camera that tracks an object from behind and
above, built only from the public transform and vector algebra.

Camera Frame:
    - Z: points from the object to the camera (reverse line of sight)
    - X: level with the global horizon
    - Y: completes the right-handed frame

Placement:
    1. Take the object's local X axis
    2. Derive the object's "ideal" Y axis, the one it would have if it were
       fully upright: perpendicular(object X, global Z)
    3. Move `behind` units along the ideal Y axis, then `above` units along
       the global Z axis

If the object's X axis is parallel to the global Z axis the ideal Y axis is
undefined and every component of the result is NaN.
"""

import logging

import numpy as np

from .config import FollowSettings
from .transforms import (
    local_x_axis,
    transform_from,
    translate_along_arbitrary_axis,
    translation_of,
)
from .vectors import (
    GLOBAL_Z_AXIS,
    create_perpendicular_unit_vector,
    create_unit_vector_from_points,
)

logger = logging.getLogger(__name__)


def camera_following(object_transform, units_behind: float, units_above: float) -> np.ndarray:
    """
    Transform of a camera that looks directly at an object.

    Args:
        object_transform: 4x4 transform of the tracked object
        units_behind: Distance behind the object along its ideal Y axis
        units_above: Height above the object along the global Z axis

    Returns:
        4x4 camera transform
    """
    object_x = local_x_axis(object_transform)
    ideal_y = create_perpendicular_unit_vector(object_x, GLOBAL_Z_AXIS)

    placed = translate_along_arbitrary_axis(object_transform, units_behind, ideal_y)
    placed = translate_along_arbitrary_axis(placed, units_above, GLOBAL_Z_AXIS)

    object_position = translation_of(object_transform)
    camera_position = translation_of(placed)

    camera_z = create_unit_vector_from_points(object_position, camera_position)
    camera_x = create_perpendicular_unit_vector(GLOBAL_Z_AXIS, camera_z)
    camera_y = create_perpendicular_unit_vector(camera_z, camera_x)

    rotation = np.array([camera_x, camera_y, camera_z])
    return transform_from(rotation, camera_position)


class FollowCamera:
    """
    Camera that keeps a fixed offset behind and above a tracked object.

    Example usage:
        camera = FollowCamera(FollowSettings(behind=3.0, above=1.0))
        camera_transform = camera.follow(object_transform)
    """

    def __init__(self, settings: FollowSettings):
        """
        Initialize the follow camera.

        Args:
            settings: Offsets behind and above the object
        """
        self.behind = settings.behind
        self.above = settings.above

        logger.debug(f"Follow camera initialized: behind={self.behind}, above={self.above}")

    def follow(self, object_transform) -> np.ndarray:
        """Camera transform for the current object transform."""
        return camera_following(object_transform, self.behind, self.above)
