"""
Rigid Body Pose Package

A small, deterministic linear-algebra engine for positioning and orienting
rigid bodies in three-dimensional space using 4x4 transform matrices
(3x3 rotation + 3x1 translation).

Transform Layout:
    Rotation rows are the local X, Y, Z axes in global space;
    the last column holds the position; the bottom row is [0, 0, 0, 1].

Conventions:
    - Right-handed coordinate system
    - Rotation around an axis is clockwise looking from the origin towards
      positive infinity along the axis
    - Angles in degrees, Euler angles applied in X, Y, Z order
    - Every operation returns a new array; inputs are never modified

Features:
    - Rotation and translation around global, local and foreign axes
    - Axis-angle rotation around arbitrary unit vectors
    - Opt-in validation of rotation matrices and unit vectors
    - Follow-camera derivation
    - Rounded comparison and deterministic text rendering
    - Validated immutable value types
"""

from .vectors import (
    GLOBAL_ORIGIN,
    GLOBAL_X_AXIS,
    GLOBAL_Y_AXIS,
    GLOBAL_Z_AXIS,
    cross_product,
    create_perpendicular_unit_vector,
    create_unit_vector_from_points,
    create_unit_vector_from_transforms,
    measure_distance,
    normalize_vector,
)
from .transforms import (
    identity_transform,
    transform_from,
    transform_for_rotation,
    transform_for_translation,
    rotation_of,
    translation_of,
    local_x_axis,
    local_y_axis,
    local_z_axis,
    multiply_rotations,
    rotate_around_arbitrary_axis,
    rotate_around_foreign_axes,
    rotate_around_global_axes,
    rotate_around_local_axes,
    translate_along_arbitrary_axis,
    translate_along_foreign_axes,
    translate_along_global_axes,
    translate_along_local_axes,
)
from .validation import (
    StructuralError,
    UnitVectorError,
    RotationMatrixError,
    validate_square_matrix,
    validate_matching_matrices,
    validate_rotation_matrix,
    validate_unit_vector,
)
from .formatting import (
    DEFAULT_DECIMAL_PLACES,
    equal_at_precision,
    format_matrix,
    format_value,
    format_vector,
    matrices_equal,
    vectors_equal,
)
from .camera import FollowCamera, camera_following
from .values import EulerAngles, Position, RotationMatrix, UnitVector
from .config import Config, FollowSettings, InitialPose, PoseStep
from .session import PoseSession, SessionReport, StepResult

__version__ = "1.1.0"
__all__ = [
    # Vector algebra
    "GLOBAL_ORIGIN",
    "GLOBAL_X_AXIS",
    "GLOBAL_Y_AXIS",
    "GLOBAL_Z_AXIS",
    "normalize_vector",
    "cross_product",
    "create_perpendicular_unit_vector",
    "create_unit_vector_from_points",
    "create_unit_vector_from_transforms",
    "measure_distance",
    # Transform algebra
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
    # Validation
    "StructuralError",
    "UnitVectorError",
    "RotationMatrixError",
    "validate_square_matrix",
    "validate_matching_matrices",
    "validate_rotation_matrix",
    "validate_unit_vector",
    # Comparison and formatting
    "DEFAULT_DECIMAL_PLACES",
    "equal_at_precision",
    "vectors_equal",
    "matrices_equal",
    "format_matrix",
    "format_vector",
    "format_value",
    # Camera
    "camera_following",
    "FollowCamera",
    # Value types
    "EulerAngles",
    "Position",
    "RotationMatrix",
    "UnitVector",
    # Configuration and sessions
    "Config",
    "FollowSettings",
    "InitialPose",
    "PoseStep",
    "PoseSession",
    "SessionReport",
    "StepResult",
]
