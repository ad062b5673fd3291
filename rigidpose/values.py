"""
Immutable value types wrapping the transform algebra.

Each type validates its input once, at construction, keeps a read-only copy
of it, and delegates all arithmetic to the functional core. Results computed
internally are wrapped through `_trusted()`, which skips re-validation.

Comparison and Display:
    - `==` compares at 3 decimal places using half-even rounding
    - `equals(other, decimal_places)` compares at any precision
    - `str()` renders at 3 decimal places using half-up rounding
"""

from dataclasses import InitVar, dataclass
from typing import Optional, Tuple

import numpy as np

from .formatting import (
    DEFAULT_DECIMAL_PLACES,
    ROUND_HALF_UP,
    equal_at_precision,
    format_value,
)
from .transforms import (
    multiply_rotations,
    rotate_around_arbitrary_axis,
    rotate_around_foreign_axes,
    rotate_around_global_axes,
    rotate_around_local_axes,
    rotation_of,
    transform_for_rotation,
    transform_for_translation,
    translate_along_foreign_axes,
    translate_along_global_axes,
    translation_of,
)
from .validation import validate_rotation_matrix, validate_unit_vector
from .vectors import measure_distance


def _frozen_copy(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64)
    array.flags.writeable = False
    return array


class _RoundedValue:
    """Rounded equality and rendering shared by the value types."""

    def _values(self):
        raise NotImplementedError

    def equals(self, other, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> bool:
        """True if both values match element-wise after half-even rounding."""
        if not isinstance(other, type(self)):
            return False
        return equal_at_precision(self._values(), other._values(), decimal_places)

    def to_string(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
        """Human-readable rendering using half-up rounding."""
        return format_value(self._values(), decimal_places, ROUND_HALF_UP)

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __str__(self):
        return self.to_string()


@dataclass(frozen=True, eq=False)
class UnitVector(_RoundedValue):
    """
    Direction in 3D space with unit length.

    Raises:
        UnitVectorError: If the vector does not have 3 elements or its
            squared length does not round to 1 at `decimal_places`
    """
    vector: np.ndarray
    decimal_places: InitVar[int] = DEFAULT_DECIMAL_PLACES

    def __post_init__(self, decimal_places):
        validate_unit_vector(self.vector, decimal_places)
        object.__setattr__(self, 'vector', _frozen_copy(self.vector))

    @classmethod
    def _trusted(cls, vector) -> "UnitVector":
        instance = cls.__new__(cls)
        object.__setattr__(instance, 'vector', _frozen_copy(vector))
        return instance

    def _values(self):
        return self.vector

    @property
    def x(self) -> float:
        return float(self.vector[0])

    @property
    def y(self) -> float:
        return float(self.vector[1])

    @property
    def z(self) -> float:
        return float(self.vector[2])


@dataclass(frozen=True, eq=False)
class EulerAngles(_RoundedValue):
    """
    Rotations in degrees around X, Y and Z, applied in that order.

    Angles follow the clockwise convention of the rest of the package;
    negate() converts them to the opposite sense of rotation.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        for name in ('x', 'y', 'z'):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def from_sequence(cls, angles) -> "EulerAngles":
        x, y, z = angles
        return cls(x, y, z)

    def negate(self) -> "EulerAngles":
        return EulerAngles(-self.x, -self.y, -self.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        return np.array(self.as_tuple())

    def _values(self):
        return self.as_tuple()


@dataclass(frozen=True, eq=False)
class RotationMatrix(_RoundedValue):
    """
    Orientation in 3D space.

    Rows are the local X, Y, Z axes expressed in global space. Defaults to
    the identity orientation.

    Raises:
        StructuralError: If the matrix is not 3x3
        RotationMatrixError: If a row or column is not a unit vector
    """
    matrix: Optional[np.ndarray] = None
    decimal_places: InitVar[int] = DEFAULT_DECIMAL_PLACES

    def __post_init__(self, decimal_places):
        if self.matrix is None:
            object.__setattr__(self, 'matrix', _frozen_copy(np.eye(3)))
            return
        validate_rotation_matrix(self.matrix, decimal_places)
        object.__setattr__(self, 'matrix', _frozen_copy(self.matrix))

    @classmethod
    def _trusted(cls, matrix) -> "RotationMatrix":
        instance = cls.__new__(cls)
        object.__setattr__(instance, 'matrix', _frozen_copy(matrix))
        return instance

    def _values(self):
        return self.matrix

    def _as_transform(self) -> np.ndarray:
        return transform_for_rotation(self.matrix)

    def rotate_around_global_axes(self, angles: EulerAngles) -> "RotationMatrix":
        rotated = rotate_around_global_axes(self._as_transform(), *angles.as_tuple())
        return RotationMatrix._trusted(rotation_of(rotated))

    def rotate_around_local_axes(self, angles: EulerAngles) -> "RotationMatrix":
        rotated = rotate_around_local_axes(self._as_transform(), *angles.as_tuple())
        return RotationMatrix._trusted(rotation_of(rotated))

    def rotate_around_foreign_axes(self, angles: EulerAngles, other: "RotationMatrix") -> "RotationMatrix":
        """Rotate around the local axes of another rotation matrix."""
        rotated = rotate_around_foreign_axes(
            self._as_transform(), *angles.as_tuple(), other._as_transform()
        )
        return RotationMatrix._trusted(rotation_of(rotated))

    def rotate_around_axis(self, angle: float, axis: UnitVector) -> "RotationMatrix":
        """Rotate by `angle` degrees around an arbitrary unit vector."""
        rotated = rotate_around_arbitrary_axis(self._as_transform(), angle, axis.vector)
        return RotationMatrix._trusted(rotation_of(rotated))

    def multiply(self, other: "RotationMatrix") -> "RotationMatrix":
        return RotationMatrix._trusted(multiply_rotations(self.matrix, other.matrix))

    @property
    def x_axis(self) -> UnitVector:
        return UnitVector._trusted(self.matrix[0])

    @property
    def y_axis(self) -> UnitVector:
        return UnitVector._trusted(self.matrix[1])

    @property
    def z_axis(self) -> UnitVector:
        return UnitVector._trusted(self.matrix[2])


@dataclass(frozen=True, eq=False)
class Position(_RoundedValue):
    """Location in global space (the translation part of a transform)."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        for name in ('x', 'y', 'z'):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def _from_transform(cls, transform) -> "Position":
        return cls(*translation_of(transform))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        return np.array(self.as_tuple())

    def _values(self):
        return self.as_tuple()

    def translate_along_global_axes(self, x_units: float, y_units: float, z_units: float) -> "Position":
        moved = translate_along_global_axes(
            transform_for_translation(self.as_tuple()), x_units, y_units, z_units
        )
        return Position._from_transform(moved)

    def translate_along_axes(self, units, rotation: RotationMatrix) -> "Position":
        """Move along the axes of a rotation matrix by (x, y, z) units."""
        moved = translate_along_foreign_axes(
            transform_for_translation(self.as_tuple()), *units, rotation._as_transform()
        )
        return Position._from_transform(moved)

    def distance_to(self, other: "Position") -> float:
        return measure_distance(self.as_tuple(), other.as_tuple())
