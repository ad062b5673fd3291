"""
Tests for matrix, rotation matrix and unit vector validation.
"""

import pytest
import numpy as np

from rigidpose.validation import (
    RotationMatrixError,
    StructuralError,
    UnitVectorError,
    validate_matching_matrices,
    validate_rotation_matrix,
    validate_square_matrix,
    validate_unit_vector,
)
from rigidpose.transforms import identity_transform, rotate_around_global_axes, rotation_of


class TestValidateSquareMatrix:
    """Tests for structural matrix checks."""

    def test_valid_matrices(self):
        """Square matrices of 2x2 and up pass."""
        validate_square_matrix([[1, 2], [3, 4]])
        validate_square_matrix(np.eye(3))
        validate_square_matrix(identity_transform())

    def test_none(self):
        with pytest.raises(StructuralError, match="The matrix is None"):
            validate_square_matrix(None)

    def test_single_row(self):
        with pytest.raises(StructuralError, match="more than one row"):
            validate_square_matrix([[1]])

    def test_first_row_missing(self):
        with pytest.raises(StructuralError, match="first row of the matrix is missing"):
            validate_square_matrix([None, [1, 2]])

    def test_single_column(self):
        with pytest.raises(StructuralError, match="more than one column"):
            validate_square_matrix([[1], [2]])

    def test_not_square(self):
        with pytest.raises(StructuralError, match="equal number of rows and columns"):
            validate_square_matrix([[1, 2, 3], [4, 5, 6]])

    def test_later_row_missing(self):
        with pytest.raises(StructuralError, match="Row 2 of the matrix is missing"):
            validate_square_matrix([[1, 2], None])

    def test_ragged(self):
        """A later row with a different column count is named in the message."""
        with pytest.raises(StructuralError, match="Row 3 .* same number of columns"):
            validate_square_matrix([[1, 2, 3], [4, 5, 6], [7, 8]])

    def test_error_carries_matrix(self):
        """The offending matrix is attached and rendered after the message."""
        matrix = [[1, 2, 3], [4, 5, 6]]
        with pytest.raises(StructuralError) as excinfo:
            validate_square_matrix(matrix)

        assert excinfo.value.matrix is matrix
        assert str(excinfo.value).endswith(":\n 1  2  3\n 4  5  6")

    @pytest.mark.parametrize("matrix", [5, 2.5, np.array(1.0)])
    def test_scalar(self, matrix):
        """A bare number is rejected as a structural problem."""
        with pytest.raises(StructuralError, match="more than one row"):
            validate_square_matrix(matrix)

    def test_scalar_rows(self):
        with pytest.raises(StructuralError, match="first row of the matrix is missing"):
            validate_square_matrix([1, 2])

    def test_is_value_error(self):
        """Structural errors can be handled as ValueError."""
        with pytest.raises(ValueError):
            validate_square_matrix(None)


class TestValidateMatchingMatrices:
    """Tests for size comparison of two matrices."""

    def test_matching(self):
        validate_matching_matrices(np.eye(4), identity_transform())

    def test_different_sizes(self):
        with pytest.raises(StructuralError, match="same number of rows"):
            validate_matching_matrices(np.eye(2), np.eye(3))

    def test_malformed_operand(self):
        with pytest.raises(StructuralError, match="is None"):
            validate_matching_matrices(np.eye(3), None)


class TestValidateUnitVector:
    """Tests for the rounded Pythagorean unit vector check."""

    def test_global_axes(self):
        for axis in ([1, 0, 0], [0, 1, 0], [0, 0, -1]):
            validate_unit_vector(axis)

    def test_diagonal_within_precision(self):
        """sqrt(1/2) truncated to 8 places still passes at 3 places."""
        validate_unit_vector([0.70710678, 0.70710678, 0])

    def test_short_vector_fails(self):
        """0.7² + 0.7² = 0.98 does not round to 1 at 3 places."""
        with pytest.raises(UnitVectorError, match="Pythagoras"):
            validate_unit_vector([0.7, 0.7, 0])

    def test_precision_is_configurable(self):
        """The same vector passes at 1 decimal place."""
        validate_unit_vector([0.7, 0.7, 0], 1)
        validate_unit_vector([0.7, 0.7, 0], 0)

    def test_long_vector_fails(self):
        with pytest.raises(UnitVectorError):
            validate_unit_vector([1, 1, 0])

    def test_none(self):
        with pytest.raises(UnitVectorError, match="The unit vector is None"):
            validate_unit_vector(None)

    @pytest.mark.parametrize("vector", [[1, 0], [1, 0, 0, 0], []])
    def test_wrong_length(self, vector):
        with pytest.raises(UnitVectorError, match="three elements"):
            validate_unit_vector(vector)

    @pytest.mark.parametrize("vector", [5.0, 1, np.array(1.0)])
    def test_scalar(self, vector):
        with pytest.raises(UnitVectorError, match="three elements"):
            validate_unit_vector(vector)

    def test_nested_elements(self):
        """A 3x3 matrix has three elements but is not a vector."""
        with pytest.raises(UnitVectorError, match="not all numbers"):
            validate_unit_vector([[1, 0, 0], [0, 1, 0], [0, 0, 1]])

    @pytest.mark.parametrize("vector", [[None, 0, 0], ["1", 0, 0]])
    def test_non_numeric_elements(self, vector):
        with pytest.raises(UnitVectorError, match="not all numbers"):
            validate_unit_vector(vector)

    def test_numpy_input(self):
        validate_unit_vector(np.array([0.6, 0.8, 0.0]))

    def test_non_finite(self):
        with pytest.raises(UnitVectorError):
            validate_unit_vector([np.nan, 0, 0])

    def test_error_attributes(self):
        """The error keeps the vector and a short description."""
        vector = [0.7, 0.7, 0]
        with pytest.raises(UnitVectorError) as excinfo:
            validate_unit_vector(vector)

        error = excinfo.value
        assert error.vector is vector
        assert error.description.startswith("The unit vector does not conform")
        assert str(error).startswith("Unit vector does not comprise three elements")


class TestValidateRotationMatrix:
    """Tests for the rotation matrix check."""

    def test_identity(self):
        validate_rotation_matrix(np.eye(3))

    def test_rotated(self):
        """Rotations produced by the algebra pass."""
        transform = rotate_around_global_axes(identity_transform(), 33, -71, 12.5)
        validate_rotation_matrix(rotation_of(transform))

    def test_reflection_passes(self):
        """Handedness is not checked."""
        validate_rotation_matrix([[-1, 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_non_orthogonal_passes(self):
        """Rows and columns of unit length pass even when not perpendicular."""
        validate_rotation_matrix([[0.6, 0.8, 0], [0.8, 0.6, 0], [0, 0, 1]])

    def test_four_by_four(self):
        with pytest.raises(StructuralError, match="three rows"):
            validate_rotation_matrix(identity_transform())

    def test_two_by_two(self):
        with pytest.raises(StructuralError, match="three rows"):
            validate_rotation_matrix(np.eye(2))

    def test_ragged(self):
        with pytest.raises(StructuralError):
            validate_rotation_matrix([[1, 0, 0], [0, 1], [0, 0, 1]])

    def test_bad_row(self):
        """Rows are checked before columns."""
        matrix = [[2, 0, 0], [0, 1, 0], [0, 0, 1]]
        with pytest.raises(RotationMatrixError) as excinfo:
            validate_rotation_matrix(matrix)

        error = excinfo.value
        assert "along the first row" in error.description
        assert error.matrix is matrix
        assert list(error.vector) == [2, 0, 0]

    def test_bad_second_row(self):
        with pytest.raises(RotationMatrixError, match="along the second row"):
            validate_rotation_matrix([[1, 0, 0], [0, 0.5, 0], [0, 0, 1]])

    def test_bad_column(self):
        """Unit rows with a repeated axis fail on the columns."""
        with pytest.raises(RotationMatrixError) as excinfo:
            validate_rotation_matrix([[1, 0, 0], [1, 0, 0], [0, 0, 1]])

        assert "along the first column" in excinfo.value.description
        assert list(excinfo.value.vector) == [1, 1, 0]

    def test_nested_rows(self):
        """Rows that are not numbers fail the unit vector check."""
        matrix = [[[1], [0], [0]], [[0], [1], [0]], [[0], [0], [1]]]
        with pytest.raises(RotationMatrixError, match="along the first row"):
            validate_rotation_matrix(matrix)

    def test_is_unit_vector_error(self):
        """Rotation matrix errors can be handled as unit vector errors."""
        with pytest.raises(UnitVectorError):
            validate_rotation_matrix([[2, 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_message_renders_matrix(self):
        with pytest.raises(RotationMatrixError) as excinfo:
            validate_rotation_matrix([[2, 0, 0], [0, 1, 0], [0, 0, 1]])

        message = str(excinfo.value)
        assert message.startswith("Rotation matrix does not comprise three rows")
        assert " 2  0  0\n 0  1  0\n 0  0  1" in message


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
