"""
Validation of matrices, rotation matrices and unit vectors.

Validation is strictly opt-in: none of the transform operations call it.
Each check raises on the first problem found and returns None otherwise.

Unit Vector Test:
    x² + y² + z², computed exactly from the binary float values and rounded
    half-even to the requested number of decimal places, must equal 1.

Rotation Matrix Test:
    The matrix must be 3x3 and each of its three rows and three columns must
    pass the unit vector test. Rows and columns are not checked for mutual
    perpendicularity.
"""

from decimal import ROUND_HALF_EVEN, Decimal

from .formatting import (
    DEFAULT_DECIMAL_PLACES,
    _EXACT,
    _has_length,
    _is_number,
    format_matrix,
    format_vector,
)

_ORDINALS = ("first", "second", "third")

# Unit vectors in error messages are shown at high precision
_VECTOR_DIAGNOSTIC_PLACES = 10


class StructuralError(ValueError):
    """A matrix is missing, ragged, not square or smaller than 2x2."""

    def __init__(self, message: str, matrix=None):
        super().__init__(message)
        self.matrix = matrix


class UnitVectorError(ValueError):
    """A vector does not have 3 elements or does not have unit length."""

    def __init__(self, description: str, vector=None):
        super().__init__(
            "Unit vector does not comprise three elements which represent the "
            "x and y and z coordinates of a valid unit vector:\n"
            + format_vector(vector, _VECTOR_DIAGNOSTIC_PLACES)
            + "\n" + description
        )
        self.vector = vector
        self.description = description


class RotationMatrixError(UnitVectorError):
    """A row or column of a 3x3 rotation matrix is not a unit vector."""

    def __init__(self, description: str, matrix=None, vector=None):
        ValueError.__init__(
            self,
            "Rotation matrix does not comprise three rows each with three "
            "columns where each row and column comprises a valid unit vector:\n"
            + format_matrix(matrix)
            + "\n" + description
        )
        self.matrix = matrix
        self.vector = vector
        self.description = description


def _structural_message(message: str, matrix, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
    return message + ":\n" + format_matrix(matrix, decimal_places)


def _length(value):
    if not _has_length(value):
        return None
    return len(value)


def validate_square_matrix(matrix) -> None:
    """
    Check that a matrix is square, at least 2x2, and not ragged.

    Args:
        matrix: Sequence of rows (nested lists or a numpy array)

    Raises:
        StructuralError: If any structural condition fails
    """
    if matrix is None:
        raise StructuralError("The matrix is None", matrix)

    rows = _length(matrix)
    if rows is None or rows <= 1:
        raise StructuralError(
            _structural_message("The matrix does not have more than one row", matrix),
            matrix,
        )

    columns = _length(matrix[0])
    if columns is None:
        raise StructuralError(
            _structural_message("The first row of the matrix is missing", matrix),
            matrix,
        )
    if columns <= 1:
        raise StructuralError(
            _structural_message(
                "The first row of the matrix does not have more than one column", matrix
            ),
            matrix,
        )
    if rows != columns:
        raise StructuralError(
            _structural_message(
                "The matrix does not have an equal number of rows and columns", matrix
            ),
            matrix,
        )

    for index in range(1, rows):
        row_columns = _length(matrix[index])
        if row_columns is None:
            raise StructuralError(
                _structural_message(f"Row {index + 1} of the matrix is missing", matrix),
                matrix,
            )
        if row_columns != columns:
            raise StructuralError(
                _structural_message(
                    f"Row {index + 1} of the matrix does not have the same number "
                    f"of columns as the first row",
                    matrix,
                ),
                matrix,
            )


def validate_matching_matrices(first, second) -> None:
    """
    Check that two matrices are individually sound and of the same size.

    Raises:
        StructuralError: If either matrix is malformed or their sizes differ
    """
    validate_square_matrix(first)
    validate_square_matrix(second)

    both = format_matrix(first) + "\n\n" + format_matrix(second)
    if len(first) != len(second):
        raise StructuralError(
            "The matrices do not have the same number of rows:\n\n" + both, first
        )
    if len(first[0]) != len(second[0]):
        raise StructuralError(
            "The matrices do not have the same number of columns:\n\n" + both, first
        )


def validate_unit_vector(vector, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> None:
    """
    Check that a vector has three elements and unit length.

    Args:
        vector: Candidate unit vector
        decimal_places: Precision of the rounded Pythagorean test

    Raises:
        UnitVectorError: If the vector is missing, has the wrong number of
            elements, holds something other than numbers or fails the
            Pythagorean test
    """
    if vector is None:
        raise UnitVectorError("The unit vector is None", vector)

    if _length(vector) != 3:
        raise UnitVectorError(
            "The unit vector does not comprise three elements: "
            + format_vector(vector, decimal_places),
            vector,
        )

    if not all(_is_number(value) for value in vector):
        raise UnitVectorError(
            "The unit vector elements are not all numbers: "
            + format_vector(vector, decimal_places),
            vector,
        )

    x, y, z = (Decimal(float(value)) for value in vector)
    squares = [_EXACT.multiply(value, value) for value in (x, y, z)]
    total = _EXACT.add(_EXACT.add(squares[0], squares[1]), squares[2])
    if not total.is_finite():
        rounded = total
    else:
        rounded = total.quantize(
            Decimal(1).scaleb(-decimal_places), rounding=ROUND_HALF_EVEN, context=_EXACT
        )
    if rounded == 1:
        return

    raise UnitVectorError(
        "The unit vector does not conform with Pythagoras' theorem: "
        + format_vector(vector, decimal_places),
        vector,
    )


def validate_rotation_matrix(matrix, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> None:
    """
    Check that a matrix is a 3x3 matrix of unit-length rows and columns.

    Rows are checked first, then columns, and the first failure is reported.

    Args:
        matrix: Candidate rotation matrix
        decimal_places: Precision of the rounded Pythagorean test

    Raises:
        StructuralError: If the matrix is malformed or not 3x3
        RotationMatrixError: If a row or column is not a unit vector
    """
    validate_square_matrix(matrix)

    if len(matrix) != 3:
        raise StructuralError(
            _structural_message(
                "The rotation matrix does not comprise three rows", matrix, decimal_places
            ),
            matrix,
        )
    if len(matrix[0]) != 3:
        raise StructuralError(
            _structural_message(
                "The rotation matrix does not comprise three columns", matrix, decimal_places
            ),
            matrix,
        )

    candidates = [("row", index, list(matrix[index])) for index in range(3)]
    candidates += [
        ("column", index, [matrix[row][index] for row in range(3)]) for index in range(3)
    ]
    for kind, index, vector in candidates:
        try:
            validate_unit_vector(vector, decimal_places)
        except UnitVectorError as e:
            raise RotationMatrixError(
                f"The rotation matrix does not comprise a rational unit vector "
                f"along the {_ORDINALS[index]} {kind}: {e.description}",
                matrix,
                vector,
            ) from e
