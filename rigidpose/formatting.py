"""
Deterministic comparison and text rendering of vectors and matrices.

Floats are converted to their exact decimal expansion before rounding, so
results never depend on binary representation error at the rounding
boundary.

Rounding Modes:
    - ROUND_HALF_EVEN: equality checks, validation and diagnostic text
    - ROUND_HALF_UP: human-readable str() of the value types

Rendering Rules:
    - Trailing fractional zeros and a trailing decimal point are stripped
    - A bare fraction keeps its leading zero (0.5, never .5)
    - Non-negative values get one leading space to line up with minus signs
    - Every value is padded to the longest rendered value of the whole matrix
"""

import math
import numbers
from decimal import (
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
)

import numpy as np

DEFAULT_DECIMAL_PLACES = 3

# Large enough to hold the exact square of any double without rounding
_EXACT = Context(prec=4000, Emax=999999, Emin=-999999)


def round_decimal(value: float, decimal_places: int, rounding: str = ROUND_HALF_EVEN) -> Decimal:
    """
    Round a float to a fixed number of decimal places.

    Args:
        value: Finite float
        decimal_places: Number of places kept after the decimal point
        rounding: A rounding mode from the decimal module

    Returns:
        Rounded Decimal
    """
    return Decimal(float(value)).quantize(
        Decimal(1).scaleb(-decimal_places), rounding=rounding, context=_EXACT
    )


def _elements_equal(first: float, second: float, decimal_places: int) -> bool:
    if not (math.isfinite(first) and math.isfinite(second)):
        return first == second
    return round_decimal(first, decimal_places) == round_decimal(second, decimal_places)


def vectors_equal(first, second, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> bool:
    """
    Compare two vectors element by element after half-even rounding.

    Args:
        first: Sequence of numbers
        second: Sequence of numbers
        decimal_places: Precision of the comparison

    Returns:
        True if both have the same length and every rounded pair is equal
    """
    if len(first) != len(second):
        return False
    return all(
        _elements_equal(float(a), float(b), decimal_places)
        for a, b in zip(first, second)
    )


def matrices_equal(first, second, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> bool:
    """Compare two matrices row by row with vectors_equal()."""
    if len(first) != len(second):
        return False
    return all(
        vectors_equal(row_a, row_b, decimal_places)
        for row_a, row_b in zip(first, second)
    )


def equal_at_precision(first, second, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> bool:
    """
    Rounded equality for vectors or matrices.

    Dispatches on the dimensionality of the first argument.
    """
    if _is_nested(first) or np.ndim(first) == 2:
        return matrices_equal(first, second, decimal_places)
    return vectors_equal(first, second, decimal_places)


def _is_nested(value) -> bool:
    try:
        return len(value) > 0 and hasattr(value[0], "__len__")
    except TypeError:
        return False


def format_number(
    value: float,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
    rounding: str = ROUND_HALF_EVEN,
) -> str:
    """
    Render a single number with trailing zeros stripped.

    Examples:
        >>> format_number(0.5, 2)
        '0.5'
        >>> format_number(4.0, 2)
        '4'
        >>> format_number(-0.0001, 2)
        '0'
    """
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    rounded = round_decimal(value, decimal_places, rounding)
    if rounded.is_zero():
        # no negative zero in the rendered output
        return "0"
    text = format(rounded.normalize(_EXACT), "f")
    if text.startswith("."):
        text = "0" + text
    return text


def _has_length(value) -> bool:
    try:
        len(value)
    except TypeError:
        return False
    return True


def _is_number(value) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 0
    return isinstance(value, numbers.Real)


def _render_row(row, decimal_places: int, rounding: str) -> list:
    rendered = []
    for value in row:
        if not _is_number(value):
            rendered.append(" " + str(value))
            continue
        text = format_number(value, decimal_places, rounding)
        # sign column follows the raw value, so -0.0001 renders as "0"
        if float(value) >= 0:
            text = " " + text
        rendered.append(text)
    return rendered


def _join_rows(rows: list) -> str:
    longest = max((len(text) for row in rows for text in row), default=0)
    lines = []
    for row in rows:
        padded = [text.ljust(longest) for text in row[:-1]] + row[-1:]
        lines.append(" ".join(padded))
    return "\n".join(lines)


def format_matrix(
    matrix,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
    rounding: str = ROUND_HALF_EVEN,
) -> str:
    """
    Render a matrix as aligned columns, one line per row.

    Column width is the longest rendered value in the whole matrix. Rows
    that are missing render as ' None'; ragged rows render as they are.

    Args:
        matrix: Sequence of rows
        decimal_places: Number of places after the decimal point
        rounding: Rounding mode from the decimal module

    Returns:
        Multi-line string
    """
    if not _has_length(matrix):
        return str(matrix)
    rows = []
    for row in matrix:
        if not _has_length(row):
            rows.append([" " + str(row)])
        else:
            rows.append(_render_row(row, decimal_places, rounding))
    return _join_rows(rows)


def format_vector(
    vector,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
    rounding: str = ROUND_HALF_EVEN,
) -> str:
    """
    Render a vector as a single aligned row.

    Same rules as format_matrix() except that the sign-column space in
    front of the first value is dropped.

    Examples:
        >>> format_vector([0, 0, 1, 4], 2)
        '0  0  1  4'
    """
    if not _has_length(vector):
        return str(vector)
    text = _join_rows([_render_row(vector, decimal_places, rounding)])
    if text.startswith(" "):
        text = text[1:]
    return text


def format_value(
    value,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
    rounding: str = ROUND_HALF_EVEN,
) -> str:
    """Render a vector or a matrix, dispatching on dimensionality."""
    if value is None:
        return "None"
    if _is_nested(value) or np.ndim(value) == 2:
        return format_matrix(value, decimal_places, rounding)
    return format_vector(value, decimal_places, rounding)
