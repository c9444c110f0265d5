"""
Plain-text matrix format.

One row per line, cells separated by whitespace, the matrix terminated by
a blank line or end of input. Numeric cells are written right-aligned in
fixed-point notation; other cells are written with str() and must form a
single non-empty token.
"""

from __future__ import annotations

from typing import IO, Any

from pymatrix.core.cells import NUMERIC_PATTERN
from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.matrix import Matrix


def format_matrix(matrix: Matrix, width: int = 10, digits: int = 4) -> str:
    """
    Render a matrix as text.

    Args:
        matrix: Matrix to render
        width: Minimum column width
        digits: Digits after the decimal point for numeric cells

    Returns:
        The rows, newline-terminated, followed by one blank line

    Raises:
        ValidationError: If a cell is None or its text is empty or contains
            whitespace, since read_matrix could not read it back
    """
    lines = []
    for i, row in enumerate(matrix.tolist()):
        cells = []
        for j, cell in enumerate(row):
            cells.append(_format_cell(cell, width, digits, i, j))
        lines.append(" ".join(cells))
    return "\n".join(lines) + "\n\n"


def write_matrix(matrix: Matrix, stream: IO[str], width: int = 10, digits: int = 4) -> None:
    """Write format_matrix(matrix) to a text stream."""
    stream.write(format_matrix(matrix, width, digits))


def read_matrix(stream: IO[str]) -> Matrix:
    """
    Read one matrix from a text stream.

    Leading blank lines are skipped. The first row fixes the number of
    columns; reading stops at the next blank line or end of input.
    Numeric-looking tokens become floats, other tokens stay text.

    Raises:
        ValidationError: If the stream holds no rows
        DimensionError: If a row has a different number of cells
    """
    rows: list[list[Any]] = []
    for line in stream:
        tokens = line.split()
        if not tokens:
            if rows:
                break
            continue
        if rows and len(tokens) != len(rows[0]):
            relation = "long" if len(tokens) > len(rows[0]) else "short"
            raise DimensionError(
                f"Row {len(rows)} is too {relation}: expected {len(rows[0])} "
                f"cells, got {len(tokens)}"
            )
        rows.append([_parse_token(token) for token in tokens])

    if not rows:
        raise ValidationError("Unexpected end of input: no matrix rows found")
    return Matrix(rows)


def _parse_token(token: str) -> Any:
    if NUMERIC_PATTERN.fullmatch(token):
        return float(token)
    return token


def _format_cell(cell: Any, width: int, digits: int, row: int, column: int) -> str:
    if isinstance(cell, float):
        return f"{cell:>{width}.{digits}f}"
    if isinstance(cell, int) and not isinstance(cell, bool):
        return f"{cell:>{width}d}"
    text = "" if cell is None else str(cell)
    if not text or any(c.isspace() for c in text):
        raise ValidationError(
            f"Cell at ({row}, {column}) cannot be written as a single token: {cell!r}"
        )
    return f"{text:>{width}}"
