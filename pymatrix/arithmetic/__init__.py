"""
Element-wise arithmetic with implicit expansion.

Submodules:
    broadcasting: Shape compatibility rules and zero-copy expansion
    coercion: Operand variants, result kinds, per-cell combine
    engine: Operator application over matrix storage
"""

from pymatrix.arithmetic.broadcasting import (
    broadcast_shape,
    expand,
    source_index,
    is_scalar_shape,
    is_row_vector,
    is_column_vector,
    is_vector,
    is_square,
)
from pymatrix.arithmetic.coercion import (
    Operator,
    Scalar,
    Text,
    MatrixOperand,
    Operand,
    classify_operand,
)
from pymatrix.arithmetic.engine import apply

__all__ = [
    # Broadcasting
    "broadcast_shape",
    "expand",
    "source_index",
    "is_scalar_shape",
    "is_row_vector",
    "is_column_vector",
    "is_vector",
    "is_square",
    # Coercion
    "Operator",
    "Scalar",
    "Text",
    "MatrixOperand",
    "Operand",
    "classify_operand",
    # Engine
    "apply",
]
