"""
Sparse integer matrix arithmetic over a simple rows=/cols= text format.

Reads two matrices, adds, subtracts or multiplies them, and writes the result back in the same format.
"""

__version__ = "0.1.0"

from .sparse_matrix import SparseMatrix
from .matrix_ops import add, subtract, multiply, apply_operation
from .matrix_io import parse_matrix, format_matrix, read_matrix, write_matrix
from .calculator import SparseMatrixCalculator
from .config import SparseCalcConfig
from .matrix_errors import (
    SparseCalcError,
    MatrixIOError,
    MalformedInputError,
    InvalidOperationError,
    DimensionMismatchError,
)

__all__ = [
    "SparseMatrix",
    "add",
    "subtract",
    "multiply",
    "apply_operation",
    "parse_matrix",
    "format_matrix",
    "read_matrix",
    "write_matrix",
    "SparseMatrixCalculator",
    "SparseCalcConfig",
    "SparseCalcError",
    "MatrixIOError",
    "MalformedInputError",
    "InvalidOperationError",
    "DimensionMismatchError",
]
