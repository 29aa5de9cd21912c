from collections import defaultdict

from .sparse_matrix import SparseMatrix
from .matrix_errors import DimensionMismatchError, InvalidOperationError
from .constants import Operation


def _check_same_shape(operation: str, a: SparseMatrix, b: SparseMatrix) -> None:
    if a.rows != b.rows or a.cols != b.cols:
        raise DimensionMismatchError(operation, a.shape, b.shape)


def add(a: SparseMatrix, b: SparseMatrix) -> SparseMatrix:
    """
    Element-wise sum of two matrices of the same shape.

    Args:
        a: Left operand
        b: Right operand

    Returns:
        New SparseMatrix; coordinates whose sum is exactly zero are not stored

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    _check_same_shape(Operation.ADD, a, b)
    result = a.copy()
    for r, c, v in b.iterate():
        result.set(r, c, result.get(r, c) + v)
    return result


def subtract(a: SparseMatrix, b: SparseMatrix) -> SparseMatrix:
    """
    Element-wise difference a - b of two matrices of the same shape.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    _check_same_shape(Operation.SUBTRACT, a, b)
    result = a.copy()
    for r, c, v in b.iterate():
        result.set(r, c, result.get(r, c) - v)
    return result


def multiply(a: SparseMatrix, b: SparseMatrix) -> SparseMatrix:
    """
    Matrix product a @ b.

    b is first grouped by row so each entry (i, k) of a only visits the
    entries of b in row k.

    Args:
        a: Left operand, shape (n, k)
        b: Right operand, shape (k, m)

    Returns:
        New SparseMatrix of shape (n, m)

    Raises:
        DimensionMismatchError: If a.cols != b.rows
    """
    if a.cols != b.rows:
        raise DimensionMismatchError(Operation.MULTIPLY, a.shape, b.shape)

    b_rows = defaultdict(list)
    for k, j, v in b.iterate():
        b_rows[k].append((j, v))

    result = SparseMatrix(a.rows, b.cols)
    for i, k, v1 in a.iterate():
        for j, v2 in b_rows.get(k, ()):
            result.add_at(i, j, v1 * v2)
    return result


OPERATIONS = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
}


def apply_operation(name: str, a: SparseMatrix, b: SparseMatrix) -> SparseMatrix:
    """Dispatch to add / subtract / multiply by name."""
    if name not in OPERATIONS:
        raise InvalidOperationError(name, list(OPERATIONS.keys()))
    return OPERATIONS[name](a, b)
