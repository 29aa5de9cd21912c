import os
import sys
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from sparse_calc import SparseMatrix


def random_sparse(rng: np.random.Generator, rows: int, cols: int, density: float = 0.3, low: int = -9, high: int = 10) -> SparseMatrix:
    """Random integer matrix with roughly `density` of its cells non-zero."""
    dense = rng.integers(low, high, size=(rows, cols))
    mask = rng.random((rows, cols)) < density
    return SparseMatrix.from_dense(dense * mask)


def entries(matrix: SparseMatrix) -> set[tuple[int, int, int]]:
    return set(matrix.iterate())


def write_text(directory, name: str, text: str) -> str:
    fp = os.path.join(str(directory), name)
    with open(fp, 'w') as f:
        f.write(text)
    return fp


def assert_no_zeros(matrix: SparseMatrix):
    zero_keys = [(r, c) for r, c, v in matrix.iterate() if v == 0]
    if len(zero_keys) > 0:
        raise AssertionError(f"Stored zero entries found at: {zero_keys}")
