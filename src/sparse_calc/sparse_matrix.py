import numpy as np
from dataclasses import dataclass, field
from typing import Iterable, Iterator
from scipy.sparse import coo_matrix



@dataclass
class SparseMatrix:
    rows: int
    cols: int
    data_store: dict[tuple[int, int], int] = field(default_factory=dict, init=False)

    @classmethod
    def from_triples(cls, rows: int, cols: int, triples: Iterable[tuple[int, int, int]]) -> 'SparseMatrix':
        """Build a matrix by setting each (row, col, value) triple in order.

        Later triples overwrite earlier ones at the same coordinate, and zero
        values are dropped.
        """
        result = cls(rows, cols)
        for r, c, v in triples:
            result.set(r, c, v)
        return result

    @classmethod
    def from_dense(cls, array) -> 'SparseMatrix':
        """Build a matrix from a 2D array-like, keeping only the non-zero entries."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Input array must be 2D, got {array.ndim}D")
        result = cls(int(array.shape[0]), int(array.shape[1]))
        for r, c in zip(*np.nonzero(array)):
            result.set(int(r), int(c), int(array[r, c]))
        return result

    @classmethod
    def from_file(cls, path: str, config=None) -> 'SparseMatrix':
        """Read a matrix from a rows=/cols= formatted text file."""
        from .matrix_io import read_matrix
        return read_matrix(path, config)

    def save_to_file(self, path: str, config=None) -> None:
        """Write this matrix to a rows=/cols= formatted text file."""
        from .matrix_io import write_matrix
        write_matrix(path, self, config)

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def get(self, row: int, col: int) -> int:
        """Get the value at position (row, col), 0 if nothing is stored there."""
        return self.data_store.get((row, col), 0)

    def set(self, row: int, col: int, value: int) -> None:
        """Set the value at position (row, col).

        A zero value removes any stored entry rather than storing it.
        """
        if value == 0:
            # Remove zero values to maintain sparsity
            self.data_store.pop((row, col), None)
        else:
            self.data_store[(row, col)] = value

    def add_at(self, row: int, col: int, value: int) -> None:
        """Add a value to the element at position (row, col)."""
        self.set(row, col, self.get(row, col) + value)

    def iterate(self) -> Iterator[tuple[int, int, int]]:
        """Yield (row, col, value) for every stored entry, in insertion order.

        Each call starts a fresh pass over the entries.
        """
        for (r, c), v in self.data_store.items():
            yield r, c, v

    def size(self) -> int:
        """Returns the number of non-zero elements."""
        return len(self.data_store)

    def __getitem__(self, key) -> int:
        """Returns the value at position (row, col).

        Args:
            key: A tuple (row, col)

        Returns:
            The value at position (row, col), or 0 if not found.
        """
        if isinstance(key, tuple) and len(key) == 2:
            r, c = key
        else:
            raise KeyError("SparseMatrix indices must be a tuple of length 2")
        return self.get(r, c)

    def __setitem__(self, key, value: int) -> None:
        """Sets the value at position (row, col).

        Args:
            key: A tuple (row, col)
            value: The value to set.
        """
        if isinstance(key, tuple) and len(key) == 2:
            r, c = key
        else:
            raise KeyError("SparseMatrix indices must be a tuple of length 2")
        self.set(r, c, value)

    def __contains__(self, key) -> bool:
        """Checks if a non-zero value is stored at position (row, col)."""
        if isinstance(key, tuple) and len(key) == 2:
            return key in self.data_store
        return False

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[tuple[int, int, int]]:
        return self.iterate()

    def __add__(self, other: 'SparseMatrix') -> 'SparseMatrix':
        from .matrix_ops import add
        return add(self, other)

    def __sub__(self, other: 'SparseMatrix') -> 'SparseMatrix':
        from .matrix_ops import subtract
        return subtract(self, other)

    def __matmul__(self, other: 'SparseMatrix') -> 'SparseMatrix':
        from .matrix_ops import multiply
        return multiply(self, other)

    def density(self) -> float:
        """Fraction of the rows x cols cells holding a non-zero value."""
        total = self.rows * self.cols
        return self.size() / total if total > 0 else 0.0

    def to_dense(self) -> np.ndarray:
        """Returns a dense int64 numpy array with the same contents.

        Out-of-range entries (possible when bounds were not enforced on input)
        raise an IndexError here.
        """
        dense = np.zeros((self.rows, self.cols), dtype=np.int64)
        for r, c, v in self.iterate():
            dense[r, c] = v
        return dense

    def to_scipy(self) -> coo_matrix:
        """Returns the entries as a scipy COO matrix of the same shape."""
        if self.size() == 0:
            return coo_matrix((self.rows, self.cols), dtype=np.int64)
        r_idx, c_idx, vals = zip(*self.iterate())
        return coo_matrix((np.array(vals, dtype=np.int64), (np.array(r_idx), np.array(c_idx))),
                          shape=(self.rows, self.cols))

    def copy(self) -> 'SparseMatrix':
        """Returns a copy of the matrix."""
        result = SparseMatrix(self.rows, self.cols)
        result.data_store = self.data_store.copy()
        return result

    def __str__(self) -> str:
        return f"Matrix {self.rows}x{self.cols} with {self.size()} non-zero elements"

    def __repr__(self) -> str:
        """String representation of the matrix."""
        items_str = ", ".join(f"{k}: {v}" for k, v in sorted(self.data_store.items()))
        return f"SparseMatrix({self.rows}x{self.cols}, {{{items_str}}})"
