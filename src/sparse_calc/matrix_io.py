from typing import Optional

from .config import SparseCalcConfig
from .constants import FormatPattern, MIN_LINES
from .matrix_errors import MalformedInputError, MatrixIOError
from .sparse_matrix import SparseMatrix


def parse_matrix(text: str, config: Optional[SparseCalcConfig] = None, filename: str = None) -> SparseMatrix:
    """
    Parse the rows=/cols= text format into a SparseMatrix.

    Blank lines are ignored and element lines that do not look like
    "(row, col, value)" are skipped silently.

    Args:
        text: Full file contents
        config: Optional config; only strict_bounds is used here
        filename: Used in error messages only

    Returns:
        The parsed SparseMatrix

    Raises:
        MalformedInputError: If the header is missing or there are fewer than 3 non-blank lines
    """
    if config is None:
        config = SparseCalcConfig()

    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]

    if len(lines) < MIN_LINES:
        raise MalformedInputError("Input file has insufficient data", filename)

    row_match = FormatPattern.ROWS.search(lines[0])
    col_match = FormatPattern.COLS.search(lines[1])
    if row_match is None or col_match is None:
        raise MalformedInputError("Input file has wrong format", filename)

    rows = int(row_match.group(1))
    cols = int(col_match.group(1))
    matrix = SparseMatrix(rows, cols)

    for line in lines[2:]:
        match = FormatPattern.ELEMENT.search(line)
        if match is None:
            continue
        r, c, v = (int(g) for g in match.groups())
        if config.strict_bounds and not (r < rows and c < cols):
            raise MalformedInputError(f"Element ({r}, {c}) is outside a {rows}x{cols} matrix", filename)
        matrix.set(r, c, v)

    return matrix


def format_matrix(matrix: SparseMatrix) -> str:
    """Serialize a matrix into the rows=/cols= text format."""
    lines = [f"rows={matrix.rows}\n", f"cols={matrix.cols}\n"]
    for r, c, v in matrix.iterate():
        lines.append(f"({r}, {c}, {v})\n")
    return "".join(lines)


def read_matrix(path: str, config: Optional[SparseCalcConfig] = None) -> SparseMatrix:
    """
    Read a matrix file from disk.

    Raises:
        MatrixIOError: If the file cannot be opened or decoded
        MalformedInputError: If the contents are not a valid matrix file
    """
    if config is None:
        config = SparseCalcConfig()
    try:
        with open(path, 'r', encoding=config.encoding) as f:
            contents = f.read()
    except (OSError, ValueError) as e:
        raise MatrixIOError(f"Unable to read input file: {e}", filename=path) from e
    return parse_matrix(contents, config, filename=path)


def write_matrix(path: str, matrix: SparseMatrix, config: Optional[SparseCalcConfig] = None) -> None:
    """
    Write a matrix to disk, overwriting any existing file.

    Raises:
        MatrixIOError: If the file cannot be written
    """
    if config is None:
        config = SparseCalcConfig()
    content = format_matrix(matrix)
    try:
        with open(path, 'w', encoding=config.encoding) as f:
            f.write(content)
    except (OSError, ValueError) as e:
        raise MatrixIOError(f"Unable to write output file: {e}", filename=path) from e
