
class SparseCalcError(Exception):
    """Base class for all sparse_calc errors."""
    pass

class MatrixInputError(SparseCalcError, ValueError):
    """Base class for errors caused by bad user input."""
    pass

class MatrixRuntimeError(SparseCalcError, ValueError):
    """Base class for errors raised while computing a result."""
    pass



class MatrixIOError(SparseCalcError):
    """Raised when a matrix file cannot be read or written."""

    def __init__(self, message: str, filename: str = None):
        self.filename = filename
        super().__init__(message)


class MalformedInputError(MatrixInputError):
    """Raised when a matrix file is missing its header or has too few lines."""

    def __init__(self, reason: str, filename: str = None):
        self.reason = reason
        self.filename = filename
        message = reason if filename is None else f"{reason} ({filename})"
        super().__init__(message)


class InvalidOperationError(MatrixInputError):
    """Raised when an unknown operation selector is given."""

    def __init__(self, choice: str, valid_choices: list = None):
        self.choice = choice
        self.valid_choices = valid_choices
        if valid_choices is None:
            message = f"Invalid operation choice '{choice}'"
        else:
            message = f"Invalid operation choice '{choice}'. Must be one of: {valid_choices}"
        super().__init__(message)


class DimensionMismatchError(MatrixRuntimeError):
    """Raised when operand shapes are incompatible for the requested operation."""

    def __init__(self, operation: str, left_shape: tuple[int, int], right_shape: tuple[int, int]):
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape

        if operation == 'multiply':
            message = (f"Matrix dimensions are not compatible for multiplication: "
                       f"{left_shape[0]}x{left_shape[1]} cols != {right_shape[0]}x{right_shape[1]} rows")
        else:
            message = (f"Matrix dimensions must match for {operation}: "
                       f"{left_shape[0]}x{left_shape[1]} vs {right_shape[0]}x{right_shape[1]}")
        super().__init__(message)
