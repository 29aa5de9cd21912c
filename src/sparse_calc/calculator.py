import sys
import time
from typing import Callable, Optional

from .config import SparseCalcConfig
from .constants import MENU, OPERATION_CHOICES
from .matrix_errors import InvalidOperationError, SparseCalcError
from .matrix_io import read_matrix, write_matrix
from .matrix_ops import apply_operation
from .sparse_matrix import SparseMatrix



class SparseMatrixCalculator:
    """
    Driver that loads two matrix files, combines them and writes the result.

    The arithmetic itself lives in matrix_ops; this class only sequences
    the read / compute / write steps and reports progress.
    """

    def __init__(self, config: SparseCalcConfig = None):
        """
        Initialize the SparseMatrixCalculator

        Args:
            config: SparseCalcConfig object controlling file handling and output
        """
        self.config = config if config is not None else SparseCalcConfig()
        self.config.validate()
        self.result = None

    def resolve_choice(self, choice: str) -> str:
        """Map an interactive menu selector ("1", "2", "3") to an operation name."""
        choice = choice.strip()
        if choice not in OPERATION_CHOICES:
            raise InvalidOperationError(choice, list(OPERATION_CHOICES.keys()))
        return OPERATION_CHOICES[choice]

    def run(self, operation: str, first_path: str, second_path: str,
            output_path: Optional[str] = None) -> SparseMatrix:
        """
        Compute `first <operation> second` and write it to disk.

        Args:
            operation: One of 'add', 'subtract', 'multiply'
            first_path: Path of the left operand file
            second_path: Path of the right operand file
            output_path: Where to write the result, defaults to config.output_path

        Returns:
            The result matrix
        """
        if output_path is None:
            output_path = self.config.output_path

        start_time = time.time()
        self._log(f"=== Computing sparse matrix {operation} ===")

        st = time.time()
        self._log("Loading input matrices")
        first = read_matrix(first_path, self.config)
        second = read_matrix(second_path, self.config)
        self._log(f"  first: {first}")
        self._log(f"  second: {second}")
        self._log(f"  took: {time.time() - st} seconds")

        st = time.time()
        self._log(f"Applying {operation}")
        self.result = apply_operation(operation, first, second)
        self._log(f"  result: {self.result}")
        self._log(f"  took: {time.time() - st} seconds")

        st = time.time()
        self._log(f"Writing result to {output_path}")
        write_matrix(output_path, self.result, self.config)
        self._log(f"  took: {time.time() - st} seconds")

        self._log(f"Total time taken: {time.time() - start_time} seconds")
        return self.result

    def interactive(self, input_fn: Callable[[str], str] = input) -> str:
        """
        Prompt for the operation and both input files, then run.

        Returns:
            The path the result was written to
        """
        print(MENU)
        choice = input_fn("Enter your choice: ")
        file1 = input_fn("Enter the first input file path: ")
        file2 = input_fn("Enter the second input file path: ")

        # reject a bad selector before touching any file
        operation = self.resolve_choice(choice)
        self.run(operation, file1.strip(), file2.strip())
        return self.config.output_path

    def _log(self, msg: str) -> None:
        if self.config.verbose:
            print(msg)


def main(config: SparseCalcConfig = None, input_fn: Callable[[str], str] = input) -> int:
    """Interactive entry point. Returns a process exit status."""
    try:
        calculator = SparseMatrixCalculator(config)
        output_path = calculator.interactive(input_fn)
    except (SparseCalcError, ValueError, EOFError) as e:
        if isinstance(e, EOFError):
            print("Error: input ended before all prompts were answered", file=sys.stderr)
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Result saved to {output_path}")
    return 0
