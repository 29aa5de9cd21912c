import codecs
from dataclasses import dataclass

from .constants import DEFAULT_OUTPUT_FILE


@dataclass
class SparseCalcConfig:
    """
    Configuration for reading, computing and writing sparse matrices.

    Controls where the interactive driver writes its result, how matrix
    files are decoded, and how strictly element lines are checked.
    """

    output_path: str = DEFAULT_OUTPUT_FILE
    """File the interactive driver writes the result matrix to."""

    encoding: str = 'utf-8'
    """Text encoding used for both reading and writing matrix files."""

    strict_bounds: bool = False
    """Whether to reject element lines whose (row, col) fall outside the declared
    rows/cols header. When False, such entries are stored as-is."""

    verbose: bool = False
    """Whether to print per-step progress and timing information."""

    def validate(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.output_path, str) or len(self.output_path) == 0:
            raise ValueError("output_path must be a non-empty string")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}")
