import re

DEFAULT_OUTPUT_FILE = "result.txt"

MIN_LINES = 3  # rows header, cols header, at least one more line

class FormatPattern:
    ROWS = re.compile(r"rows=(\d+)", re.ASCII)
    COLS = re.compile(r"cols=(\d+)", re.ASCII)
    ELEMENT = re.compile(r"\((\d+),\s*(\d+),\s*(-?\d+)\)", re.ASCII)


class Operation:
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"


# interactive menu selector -> operation name
OPERATION_CHOICES = {
    "1": Operation.ADD,
    "2": Operation.SUBTRACT,
    "3": Operation.MULTIPLY,
}

MENU = "Select operation:\n1. Addition\n2. Subtraction\n3. Multiplication"
