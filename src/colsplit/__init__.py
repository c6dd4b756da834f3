"""
colsplit - split a single-sheet Excel workbook into one sheet per column value.

This package reads the rows of a one-sheet workbook, groups them by the text
found in a chosen column and writes each group to its own sheet of a new
workbook.
"""

__version__ = "0.1.0"

from .core import split_workbook, stringify_row
from .cells import cell_to_string
from .errors import (
    SplitError,
    WorkbookValidationError,
    ShortRowError,
    CellConversionError,
    SheetCreateError,
    RowWriteError
)
from .patterns import DEFAULT_IGNORE_PATTERNS, LiteralMatcher, compile_patterns
from .runner import split_file
from .io_utils import load_workbook_safe, save_workbook

__all__ = [
    "split_workbook",
    "stringify_row",
    "cell_to_string",
    "SplitError",
    "WorkbookValidationError",
    "ShortRowError",
    "CellConversionError",
    "SheetCreateError",
    "RowWriteError",
    "DEFAULT_IGNORE_PATTERNS",
    "LiteralMatcher",
    "compile_patterns",
    "split_file",
    "load_workbook_safe",
    "save_workbook"
]
