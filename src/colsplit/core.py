"""
Core row partitioning: one output sheet per distinct value of a column.
"""

import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from openpyxl import Workbook
from openpyxl.cell.cell import TYPE_STRING, Cell
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import IllegalCharacterError
from openpyxl.worksheet.worksheet import Worksheet

from .cells import cell_to_string
from .errors import (
    CellConversionError,
    RowWriteError,
    SheetCreateError,
    ShortRowError,
    WorkbookValidationError,
)
from .patterns import Matcher, compile_patterns, matches_any

MAX_SHEET_TITLE_LENGTH = 31
INVALID_TITLE_CHARS = re.compile(r"[\\*?:/\[\]]")


def split_workbook(
    source: Optional[Workbook],
    col_index: int,
    *,
    short_row_error: bool = False,
    trim_sheet_names: bool = False,
    ignore_patterns: Optional[Iterable[Union[str, Matcher]]] = None
) -> Workbook:
    """
    Split the single sheet of a workbook into one sheet per group key.

    The group key of a row is the text of its cell at ``col_index``. Rows
    are written to the output sheet named by their key, as text cells, in
    source order. The source workbook is left untouched.

    Args:
        source: Workbook holding exactly one worksheet
        col_index: 0-based index of the column holding the group key
        short_row_error: Fail on rows that do not reach ``col_index``
            instead of skipping them
        trim_sheet_names: Strip surrounding whitespace from keys before
            using them as sheet names
        ignore_patterns: Regular expressions (or matchers) searched in the
            untrimmed key; matching rows are dropped

    Returns:
        New workbook with one sheet per distinct surviving key

    Raises:
        WorkbookValidationError: If the source is missing, does not have
            exactly one sheet, or the column index is negative
        ShortRowError: If a short row is found and ``short_row_error`` is set
        CellConversionError: If a cell value cannot be rendered as text
        SheetCreateError: If a key is not a usable sheet name
        RowWriteError: If a converted row cannot be written
    """
    if source is None:
        raise WorkbookValidationError("Input workbook is required")

    sheets = source.worksheets
    if len(sheets) > 1:
        raise WorkbookValidationError(
            f"Input workbook may not have more than one sheet, found {len(sheets)}: {source.sheetnames}"
        )
    if not sheets:
        raise WorkbookValidationError("Input workbook contains no sheets")

    if col_index < 0:
        raise WorkbookValidationError(f"Column index must be 0 or greater, got: {col_index}")

    matchers = compile_patterns(ignore_patterns)

    out_wb = Workbook()
    out_wb.remove(out_wb.active)
    out_sheets: Dict[str, Worksheet] = {}

    for row_number, row in enumerate(sheets[0].iter_rows(), start=1):
        cells = trim_row(row)

        if len(cells) < col_index + 1:
            if short_row_error:
                raise ShortRowError(
                    f"Not enough cells in row {row_number}: "
                    f"need {col_index + 1}, found {len(cells)}"
                )
            continue

        key = _cell_text(cells[col_index].value, row_number, col_index)

        if matches_any(key, matchers):
            continue

        if trim_sheet_names:
            key = key.strip()

        out_ws = out_sheets.get(key)
        if out_ws is None:
            out_ws = add_output_sheet(out_wb, key, row_number)
            out_sheets[key] = out_ws

        _write_text_row(out_ws, stringify_row(cells, row_number), row_number)

    return out_wb


def trim_row(row: Sequence[Cell]) -> Tuple[Cell, ...]:
    """
    Drop trailing cells without a value.

    Empty cells before the last populated one are kept and read as "".
    """
    end = len(row)
    while end and row[end - 1].value is None:
        end -= 1
    return tuple(row[:end])


def stringify_row(cells: Sequence[Cell], row_number: int = 0) -> List[str]:
    """
    Render every cell of a row as text, keeping cell order.

    Args:
        cells: Cells of the row
        row_number: 1-based row number used in error messages

    Returns:
        List of cell texts

    Raises:
        CellConversionError: If any cell value cannot be rendered as text
    """
    return [
        _cell_text(cell.value, row_number, col_idx)
        for col_idx, cell in enumerate(cells)
    ]


def add_output_sheet(wb: Workbook, title: str, row_number: int = 0) -> Worksheet:
    """
    Create a sheet for a group key, enforcing xlsx sheet name rules.

    openpyxl silently renames duplicates and only warns on long titles,
    so those rules are checked here before creating the sheet.

    Raises:
        SheetCreateError: If the title cannot name a sheet in the workbook
    """
    problem = sheet_title_problem(title, wb.sheetnames)
    if problem:
        raise SheetCreateError(f"Cannot add sheet '{title}' for row {row_number}: {problem}")

    try:
        return wb.create_sheet(title=title)
    except ValueError as e:
        raise SheetCreateError(f"Cannot add sheet '{title}' for row {row_number}: {e}") from e


def sheet_title_problem(title: str, existing: Sequence[str] = ()) -> Optional[str]:
    """
    Describe why a title is not a valid new sheet name, or return None.

    Args:
        title: Candidate sheet title
        existing: Titles already used in the workbook

    Returns:
        Reason the title is rejected, or None if it is usable
    """
    if not title:
        return "sheet name is empty"

    if len(title) > MAX_SHEET_TITLE_LENGTH:
        return f"sheet name is longer than {MAX_SHEET_TITLE_LENGTH} characters"

    m = INVALID_TITLE_CHARS.search(title)
    if m:
        return f"invalid character {m.group(0)!r} in sheet name"

    if title.startswith("'") or title.endswith("'"):
        return "sheet name may not start or end with an apostrophe"

    # Excel compares sheet names case-insensitively
    folded = title.casefold()
    if any(name.casefold() == folded for name in existing):
        return "duplicate sheet name"

    return None


def _cell_text(value, row_number: int, col_idx: int) -> str:
    try:
        return cell_to_string(value)
    except CellConversionError as e:
        raise CellConversionError(
            f"Coercing cell {get_column_letter(col_idx + 1)}{row_number} to string: {e}"
        ) from e


def _write_text_row(ws: Worksheet, values: List[str], row_number: int) -> None:
    """Append values as string cells; text starting with '=' stays text."""
    try:
        cells = []
        for value in values:
            cell = Cell(ws, value=value)
            cell.data_type = TYPE_STRING
            cells.append(cell)
        ws.append(cells)
    except (IllegalCharacterError, ValueError) as e:
        raise RowWriteError(f"Bad cell write for row {row_number} in sheet '{ws.title}': {e}") from e
