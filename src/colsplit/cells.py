"""
Conversion of cell values to their plain text form.
"""

import datetime
from decimal import Decimal
from typing import Any

from openpyxl.cell.rich_text import CellRichText
from openpyxl.worksheet.formula import ArrayFormula

from .errors import CellConversionError


def cell_to_string(value: Any) -> str:
    """
    Render a cell value as text.

    Args:
        value: Raw cell value as loaded by openpyxl

    Returns:
        Text representation of the value ("" for empty cells)

    Raises:
        CellConversionError: If the value type has no text representation
    """
    if value is None:
        return ""

    if isinstance(value, str):
        return value

    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"

    if isinstance(value, (int, Decimal)):
        return str(value)

    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)

    if isinstance(value, datetime.datetime):
        if value.time() == datetime.time(0, 0) and value.tzinfo is None:
            return value.date().isoformat()
        return value.isoformat(sep=" ")

    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()

    if isinstance(value, datetime.timedelta):
        return str(value)

    if isinstance(value, CellRichText):
        return str(value)

    if isinstance(value, ArrayFormula):
        return value.text or ""

    raise CellConversionError(f"Unsupported cell value type: {type(value).__name__}")

