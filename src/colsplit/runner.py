"""
File-level orchestration: load a workbook, split it and save the result.
"""

from pathlib import Path
from typing import Optional, Dict, Any, Iterable, Union
import logging

from openpyxl.utils import get_column_letter

from .core import split_workbook
from .io_utils import (
    load_workbook_safe,
    save_workbook,
    validate_paths,
    build_manifest,
    write_manifest_csv
)
from .patterns import Matcher

logger = logging.getLogger(__name__)


def split_file(
    input_path: Path,
    output_path: Path,
    col_index: int,
    *,
    ignore_patterns: Optional[Iterable[Union[str, Matcher]]] = None,
    short_row_error: bool = False,
    trim_sheet_names: bool = False,
    data_only: bool = True,
    manifest_path: Optional[Path] = None
) -> Dict[str, Any]:
    """
    Split an Excel file into a new workbook with one sheet per group key.

    Args:
        input_path: Path to input Excel file (exactly one sheet)
        output_path: Path of the workbook to write
        col_index: 0-based index of the group key column
        ignore_patterns: Patterns that drop rows whose key text matches
        short_row_error: Whether rows not reaching the key column are fatal
        trim_sheet_names: Whether to strip whitespace from group keys
        data_only: Read cached formula results instead of formula text
        manifest_path: Path for manifest CSV file (None to skip)

    Returns:
        Summary dictionary with results
    """
    logger.info(f"Starting workbook split: {input_path}")

    validate_paths(input_path, output_path)

    wb = load_workbook_safe(input_path, data_only=data_only)
    try:
        logger.info(f"Loaded workbook with {len(wb.sheetnames)} sheets")

        sheet_used = wb.sheetnames[0] if wb.sheetnames else ''
        total_rows = sum(1 for ws in wb.worksheets for _ in ws.iter_rows())
        logger.info(f"Splitting {total_rows} rows by column index {col_index}")

        out_wb = split_workbook(
            wb,
            col_index,
            short_row_error=short_row_error,
            trim_sheet_names=trim_sheet_names,
            ignore_patterns=ignore_patterns
        )
    finally:
        wb.close()

    manifest_entries = build_manifest(out_wb)
    rows_written = sum(entry['row_count'] for entry in manifest_entries)

    logger.info(
        f"Found {len(manifest_entries)} groups: "
        f"{[e['sheet'] for e in manifest_entries[:5]]}{'...' if len(manifest_entries) > 5 else ''}"
    )

    save_workbook(out_wb, output_path)
    logger.info(f"Wrote {rows_written} rows to: {output_path}")

    if manifest_path:
        write_manifest_csv(manifest_entries, manifest_path)
        logger.info(f"Wrote manifest to: {manifest_path}")

    return {
        'input_file': str(input_path),
        'sheet_used': sheet_used,
        'column': f"{col_index} ({get_column_letter(col_index + 1)})",
        'total_rows': total_rows,
        'rows_written': rows_written,
        'rows_dropped': total_rows - rows_written,
        'sheets_created': len(manifest_entries),
        'output_file': str(output_path),
        'manifest_entries': manifest_entries
    }
