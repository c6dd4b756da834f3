"""
I/O utilities for loading, validating and saving workbooks.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
import openpyxl
from openpyxl.workbook import Workbook

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = ['.xlsx', '.xlsm']


def load_workbook_safe(path: Path, data_only: bool = True) -> Workbook:
    """
    Safely load an Excel workbook.

    Args:
        path: Path to the Excel file
        data_only: Read cached formula results instead of formula text

    Returns:
        Loaded openpyxl workbook

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is not a valid Excel file
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if not path.suffix.lower() in EXCEL_SUFFIXES:
        raise ValueError(f"File must be an Excel file (.xlsx or .xlsm): {path}")

    try:
        return openpyxl.load_workbook(path, data_only=data_only)
    except Exception as e:
        raise ValueError(f"Failed to load Excel file {path}: {e}")


def save_workbook(wb: Workbook, path: Path) -> None:
    """
    Save a split workbook, creating the parent directory if needed.

    Args:
        wb: Workbook to save
        path: Destination path (.xlsx or .xlsm)

    Raises:
        ValueError: If the workbook has no sheets or cannot be written
    """
    if not wb.worksheets:
        raise ValueError("Nothing to write: no rows survived filtering")

    ensure_out_dir(path.parent)

    try:
        wb.save(path)
    except OSError as e:
        raise ValueError(f"Failed to save Excel file {path}: {e}")

    logger.debug(f"Saved {len(wb.worksheets)} sheets to {path}")


def validate_paths(input_path: Path, output_path: Path) -> None:
    """
    Validate input and output workbook paths.

    Args:
        input_path: Path to input file
        output_path: Path to output file

    Raises:
        ValueError: If validation fails
    """
    if not input_path.exists():
        raise ValueError(f"Input file does not exist: {input_path}")

    if not input_path.suffix.lower() in EXCEL_SUFFIXES:
        raise ValueError(f"Input file must be Excel format (.xlsx or .xlsm): {input_path}")

    if not output_path.suffix.lower() in EXCEL_SUFFIXES:
        raise ValueError(f"Output file must be Excel format (.xlsx or .xlsm): {output_path}")

    if output_path.exists() and output_path.resolve() == input_path.resolve():
        raise ValueError(f"Output file must differ from input file: {output_path}")


def ensure_out_dir(path: Path) -> Path:
    """
    Ensure output directory exists.

    Args:
        path: Directory path to create

    Returns:
        The created directory path
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def build_manifest(wb: Workbook) -> List[Dict[str, Any]]:
    """
    Describe each sheet of a split workbook.

    Args:
        wb: Split workbook

    Returns:
        One entry per sheet with its name and row count, in sheet order
    """
    return [
        {'sheet': ws.title, 'row_count': ws.max_row}
        for ws in wb.worksheets
    ]


def write_manifest_csv(manifest_data: List[Dict[str, Any]], output_path: Path) -> None:
    """
    Write manifest data to CSV file.

    Args:
        manifest_data: List of dictionaries with manifest information
        output_path: Path where to write the CSV file
    """
    if not manifest_data:
        return

    ensure_out_dir(output_path.parent)
    df = pd.DataFrame(manifest_data)
    df.to_csv(output_path, index=False, encoding='utf-8')
