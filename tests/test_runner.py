"""
Tests for file-level split orchestration.
"""

import pytest
import pandas as pd
from pathlib import Path
import tempfile
import shutil
import openpyxl

from colsplit.runner import split_file
from colsplit.errors import WorkbookValidationError, ShortRowError
from colsplit.patterns import DEFAULT_IGNORE_PATTERNS


class TestSplitFile:
    """Test suite for split_file function."""

    @pytest.fixture
    def temp_dir(self):
        """Create a temporary directory for test outputs."""
        temp_dir = Path(tempfile.mkdtemp())
        yield temp_dir
        shutil.rmtree(temp_dir)

    @pytest.fixture
    def report_path(self, temp_dir):
        """Create a combined county report workbook."""
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Report"
        ws.append(["Table 1 Summary"])
        ws.append(["County", "Amount"])
        ws.append(["Alameda", 100])
        ws.append(["  Alameda  ", 50])
        ws.append(["Kern", 30, "=B5*2"])
        ws.append(["Inyo"])

        path = temp_dir / "report.xlsx"
        wb.save(path)
        wb.close()
        return path

    def test_split_file(self, report_path, temp_dir):
        """Test end-to-end split with defaults and trimming."""
        out_path = temp_dir / "out" / "split.xlsx"

        result = split_file(
            report_path,
            out_path,
            0,
            ignore_patterns=DEFAULT_IGNORE_PATTERNS,
            trim_sheet_names=True
        )

        assert out_path.exists()
        assert result['sheet_used'] == "Report"
        assert result['column'] == "0 (A)"
        assert result['total_rows'] == 6
        assert result['rows_written'] == 4
        assert result['rows_dropped'] == 2
        assert result['sheets_created'] == 3

        wb = openpyxl.load_workbook(out_path)
        assert wb.sheetnames == ["Alameda", "Kern", "Inyo"]
        alameda = [list(r) for r in wb["Alameda"].iter_rows(values_only=True)]
        assert alameda == [["Alameda", "100"], ["  Alameda  ", "50"]]
        # formula without a cached value reads as empty and is trimmed
        kern = [list(r) for r in wb["Kern"].iter_rows(values_only=True)]
        assert kern == [["Kern", "30"]]

    def test_split_file_with_formulas(self, report_path, temp_dir):
        """Test formula text is copied as plain text when requested."""
        out_path = temp_dir / "split.xlsx"

        split_file(
            report_path,
            out_path,
            0,
            ignore_patterns=DEFAULT_IGNORE_PATTERNS,
            data_only=False
        )

        wb = openpyxl.load_workbook(out_path)
        cell = wb["Kern"]["C1"]
        assert cell.value == "=B5*2"
        assert cell.data_type == "s"

    def test_split_file_manifest(self, report_path, temp_dir):
        """Test manifest CSV lists each created sheet."""
        out_path = temp_dir / "split.xlsx"
        manifest_path = temp_dir / "manifest.csv"

        result = split_file(
            report_path,
            out_path,
            0,
            ignore_patterns=DEFAULT_IGNORE_PATTERNS,
            manifest_path=manifest_path
        )

        df = pd.read_csv(manifest_path, keep_default_na=False)
        assert df['sheet'].tolist() == [e['sheet'] for e in result['manifest_entries']]
        assert df['row_count'].sum() == result['rows_written']

    def test_split_file_short_row_error(self, report_path, temp_dir):
        """Test short row failures leave no output file."""
        out_path = temp_dir / "split.xlsx"

        with pytest.raises(ShortRowError, match="row 1"):
            split_file(
                report_path,
                out_path,
                1,
                ignore_patterns=DEFAULT_IGNORE_PATTERNS,
                short_row_error=True
            )

        assert not out_path.exists()

    def test_split_file_multi_sheet(self, temp_dir):
        """Test multi-sheet inputs are rejected."""
        wb = openpyxl.Workbook()
        wb.active.append(["a", "1"])
        wb.create_sheet("Second")
        path = temp_dir / "multi.xlsx"
        wb.save(path)

        with pytest.raises(WorkbookValidationError, match="more than one sheet"):
            split_file(path, temp_dir / "out.xlsx", 0)

    def test_split_file_nothing_survives(self, report_path, temp_dir):
        """Test an error is raised when every row is dropped."""
        out_path = temp_dir / "split.xlsx"

        with pytest.raises(ValueError, match="no rows survived"):
            split_file(report_path, out_path, 5)

        assert not out_path.exists()
