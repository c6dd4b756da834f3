"""
Command-line interface for colsplit using Typer.
"""

from pathlib import Path
from typing import List, Optional, Annotated

import typer
from rich.console import Console

from . import __version__
from .patterns import DEFAULT_IGNORE_PATTERNS, compile_patterns
from .runner import split_file
from .logging_utils import (
    setup_logging,
    print_summary_table,
    print_manifest_table,
    print_success_message,
    print_error_message,
    print_progress_step
)

app = typer.Typer(
    name="colsplit",
    help="Split a single-sheet Excel workbook into one sheet per column value",
    add_completion=False
)

console = Console()


@app.command()
def split(
    input_file: Annotated[
        Path,
        typer.Option("--in", "-i", help="Path to input Excel file", exists=True, file_okay=True, dir_okay=False)
    ],
    output_file: Annotated[
        Path,
        typer.Option("--out", "-o", help="Path of the Excel file to write")
    ],
    col: Annotated[
        int,
        typer.Option("--col", "-c", help="0-based index of the column to split by", min=0)
    ] = 0,
    ignore: Annotated[
        Optional[List[str]],
        typer.Option("--ignore", "-x", help="Drop rows whose key matches this pattern (repeatable, replaces the defaults)")
    ] = None,
    no_default_ignores: Annotated[
        bool,
        typer.Option("--no-default-ignores", help="Do not drop 'Table N' and 'County' rows by default")
    ] = False,
    literal: Annotated[
        bool,
        typer.Option("--literal", help="Treat --ignore values as plain substrings instead of regular expressions")
    ] = False,
    short_row_error: Annotated[
        bool,
        typer.Option("--short-row-error", help="Fail on rows that do not reach the split column")
    ] = False,
    trim: Annotated[
        bool,
        typer.Option("--trim/--no-trim", help="Strip surrounding whitespace from sheet names")
    ] = False,
    formulas: Annotated[
        bool,
        typer.Option("--formulas", help="Copy formula text instead of cached values")
    ] = False,
    manifest: Annotated[
        Optional[Path],
        typer.Option("--manifest", help="Path for manifest CSV file")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging")
    ] = False,
) -> None:
    """
    Split the only sheet of an Excel workbook into one sheet per distinct value
    of a column.

    Rows are copied as text, in their original order, to the sheet named after
    their value in the split column. By default rows whose value starts with
    "Table <number>" or with the word "County" are dropped.

    Examples:

        # Split by the first column
        colsplit split --in report.xlsx --out by_region.xlsx

        # Split by the third column, trimming sheet names
        colsplit split --in report.xlsx --out out.xlsx --col 2 --trim

        # Custom ignore patterns and a manifest
        colsplit split --in report.xlsx --out out.xlsx -x "^Total" --manifest sheets.csv
    """
    setup_logging(verbose)

    try:
        if ignore:
            patterns = compile_patterns(ignore, literal=literal)
        elif no_default_ignores:
            patterns = []
        else:
            patterns = compile_patterns(DEFAULT_IGNORE_PATTERNS)

        print_progress_step("Splitting workbook...", console)

        result = split_file(
            input_file,
            output_file,
            col,
            ignore_patterns=patterns,
            short_row_error=short_row_error,
            trim_sheet_names=trim,
            data_only=not formulas,
            manifest_path=manifest
        )

        print_summary_table(result, console)
        print_manifest_table(result['manifest_entries'], console)
        print_success_message(result['sheets_created'], result['output_file'], console)

        if manifest:
            console.print(f"📋 [bold blue]Manifest:[/bold blue] {manifest}")

    except Exception as e:
        print_error_message(str(e), console)
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"colsplit version {__version__}")


@app.command()
def info() -> None:
    """Show information about the tool."""
    console.print("""
[bold blue]colsplit[/bold blue]

Splits a single-sheet Excel workbook into a multi-sheet workbook, one sheet per
distinct value found in a chosen column.

[bold]Features:[/bold]
• Rows keep their original order within each sheet
• Values are written as plain text cells
• Rows can be dropped by regular expression or substring patterns
• Optional whitespace trimming of sheet names
• Short rows are skipped, or fatal with --short-row-error

[bold]Default ignore patterns:[/bold]
• ^(?i:table)\\s+\\d+   title rows such as "Table 3 ..."
• ^(?i:county)\\b       "County" header rows

[bold]Supported file formats:[/bold]
• .xlsx (Excel 2007+)
• .xlsm (Excel with macros)

Use --help for detailed usage information.
""")


if __name__ == "__main__":
    app()
