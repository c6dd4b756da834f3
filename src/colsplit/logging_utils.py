"""
Logging configuration using Rich for console output.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging with Rich handler.

    Args:
        verbose: Whether to enable debug-level logging
    """
    console = Console(stderr=True)

    level = logging.DEBUG if verbose else logging.INFO

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[rich_handler],
        force=True
    )

    # Reduce noise from other libraries
    logging.getLogger("openpyxl").setLevel(logging.WARNING)


def print_summary_table(summary: dict, console: Optional[Console] = None) -> None:
    """
    Print a formatted summary table of the split operation.

    Args:
        summary: Summary dictionary from split_file
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    table = Table(title="Column Split Summary", show_header=True, header_style="bold magenta")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Input File", summary.get('input_file', 'Unknown'))
    table.add_row("Sheet Used", summary.get('sheet_used', 'Unknown'))
    table.add_row("Split Column", summary.get('column', 'Unknown'))
    table.add_row("Total Input Rows", str(summary.get('total_rows', 0)))
    table.add_row("Rows Written", str(summary.get('rows_written', 0)))
    table.add_row("Rows Dropped", str(summary.get('rows_dropped', 0)))
    table.add_row("Sheets Created", str(summary.get('sheets_created', 0)))
    table.add_row("Output File", summary.get('output_file', 'Unknown'))

    console.print()
    console.print(table)


def print_manifest_table(manifest_entries: list, console: Optional[Console] = None) -> None:
    """
    Print a formatted table of created sheets.

    Args:
        manifest_entries: List of manifest entry dictionaries
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    if not manifest_entries:
        console.print("[yellow]No sheets were created.[/yellow]")
        return

    table = Table(title="Created Sheets", show_header=True, header_style="bold green")
    table.add_column("Sheet", style="cyan", no_wrap=False)
    table.add_column("Rows", justify="right", style="magenta")

    for entry in manifest_entries:
        table.add_row(escape(entry.get('sheet', 'Unknown')), str(entry.get('row_count', 0)))

    console.print()
    console.print(table)


def print_success_message(sheets_created: int, output_file: str, console: Optional[Console] = None) -> None:
    """
    Print a success message with sheet count and output file.

    Args:
        sheets_created: Number of sheets created
        output_file: Output workbook path
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    console.print()
    console.print(f"✅ [bold green]Successfully created {sheets_created} sheets in:[/bold green]")
    console.print(f"   [cyan]{output_file}[/cyan]")


def print_error_message(error: str, console: Optional[Console] = None) -> None:
    """
    Print an error message with Rich formatting.

    Args:
        error: Error message to display
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    console.print()
    console.print(f"❌ [bold red]Error:[/bold red] {escape(error)}")


def print_progress_step(step: str, console: Optional[Console] = None) -> None:
    """
    Print a progress step message.

    Args:
        step: Description of the current step
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    console.print(f"🔄 [bold blue]{step}[/bold blue]")
