"""
Command-line interface for pdflib-compat.
"""

import os
import sys

import click
from rich.console import Console
from rich.table import Table

from pdflib_compat import __version__
from pdflib_compat.config import ShimOptions
from pdflib_compat.exceptions import PDFLibCompatException, ScriptError
from pdflib_compat.pdf import PDF
from pdflib_compat.script import parse_script, run_script
from pdflib_compat.utils import configure_logging, format_file_size, get_pdf_info

console = Console()


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    pdflib-compat CLI - Replay PDFlib-style drawing scripts and inspect the result.
    """
    pass


@cli.command(name="run")
@click.argument('script', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--output', '-o',
    required=True,
    help='PDF file to write (extended if it already exists)',
    type=click.Path(dir_okay=False)
)
@click.option(
    '--clear-after-terminal-op',
    is_flag=True,
    default=False,
    help='End the current path after fill, stroke and clip'
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    default=False,
    help='Enable debug logging'
)
def run(script, output, clear_after_terminal_op, verbose):
    """
    Replay a drawing script into a PDF.

    Examples:

        pdflib-compat run drawing.txt -o drawing.pdf

        pdflib-compat run drawing.txt -o drawing.pdf --clear-after-terminal-op
    """
    configure_logging(verbose)

    try:
        with open(script, encoding='utf-8') as handle:
            commands = parse_script(handle.read())
    except ScriptError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(2)

    options = ShimOptions(clear_pending_shape_after_terminal_op=clear_after_terminal_op)
    pdf = PDF.open_file(output, options)
    if pdf is False:
        console.print(f"[bold red]✗ Error:[/bold red] cannot open {output}")
        sys.exit(1)

    results = run_script(pdf, commands)
    failures = [result for result in results if not result.success]
    for result in failures:
        reason = f" ({result.error.value})" if result.error is not None else ""
        console.print(
            f"[yellow]⚠ line {result.command.line_number}:[/yellow] {result.command} returned False{reason}"
        )

    if not pdf.close():
        console.print(f"[bold red]✗ Error:[/bold red] failed to write {output}")
        sys.exit(1)

    console.print(
        f"\n[bold green]✓ Replayed {len(results)} calls ({len(failures)} failed)[/bold green]"
    )
    console.print(f"[dim]Output file: {os.path.abspath(output)}[/dim]")


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
def show_info(input_pdf):
    """
    Display information about a PDF file.

    Example:

        pdflib-compat info drawing.pdf
    """
    try:
        info = get_pdf_info(input_pdf)
    except PDFLibCompatException as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Path", os.path.abspath(input_pdf))
    table.add_row("File Size", format_file_size(info.file_size))
    table.add_row("Number of Pages", str(info.num_pages))

    for label, value in (
        ("Title", info.title),
        ("Author", info.author),
        ("Subject", info.subject),
        ("Keywords", info.keywords),
        ("Creator", info.creator),
        ("Producer", info.producer),
    ):
        if value:
            table.add_row(label, str(value))

    if info.outlines:
        table.add_row("Outlines", "\n".join(info.outlines))

    console.print()
    console.print(table)
    console.print()


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
