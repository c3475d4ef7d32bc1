"""
Command-line interface for PDF combiner.
"""

import os
import sys

import click
from rich.console import Console
from rich.progress import Progress, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from pdf_combiner import __version__
from pdf_combiner.backends import PypdfEngine
from pdf_combiner.combiner import PDFCombiner
from pdf_combiner.config import CombinerSettings
from pdf_combiner.exceptions import PDFCombinerException
from pdf_combiner.ranges import parse_page_range
from pdf_combiner.utils import configure_logging, format_file_size

console = Console()
err_console = Console(stderr=True)

OUTPUT_MODES = ['file', 'download', 'string', 'browser']


def _fail(message, target=None):
    (target or err_console).print(f"\n[bold red]✗ Error:[/bold red] {message}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    PDF Combiner CLI - Merge PDF files with page selection and duplex padding.
    """
    pass


@cli.command(name="merge")
@click.argument('input_pdfs', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--output', '-o',
    default='new_file.pdf',
    help='Output PDF path (file name only for download mode)',
    type=click.Path()
)
@click.option(
    '--pages', '-r',
    multiple=True,
    help="Pages per input (e.g., '1,3,6,12-16' or 'all'); give one per input or one for all",
    type=str
)
@click.option(
    '--orientation',
    type=click.Choice(['P', 'L'], case_sensitive=False),
    help='Force every page to portrait (P) or landscape (L)'
)
@click.option(
    '--duplex',
    is_flag=True,
    help='Insert blank pages so each input starts on a front side'
)
@click.option(
    '--mode', '-m',
    type=click.Choice(OUTPUT_MODES, case_sensitive=False),
    default=None,
    help='Output mode (defaults to PDF_COMBINER_OUTPUT_MODE or file)'
)
@click.option('--title', type=str, help='Title metadata')
@click.option('--author', type=str, help='Author metadata')
@click.option('--subject', type=str, help='Subject metadata')
@click.option('--keywords', type=str, help='Keywords metadata')
@click.option('--creator', type=str, help='Creator metadata')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def merge(input_pdfs, output, pages, orientation, duplex, mode, verbose, **meta_options):
    """
    Merge PDF files into a single document.

    Examples:

        pdf-combiner merge a.pdf b.pdf -o combined.pdf

        pdf-combiner merge a.pdf b.pdf -r '1-3' -r all --duplex

        pdf-combiner merge report.pdf -r '1,3,6,12-16' --title 'Summary' -m string > out.pdf
    """
    settings = CombinerSettings.from_env()
    mode = (mode or settings.output_mode).lower()
    # stdout carries the PDF bytes in string mode.
    out = err_console if mode == 'string' else console

    configure_logging('DEBUG' if verbose else settings.log_level, console=err_console)

    if pages and len(pages) not in (1, len(input_pdfs)):
        _fail("Supply --pages once, or once per input PDF.", out)

    page_specs = list(pages) if len(pages) == len(input_pdfs) else [pages[0] if pages else 'all'] * len(input_pdfs)
    meta = {key: value for key, value in meta_options.items() if value is not None}

    try:
        combiner = PDFCombiner(settings=settings)

        files_table = Table(title="Files to Merge", show_header=True)
        files_table.add_column("#", style="cyan", width=4)
        files_table.add_column("Filename", style="green")
        files_table.add_column("Pages", style="magenta")

        for idx, (input_pdf, page_spec) in enumerate(zip(input_pdfs, page_specs), 1):
            combiner.add_pdf(input_pdf, page_spec)
            files_table.add_row(str(idx), os.path.basename(input_pdf), page_spec)

        out.print()
        out.print(files_table)

        label = "duplex " if duplex else ""
        out.print(f"\n[bold cyan]Merging {len(input_pdfs)} PDF(s) with {label}layout...[/bold cyan]")

        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=out
        ) as progress:
            task = progress.add_task("Merging PDFs", total=len(input_pdfs))

            def update_progress(current, total, filename):
                progress.update(task, completed=current, description=f"Merging: {filename}")

            if duplex:
                page_count = combiner.duplex_merge(orientation, meta, progress_callback=update_progress)
            else:
                page_count = combiner.merge(orientation, meta, progress_callback=update_progress)

        result = combiner.save(output, mode)

        if mode == 'string':
            stream = click.get_binary_stream('stdout')
            stream.write(result)
            stream.flush()
            out.print(f"\n[bold green]✓ Wrote {page_count} page(s) to stdout[/bold green]")
        else:
            destination = output
            if mode == 'download':
                destination = str(settings.download_dir / os.path.basename(output))
            out.print(f"\n[bold green]✓ Successfully created:[/bold green] {destination}")
            if os.path.exists(destination):
                out.print(f"[dim]Output size: {format_file_size(os.path.getsize(destination))}[/dim]")
            out.print(f"[dim]Pages written: {page_count}[/dim]")

        out.print()

    except Exception as e:
        _fail(e, out)


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
def show_info(input_pdf):
    """
    Display page sizes and orientations of a PDF file.

    Example:

        pdf-combiner info input.pdf
    """
    try:
        engine = PypdfEngine(CombinerSettings.from_env())
        page_count = engine.set_source_file(input_pdf)

        table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
        table.add_column("Page", style="cyan", no_wrap=True)
        table.add_column("Width", style="green")
        table.add_column("Height", style="green")
        table.add_column("Orientation", style="magenta")

        for page_number in range(1, page_count + 1):
            size = engine.get_template_size(engine.import_page(page_number))
            table.add_row(
                str(page_number),
                f"{size.width:g}",
                f"{size.height:g}",
                "Portrait" if size.orientation.value == "P" else "Landscape",
            )

        console.print()
        console.print(f"[bold]File Size:[/bold] {format_file_size(os.path.getsize(input_pdf))}")
        console.print(f"[bold]Number of Pages:[/bold] {page_count}")
        console.print(table)
        console.print()

    except Exception as e:
        _fail(e, console)


@cli.command(name="pages")
@click.argument('expression', type=str)
def preview_pages(expression):
    """
    Show the pages a range expression selects.

    Example:

        pdf-combiner pages '1,3,6,12-16'
    """
    try:
        page_list = parse_page_range(expression)
    except PDFCombinerException as e:
        _fail(e, console)

    console.print(f"[bold]Pages:[/bold] {', '.join(map(str, page_list))}")
    console.print(f"[dim]Total pages selected: {len(page_list)}[/dim]")


if __name__ == '__main__':
    cli()
