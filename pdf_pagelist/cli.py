"""
Command-line interface for PDF PageList.
"""

import os
import sys

import click
from rich.console import Console
from rich.table import Table

from pdf_pagelist.exceptions import PageIndexError
from pdf_pagelist.graphs.pypdf_graph import PypdfGraph
from pdf_pagelist.utils import configure_logging, parse_page_spec

console = Console()


def _fail(error):
    console.print(f"\n[bold red]✗ Error:[/bold red] {error}")
    sys.exit(1)


def _done(doc, output):
    path = doc.save(output)
    console.print(f"[bold green]✓ Wrote {len(doc.pages)} pages[/bold green]")
    console.print(f"[dim]Output file: {os.path.abspath(path)}[/dim]")


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Log every page operation')
def cli(verbose):
    """
    PDF PageList CLI - Reorder, select and combine PDF pages.
    """
    configure_logging("DEBUG" if verbose else None)


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True))
def show_info(input_pdf):
    """
    Display the pages of a PDF file.

    Example:

        pdf-pagelist info input.pdf
    """
    try:
        doc = PypdfGraph.open(input_pdf)

        table = Table(title=f"Pages: {os.path.basename(input_pdf)}")
        table.add_column("Page", style="cyan", no_wrap=True)
        table.add_column("Width", style="green")
        table.add_column("Height", style="green")

        for number, page in enumerate(doc.pages, start=1):
            table.add_row(str(number), f"{float(page.mediabox.width):g}", f"{float(page.mediabox.height):g}")

        console.print()
        console.print(table)
        console.print()

    except Exception as e:
        _fail(e)


@cli.command(name="reverse")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option(
    '--output', '-o',
    required=True,
    help='Output PDF file path',
    type=click.Path()
)
def reverse(input_pdf, output):
    """
    Reverse the page order of a PDF.

    Example:

        pdf-pagelist reverse input.pdf -o reversed.pdf
    """
    try:
        doc = PypdfGraph.open(input_pdf)
        doc.pages.reverse()
        _done(doc, output)

    except Exception as e:
        _fail(e)


@cli.command(name="select")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.argument('pages')
@click.option(
    '--output', '-o',
    required=True,
    help='Output PDF file path',
    type=click.Path()
)
def select(input_pdf, pages, output):
    """
    Keep only the listed pages, in the order given.

    Pages are 1-indexed and may repeat.

    Examples:

        pdf-pagelist select input.pdf 3,1,2 -o reordered.pdf

        pdf-pagelist select input.pdf 1-3,1-3 -o twice.pdf
    """
    try:
        doc = PypdfGraph.open(input_pdf)
        page_count = len(doc.pages)
        try:
            wanted = [doc.pages.p(number) for number in parse_page_spec(pages)]
        except PageIndexError as e:
            raise PageIndexError(f"{e} (document has {page_count} pages)") from e
        doc.pages[:] = wanted
        _done(doc, output)

    except Exception as e:
        _fail(e)


@cli.command(name="delete")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.argument('pages')
@click.option(
    '--output', '-o',
    required=True,
    help='Output PDF file path',
    type=click.Path()
)
def delete(input_pdf, pages, output):
    """
    Remove the listed pages.

    Example:

        pdf-pagelist delete input.pdf 2,4-5 -o trimmed.pdf
    """
    try:
        doc = PypdfGraph.open(input_pdf)
        numbers = sorted(set(parse_page_spec(pages)), reverse=True)
        if numbers[0] > len(doc.pages):
            raise PageIndexError(
                f"Page {numbers[0]} exceeds PDF page count ({len(doc.pages)} pages)."
            )
        for number in numbers:
            del doc.pages[number - 1]
        _done(doc, output)

    except Exception as e:
        _fail(e)


@cli.command(name="concat")
@click.argument('input_pdfs', nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    '--output', '-o',
    required=True,
    help='Output PDF file path',
    type=click.Path()
)
def concat(input_pdfs, output):
    """
    Append the pages of every input to the first one.

    Example:

        pdf-pagelist concat a.pdf b.pdf c.pdf -o combined.pdf
    """
    try:
        doc = PypdfGraph.open(input_pdfs[0])
        for input_pdf in input_pdfs[1:]:
            doc.pages.extend(PypdfGraph.open(input_pdf).pages)
        _done(doc, output)

    except Exception as e:
        _fail(e)


if __name__ == '__main__':
    cli()
