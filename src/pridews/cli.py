"""Command-line interface for the PRIDE Archive client."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pridews.errors import PrideWsError
from pridews.logging_setup import configure_logging
from pridews.models import (
    AssayDetail,
    AssayDetailList,
    FileDetailList,
    ProjectDetail,
    ProjectSummary,
)
from pridews.services import ArchiveClient, HttpTransport
from pridews.settings import Settings, get_settings

console = Console()
app = typer.Typer(help="pridews – PRIDE Archive web-service client")

DEFAULT_TERMS = ("cancer", "kidney")
DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 5


@app.callback()
def main() -> None:
    """Query public proteomics datasets in the PRIDE Archive."""
    configure_logging(get_settings().log_level)


@contextmanager
def _open_client(settings: Settings) -> Iterator[ArchiveClient]:
    with HttpTransport(settings) as transport:
        yield ArchiveClient(transport, settings)


@contextmanager
def _reporting_errors() -> Iterator[None]:
    try:
        yield
    except PrideWsError as exc:
        console.print(f"[red]{type(exc).__name__}: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def _parse_terms(values: Optional[list[str]]) -> set[str]:
    if not values:
        return set(DEFAULT_TERMS)
    # one -q value may carry several whitespace separated terms
    return {term for value in values for term in value.split()}


@app.command()
def search(
    query: Optional[list[str]] = typer.Option(
        None, "--query", "-q", help="Query term (repeatable; default: cancer kidney)"
    ),
    page: int = typer.Option(DEFAULT_PAGE, "--page", "-p", help="Result page to retrieve (0 based)"),
    size: int = typer.Option(DEFAULT_PAGE_SIZE, "--size", "-s", help="Size of a result page"),
    count: bool = typer.Option(False, "--count", "-c", help="Count matching projects only"),
    assays: bool = typer.Option(False, "--assays", "-a", help="List the assays of each project"),
    files: bool = typer.Option(False, "--files", "-f", help="List the files of each project"),
) -> None:
    """Search for projects matching keywords."""
    terms = _parse_terms(query)
    settings = get_settings()
    console.print(f"Search for datasets matching terms: {_text(', '.join(sorted(terms)))}")

    with _reporting_errors(), _open_client(settings) as client:
        if count:
            total = client.count_projects(terms)
            console.print(f"Number of projects matching query terms: {total}")
            return

        projects = client.query_for_projects(terms, page, size)
        if not projects:
            console.print("[yellow]No records matching the query parameters.")
            return

        for summary in projects:
            _print_project_summary(summary)
            if assays:
                _print_assays(client.get_assay_details_for_project(summary.accession or ""))
            if files:
                _print_files(client.get_files_for_project(summary.accession or ""))


@app.command()
def project(accession: str = typer.Argument(..., help="Project accession, e.g. PXD000001")) -> None:
    """Show the details of one project."""
    settings = get_settings()
    with _reporting_errors(), _open_client(settings) as client:
        detail = client.get_project_details(accession)
    _print_project_detail(detail)


@app.command()
def assay(accession: str = typer.Argument(..., help="Assay accession")) -> None:
    """Show the details of one assay."""
    settings = get_settings()
    with _reporting_errors(), _open_client(settings) as client:
        detail = client.get_assay_details(accession)
    _print_assay_detail(detail)


@app.command()
def files(
    accession: str = typer.Argument(..., help="Project or assay accession"),
    for_assay: bool = typer.Option(False, "--assay", help="Treat the accession as an assay"),
) -> None:
    """List the files attached to a project or an assay."""
    settings = get_settings()
    with _reporting_errors(), _open_client(settings) as client:
        if for_assay:
            listing = client.get_files_for_assay(accession)
        else:
            listing = client.get_files_for_project(accession)
    _print_files(listing)


@app.command()
def config(
    json_output: bool = typer.Option(False, "--json", help="Output settings as JSON"),
) -> None:
    """Display the resolved settings."""
    settings = get_settings()
    if json_output:
        typer.echo(settings.model_dump_json(indent=2))
        return
    table = Table(title="pridews Settings")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in settings.model_dump().items():
        table.add_row(key, _text(value))
    console.print(table)

def _text(value: object) -> str:
    # service data is printed literally, never as rich markup
    if value is None or value == "":
        return "—"
    return escape(str(value))


def _joined(values: frozenset[str]) -> str:
    return _text(", ".join(sorted(values)))


def _print_project_summary(summary: ProjectSummary) -> None:
    console.print()
    console.print(f"Project: {_text(summary.accession)}")
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field")
    table.add_column("Value", overflow="fold")
    table.add_row("Title", _text(summary.title))
    table.add_row("# assays", str(summary.num_assays))
    table.add_row("published", _text(summary.publication_date))
    table.add_row("Tags", _joined(summary.project_tags))
    console.print(table)


def _print_project_detail(detail: ProjectDetail) -> None:
    console.print(f"Project: {_text(detail.accession)}")
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field")
    table.add_column("Value", overflow="fold")
    table.add_row("Title", _text(detail.title))
    table.add_row("Description", _text(detail.project_description))
    table.add_row("# assays", str(detail.num_assays))
    table.add_row("DOI", _text(detail.doi))
    table.add_row("published", _text(detail.publication_date))
    table.add_row("Species", _joined(detail.species))
    table.add_row("Tags", _joined(detail.project_tags))
    console.print(table)


def _print_assay_detail(detail: AssayDetail) -> None:
    console.print(f"Assay: {_text(detail.assay_accession)}")
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field")
    table.add_column("Value", overflow="fold")
    table.add_row("Title", _text(detail.title))
    table.add_row("Short label", _text(detail.short_label))
    table.add_row("Project", _text(detail.project_accession))
    table.add_row("Proteins", str(detail.protein_count))
    table.add_row("Peptides", str(detail.peptide_count))
    console.print(table)


def _print_assays(listing: AssayDetailList) -> None:
    console.print("Project assay list")
    for entry in listing:
        console.print(f"  Assay: {_text(entry.assay_accession)} ({_text(entry.title)})")


def _print_files(listing: FileDetailList | None) -> None:
    if listing is None:
        console.print("[yellow]File listing is not applicable to this accession.")
        return
    console.print("File list")
    for entry in listing:
        console.print(f"  {_text(entry.file_name)}")
