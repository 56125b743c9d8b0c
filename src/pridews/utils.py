"""Helpers for accession checks and search query strings."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote

PROJECT_ACCESSION_PREFIXES = ("PRD", "PXD")
KEYWORD_SEPARATOR = "%20"


def is_project_accession(accession: str) -> bool:
    """Return True for legacy PRIDE (PRD) and ProteomeXchange (PXD) project accessions."""
    return accession.startswith(PROJECT_ACCESSION_PREFIXES)


def path_segment(value: str) -> str:
    """Percent-encode ``value`` so it stays a single URL path segment."""
    return quote(value, safe="")


def build_query(
    keywords: Iterable[str],
    page: int | None = None,
    show: int | None = None,
    *,
    param: str = "query",
) -> str:
    """Build the ``?query=a%20b&page=..&show=..`` string used by project search.

    Paging parameters are only emitted when given, leaving the service default
    in place otherwise. A plain string counts as a single keyword.
    """
    if isinstance(keywords, str):
        keywords = [keywords]
    terms = sorted(set(keywords))
    query = f"?{param}=" + KEYWORD_SEPARATOR.join(quote(term, safe="") for term in terms)
    if page is not None:
        query += f"&page={page}"
    if show is not None:
        query += f"&show={show}"
    return query
