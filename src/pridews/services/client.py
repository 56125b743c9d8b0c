"""Resource client for the PRIDE Archive web service."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from pridews.decoding import decode, decode_count
from pridews.models import (
    AssayDetail,
    AssayDetailList,
    FileDetailList,
    ProjectDetail,
    ProjectSummaryList,
)
from pridews.services.transport import Transport
from pridews.settings import Settings
from pridews.utils import build_query, is_project_accession, path_segment

logger = structlog.get_logger(__name__)


class ArchiveClient:
    """Builds request URLs for each query and decodes the responses.

    Every operation performs at most one request. Transport and parse failures
    propagate to the caller untouched.
    """

    def __init__(self, transport: Transport, settings: Settings) -> None:
        self._transport = transport
        self._settings = settings

    def get_project_details(self, accession: str) -> ProjectDetail:
        content = self._get(f"/project/{path_segment(accession)}")
        return decode(ProjectDetail, content)

    def get_assay_details(self, accession: str) -> AssayDetail:
        content = self._get(f"/assay/{path_segment(accession)}")
        return decode(AssayDetail, content)

    def get_assay_details_for_project(self, project_accession: str) -> AssayDetailList:
        content = self._get(f"/assay/list/project/{path_segment(project_accession)}")
        return decode(AssayDetailList, content)

    def get_files_for_assay(self, assay_accession: str) -> FileDetailList:
        content = self._get(f"/file/list/assay/{path_segment(assay_accession)}")
        return decode(FileDetailList, content)

    def get_files_for_project(self, project_accession: str) -> FileDetailList | None:
        """Return the project's files, or None for accessions outside PRD/PXD."""
        if not is_project_accession(project_accession):
            logger.info("client.files.not_applicable", accession=project_accession)
            return None
        content = self._get(f"/file/list/project/{path_segment(project_accession)}")
        return decode(FileDetailList, content)

    def query_for_projects(
        self,
        keywords: Iterable[str],
        page: int | None = None,
        show: int | None = None,
    ) -> ProjectSummaryList:
        query = build_query(keywords, page, show, param=self._settings.search_query_param)
        content = self._get(f"/project/list{query}")
        return decode(ProjectSummaryList, content)

    def count_projects(self, keywords: Iterable[str]) -> int:
        # the count endpoint answers with a bare integer, not JSON
        query = build_query(keywords, param=self._settings.search_query_param)
        content = self._get(f"/project/count{query}")
        return decode_count(content)

    def _get(self, path: str) -> str:
        url = f"{self._settings.base_url}{path}"
        logger.debug("client.request", url=url)
        return self._transport.fetch(url)
