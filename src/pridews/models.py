"""Immutable records mirroring the PRIDE Archive web-service payloads."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ArchiveRecord(BaseModel):
    """Base for payload records.

    JSON keys are camelCase, unknown keys are dropped and declared types are
    enforced strictly, so ``"numAssays": "3"`` is rejected rather than coerced.
    A ``null`` value is treated like an absent key.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        strict=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _nulls_take_defaults(cls, data: Any) -> Any:
        # a JSON null leaves the field at its declared default
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ProjectSummary(ArchiveRecord):
    """One row of a project search page."""

    accession: str | None = None
    title: str | None = None
    project_description: str | None = None
    publication_date: date | None = None
    submission_type: str | None = None
    num_assays: int = 0
    species: frozenset[str] = frozenset()
    tissues: frozenset[str] = frozenset()
    ptm_names: frozenset[str] = frozenset()
    instrument_names: frozenset[str] = frozenset()
    project_tags: frozenset[str] = frozenset()


class ProjectDetail(ArchiveRecord):
    """Full record for a single project."""

    accession: str | None = None
    title: str | None = None
    project_description: str | None = None
    publication_date: date | None = None
    submission_date: date | None = None
    submission_type: str | None = None
    num_assays: int = 0
    doi: str | None = None
    species: frozenset[str] = frozenset()
    tissues: frozenset[str] = frozenset()
    ptm_names: frozenset[str] = frozenset()
    instrument_names: frozenset[str] = frozenset()
    project_tags: frozenset[str] = frozenset()
    keywords: frozenset[str] = frozenset()
    sample_processing_protocol: str | None = None
    data_processing_protocol: str | None = None


class AssayDetail(ArchiveRecord):
    """A single experiment within a project."""

    assay_accession: str | None = None
    project_accession: str | None = None
    title: str | None = None
    short_label: str | None = None
    protein_count: int = 0
    peptide_count: int = 0
    unique_peptide_count: int = 0
    identified_spectrum_count: int = 0
    total_spectrum_count: int = 0
    species: frozenset[str] = frozenset()
    ptm_names: frozenset[str] = frozenset()
    instrument_names: frozenset[str] = frozenset()


class FileDetail(ArchiveRecord):
    """A data file attached to a project or an assay."""

    file_name: str | None = None
    project_accession: str | None = None
    assay_accession: str | None = None
    file_type: str | None = None
    file_source: str | None = None
    file_size: int = 0
    download_link: str | None = None


class RecordList(ArchiveRecord):
    """One page of results wrapped in the service's ``{"list": [...]}`` envelope."""

    entries: tuple[Any, ...] = Field(default=(), alias="list", strict=False)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)


class ProjectSummaryList(RecordList):
    entries: tuple[ProjectSummary, ...] = Field(default=(), alias="list", strict=False)


class AssayDetailList(RecordList):
    entries: tuple[AssayDetail, ...] = Field(default=(), alias="list", strict=False)


class FileDetailList(RecordList):
    entries: tuple[FileDetail, ...] = Field(default=(), alias="list", strict=False)
