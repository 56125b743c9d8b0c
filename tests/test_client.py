from urllib.parse import urlsplit

import pytest

from pridews.errors import ParseError, TransportError
from pridews.services.client import ArchiveClient
from pridews.settings import Settings

BASE = "https://pride.example.org/ws/archive"


class _RecordingTransport:
    """Transport stub that records every URL and replies with a canned body."""

    def __init__(self, body: str = '{"list": []}', status: int = 200) -> None:
        self.body = body
        self.status = status
        self.calls: list[str] = []

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        if self.status != 200:
            raise TransportError(f"HTTP {self.status}", status_code=self.status, url=url)
        return self.body


def _client(transport: _RecordingTransport, **overrides) -> ArchiveClient:
    return ArchiveClient(transport, Settings(base_url=BASE, **overrides))


def _query_terms(url: str) -> tuple[set[str], dict[str, str]]:
    params = dict(part.split("=", 1) for part in urlsplit(url).query.split("&"))
    terms = set(params.pop("query").split("%20"))
    return terms, params


@pytest.mark.parametrize("accession", ["12345", "pxd000001", "XPD000001", "", "PX000001"])
def test_files_for_project_skips_invalid_accessions(accession: str) -> None:
    transport = _RecordingTransport()
    result = _client(transport).get_files_for_project(accession)
    assert result is None
    assert transport.calls == []


@pytest.mark.parametrize("accession", ["PXD000001", "PRD000123"])
def test_files_for_project_issues_one_request(accession: str) -> None:
    transport = _RecordingTransport('{"list": [{"fileName": "run1.raw", "fileSize": 1024}]}')
    result = _client(transport).get_files_for_project(accession)
    assert transport.calls == [f"{BASE}/file/list/project/{accession}"]
    assert result is not None
    assert [entry.file_name for entry in result] == ["run1.raw"]


def test_project_details_url_and_decoding() -> None:
    transport = _RecordingTransport(
        '{"accession": "PXD000001", "title": "T", "numAssays": 2, "unexpected": [1, 2]}'
    )
    detail = _client(transport).get_project_details("PXD000001")
    assert transport.calls == [f"{BASE}/project/PXD000001"]
    assert detail.accession == "PXD000001"
    assert detail.num_assays == 2


def test_assay_endpoints() -> None:
    transport = _RecordingTransport('{"assayAccession": "1643", "shortLabel": "run"}')
    client = _client(transport)
    assay = client.get_assay_details("1643")
    assert assay.short_label == "run"

    transport.body = '{"list": [{"assayAccession": "1643"}, {"assayAccession": "1644"}]}'
    assays = client.get_assay_details_for_project("PXD000001")
    assert [entry.assay_accession for entry in assays] == ["1643", "1644"]

    transport.body = '{"list": [{"fileName": "a.mzid"}]}'
    files = client.get_files_for_assay("1643")
    assert len(files) == 1

    assert transport.calls == [
        f"{BASE}/assay/1643",
        f"{BASE}/assay/list/project/PXD000001",
        f"{BASE}/file/list/assay/1643",
    ]


def test_query_for_projects_with_paging() -> None:
    transport = _RecordingTransport(
        '{"list": [{"accession": "PXD000001", "numAssays": 1, "projectTags": ["Biomedical"]}]}'
    )
    projects = _client(transport).query_for_projects({"cancer", "kidney"}, 0, 5)

    (url,) = transport.calls
    assert url.startswith(f"{BASE}/project/list?query=")
    terms, params = _query_terms(url)
    assert terms == {"cancer", "kidney"}
    assert params == {"page": "0", "show": "5"}
    assert "&page=0&show=5" in url
    assert [summary.accession for summary in projects] == ["PXD000001"]


def test_query_for_projects_without_paging() -> None:
    transport = _RecordingTransport()
    result = _client(transport).query_for_projects({"x"}, None, None)
    assert transport.calls == [f"{BASE}/project/list?query=x"]
    assert len(result) == 0


def test_query_parameter_name_is_configurable() -> None:
    transport = _RecordingTransport()
    _client(transport, search_query_param="q").query_for_projects({"x"})
    assert transport.calls == [f"{BASE}/project/list?q=x"]


def test_count_projects_parses_plain_text() -> None:
    transport = _RecordingTransport("42")
    assert _client(transport).count_projects({"cancer"}) == 42
    assert transport.calls == [f"{BASE}/project/count?query=cancer"]


def test_count_projects_rejects_json_body() -> None:
    transport = _RecordingTransport('{"count": 42}')
    with pytest.raises(ParseError):
        _client(transport).count_projects({"cancer"})


@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.get_project_details("PXD000001"),
        lambda c: c.get_assay_details("1643"),
        lambda c: c.get_assay_details_for_project("PXD000001"),
        lambda c: c.get_files_for_assay("1643"),
        lambda c: c.get_files_for_project("PXD000001"),
        lambda c: c.query_for_projects({"cancer"}, 0, 5),
        lambda c: c.count_projects({"cancer"}),
    ],
)
def test_http_errors_propagate_with_status(call) -> None:
    transport = _RecordingTransport(status=404)
    with pytest.raises(TransportError) as excinfo:
        call(_client(transport))
    assert excinfo.value.status_code == 404
    assert len(transport.calls) == 1


def test_single_string_keyword_is_not_split_into_characters() -> None:
    transport = _RecordingTransport()
    _client(transport).query_for_projects("cancer", 1, 20)
    assert transport.calls == [f"{BASE}/project/list?query=cancer&page=1&show=20"]
