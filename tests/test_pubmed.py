"""Tests for the PubMed search client (Entrez stubbed; live test marked)."""

import io

import pytest

from citeformat.core.reference import OutputFormat, ReferenceStyle
from citeformat.core.settings import PubMedSettings
from citeformat.render import format_reference
from citeformat.search import pubmed
from citeformat.search.models import SearchResult
from citeformat.search.pubmed import SearchError, parse_year, search_pubmed

SETTINGS = PubMedSettings(email="tests@example.org", max_results=5)


# ── Fakes ────────────────────────────────────────────────────────────


def _docsum(pmid="111", **kw):
    doc = {
        "Id": pmid,
        "Title": f"Study {pmid}",
        "AuthorList": ["Smith J", "Doe A"],
        "PubDate": "2023 Jan 5",
        "Source": "J Surg Robot",
        "Volume": "12",
        "Issue": "3",
        "Pages": "45-67",
        "DOI": f"10.1000/{pmid}",
    }
    doc.update(kw)
    return doc


class FakeEntrez:
    """Records calls and replays canned esearch/esummary payloads."""

    def __init__(self, ids, docs=None, fail_on=None):
        self.ids = ids
        self.docs = docs or []
        self.fail_on = fail_on
        self.calls = []
        self.email = None
        self.tool = None
        self.api_key = None

    def esearch(self, **kwargs):
        self.calls.append(("esearch", kwargs))
        if self.fail_on == "esearch":
            raise OSError("connection refused")
        return io.StringIO("esearch")

    def esummary(self, **kwargs):
        self.calls.append(("esummary", kwargs))
        if self.fail_on == "esummary":
            raise OSError("HTTP Error 502: Bad Gateway")
        return io.StringIO("esummary")

    def read(self, handle):
        if handle.getvalue() == "esearch":
            return {"Count": str(len(self.ids)), "IdList": self.ids}
        return self.docs


@pytest.fixture()
def fake_entrez(monkeypatch):
    def install(*args, **kwargs):
        fake = FakeEntrez(*args, **kwargs)
        monkeypatch.setattr(pubmed, "Entrez", fake)
        return fake

    return install


# ── Year Parsing ─────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "pubdate, expected",
    [
        ("2023 Jan 5", 2023),
        ("1999", 1999),
        ("  2010 Spring", 2010),
        ("Winter 2020", 0),
        ("", 0),
        ("2021-03-04", 0),
    ],
)
def test_parse_year(pubdate, expected):
    assert parse_year(pubdate) == expected


# ── Two-Step Search ──────────────────────────────────────────────────


def test_search_maps_summaries(fake_entrez):
    fake = fake_entrez(["111", "222"], [_docsum("111"), _docsum("222", PubDate="")])
    results = search_pubmed("robotic surgery", settings=SETTINGS)

    assert [r.id for r in results] == ["111", "222"]
    first = results[0]
    assert first.title == "Study 111"
    assert first.authors == ["Smith J", "Doe A"]
    assert first.year == 2023
    assert first.container == "J Surg Robot"
    assert results[1].year == 0

    assert [c[0] for c in fake.calls] == ["esearch", "esummary"]
    assert fake.calls[0][1]["term"] == "robotic surgery"
    assert fake.calls[0][1]["retmax"] == 5
    assert fake.calls[1][1]["id"] == "111,222"
    assert fake.email == "tests@example.org"


def test_max_results_overrides_settings(fake_entrez):
    fake = fake_entrez([], [])
    search_pubmed("q", max_results=50, settings=SETTINGS)
    assert fake.calls[0][1]["retmax"] == 50


def test_no_ids_skips_summary_call(fake_entrez):
    fake = fake_entrez([])
    assert search_pubmed("nothing matches", settings=SETTINGS) == []
    assert [c[0] for c in fake.calls] == ["esearch"]


def test_esearch_failure_raises_search_error(fake_entrez):
    fake_entrez(["111"], [_docsum()], fail_on="esearch")
    with pytest.raises(SearchError, match="Failed to search PubMed: connection refused"):
        search_pubmed("q", settings=SETTINGS)


def test_esummary_failure_returns_no_partial_results(fake_entrez):
    fake = fake_entrez(["111"], [_docsum()], fail_on="esummary")
    with pytest.raises(SearchError, match="502") as excinfo:
        search_pubmed("q", settings=SETTINGS)
    assert isinstance(excinfo.value.__cause__, OSError)
    # Not retried
    assert [c[0] for c in fake.calls] == ["esearch", "esummary"]


def test_unparsable_summary_raises_search_error(fake_entrez):
    broken = _docsum()
    del broken["Title"]
    fake_entrez(["111"], [broken])
    with pytest.raises(SearchError):
        search_pubmed("q", settings=SETTINGS)


# ── Mapping to Reference ─────────────────────────────────────────────


def test_search_result_to_reference():
    result = SearchResult(
        id="111",
        title="Study",
        authors=["Smith J"],
        year=2023,
        container="J Surg Robot",
        volume="12",
        issue="3",
        pages="45-67",
        doi="10.1000/111",
    )
    ref = result.to_reference()
    assert ref.year == 2023
    assert ref.volume == 12
    assert ref.issue == 3
    assert ref.additional_info == {"pmid": "111"}
    assert format_reference(ref, ReferenceStyle.VANCOUVER, OutputFormat.TEXT) == (
        "J S. Study. J Surg Robot. 2023;12(3):45-67. doi: 10.1000/111"
    )


def test_search_result_zero_year_and_odd_volume_dropped():
    ref = SearchResult(id="1", title="T", year=0, volume="12 Suppl 1", issue="").to_reference()
    assert ref.year is None
    assert ref.volume is None
    assert ref.issue is None
    assert format_reference(ref, ReferenceStyle.IEEE, OutputFormat.TEXT) == "T."


# ── Live Search ──────────────────────────────────────────────────────


@pytest.mark.network
def test_live_search_returns_results():
    results = search_pubmed("CRISPR gene editing", max_results=3, settings=SETTINGS)
    assert 0 < len(results) <= 3
    for r in results:
        assert r.id
        assert r.title
