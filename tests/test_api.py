"""Tests for the HTTP routes (/format, /styles, /search)."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from citeformat.api.server import app
from citeformat.search.models import SearchResult
from citeformat.search.pubmed import SearchError

client = TestClient(app)

REFERENCE = {
    "authors": ["Smith, John", "Doe, Jane"],
    "year": 2023,
    "title": "A Study of Reference Styles",
    "container": "Journal of Citation Studies",
    "volume": 5,
    "issue": 2,
    "pages": "123-145",
    "doi": "10.1234/jcs.2023.01",
}


# ── POST /format ─────────────────────────────────────────────────────


def test_format_defaults_to_html():
    response = client.post("/format", json={"reference": REFERENCE, "style": "APA"})
    assert response.status_code == 200
    formatted = response.json()["formatted_reference"]
    assert formatted.startswith('<p class="apa-reference">')
    assert "https://doi.org/10.1234/jcs.2023.01" in formatted


def test_format_plain_text():
    response = client.post(
        "/format",
        json={"reference": REFERENCE, "style": "Chicago", "output_format": "TEXT"},
    )
    assert response.status_code == 200
    assert response.json()["formatted_reference"] == (
        "Smith, John, and Doe, Jane. A Study of Reference Styles "
        "Journal of Citation Studies 5, no. 2 (2023): 123-145. "
        "https://doi.org/10.1234/jcs.2023.01"
    )


def test_format_accepts_unknown_reference_fields():
    body = {
        "reference": {"title": "T", "edition": "2nd", "isbn": "123"},
        "style": "Harvard",
        "output_format": "TEXT",
    }
    response = client.post("/format", json=body)
    assert response.status_code == 200
    assert response.json()["formatted_reference"] == "T."


@pytest.mark.parametrize(
    "body",
    [
        {"reference": REFERENCE, "style": "Bluebook"},
        {"reference": {"authors": ["A"]}, "style": "APA"},
        {"style": "APA"},
        {"reference": {**REFERENCE, "volume": "five"}, "style": "MLA"},
    ],
)
def test_format_malformed_body_rejected(body):
    response = client.post("/format", json=body)
    assert response.status_code == 422


def test_styles_listing():
    response = client.get("/styles")
    assert response.status_code == 200
    assert response.json() == ["APA", "MLA", "Chicago", "Harvard", "Vancouver", "IEEE"]


# ── POST /search ─────────────────────────────────────────────────────


def test_search_returns_results():
    hits = [SearchResult(id="111", title="Study", authors=["Smith J"], year=2023)]
    with patch("citeformat.api.routes_search.search_pubmed", return_value=hits) as mock_search:
        response = client.post("/search", json={"q": "robotic surgery"})

    assert response.status_code == 200
    body = response.json()
    assert body[0]["id"] == "111"
    assert body[0]["title"] == "Study"
    assert body[0]["authors"] == ["Smith J"]
    assert body[0]["year"] == 2023
    mock_search.assert_called_once_with("robotic surgery")


def test_search_failure_is_500_with_cause():
    error = SearchError("Failed to search PubMed: connection refused")
    with patch("citeformat.api.routes_search.search_pubmed", side_effect=error):
        response = client.post("/search", json={"q": "x"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to search PubMed: connection refused"


def test_search_requires_query():
    response = client.post("/search", json={})
    assert response.status_code == 422
