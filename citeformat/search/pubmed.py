"""PubMed search client using Biopython's Entrez module."""

import logging

from Bio import Entrez

from citeformat.core.settings import PubMedSettings, get_settings
from citeformat.search.models import SearchResult

logger = logging.getLogger(__name__)


class SearchError(RuntimeError):
    """ESearch or ESummary failed, or returned something unparsable."""


# ── Public API ───────────────────────────────────────────────────────


def search_pubmed(
    query: str,
    max_results: int | None = None,
    settings: PubMedSettings | None = None,
) -> list[SearchResult]:
    """Search PubMed for *query* and return one SearchResult per hit.

    Two sequential calls: ESearch for the matching PMIDs, then one ESummary
    batch for their summaries. A failure in either is raised as a single
    SearchError; nothing is retried and no partial results are returned.
    """
    settings = settings or get_settings().pubmed
    _configure_entrez(settings)
    retmax = max_results or settings.max_results
    logger.info("PubMed query: %s (retmax=%d)", query, retmax)

    try:
        pmids = _esearch(query, retmax)
        if not pmids:
            logger.info("PubMed returned 0 results")
            return []
        logger.info("PubMed found %d PMIDs", len(pmids))
        results = [_parse_summary(doc) for doc in _esummary(pmids)]
    except Exception as exc:
        logger.error("PubMed search failed for %r: %s", query, exc)
        raise SearchError(f"Failed to search PubMed: {exc}") from exc

    logger.info("Fetched %d summaries from PubMed", len(results))
    return results


def parse_year(pubdate: str) -> int:
    """Year from the leading token of a PubMed date ("2023 Jan 5"), else 0."""
    tokens = pubdate.split()
    if not tokens:
        return 0
    try:
        return int(tokens[0])
    except ValueError:
        return 0


# ── Entrez Wrappers ──────────────────────────────────────────────────


def _configure_entrez(settings: PubMedSettings) -> None:
    Entrez.email = settings.email
    Entrez.tool = settings.tool
    if settings.api_key:
        Entrez.api_key = settings.api_key


def _esearch(query: str, retmax: int) -> list[str]:
    """Run ESearch and return the matching PMIDs."""
    handle = Entrez.esearch(db="pubmed", term=query, retmax=retmax)
    try:
        result = Entrez.read(handle)
    finally:
        handle.close()
    return [str(pmid) for pmid in result["IdList"]]


def _esummary(pmids: list[str]) -> list[dict]:
    """Fetch document summaries for a batch of PMIDs."""
    handle = Entrez.esummary(db="pubmed", id=",".join(pmids))
    try:
        return list(Entrez.read(handle))
    finally:
        handle.close()


# ── Summary Parser ───────────────────────────────────────────────────


def _parse_summary(doc: dict) -> SearchResult:
    """Convert an ESummary DocSum into a SearchResult.

    ``Id`` and ``Title`` are required; a DocSum without them is an
    unparsable response and raises KeyError.
    """
    return SearchResult(
        id=str(doc["Id"]),
        title=str(doc["Title"]),
        authors=[str(name) for name in doc.get("AuthorList", [])],
        year=parse_year(str(doc.get("PubDate", ""))),
        container=_text(doc.get("Source")),
        volume=_text(doc.get("Volume")),
        issue=_text(doc.get("Issue")),
        pages=_text(doc.get("Pages")),
        doi=_text(doc.get("DOI")),
    )


def _text(value) -> str | None:
    if value is None:
        return None
    return str(value) or None
