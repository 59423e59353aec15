"""Search result model and its mapping onto a Reference."""

from typing import Optional

from pydantic import BaseModel, Field

from citeformat.core.reference import Reference


class SearchResult(BaseModel):
    """A single PubMed hit."""

    id: str
    title: str
    authors: list[str] = Field(default_factory=list)
    year: int = Field(default=0, description="0 when the publication date has no year")
    container: Optional[str] = None
    volume: Optional[str] = None
    issue: Optional[str] = None
    pages: Optional[str] = None
    doi: Optional[str] = None

    def to_reference(self) -> Reference:
        """Map this hit onto a renderable Reference.

        A year of 0 and non-numeric volume/issue values are dropped; the
        PubMed ID is kept in ``additional_info``.
        """
        return Reference(
            authors=self.authors,
            year=self.year or None,
            title=self.title,
            container=self.container or None,
            volume=_as_int(self.volume),
            issue=_as_int(self.issue),
            pages=self.pages or None,
            doi=self.doi or None,
            additional_info={"pmid": self.id},
        )


def _as_int(value: str | None) -> int | None:
    if value and value.strip().isdigit():
        return int(value)
    return None
