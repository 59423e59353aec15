"""API request/response Pydantic models."""

from typing import Optional

from pydantic import BaseModel, Field

from citeformat.core.reference import OutputFormat, Reference, ReferenceStyle


class FormatRequest(BaseModel):
    """Format one reference in one style."""

    reference: Reference
    style: ReferenceStyle
    output_format: Optional[OutputFormat] = Field(
        None, description="HTML | TEXT, None uses the configured default"
    )


class FormatResponse(BaseModel):
    formatted_reference: str


class SearchQuery(BaseModel):
    q: str = Field(..., description="PubMed query term")
