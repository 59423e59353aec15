"""Formatting API: render a reference in a citation style."""

from fastapi import APIRouter

from citeformat.api.schemas import FormatRequest, FormatResponse
from citeformat.core.reference import ReferenceStyle
from citeformat.core.settings import get_settings
from citeformat.render import format_reference

router = APIRouter(tags=["format"])


@router.post("/format", response_model=FormatResponse)
def format_endpoint(req: FormatRequest) -> FormatResponse:
    output_format = req.output_format or get_settings().rendering.default_output_format
    formatted = format_reference(req.reference, req.style, output_format)
    return FormatResponse(formatted_reference=formatted)


@router.get("/styles", response_model=list[str])
def styles_endpoint() -> list[str]:
    return [style.value for style in ReferenceStyle]
