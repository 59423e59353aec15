"""Rendering engine entry points."""

import logging

from citeformat.core.reference import OutputFormat, Reference, ReferenceStyle
from citeformat.render.encoders import ENCODERS
from citeformat.render.fragments import RenderedReference
from citeformat.render.styles import STYLE_RENDERERS

logger = logging.getLogger(__name__)


def render(reference: Reference, style: ReferenceStyle | str) -> RenderedReference:
    """Render *reference* in *style* into the intermediate fragment form."""
    style = ReferenceStyle(style)
    fragments = STYLE_RENDERERS[style](reference)
    logger.debug("Rendered %r in %s (%d fragments)", reference.title, style.value, len(fragments))
    return RenderedReference(style=style, fragments=tuple(fragments))


def format_reference(
    reference: Reference,
    style: ReferenceStyle | str,
    output_format: OutputFormat | str = OutputFormat.HTML,
) -> str:
    """Render and encode one reference. Never fails on missing fields."""
    return ENCODERS[OutputFormat(output_format)].encode(render(reference, style))


def format_bibliography(
    references: list[Reference],
    style: ReferenceStyle | str,
    output_format: OutputFormat | str = OutputFormat.HTML,
) -> list[str]:
    """Format several references in the same style, preserving order."""
    return [format_reference(ref, style, output_format) for ref in references]
