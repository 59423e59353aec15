"""Markdown and HTML bibliography files."""

import html
import logging
import re

from citeformat.core.reference import OutputFormat, Reference, ReferenceStyle
from citeformat.render import format_bibliography, render
from citeformat.render.fragments import RenderedReference

logger = logging.getLogger(__name__)

MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]])")


def escape_markdown(text: str) -> str:
    return MARKDOWN_SPECIAL.sub(r"\\\1", text)


def to_markdown(rendered: RenderedReference) -> str:
    """Inline Markdown: emphasised fragments wrapped in ``*``, text escaped."""
    parts = []
    for frag in rendered.fragments:
        text = escape_markdown(frag.text)
        parts.append(f"*{text}*" if frag.emphasis else text)
    return "".join(parts).strip()


def export_bibliography_md(
    references: list[Reference], style: ReferenceStyle, output_path: str
) -> None:
    """Write a Markdown reference list."""
    style = ReferenceStyle(style)
    with open(output_path, "w") as f:
        f.write("# References\n\n")
        for ref in references:
            f.write(f"- {to_markdown(render(ref, style))}\n")

    logger.info("Bibliography Markdown exported to %s", output_path)


def export_bibliography_html(
    references: list[Reference], style: ReferenceStyle, output_path: str
) -> None:
    """Write a standalone HTML page with one encoded entry per reference."""
    style = ReferenceStyle(style)
    entries = format_bibliography(references, style, OutputFormat.HTML)
    title = html.escape(f"References ({style.value})")
    with open(output_path, "w") as f:
        f.write("<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n")
        f.write(f"<title>{title}</title>\n</head>\n<body>\n")
        f.write(f"<h1>{title}</h1>\n")
        for entry in entries:
            f.write(f"{entry}\n")
        f.write("</body>\n</html>\n")

    logger.info("Bibliography HTML exported to %s", output_path)
