"""DOCX bibliography for manuscript submission."""

import logging

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt

from citeformat.core.reference import Reference, ReferenceStyle
from citeformat.render import render

logger = logging.getLogger(__name__)


def export_bibliography_docx(
    references: list[Reference], style: ReferenceStyle, output_path: str
) -> None:
    """Export a bibliography as DOCX, one hanging-indent paragraph per entry.

    Emphasised fragments (titles, journal names) become italic runs.
    """
    style = ReferenceStyle(style)
    doc = Document()

    heading = doc.add_paragraph()
    run = heading.add_run("References")
    run.bold = True
    run.font.size = Pt(14)
    heading.alignment = WD_ALIGN_PARAGRAPH.LEFT

    for ref in references:
        rendered = render(ref, style)
        para = doc.add_paragraph()
        para.paragraph_format.left_indent = Inches(0.5)
        para.paragraph_format.first_line_indent = Inches(-0.5)
        for frag in rendered.fragments:
            run = para.add_run(frag.text)
            run.italic = frag.emphasis
            run.font.size = Pt(11)

    doc.save(output_path)
    logger.info(
        "Bibliography DOCX exported to %s (%d references, %s)",
        output_path,
        len(references),
        style.value,
    )
