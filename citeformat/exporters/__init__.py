"""Export convenience function."""

import logging
from pathlib import Path

from citeformat.core.reference import Reference, ReferenceStyle
from citeformat.exporters.bibliography import export_bibliography_html, export_bibliography_md
from citeformat.exporters.docx_export import export_bibliography_docx

logger = logging.getLogger(__name__)


def export_all(
    references: list[Reference],
    style: ReferenceStyle,
    output_dir: str,
) -> dict:
    """Run all bibliography exports and return dict of file paths created."""
    style = ReferenceStyle(style)
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    stem = f"references_{style.value.lower()}"
    paths = {}

    docx_path = str(out / f"{stem}.docx")
    export_bibliography_docx(references, style, docx_path)
    paths["docx"] = docx_path

    md_path = str(out / f"{stem}.md")
    export_bibliography_md(references, style, md_path)
    paths["markdown"] = md_path

    html_path = str(out / f"{stem}.html")
    export_bibliography_html(references, style, html_path)
    paths["html"] = html_path

    logger.info("All exports written to %s", output_dir)
    return paths
