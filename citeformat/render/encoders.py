"""Output encoders: turn a RenderedReference into a concrete string.

New output formats only need a new encoder here; renderers never change.
"""

import html
from abc import ABC, abstractmethod

from citeformat.core.reference import OutputFormat, ReferenceStyle
from citeformat.render.fragments import RenderedReference, check_exhaustive


class OutputEncoder(ABC):
    """Abstract base class for output encoders."""

    @abstractmethod
    def encode(self, rendered: RenderedReference) -> str:
        """Return the concrete representation of *rendered*."""


class TextEncoder(OutputEncoder):
    """Plain text, no markup."""

    def encode(self, rendered: RenderedReference) -> str:
        return rendered.text


class HtmlEncoder(OutputEncoder):
    """Inline HTML: one ``<p>`` per reference, one ``<span>`` per field.

    The paragraph carries ``{style}-reference`` as its class and each field
    value carries its kind (``author``, ``year``, ...) so that downstream
    stylesheets can target them. Emphasised values are wrapped in ``<i>``.
    """

    def encode(self, rendered: RenderedReference) -> str:
        parts = [f'<p class="{css_class(rendered.style)}">']
        for frag in rendered.fragments:
            text = html.escape(frag.text)
            if frag.kind is None:
                parts.append(text)
                continue
            if frag.emphasis:
                text = f"<i>{text}</i>"
            parts.append(f'<span class="{frag.kind.value}">{text}</span>')
        parts.append("</p>")
        return "".join(parts)


def css_class(style: ReferenceStyle) -> str:
    """``ReferenceStyle.CHICAGO`` -> ``"chicago-reference"``."""
    return f"{style.value.lower()}-reference"


ENCODERS: dict[OutputFormat, OutputEncoder] = {
    OutputFormat.HTML: HtmlEncoder(),
    OutputFormat.TEXT: TextEncoder(),
}

check_exhaustive(ENCODERS, OutputFormat, "Output encoder")
