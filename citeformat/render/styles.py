"""Per-style citation renderers and the style dispatch table.

Every optional field goes through ``optional`` so that an absent field
drops its whole fragment, punctuation included. An issue number is only
ever emitted inside its volume's fragment.
"""

from typing import Callable

from citeformat.core.reference import Reference, ReferenceStyle
from citeformat.render.fragments import (
    FieldKind,
    Fragment,
    check_exhaustive,
    field,
    join_names,
    lit,
    optional,
    surname_initial,
)

Renderer = Callable[[Reference], list[Fragment]]

VANCOUVER_MAX_AUTHORS = 6


# ── Author-Date Styles ───────────────────────────────────────────────


def render_apa(ref: Reference) -> list[Fragment]:
    return [
        *optional(ref.authors, join_names(ref.authors), lit(" ")),
        *optional(ref.year, lit("("), field(FieldKind.YEAR, ref.year), lit("). ")),
        field(FieldKind.TITLE, ref.title, emphasis=True),
        lit(". "),
        *optional(
            ref.container,
            field(FieldKind.CONTAINER, ref.container, emphasis=True),
            lit(" "),
        ),
        *optional(
            ref.volume,
            lit("vol. "),
            field(FieldKind.VOLUME, ref.volume),
            lit(", "),
            optional(ref.issue, lit("no. "), field(FieldKind.ISSUE, ref.issue), lit(", ")),
        ),
        *optional(ref.pages, lit("pp. "), field(FieldKind.PAGES, ref.pages), lit(". ")),
        *optional(ref.doi, field(FieldKind.DOI, f"https://doi.org/{ref.doi}")),
    ]


def render_harvard(ref: Reference) -> list[Fragment]:
    # Separators lead each optional fragment so the entry always closes on "."
    return [
        *optional(ref.authors, join_names(ref.authors), lit(" ")),
        *optional(ref.year, lit("("), field(FieldKind.YEAR, ref.year), lit(") ")),
        field(FieldKind.TITLE, ref.title),
        *optional(
            ref.container,
            lit(", "),
            field(FieldKind.CONTAINER, ref.container, emphasis=True),
        ),
        *optional(
            ref.volume,
            lit(", "),
            field(FieldKind.VOLUME, ref.volume),
            optional(ref.issue, lit("("), field(FieldKind.ISSUE, ref.issue), lit(")")),
        ),
        *optional(ref.pages, lit(", pp. "), field(FieldKind.PAGES, ref.pages)),
        lit("."),
        *optional(ref.doi, lit(" DOI: "), field(FieldKind.DOI, ref.doi)),
    ]


# ── Humanities Styles ────────────────────────────────────────────────


def render_mla(ref: Reference) -> list[Fragment]:
    return [
        *optional(ref.authors, join_names(ref.authors, ", and "), lit(". ")),
        field(FieldKind.TITLE, ref.title, emphasis=True),
        lit(". "),
        *optional(
            ref.container,
            field(FieldKind.CONTAINER, ref.container, emphasis=True),
            lit(", "),
        ),
        *optional(
            ref.volume,
            lit("vol. "),
            field(FieldKind.VOLUME, ref.volume),
            lit(", "),
            optional(ref.issue, lit("no. "), field(FieldKind.ISSUE, ref.issue), lit(", ")),
        ),
        *optional(ref.year, field(FieldKind.YEAR, ref.year), lit(", ")),
        *optional(ref.pages, lit("pp. "), field(FieldKind.PAGES, ref.pages), lit(". ")),
        *optional(ref.doi, lit("DOI: "), field(FieldKind.DOI, ref.doi)),
    ]


def render_chicago(ref: Reference) -> list[Fragment]:
    return [
        *optional(ref.authors, join_names(ref.authors, ", and "), lit(". ")),
        field(FieldKind.TITLE, ref.title),
        *optional(
            ref.container,
            lit(" "),
            field(FieldKind.CONTAINER, ref.container, emphasis=True),
        ),
        *optional(
            ref.volume,
            lit(" "),
            field(FieldKind.VOLUME, ref.volume),
            optional(ref.issue, lit(", no. "), field(FieldKind.ISSUE, ref.issue)),
        ),
        *optional(ref.year, lit(" ("), field(FieldKind.YEAR, ref.year), lit(")")),
        *optional(ref.pages, lit(": "), field(FieldKind.PAGES, ref.pages), lit(".")),
        *optional(ref.doi, lit(" "), field(FieldKind.DOI, f"https://doi.org/{ref.doi}")),
    ]


# ── Numbered Styles ──────────────────────────────────────────────────


def render_vancouver(ref: Reference) -> list[Fragment]:
    shown = [surname_initial(a) for a in ref.authors[:VANCOUVER_MAX_AUTHORS]]
    overflow = ref.authors[VANCOUVER_MAX_AUTHORS:]
    return [
        *optional(
            ref.authors,
            join_names(shown),
            optional(overflow, lit(", et al")),
            lit(". "),
        ),
        field(FieldKind.TITLE, ref.title),
        lit("."),
        *optional(
            ref.container,
            lit(" "),
            field(FieldKind.CONTAINER, ref.container, emphasis=True),
            lit("."),
        ),
        *optional(ref.year, lit(" "), field(FieldKind.YEAR, ref.year)),
        *optional(
            ref.volume,
            lit(";"),
            field(FieldKind.VOLUME, ref.volume),
            optional(ref.issue, lit("("), field(FieldKind.ISSUE, ref.issue), lit(")")),
        ),
        *optional(ref.pages, lit(":"), field(FieldKind.PAGES, ref.pages), lit(".")),
        *optional(ref.doi, lit(" doi: "), field(FieldKind.DOI, ref.doi)),
    ]


def render_ieee(ref: Reference) -> list[Fragment]:
    authors: list[Fragment] = []
    for index, name in enumerate(ref.authors):
        if index > 0:
            authors.append(lit(", "))
        authors.append(field(FieldKind.AUTHOR, surname_initial(name)))
        authors.append(lit("."))

    # Separators lead each optional fragment so the entry always closes on "."
    return [
        *optional(ref.authors, authors, lit(", ")),
        field(FieldKind.TITLE, ref.title),
        *optional(
            ref.container,
            lit(", "),
            field(FieldKind.CONTAINER, ref.container, emphasis=True),
        ),
        *optional(
            ref.volume,
            lit(", vol. "),
            field(FieldKind.VOLUME, ref.volume),
            optional(ref.issue, lit(", no. "), field(FieldKind.ISSUE, ref.issue)),
        ),
        *optional(ref.pages, lit(", pp. "), field(FieldKind.PAGES, ref.pages)),
        *optional(ref.year, lit(", "), field(FieldKind.YEAR, ref.year)),
        lit("."),
        *optional(ref.doi, lit(" DOI: "), field(FieldKind.DOI, ref.doi)),
    ]


# ── Dispatch ─────────────────────────────────────────────────────────


STYLE_RENDERERS: dict[ReferenceStyle, Renderer] = {
    ReferenceStyle.APA: render_apa,
    ReferenceStyle.MLA: render_mla,
    ReferenceStyle.CHICAGO: render_chicago,
    ReferenceStyle.HARVARD: render_harvard,
    ReferenceStyle.VANCOUVER: render_vancouver,
    ReferenceStyle.IEEE: render_ieee,
}

check_exhaustive(STYLE_RENDERERS, ReferenceStyle, "Style renderer")
