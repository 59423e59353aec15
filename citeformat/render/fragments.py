"""Intermediate rendering shared by the style renderers and output encoders.

A renderer turns a Reference into an ordered sequence of Fragments. A
fragment is either literal punctuation (``kind is None``) or a tagged field
value. Encoders only ever see this structure, never the Reference itself.
"""

from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from citeformat.core.reference import ReferenceStyle


class FieldKind(str, Enum):
    """Field tags an encoder can style individually."""

    AUTHOR = "author"
    YEAR = "year"
    TITLE = "title"
    CONTAINER = "container"
    VOLUME = "volume"
    ISSUE = "issue"
    PAGES = "pages"
    DOI = "doi"


class Fragment(BaseModel):
    """One piece of rendered text."""

    model_config = ConfigDict(frozen=True)

    text: str
    kind: Optional[FieldKind] = None
    emphasis: bool = False


class RenderedReference(BaseModel):
    """A reference rendered in one style, before encoding."""

    model_config = ConfigDict(frozen=True)

    style: ReferenceStyle
    fragments: tuple[Fragment, ...]

    @property
    def text(self) -> str:
        return "".join(f.text for f in self.fragments)


Part = Union[Fragment, Iterable[Fragment]]


# ── Builders ─────────────────────────────────────────────────────────


def lit(text: str) -> Fragment:
    """Literal punctuation or label text."""
    return Fragment(text=text)


def field(kind: FieldKind, value: Any, emphasis: bool = False) -> Fragment:
    """A tagged field value."""
    return Fragment(text=str(value), kind=kind, emphasis=emphasis)


def present(value: Any) -> bool:
    """True when a field carries something worth rendering."""
    if value is None:
        return False
    if isinstance(value, (str, list, tuple)):
        return len(value) > 0
    return True


def optional(value: Any, *parts: Part) -> list[Fragment]:
    """Emit *parts*, delimiters included, only when *value* is present.

    Parts may themselves be nested ``optional(...)`` results, which is how
    an issue number stays inside its volume's fragment.
    """
    if not present(value):
        return []
    out: list[Fragment] = []
    for part in parts:
        if isinstance(part, Fragment):
            out.append(part)
        else:
            out.extend(part)
    return out


# ── Author Lists ─────────────────────────────────────────────────────


def join_names(names: list[str], last_separator: str = ", ") -> list[Fragment]:
    """Author fragments joined by ", ", with *last_separator* before the last."""
    out: list[Fragment] = []
    last = len(names) - 1
    for index, name in enumerate(names):
        if index > 0:
            out.append(lit(last_separator if index == last else ", "))
        out.append(field(FieldKind.AUTHOR, name))
    return out


def surname_initial(name: str) -> str:
    """``"Jane Q Doe"`` -> ``"Doe J"``.

    The surname is the last whitespace token; the initial is the first
    character of the whole display name, not of the surname.
    """
    tokens = name.split()
    surname = tokens[-1] if tokens else ""
    return f"{surname} {name[:1]}"


# ── Registries ───────────────────────────────────────────────────────


def check_exhaustive(registry: Mapping, members: type[Enum], what: str) -> None:
    """Raise if *registry* keys are not exactly the members of *members*."""
    missing = [m.value for m in members if m not in registry]
    unexpected = [k for k in registry if not isinstance(k, members)]
    if missing or unexpected:
        raise RuntimeError(
            f"{what} registry out of sync with {members.__name__}: "
            f"missing={missing} unexpected={unexpected}"
        )
