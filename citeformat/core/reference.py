"""Reference record, citation style and output format models."""

from enum import Enum
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_serializer,
    model_validator,
)


# ── Styles & Formats ─────────────────────────────────────────────────


class ReferenceStyle(str, Enum):
    """The six supported citation styles. Values are the wire names."""

    APA = "APA"
    MLA = "MLA"
    CHICAGO = "Chicago"
    HARVARD = "Harvard"
    VANCOUVER = "Vancouver"
    IEEE = "IEEE"

    @classmethod
    def parse(cls, name: str) -> "ReferenceStyle":
        """Case-insensitive lookup by wire name, e.g. ``"chicago"``."""
        for style in cls:
            if style.value.lower() == name.strip().lower():
                return style
        valid = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown citation style {name!r} (valid: {valid})")


class OutputFormat(str, Enum):
    """Concrete representations a rendered reference can be encoded to."""

    HTML = "HTML"
    TEXT = "TEXT"


# ── Reference Record ─────────────────────────────────────────────────


class Reference(BaseModel):
    """One bibliographic entry.

    Only ``title`` is required. Keys outside the fixed schema are collected
    into ``additional_info`` on input and flattened back out on dump.
    """

    model_config = ConfigDict(frozen=True)

    authors: list[str] = Field(default_factory=list)
    year: Optional[int] = None
    title: str
    container: Optional[str] = Field(
        default=None, description="Journal, book or collection name"
    )
    other_contributors: Optional[list[str]] = None
    version: Optional[str] = None
    number: Optional[str] = None
    publisher: Optional[str] = None
    publication_date: Optional[str] = None
    location: Optional[str] = None
    pages: Optional[str] = None
    volume: Optional[int] = None
    issue: Optional[int] = None
    doi: Optional[str] = None
    url: Optional[str] = None
    accessed_date: Optional[str] = None
    additional_info: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def absorb_unknown_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        known = {k: v for k, v in data.items() if k in cls.model_fields}
        unknown = {k: v for k, v in data.items() if k not in cls.model_fields}
        if not unknown:
            return data

        info = dict(known.get("additional_info") or {})
        for key, value in unknown.items():
            if value is None:
                continue
            info[str(key)] = value if isinstance(value, str) else str(value)
        known["additional_info"] = info
        return known

    @model_serializer(mode="wrap")
    def _flatten_additional_info(self, handler) -> dict:
        data = handler(self)
        extra = data.pop("additional_info", None) or {}
        for key, value in extra.items():
            data.setdefault(key, value)
        return data
