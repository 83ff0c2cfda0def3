"""Pydantic schemas for link assertions and link documents."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator

DEFAULT_ANCHOR = "https://example.org/"

# Names that collide with the required fields or the serialized rel/anchor pair
RESERVED_FACETS = frozenset({"href", "rel", "relation", "anchor", "origin"})

# RFC 7230 token: the characters allowed in a Link parameter name
TOKEN_RE = re.compile(r"[!#$%&'*+.^_`|~0-9A-Za-z-]+")


def is_token(name: str) -> bool:
    return TOKEN_RE.fullmatch(name) is not None


class LinkOrigin(str, Enum):
    """Where a link assertion was found."""

    HEADER = "header"  # HTTP Link response header
    BODY = "body"  # HTML <link> element
    LINKSET = "linkset"  # External linkset document


class LinkSchema(BaseModel):
    """
    Schema for a single link assertion.

    href, relation, anchor and origin are always present. Facets are
    free-form string attributes (type, hreflang, title, ...).
    """

    origin: LinkOrigin
    href: str = Field(min_length=1)
    relation: str = Field(min_length=1)
    anchor: str = Field(min_length=1)
    facets: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("href", "relation", "anchor")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("facets")
    @classmethod
    def reject_reserved_facets(cls, v: dict[str, str]) -> dict[str, str]:
        """Facet names must not shadow the required fields."""
        for name in v:
            if not name:
                raise ValueError("facet names must not be empty")
            if not is_token(name):
                raise ValueError(f"Facet name is not a token: {name!r}")
            if name in RESERVED_FACETS:
                raise ValueError(f"Reserved facet name: {name}")
        return v


class LinkEntrySchema(BaseModel):
    """A pre-parsed link as it appears in a link document (anchor optional)."""

    origin: LinkOrigin
    href: str
    relation: str
    anchor: str | None = None
    facets: dict[str, str] = Field(default_factory=dict)


class LinkDocumentSchema(BaseModel):
    """
    Schema for a document of pre-parsed links.

    Links are created in document order, so warnings and deduplication
    behave exactly as if the links had been registered one by one.
    """

    default_anchor: str = DEFAULT_ANCHOR
    links: list[LinkEntrySchema] = Field(default_factory=list)
