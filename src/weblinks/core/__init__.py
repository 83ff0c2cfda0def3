"""Core domain models for Web Links."""

from weblinks.core.links import InvalidLinkError, Link
from weblinks.core.registry import Registry
from weblinks.core.schema import LinkDocumentSchema, LinkOrigin, LinkSchema

__all__ = [
    "Registry",
    "Link",
    "LinkOrigin",
    "InvalidLinkError",
    "LinkSchema",
    "LinkDocumentSchema",
]
