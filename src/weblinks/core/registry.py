"""Registry of link assertions with conflict detection."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Iterator, Mapping

import yaml

from weblinks.core.links import InvalidLinkError, Link
from weblinks.core.schema import DEFAULT_ANCHOR, LinkDocumentSchema, LinkOrigin
from weblinks.logging import logger

MULTIPLE_RELATIONS_WARNING = (
    "WARN: the link relation contains spaces. This is allowed by the standard to "
    "indicate multiple relations for the same link, but the relations MUST be split "
    "before the link is created"
)
DESCRIBEDBY_TYPE_WARNING = (
    'WARN: A describedby link should include a "type" attribute, to know the MIME type '
    "of the addressed description"
)
CITE_AS_CONFLICT_WARNING = (
    "WARN: Found conflicting cite-as relations. A resource should assert exactly one "
    "canonical citation target"
)
RELATION_MISMATCH_WARNING = (
    "WARN: Found identical hrefs with different relation types. This may be suspicious. "
    "Both have been retained"
)


class Registry:
    """
    Registry of Web Links collected from headers, HTML bodies and linksets.

    Links are kept in insertion order. Every new link is checked against the
    links already registered; problems are recorded as warnings and never
    abort registration. A link with the same href and relation as a known
    link is collapsed into the known one.
    """

    def __init__(self, default_anchor: str = DEFAULT_ANCHOR) -> None:
        """
        Initialize registry.

        Args:
            default_anchor: Anchor used for links created without one
        """
        if not default_anchor:
            raise InvalidLinkError("default_anchor must not be empty")
        self._default_anchor = default_anchor
        self._links: list[Link] = []
        self._warnings: list[str] = []
        # Secondary index: (href, relation) -> first Link registered for it
        self._key_index: dict[tuple[str, str], Link] = {}
        self._lock = threading.Lock()

    @classmethod
    def load(cls, path: str | Path, default_anchor: str | None = None) -> Registry:
        """Load links from a YAML (or JSON) link document."""
        path = Path(path)
        with path.open() as f:
            data = yaml.safe_load(f)
        return cls.from_dict({} if data is None else data, default_anchor=default_anchor)

    @classmethod
    def from_dict(cls, data: Any, default_anchor: str | None = None) -> Registry:
        """Create registry from a link document dictionary."""
        schema = LinkDocumentSchema.model_validate(data)
        registry = cls(default_anchor or schema.default_anchor)
        for entry in schema.links:
            registry.create(
                entry.origin,
                entry.href,
                entry.relation,
                anchor=entry.anchor,
                facets=entry.facets,
            )
        return registry

    @property
    def default_anchor(self) -> str:
        return self._default_anchor

    @property
    def links(self) -> list[Link]:
        """All links, in insertion order."""
        with self._lock:
            return list(self._links)

    @property
    def warnings(self) -> list[str]:
        """Warnings collected so far, each message once, in the order first seen."""
        with self._lock:
            return list(self._warnings)

    def create(
        self,
        origin: LinkOrigin | str,
        href: str,
        relation: str,
        anchor: str | None = None,
        facets: Mapping[str, Any] | None = None,
    ) -> Link:
        """
        Create and register a link.

        Returns the link that is authoritative for (href, relation): the new
        link, or the previously registered one when the new link is a
        duplicate.

        Raises:
            InvalidLinkError: If origin, href or relation is missing or empty
        """
        if anchor is None:
            anchor = self._default_anchor
        link = Link(origin, href, relation, anchor, facets)

        with self._lock:
            if len(relation.split()) > 1:
                self._warn(MULTIPLE_RELATIONS_WARNING)

            known = self._check(link)
            if known is not None:
                logger.debug("Collapsed duplicate %r into %r", link, known)
                return known

            self._links.append(link)
            self._key_index.setdefault(link.key, link)
            logger.debug("Registered %r", link)
            return link

    def _check(self, link: Link) -> Link | None:
        """
        Compare a new link with every registered link.

        Adds warnings and returns the first registered duplicate, if any.
        Must be called with the lock held.
        """
        if link.relation == "describedby" and not link.has_facet("type"):
            self._warn(DESCRIBEDBY_TYPE_WARNING)

        duplicate: Link | None = None
        for known in self._links:
            if known.relation == "cite-as" and link.relation == "cite-as" and known.href != link.href:
                self._warn(CITE_AS_CONFLICT_WARNING)
            if known.href != link.href:
                continue
            if known.relation != link.relation:
                self._warn(RELATION_MISMATCH_WARNING)
            else:
                self._warn(
                    f"WARN: found apparent duplicate {known.relation} {known.href}. "
                    f"Ignoring and returning known link {known.relation} {known.href}"
                )
                if duplicate is None:
                    duplicate = known
        return duplicate

    def _warn(self, message: str) -> None:
        if message in self._warnings:
            return
        self._warnings.append(message)
        logger.warning(message)

    def filter(
        self,
        relation: str | None = None,
        origin: LinkOrigin | str | None = None,
    ) -> list[Link]:
        """Filter links by criteria, keeping insertion order."""
        if origin is not None:
            origin = LinkOrigin(origin)
        results = []
        for link in self.links:
            if relation is not None and link.relation != relation:
                continue
            if origin is not None and link.origin != origin:
                continue
            results.append(link)
        return results

    def filter_by_relation(self, relation: str) -> list[Link]:
        """Get all links with exactly this relation string."""
        return self.filter(relation=relation)

    def filter_by_origin(self, origin: LinkOrigin | str) -> list[Link]:
        """Get all links found in a specific place."""
        return self.filter(origin=origin)

    def linksets(self) -> list[Link]:
        """Get all links that point at linkset documents."""
        return self.filter_by_relation("linkset")

    def header_links(self) -> list[Link]:
        """Get all links that came from HTTP Link headers."""
        return self.filter_by_origin(LinkOrigin.HEADER)

    def body_links(self) -> list[Link]:
        """Get all links that came from HTML <link> elements."""
        return self.filter_by_origin(LinkOrigin.BODY)

    def linkset_links(self) -> list[Link]:
        """Get all links that came from linkset documents."""
        return self.filter_by_origin(LinkOrigin.LINKSET)

    def relations(self) -> set[str]:
        """Get all unique relation strings."""
        return {link.relation for link in self.links}

    def get(self, href: str, relation: str) -> Link | None:
        """Get the registered link for (href, relation)."""
        with self._lock:
            return self._key_index.get((href, relation))

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)

    def __iter__(self) -> Iterator[Link]:
        return iter(self.links)

    def __contains__(self, item: object) -> bool:
        """Check for a registered (href, relation) pair."""
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        return self.get(*item) is not None
