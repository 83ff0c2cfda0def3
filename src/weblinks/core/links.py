"""Link assertions with required fields and dynamic facets."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import ValidationError

from weblinks.core.schema import LinkOrigin, LinkSchema

# (href, [(name, value), ...]) -> markup
Formatter = Callable[[str, list[tuple[str, str]]], str]


class InvalidLinkError(ValueError):
    """Raised when a link is missing a required field or has a malformed facet."""

    pass


class Link:
    """
    A single Web Link: an HTTP Link header, an HTML <link>, or a linkset entry.

    href, relation, anchor and origin are guaranteed to be present and are
    read-only. Every facet supplied at construction is also reachable as an
    attribute, so a link built with ``{"type": "text/html"}`` answers
    ``link.type``. Facets not supplied at construction do not exist on the
    link. Facet names must be Link header parameter names and must not
    collide with Link's own attributes (key, get, render, ...).
    """

    def __init__(
        self,
        origin: LinkOrigin | str,
        href: str,
        relation: str,
        anchor: str,
        facets: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Initialize a link.

        Args:
            origin: Where the link was found (header, body or linkset)
            href: Target URL
            relation: Relation type, e.g. "cite-as"
            anchor: Context URL
            facets: Remaining attributes, e.g. {"type": "text/html"}

        Raises:
            InvalidLinkError: If a required field is empty or a facet is invalid
        """
        try:
            schema = LinkSchema(
                origin=origin,
                href=href,
                relation=relation,
                anchor=anchor,
                facets=dict(facets or {}),
            )
        except ValidationError as e:
            raise InvalidLinkError(f"Invalid link {href!r} ({relation!r}): {e}") from e
        shadowed = [name for name in schema.facets if hasattr(type(self), name)]
        if shadowed:
            raise InvalidLinkError(f"Facet names collide with Link attributes: {', '.join(shadowed)}")
        self._schema = schema
        # Mutable copy; dict order is the order the facets were supplied
        self._facets: dict[str, str] = dict(schema.facets)

    @property
    def href(self) -> str:
        """Target URL of the link."""
        return self._schema.href

    @property
    def relation(self) -> str:
        """Relation type (e.g. "cite-as")."""
        return self._schema.relation

    @property
    def anchor(self) -> str:
        """Context URL the link is relative to."""
        return self._schema.anchor

    @property
    def origin(self) -> LinkOrigin:
        return self._schema.origin

    @property
    def key(self) -> tuple[str, str]:
        """Deduplication identity: facets, anchor and origin are ignored."""
        return (self._schema.href, self._schema.relation)

    @property
    def facet_names(self) -> tuple[str, ...]:
        """Facet names in the order they were supplied."""
        return tuple(self._facets)

    @property
    def facets(self) -> dict[str, str]:
        return self._facets.copy()

    def has_facet(self, name: str) -> bool:
        return name in self._facets

    def get(self, name: str, default: str | None = None) -> str | None:
        """Get a facet value."""
        return self._facets.get(name, default)

    def set(self, name: str, value: str) -> None:
        """
        Set the value of an existing facet.

        Only facets supplied at construction can be set.
        """
        if name not in self._facets:
            raise KeyError(f"Link has no facet {name!r}")
        if not isinstance(value, str):
            raise InvalidLinkError(f"Facet {name!r} must be a string, got {type(value).__name__}")
        self._facets[name] = value

    def is_duplicate_of(self, other: Link) -> bool:
        return self.key == other.key

    def properties(self) -> list[tuple[str, str]]:
        """Serialization properties: all facets, then rel, then anchor."""
        props = list(self._facets.items())
        props.append(("rel", self.relation))
        props.append(("anchor", self.anchor))
        return props

    def render(self, formatter: Formatter) -> str:
        """Render the link with an external formatter."""
        return formatter(self.href, self.properties())

    def to_html(self) -> str:
        """HTML <link> element for this link."""
        from weblinks.generators.html import format_html_link

        return self.render(format_html_link)

    def to_header(self) -> str:
        """HTTP Link header value for this link."""
        from weblinks.generators.header import format_link_header

        return self.render(format_link_header)

    def to_dict(self) -> dict[str, Any]:
        """Return link data as a link document entry."""
        return {
            "origin": self.origin.value,
            "href": self.href,
            "relation": self.relation,
            "anchor": self.anchor,
            "facets": self._facets.copy(),
        }

    def __getattr__(self, name: str) -> str:
        # Only reached when normal attribute lookup fails
        facets = self.__dict__.get("_facets")
        if facets is not None and name in facets:
            return facets[name]
        raise AttributeError(f"{type(self).__name__} has no attribute or facet {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        facets = self.__dict__.get("_facets")
        if facets is not None and name in facets:
            self.set(name, value)
            return
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"Link({self.relation} -> {self.href}, anchor={self.anchor}, origin={self.origin.value})"
