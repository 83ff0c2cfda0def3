"""HTML <link> element rendering."""

from __future__ import annotations

from html import escape

from weblinks.core.schema import is_token


def format_html_link(href: str, properties: list[tuple[str, str]]) -> str:
    """
    Render an HTML <link> element.

    Attributes are emitted in the order given, after href.

    Example:
        format_html_link("https://doi.org/10.1/x", [("rel", "cite-as")])
        # Returns: <link href="https://doi.org/10.1/x" rel="cite-as" />

    Raises:
        ValueError: If a property name is not a valid attribute name
    """
    attrs = [f'href="{escape(href, quote=True)}"']
    for name, value in properties:
        # Tokens may still contain a quote, which HTML attribute names may not
        if not is_token(name) or "'" in name:
            raise ValueError(f"Invalid attribute name: {name!r}")
        attrs.append(f'{name}="{escape(value, quote=True)}"')
    return f"<link {' '.join(attrs)} />"
