"""HTTP Link header value rendering (RFC 8288)."""

from __future__ import annotations

from weblinks.core.schema import is_token


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_link_header(href: str, properties: list[tuple[str, str]]) -> str:
    """
    Render one link as a Link header value.

    Angle brackets inside href are percent-encoded so the target cannot end early.

    Example:
        format_link_header("https://doi.org/10.1/x", [("rel", "cite-as")])
        # Returns: <https://doi.org/10.1/x>; rel="cite-as"

    Raises:
        ValueError: If a property name is not a token
    """
    target = href.replace("<", "%3C").replace(">", "%3E")
    parts = [f"<{target}>"]
    for name, value in properties:
        if not is_token(name):
            raise ValueError(f"Invalid link parameter name: {name!r}")
        parts.append(f"{name}={_quote(value)}")
    return "; ".join(parts)


def format_link_headers(links: list[tuple[str, list[tuple[str, str]]]]) -> str:
    """Join several rendered links into a single comma-separated header value."""
    return ", ".join(format_link_header(href, props) for href, props in links)
