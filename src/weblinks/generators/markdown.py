"""Markdown report generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weblinks.core.schema import LinkOrigin

if TYPE_CHECKING:
    from weblinks.core.registry import Registry


def _cell(value: str) -> str:
    return value.replace("|", "\\|")


def generate_report(registry: Registry, title: str = "Link Report") -> str:
    """Generate a Markdown summary of all links and warnings in a registry."""
    links = registry.links
    lines = [
        f"# {title}",
        "",
        f"**Default anchor:** `{registry.default_anchor}`  ",
        f"**Total links:** {len(links)}  ",
    ]
    for origin in LinkOrigin:
        lines.append(f"**From {origin.value}:** {len(registry.filter_by_origin(origin))}  ")
    lines.append("")

    lines.extend([
        "## Links",
        "",
    ])

    if links:
        lines.append("| Origin | Relation | Href | Anchor | Facets |")
        lines.append("|--------|----------|------|--------|--------|")
        for link in links:
            facets = ", ".join(f"{name}={value}" for name, value in link.facets.items()) or "-"
            lines.append(
                f"| {link.origin.value} | {_cell(link.relation)} | `{link.href}` | "
                f"`{link.anchor}` | {_cell(facets)} |"
            )
    else:
        lines.append("*No links found*")

    lines.append("")

    linksets = registry.linksets()
    if linksets:
        lines.extend([
            "## Linksets",
            "",
        ])
        for link in linksets:
            type_hint = f" ({link.get('type')})" if link.has_facet("type") else ""
            lines.append(f"- `{link.href}`{type_hint}")
        lines.append("")

    lines.extend([
        "## Warnings",
        "",
    ])
    warnings = registry.warnings
    if warnings:
        for warning in warnings:
            lines.append(f"- {warning}")
    else:
        lines.append("*No warnings*")

    return "\n".join(lines)
