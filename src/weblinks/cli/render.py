"""Link rendering CLI command."""

from __future__ import annotations

from pathlib import Path

import click

from weblinks.cli.main import Context, pass_context


@click.command()
@click.argument("document", type=click.Path(path_type=Path))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["html", "header"]),
    default="html",
    help="Output format",
)
@click.option(
    "--relation",
    "-r",
    help="Render only links with this relation",
)
@click.option(
    "--combined",
    is_flag=True,
    help="Emit a single comma-separated Link header value (header format only)",
)
@pass_context
def render(
    ctx: Context,
    document: Path,
    output_format: str,
    relation: str | None,
    combined: bool,
) -> None:
    """
    Render the links in a document as HTML or Link header values.

    Examples:

        # HTML <link> elements
        weblinks render links.yml

        # One Link header for all cite-as links
        weblinks render links.yml -f header -r cite-as --combined
    """
    from weblinks.generators import format_html_link, format_link_header, format_link_headers

    registry = ctx.load(document)
    links = registry.filter_by_relation(relation) if relation else registry.links

    if output_format == "header" and combined:
        if links:
            click.echo(format_link_headers([(link.href, link.properties()) for link in links]))
        return

    formatter = format_html_link if output_format == "html" else format_link_header
    for link in links:
        click.echo(link.render(formatter))
