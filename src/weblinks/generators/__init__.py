"""Generators for link markup and reports."""

from weblinks.generators.header import format_link_header, format_link_headers
from weblinks.generators.html import format_html_link
from weblinks.generators.markdown import generate_report

__all__ = [
    "format_html_link",
    "format_link_header",
    "format_link_headers",
    "generate_report",
]
