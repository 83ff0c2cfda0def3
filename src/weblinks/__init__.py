"""
Weblinks - a registry of Web Links (RFC 8288) with conflict detection.

This package provides tools for:
- Collecting links found in HTTP Link headers, HTML <link> elements and linksets
- Flagging duplicate links, conflicting cite-as targets and other suspicious links
- Filtering links by origin or relation
- Rendering links as HTML elements or Link header values
"""

__version__ = "0.1.0"

from weblinks.core.links import InvalidLinkError, Link
from weblinks.core.registry import Registry
from weblinks.core.schema import LinkOrigin

__all__ = [
    "__version__",
    "Registry",
    "Link",
    "LinkOrigin",
    "InvalidLinkError",
]
