"""linkkeeper: redirect pages for posts published under a site's old URL scheme."""

from linkkeeper.data_primitives.document import ContentItem, ContentKind, RedirectPage
from linkkeeper.redirects import build_redirects, generate_redirects, select_legacy_items, synthesize

__version__ = "0.1.0"

__all__ = [
    "ContentItem",
    "ContentKind",
    "RedirectPage",
    "build_redirects",
    "generate_redirects",
    "select_legacy_items",
    "synthesize",
]
