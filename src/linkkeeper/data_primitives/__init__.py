"""Fundamental data primitives for the redirect pipeline.

- **Content**: ContentItem, ContentKind
- **Derived pages**: RedirectPage
- **Collaborator protocols**: LayoutRenderer, PageWriter
"""

from linkkeeper.data_primitives.document import ContentItem, ContentKind, RedirectPage
from linkkeeper.data_primitives.protocols import LayoutRenderer, PageWriter

__all__ = [
    "ContentItem",
    "ContentKind",
    "LayoutRenderer",
    "PageWriter",
    "RedirectPage",
]
