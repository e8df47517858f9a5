"""Legacy URL redirect pipeline: select old posts, synthesize redirect pages."""

from linkkeeper.redirects.pipeline import build_redirects, generate_redirects
from linkkeeper.redirects.selector import is_legacy_item, select_legacy_items
from linkkeeper.redirects.synthesizer import build_context, legacy_path, synthesize

__all__ = [
    "build_context",
    "build_redirects",
    "generate_redirects",
    "is_legacy_item",
    "legacy_path",
    "select_legacy_items",
    "synthesize",
]
