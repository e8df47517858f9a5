"""Content corpus loading."""

from linkkeeper.content.exceptions import ContentLoadError, ContentParseError
from linkkeeper.content.loader import canonical_id, load_corpus, parse_content_file

__all__ = ["ContentLoadError", "ContentParseError", "canonical_id", "load_corpus", "parse_content_file"]
