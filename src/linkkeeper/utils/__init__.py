"""Shared helpers."""

from linkkeeper.utils.paths import PathTraversalError, safe_path_join

__all__ = ["PathTraversalError", "safe_path_join"]
