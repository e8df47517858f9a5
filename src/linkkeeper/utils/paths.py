"""Path safety utilities for secure file operations."""

from __future__ import annotations

from pathlib import Path

from linkkeeper.exceptions import LinkkeeperError


class PathTraversalError(LinkkeeperError):
    """Raised when a path would escape its intended directory."""


def safe_path_join(base_dir: Path, *parts: str) -> Path:
    r"""Safely join path parts and ensure result stays within base_dir.

    Legacy paths are built from front matter (a category such as ``../x``
    would otherwise land outside the build output), so every write goes
    through here.

    Args:
        base_dir: Base directory that result must stay within
        *parts: Path parts to join

    Returns:
        Resolved path guaranteed to be within base_dir

    Raises:
        PathTraversalError: If resulting path would escape base_dir

    Examples:
        >>> base = Path("/output")
        >>> safe_path_join(base, "c++/2016/03/02/foo", "index.html")
        PosixPath('/output/c++/2016/03/02/foo/index.html')

    """
    if any(Path(part).is_absolute() for part in parts):
        absolute_part = next(part for part in parts if Path(part).is_absolute())
        msg = f"Absolute paths not allowed: {absolute_part}"
        raise PathTraversalError(msg)

    base_resolved = base_dir.resolve()
    candidate_path = base_resolved.joinpath(*parts)

    try:
        candidate_resolved = candidate_path.resolve()
        candidate_resolved.relative_to(base_resolved)
    except (ValueError, OSError) as err:
        msg = f"Path traversal detected: joining {parts} to {base_dir} would escape base directory"
        raise PathTraversalError(msg) from err

    return candidate_resolved
