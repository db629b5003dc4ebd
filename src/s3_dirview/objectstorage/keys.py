"""Conversion between logical directory paths and flat S3 keys.

S3 has no directories. A directory is represented by the set of keys that
share a ``/``-terminated prefix, so every path handed to the store has to be
turned into a key first: absolute paths lose their leading separator, and
directory paths gain a trailing one so that a delimiter listing groups their
children one level deep.

Examples:
    >>> normalize_key("/data/2024", is_directory=True)
    'data/2024/'
    >>> normalize_key("/data/2024/report.csv", is_directory=False)
    'data/2024/report.csv'
    >>> normalize_key("/", is_directory=True)
    ''
"""

from typing import Optional

SEPARATOR = "/"
DEFAULT_PLACEHOLDER_NAME = ".placeholder"


def normalize_key(path: str, is_directory: bool) -> str:
    """Convert a logical path into an S3 key.

    Args:
        path: Logical path, absolute or relative
        is_directory: Whether the path names a directory

    Returns:
        The storage key. Trailing separators in ``path`` are dropped, so a
        directory key ends in exactly one and a file key in none. The
        bucket root is always the empty string.
    """
    if path.startswith(SEPARATOR):
        path = path[len(SEPARATOR) :]
    path = path.rstrip(SEPARATOR)
    if path and is_directory:
        path += SEPARATOR
    return path


def resolve_placeholder_name(placeholder_name: Optional[str]) -> str:
    """Return the configured placeholder name, or the default when unset."""
    return placeholder_name or DEFAULT_PLACEHOLDER_NAME


def base_name(key: str) -> str:
    """Return the last segment of a key, ignoring trailing separators."""
    trimmed = key.rstrip(SEPARATOR)
    if not trimmed:
        return SEPARATOR if key else ""
    return trimmed.rsplit(SEPARATOR, 1)[-1]


def folder_name(common_prefix: str) -> str:
    """Return the display name of a common prefix ("a/b/" -> "b")."""
    return base_name(common_prefix.strip(SEPARATOR))
