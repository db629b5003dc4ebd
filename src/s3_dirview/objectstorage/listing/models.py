"""Value types produced while listing an S3 prefix."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Entry:
    """One item of a directory listing.

    Attributes:
        name: Basename of the object or folder
        is_folder: True for folders synthesized from common prefixes
        size: Object size in bytes (0 for folders)
        modified: Last modification time (configured default for folders)
    """

    name: str
    is_folder: bool
    size: int
    modified: datetime


@dataclass(frozen=True)
class Page:
    """A single list response, reduced to what the listers need.

    ``is_truncated`` is None when the store left the flag out of the
    response. ``next_cursor`` holds NextMarker (v1) or
    NextContinuationToken (v2).
    """

    common_prefixes: list[str] = field(default_factory=list)
    objects: list[dict[str, Any]] = field(default_factory=list)
    is_truncated: Optional[bool] = None
    next_cursor: Optional[str] = None

    @classmethod
    def from_v1_response(cls, response: dict[str, Any]) -> "Page":
        """Build a page from a ``list_objects`` response."""
        return cls(
            common_prefixes=_prefixes(response),
            objects=list(response.get("Contents", [])),
            is_truncated=response.get("IsTruncated"),
            next_cursor=response.get("NextMarker"),
        )

    @classmethod
    def from_v2_response(cls, response: dict[str, Any]) -> "Page":
        """Build a page from a ``list_objects_v2`` response."""
        return cls(
            common_prefixes=_prefixes(response),
            objects=list(response.get("Contents", [])),
            is_truncated=response.get("IsTruncated"),
            next_cursor=response.get("NextContinuationToken"),
        )


def _prefixes(response: dict[str, Any]) -> list[str]:
    return [common["Prefix"] for common in response.get("CommonPrefixes", [])]
