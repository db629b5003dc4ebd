"""Object storage listing operations."""

from .models import Entry, Page
from .paged_listers import (
    ContinuationTokenPagedLister,
    MarkerPagedLister,
    PagedLister,
    create_lister,
)

__all__ = [
    "ContinuationTokenPagedLister",
    "Entry",
    "MarkerPagedLister",
    "Page",
    "PagedLister",
    "create_lister",
]
