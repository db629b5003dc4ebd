"""Directory-style access to S3-compatible object storage."""

from .clients import CustomHostRewriter, S3ClientConfig, S3ClientManager
from .copy import copy_object
from .keys import normalize_key
from .listing import (
    ContinuationTokenPagedLister,
    Entry,
    MarkerPagedLister,
    PagedLister,
    create_lister,
)
from .s3_operations import S3DirectoryView, copy_path, get_link, list_directory

__all__ = [
    "ContinuationTokenPagedLister",
    "CustomHostRewriter",
    "Entry",
    "MarkerPagedLister",
    "PagedLister",
    "S3ClientConfig",
    "S3ClientManager",
    "S3DirectoryView",
    "copy_object",
    "copy_path",
    "create_lister",
    "get_link",
    "list_directory",
    "normalize_key",
]
