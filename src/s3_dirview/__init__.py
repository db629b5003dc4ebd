"""A directory-tree view over flat S3 buckets.

S3 stores objects under flat keys. This package pages through the store's
delimiter listings and turns them into folders and files, so a bucket can be
browsed like a file system.

Key Features:
    - Directory listings over ListObjects v1 (marker) or v2 (continuation token)
    - Placeholder objects for empty folders hidden from listings
    - Single-key server-side copy
    - Presigned download links, optionally through a custom host
    - CLI interface

Recommended Usage:
    >>> from s3_dirview import S3StorageConfig, list_directory
    >>> config = S3StorageConfig(bucket="datasets", aws_profile="research")
    >>> for entry in list_directory("/projects/2024", config):
    ...     print(entry.name, entry.is_folder)

Advanced Usage:
    Build a view once and reuse it, or pick a lister directly:

    >>> from s3_dirview.objectstorage import S3DirectoryView, MarkerPagedLister
"""

__version__ = "0.1.0"

from .objectstorage import (
    Entry,
    S3DirectoryView,
    copy_path,
    get_link,
    list_directory,
    normalize_key,
)
from .schemas import S3StorageConfig

__all__ = [
    "Entry",
    "S3DirectoryView",
    "S3StorageConfig",
    "copy_path",
    "get_link",
    "list_directory",
    "normalize_key",
]
