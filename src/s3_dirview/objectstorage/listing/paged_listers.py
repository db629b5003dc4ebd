"""Directory listings assembled from paginated S3 list responses.

Both listers ask the store to group keys on ``/`` under the directory's
prefix, which yields the immediate children only: common prefixes become
folders and objects become files. They differ in how they walk the pages:

- ``MarkerPagedLister`` uses ListObjects (v1) and resumes from NextMarker.
- ``ContinuationTokenPagedLister`` uses ListObjectsV2 and resumes from
  NextContinuationToken, falling back to StartAfter for stores that
  truncate without handing out tokens.

The protocol is chosen once, through ``create_lister``. Store errors are not
caught here; a failure on any page aborts the listing.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

from s3_dirview.core import get_logger
from s3_dirview.core.exceptions import ProtocolContractError, ValidationError
from s3_dirview.objectstorage.keys import (
    SEPARATOR,
    base_name,
    folder_name,
    normalize_key,
    resolve_placeholder_name,
)

from .models import Entry, Page

logger = get_logger(__name__)


class PagedLister(ABC):
    """Lists the immediate children of a directory in an S3 bucket."""

    def __init__(
        self,
        client: Any,
        bucket: str,
        placeholder_name: Optional[str],
        default_folder_modified: datetime,
    ):
        """Initialize the lister.

        Args:
            client: boto3 S3 client (or anything with the same list methods)
            bucket: Bucket to list
            placeholder_name: Object name hidden from listings; None for the
                default
            default_folder_modified: Modification time reported for folders
        """
        self.client = client
        self.bucket = bucket
        self.placeholder_name = resolve_placeholder_name(placeholder_name)
        self.default_folder_modified = default_folder_modified

    @abstractmethod
    def _pages(self, prefix: str):
        """Yield every page of the listing for ``prefix``."""

    def _entries(self, page: Page) -> list[Entry]:
        entries = [
            Entry(
                name=folder_name(common_prefix),
                is_folder=True,
                size=0,
                modified=self.default_folder_modified,
            )
            for common_prefix in page.common_prefixes
        ]
        for obj in page.objects:
            name = base_name(obj["Key"])
            if name == self.placeholder_name:
                continue
            entries.append(
                Entry(
                    name=name,
                    is_folder=False,
                    size=obj["Size"],
                    modified=obj["LastModified"],
                )
            )
        return entries

    def list(self, directory_path: str) -> list[Entry]:
        """List folders and files directly under ``directory_path``.

        Returns:
            Entries from every page, in the order the store returned them

        Raises:
            ProtocolContractError: If the store's pagination is malformed
            botocore.exceptions.ClientError: On any store-reported failure
        """
        prefix = normalize_key(directory_path, is_directory=True)
        logger.debug("Listing S3 prefix", bucket=self.bucket, prefix=prefix)

        entries: list[Entry] = []
        page_count = 0
        for page in self._pages(prefix):
            page_count += 1
            entries.extend(self._entries(page))

        logger.info(
            "S3 prefix listed",
            bucket=self.bucket,
            prefix=prefix,
            page_count=page_count,
            entry_count=len(entries),
        )
        return entries


class MarkerPagedLister(PagedLister):
    """Pages through ListObjects (v1) using markers."""

    def _pages(self, prefix: str):
        marker = ""
        while True:
            response = self.client.list_objects(
                Bucket=self.bucket,
                Prefix=prefix,
                Delimiter=SEPARATOR,
                Marker=marker,
            )
            page = Page.from_v1_response(response)
            logger.debug(
                "S3 list page received",
                prefix=prefix,
                marker=marker,
                is_truncated=page.is_truncated,
            )
            yield page

            if page.is_truncated is None:
                raise ProtocolContractError(
                    f"ListObjects response for '{prefix}' has no IsTruncated flag"
                )
            if not page.is_truncated:
                return
            if not page.next_cursor:
                raise ProtocolContractError(
                    f"ListObjects response for '{prefix}' is truncated "
                    f"but has no NextMarker"
                )
            marker = page.next_cursor


class ContinuationTokenPagedLister(PagedLister):
    """Pages through ListObjectsV2 using continuation tokens."""

    def _pages(self, prefix: str):
        cursor: dict[str, str] = {}
        while True:
            response = self.client.list_objects_v2(
                Bucket=self.bucket,
                Prefix=prefix,
                Delimiter=SEPARATOR,
                **cursor,
            )
            page = Page.from_v2_response(response)
            logger.debug(
                "S3 list page received",
                prefix=prefix,
                cursor=cursor,
                is_truncated=page.is_truncated,
            )
            yield page

            if not page.is_truncated:
                return
            if page.next_cursor is not None:
                cursor = {"ContinuationToken": page.next_cursor}
            elif not page.objects:
                return
            else:
                cursor = {"StartAfter": page.objects[-1]["Key"]}


LISTERS: dict[str, type[PagedLister]] = {
    "v1": MarkerPagedLister,
    "v2": ContinuationTokenPagedLister,
}


def create_lister(
    version: str,
    client: Any,
    bucket: str,
    placeholder_name: Optional[str],
    default_folder_modified: datetime,
) -> PagedLister:
    """Create the lister for a ListObjects protocol version ("v1" or "v2").

    Raises:
        ValidationError: If the version is unknown
    """
    try:
        lister_class = LISTERS[version]
    except KeyError:
        raise ValidationError(
            f"list_object_version must be 'v1' or 'v2', got: {version}"
        )
    return lister_class(client, bucket, placeholder_name, default_folder_modified)
