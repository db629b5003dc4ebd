"""Server-side copy of a single S3 key."""

from typing import Any

from s3_dirview.core import get_logger
from s3_dirview.objectstorage.keys import normalize_key

logger = get_logger(__name__)


def copy_object(
    client: Any,
    bucket: str,
    source_path: str,
    dest_path: str,
    is_directory: bool,
) -> None:
    """Copy one key to another inside ``bucket``.

    Exactly one CopyObject request is made. For a directory only the folder
    marker key ("a/dir/") is copied, never the objects below it. Nothing is
    retried or verified, and store errors propagate unchanged.

    Args:
        client: boto3 S3 client
        bucket: Bucket holding both keys
        source_path: Logical source path
        dest_path: Logical destination path
        is_directory: Whether both paths name directories
    """
    source_key = normalize_key(source_path, is_directory)
    dest_key = normalize_key(dest_path, is_directory)
    logger.debug(
        "Copying S3 object", bucket=bucket, source_key=source_key, dest_key=dest_key
    )
    client.copy_object(
        Bucket=bucket,
        CopySource={"Bucket": bucket, "Key": source_key},
        Key=dest_key,
    )
    logger.info(
        "S3 object copied", bucket=bucket, source_key=source_key, dest_key=dest_key
    )
