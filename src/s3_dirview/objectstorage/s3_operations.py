"""Directory-style operations on an S3 bucket.

``S3DirectoryView`` is the entry point for callers that want to treat a
bucket as a tree: it lists directories, copies single keys and signs
download links. The module-level functions build a view from an
``S3StorageConfig`` for one-off use.
"""

from typing import Any, Optional

from s3_dirview.core import get_logger, get_tracer
from s3_dirview.objectstorage.clients import S3ClientConfig, S3ClientManager
from s3_dirview.objectstorage.copy import copy_object
from s3_dirview.objectstorage.keys import normalize_key
from s3_dirview.objectstorage.listing import Entry, create_lister
from s3_dirview.schemas import S3StorageConfig

logger = get_logger(__name__)
tracer = get_tracer(__name__)

SESSION_FIELDS = set(S3ClientConfig.model_fields)


class S3DirectoryView:
    """A bucket seen as a tree of folders and files."""

    def __init__(
        self,
        client: Any,
        config: S3StorageConfig,
        link_client: Optional[Any] = None,
    ):
        """Initialize the view.

        Args:
            client: boto3 S3 client used for listing and copying
            config: Storage configuration
            link_client: Client used to sign links; defaults to ``client``
        """
        self.client = client
        self.link_client = link_client if link_client is not None else client
        self.config = config
        self.lister = create_lister(
            config.list_object_version,
            client,
            config.bucket,
            config.placeholder_name,
            config.default_folder_modified,
        )

    @classmethod
    def from_config(cls, config: S3StorageConfig) -> "S3DirectoryView":
        """Create a view with fresh boto3 clients built from ``config``."""
        manager = S3ClientManager(client_config(config))
        return cls(manager.client, config, link_client=manager.link_client)

    def copy(self, source: str, dest: str, is_directory: bool = False) -> None:
        """Copy one key (or one folder marker) to another path."""
        with tracer.start_as_current_span("s3_dirview.copy") as span:
            span.set_attribute("s3.bucket", self.config.bucket)
            copy_object(self.client, self.config.bucket, source, dest, is_directory)

    def link(self, path: str, expires_in: Optional[int] = None) -> str:
        """Return a presigned GET URL for the file at ``path``.

        The URL is signed by the link client, so it carries the custom host
        when one is configured.
        """
        key = normalize_key(path, is_directory=False)
        if expires_in is None:
            expires_in = self.config.link_expires_in
        url = self.link_client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.config.bucket, "Key": key},
            ExpiresIn=expires_in,
        )
        logger.debug("S3 link generated", key=key, expires_in=expires_in)
        return url

    def list(self, directory_path: str) -> list[Entry]:
        """List folders and files directly under ``directory_path``."""
        with tracer.start_as_current_span("s3_dirview.list") as span:
            span.set_attribute("s3.bucket", self.config.bucket)
            span.set_attribute("s3.list_version", self.config.list_object_version)
            entries = self.lister.list(directory_path)
            span.set_attribute("s3.entry_count", len(entries))
            return entries


def client_config(config: S3StorageConfig) -> S3ClientConfig:
    """Extract the session settings from a storage configuration."""
    return S3ClientConfig(**config.model_dump(include=SESSION_FIELDS))


def list_directory(path: str, config: S3StorageConfig) -> list[Entry]:
    """List a directory of the configured bucket."""
    logger.info("Listing S3 directory", bucket=config.bucket, path=path)
    return S3DirectoryView.from_config(config).list(path)


def copy_path(
    source: str, dest: str, config: S3StorageConfig, is_directory: bool = False
) -> None:
    """Copy a single key within the configured bucket."""
    logger.info(
        "Copying S3 path",
        bucket=config.bucket,
        source=source,
        dest=dest,
        is_directory=is_directory,
    )
    S3DirectoryView.from_config(config).copy(source, dest, is_directory)


def get_link(
    path: str, config: S3StorageConfig, expires_in: Optional[int] = None
) -> str:
    """Return a presigned download link for a file in the configured bucket."""
    return S3DirectoryView.from_config(config).link(path, expires_in)
