"""S3 client configuration and management.

This module builds the boto3 S3 client handed to the listing and copy code.
The client is treated as an opaque handle: everything about the session
(credentials, endpoint, region, addressing style) is settled here, once.

Authentication Methods Supported:
    1. Explicit credentials (access_key_id, secret_access_key)
    2. AWS CLI profiles (aws_profile)
    3. IAM roles / environment variables (no explicit credentials)
    4. Temporary credentials (session_token)

S3-Compatible Services:
    Custom endpoints (MinIO, Ceph, Wasabi, ...) are supported through
    endpoint_url. Most of them need force_path_style as well.

Custom Hosts:
    Some deployments serve downloads through a CDN or reverse proxy whose
    host differs from the API endpoint. ``S3ClientManager.link_client`` is a
    second client with a ``CustomHostRewriter`` registered on its
    ``before-sign`` event, so links it signs point at the custom host while
    listing and copy requests keep talking to the real endpoint.
"""

from typing import Any, Dict, Optional
from urllib.parse import urlparse, urlsplit, urlunsplit

import boto3
from botocore.config import Config
from pydantic import BaseModel, ConfigDict, Field

from s3_dirview.core import get_logger
from s3_dirview.core.exceptions import ValidationError

logger = get_logger(__name__)


class S3ClientConfig(BaseModel):
    """Session settings for S3 client connections.

    Authentication Priority:
        1. If aws_profile is provided, use profile-based authentication
        2. If explicit credentials are provided, use them
        3. Otherwise, fall back to default AWS credential chain

    Example:
        # MinIO endpoint
        config = S3ClientConfig(
            endpoint_url="http://localhost:9000",
            access_key_id="minioadmin",
            secret_access_key="minioadmin",
            force_path_style=True,
        )
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    access_key_id: Optional[str] = Field(None, description="AWS access key ID")
    secret_access_key: Optional[str] = Field(None, description="AWS secret access key")
    session_token: Optional[str] = Field(
        None, description="AWS session token for temporary credentials"
    )
    region_name: str = Field("us-east-1", description="AWS region name")
    endpoint_url: Optional[str] = Field(
        None, description="Custom S3 endpoint URL for S3-compatible services"
    )
    aws_profile: Optional[str] = Field(
        None, description="AWS CLI profile name to use for credentials"
    )
    force_path_style: bool = Field(
        False, description="Put the bucket in the URL path instead of the host"
    )
    custom_host: Optional[str] = Field(
        None, description="Host substituted into GET requests signed by link_client"
    )


class CustomHostRewriter:
    """botocore ``before-sign`` hook that swaps the host of GET requests.

    Only read-style requests are rewritten; anything else passes through
    untouched.
    """

    def __init__(self, host: str):
        self.host = host

    def __call__(self, request: Any, **kwargs: Any) -> None:
        if request.method != "GET":
            return
        parts = urlsplit(request.url)
        request.url = urlunsplit(parts._replace(netloc=self.host))


class S3ClientManager:
    """Manages S3 client connections and provides utility methods."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 client manager.

        Args:
            config: S3 client configuration
        """
        self.config = config
        self._client = None
        self._link_client = None
        logger.info("S3 client manager initialized", region=config.region_name)

    @property
    def client(self):
        """Get or create the S3 client used for listing and copying."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    @property
    def link_client(self):
        """Get or create the S3 client used to sign download links.

        Without a custom host this is the same object as ``client``.
        """
        if not self.config.custom_host:
            return self.client
        if self._link_client is None:
            client = self._create_client()
            client.meta.events.register(
                "before-sign.s3", CustomHostRewriter(self.config.custom_host)
            )
            logger.info("S3 link client created", custom_host=self.config.custom_host)
            self._link_client = client
        return self._link_client

    def _create_client(self):
        """Create boto3 S3 client with the configured settings."""
        kwargs: Dict[str, Any] = {
            "region_name": self.config.region_name,
        }

        if self.config.endpoint_url:
            kwargs["endpoint_url"] = self.config.endpoint_url

        if self.config.force_path_style:
            kwargs["config"] = Config(s3={"addressing_style": "path"})

        if self.config.aws_profile:
            session = boto3.Session(profile_name=self.config.aws_profile)
            client = session.client("s3", **kwargs)  # type: ignore
            logger.info(
                "S3 client created with profile", profile=self.config.aws_profile
            )
        else:
            if self.config.access_key_id and self.config.secret_access_key:
                kwargs.update(
                    {
                        "aws_access_key_id": self.config.access_key_id,
                        "aws_secret_access_key": self.config.secret_access_key,
                    }
                )
                if self.config.session_token:
                    kwargs["aws_session_token"] = self.config.session_token
                logger.info("S3 client created with explicit credentials")
            else:
                logger.info("S3 client created with default credential chain")

            client = boto3.client("s3", **kwargs)  # type: ignore

        return client

    @staticmethod
    def parse_s3_path(s3_path: str) -> tuple[str, str]:
        """Parse S3 path into bucket and logical path components.

        Args:
            s3_path: S3 path in format s3://bucket/path or s3://bucket

        Returns:
            Tuple of (bucket_name, path). The path keeps its leading slash.

        Raises:
            ValidationError: If path format is invalid
        """
        if not s3_path.startswith("s3://"):
            raise ValidationError(f"S3 path must start with 's3://': {s3_path}")

        parsed = urlparse(s3_path)
        bucket = parsed.netloc
        if not bucket:
            raise ValidationError(f"Invalid S3 path, missing bucket: {s3_path}")

        path = parsed.path or "/"
        logger.debug("S3 path parsed", bucket=bucket, path=path)
        return bucket, path
