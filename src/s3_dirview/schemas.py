"""Storage configuration schemas for s3-dirview."""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class S3StorageConfig(BaseModel):
    """Configuration for an S3 bucket viewed as a directory tree."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["s3"] = "s3"
    bucket: str = Field(..., min_length=1, description="Bucket to browse")

    # Session
    access_key_id: Optional[str] = Field(default=None, description="AWS access key ID")
    secret_access_key: Optional[str] = Field(
        default=None, description="AWS secret access key"
    )
    session_token: Optional[str] = Field(default=None, description="AWS session token")
    region_name: str = Field(default="us-east-1", description="AWS region")
    endpoint_url: Optional[str] = Field(
        default=None, description="Custom S3 endpoint URL"
    )
    aws_profile: Optional[str] = Field(default=None, description="AWS profile name")
    force_path_style: bool = Field(
        default=False, description="Use path-style addressing (bucket in the path)"
    )
    custom_host: Optional[str] = Field(
        default=None, description="Host substituted into generated download links"
    )

    # Listing
    list_object_version: Literal["v1", "v2"] = Field(
        default="v1", description="ListObjects protocol: v1 (marker) or v2 (token)"
    )
    placeholder_name: Optional[str] = Field(
        default=None,
        description="Name of the object that keeps empty folders alive "
        "(defaults to .placeholder)",
    )
    default_folder_modified: datetime = Field(
        default=EPOCH, description="Modification time reported for folders"
    )
    link_expires_in: int = Field(
        default=3600, gt=0, description="Lifetime of generated links in seconds"
    )
