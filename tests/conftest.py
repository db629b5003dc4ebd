"""Test configuration and fixtures for s3-dirview."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import boto3
import pytest
from moto import mock_aws

from s3_dirview.schemas import S3StorageConfig

BUCKET = "test-bucket"
MODIFIED = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
FOLDER_MODIFIED = datetime(2020, 1, 1, tzinfo=timezone.utc)


def obj(key, size=1):
    """Build an object record as returned in a list response's Contents."""
    return {"Key": key, "Size": size, "LastModified": MODIFIED}


def prefixes(*names):
    """Build a list response's CommonPrefixes."""
    return [{"Prefix": name} for name in names]


@pytest.fixture
def store_client():
    """A stand-in S3 client whose list responses are set per test."""
    return MagicMock(name="s3_client")


@pytest.fixture
def storage_config():
    """Storage configuration pointing at the moto test bucket."""
    return S3StorageConfig(
        bucket=BUCKET,
        access_key_id="test_key",
        secret_access_key="test_secret",
        region_name="us-east-1",
    )


@pytest.fixture
def s3_bucket():
    """Create an in-memory bucket laid out like a small directory tree."""
    with mock_aws():
        client = boto3.client(
            "s3",
            aws_access_key_id="test_key",
            aws_secret_access_key="test_secret",
            region_name="us-east-1",
        )
        client.create_bucket(Bucket=BUCKET)
        for key, body in [
            ("data/file1.txt", b"content1"),
            ("data/file2.txt", b"content2content2"),
            ("data/2023/file3.txt", b"content3"),
            ("data/2024/file4.txt", b"content4"),
            ("data/empty/.placeholder", b""),
            ("data/.placeholder", b""),
            ("top.txt", b"top"),
        ]:
            client.put_object(Bucket=BUCKET, Key=key, Body=body)
        yield client
