"""S3 client management and configuration."""

from .s3_client import CustomHostRewriter, S3ClientConfig, S3ClientManager

__all__ = ["CustomHostRewriter", "S3ClientConfig", "S3ClientManager"]
