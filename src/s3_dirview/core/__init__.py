"""Core utilities and shared components for s3-dirview."""

from .config import settings
from .exceptions import ProtocolContractError, S3DirviewError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "S3DirviewError",
    "ValidationError",
    "ProtocolContractError",
    "get_logger",
    "get_tracer",
]
