"""Exception hierarchy for s3-dirview."""


class S3DirviewError(Exception):
    """Base exception for all s3-dirview errors."""

    pass


class ValidationError(S3DirviewError):
    """Raised when validation fails."""

    pass


class ProtocolContractError(S3DirviewError):
    """Raised when a list response cannot be paged any further.

    The store reported more results (or left the truncation flag out
    entirely) without handing back the cursor needed to fetch them.
    """

    pass
