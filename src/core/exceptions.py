"""
Exception hierarchy for the containers resolver.

Provides a standardized exception hierarchy for consistent error handling
across the resolver and its collaborators. All exceptions inherit from
ResolverException.

Filesystem errors raised while validating or creating the resolution folder
are not wrapped: callers receive the original OSError.
"""


class ResolverException(Exception):
    """Base exception for all resolver errors."""
    pass


class ValidationException(ResolverException):
    """Input validation failed."""

    def __init__(self, message: str, field: str = None):
        """
        Initialize validation exception.

        Args:
            message: Validation error message
            field: Field that failed validation (optional)
        """
        self.field = field
        if field:
            super().__init__(f"Validation failed for {field}: {message}")
        else:
            super().__init__(f"Validation failed: {message}")


class ExtractionException(ResolverException):
    """Manifest discovery or image extraction failed."""

    def __init__(self, scan_path: str, reason: str):
        """
        Initialize extraction exception.

        Args:
            scan_path: Scan path that was being processed
            reason: Reason for failure
        """
        self.scan_path = scan_path
        self.reason = reason
        super().__init__(f"Failed to extract images from {scan_path}: {reason}")


class AnalysisException(ResolverException):
    """Package analysis of one or more images failed."""

    def __init__(self, reason: str, partial_results: list = None):
        """
        Initialize analysis exception.

        Args:
            reason: Reason for failure
            partial_results: Resolutions produced before the failure, if any.
                             These are never persisted and must not be treated
                             as a valid resolution.
        """
        self.reason = reason
        self.partial_results = partial_results or []
        super().__init__(f"Failed to analyze images: {reason}")


class PersistenceException(ResolverException):
    """Resolution artifact could not be written or read."""
    pass


class ConfigurationException(ResolverException):
    """Configuration is invalid or missing."""
    pass


__all__ = [
    "ResolverException",
    "ValidationException",
    "ExtractionException",
    "AnalysisException",
    "PersistenceException",
    "ConfigurationException",
]
