"""
Input validation utilities for the containers resolver.

Provides validation functions for resolution folder paths and platform
strings.
"""

import os
import re
import stat

from core.exceptions import ValidationException

_PLATFORM_PATTERN = re.compile(r"^[a-z0-9_]+/[a-z0-9_]+(/[a-z0-9_.]+)?$", re.IGNORECASE)


def is_valid_folder_path(path: str) -> bool:
    """
    Check that a path points at an existing directory.

    The result is always definite: True for a directory, False for an
    existing non-directory. Any problem reaching the path is raised as the
    original OSError rather than reported as False.

    Args:
        path: Folder path to check

    Returns:
        True if path is an existing directory, False otherwise

    Raises:
        OSError: If the path cannot be stat'ed (e.g. FileNotFoundError
                 for "" or a missing path, PermissionError)

    Examples:
        >>> is_valid_folder_path("/tmp")
        True
        >>> is_valid_folder_path("")
        FileNotFoundError: [Errno 2] No such file or directory: ''
    """
    info = os.stat(os.fspath(path))
    return stat.S_ISDIR(info.st_mode)


def validate_platform(platform: str, field_name: str = "platform") -> str:
    """
    Validate and normalize a container platform string.

    Args:
        platform: Platform in os/arch[/variant] form
        field_name: Field name for error messages

    Returns:
        Normalized platform string

    Raises:
        ValidationException: If platform is malformed

    Examples:
        >>> validate_platform("linux/amd64")
        'linux/amd64'
        >>> validate_platform("linux/arm64/v8")
        'linux/arm64/v8'
    """
    if not isinstance(platform, str):
        raise ValidationException(f"Platform must be a string, got {type(platform).__name__}", field_name)

    if not platform or not platform.strip():
        raise ValidationException("Platform cannot be empty", field_name)

    platform = platform.strip()

    if not _PLATFORM_PATTERN.match(platform):
        raise ValidationException(
            f"Invalid platform format: {platform} (expected os/arch[/variant])",
            field_name
        )

    return platform


__all__ = [
    "is_valid_folder_path",
    "validate_platform",
]
