"""Utility modules for filesystem handling, validation and logging."""

from utils.file_utils import create_results_folder, delete_directory, is_same_or_inside
from utils.validation import is_valid_folder_path, validate_platform

__all__ = [
    "create_results_folder",
    "delete_directory",
    "is_same_or_inside",
    "is_valid_folder_path",
    "validate_platform",
]
