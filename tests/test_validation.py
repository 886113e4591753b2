"""Tests for input validation utilities."""

import pytest

from core.exceptions import ValidationException
from utils.validation import is_valid_folder_path, validate_platform


class TestIsValidFolderPath:
    """Tests for resolution folder validation."""

    def test_existing_directory(self, tmp_path):
        """Test that an existing directory is valid."""
        assert is_valid_folder_path(str(tmp_path)) is True

    def test_accepts_path_objects(self, tmp_path):
        """Test that Path objects are accepted."""
        assert is_valid_folder_path(tmp_path) is True

    def test_existing_file(self, tmp_path):
        """Test that a regular file is reported as not valid."""
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")
        assert is_valid_folder_path(str(file_path)) is False

    def test_empty_path_raises(self):
        """Test that an empty path raises the OS error instead of returning False."""
        with pytest.raises(FileNotFoundError):
            is_valid_folder_path("")

    def test_missing_path_raises(self, tmp_path):
        """Test that a missing path raises the OS error."""
        with pytest.raises(FileNotFoundError):
            is_valid_folder_path(str(tmp_path / "missing"))


class TestValidatePlatform:
    """Tests for platform validation."""

    @pytest.mark.parametrize("platform", ["linux/amd64", "linux/arm64", "linux/arm64/v8", "windows/amd64"])
    def test_valid(self, platform):
        """Test valid platforms."""
        assert validate_platform(platform) == platform

    def test_strips_whitespace(self):
        """Test that whitespace is stripped."""
        assert validate_platform("  linux/amd64 ") == "linux/amd64"

    @pytest.mark.parametrize("platform", ["", "   "])
    def test_empty(self, platform):
        """Test empty platform."""
        with pytest.raises(ValidationException) as exc:
            validate_platform(platform)
        assert "cannot be empty" in str(exc.value)

    @pytest.mark.parametrize("platform", ["amd64", "linux/", "/amd64", "linux amd64", "linux/amd64;rm"])
    def test_invalid_format(self, platform):
        """Test malformed platforms."""
        with pytest.raises(ValidationException) as exc:
            validate_platform(platform)
        assert "Invalid platform format" in str(exc.value)

    @pytest.mark.parametrize("platform", [5, ["linux", "amd64"], None])
    def test_not_a_string(self, platform):
        """Test that non-string platforms are rejected."""
        with pytest.raises(ValidationException) as exc:
            validate_platform(platform)
        assert "must be a string" in str(exc.value)

    def test_custom_field_name(self):
        """Test custom field name in error message."""
        with pytest.raises(ValidationException) as exc:
            validate_platform("", "target_platform")
        assert "target_platform" in str(exc.value)
