"""Tests for collaborator interface defaults and logging helpers."""

import json
import logging

import pytest

from core.exceptions import AnalysisException, ExtractionException
from core.models import FileImages
from core.resolver_interface import ImagesExtractor, PackagesAnalyzer
from utils.logging_helpers import log_warning_section, trace_level


class DirectoryExtractor(ImagesExtractor):
    """Minimal extractor used to exercise the base class."""

    def extract_files(self, scan_path):
        return FileImages(), {}, None

    def extract_and_merge_images_from_files(self, file_images, images, settings_files):
        return images


class NullAnalyzer(PackagesAnalyzer):
    """Minimal analyzer used to exercise the base class."""

    def analyze_images(self, images):
        return []

    def analyze_images_with_platform(self, images, platform):
        return []


class TestInterfaces:
    """Tests for the abstract collaborator interfaces."""

    def test_cannot_instantiate_abstract(self):
        """Test that the interfaces require their abstract methods."""
        with pytest.raises(TypeError):
            ImagesExtractor()
        with pytest.raises(TypeError):
            PackagesAnalyzer()

    def test_default_names(self):
        """Test that names default to the class name."""
        assert DirectoryExtractor().name() == "DirectoryExtractor"
        assert NullAnalyzer().name() == "NullAnalyzer"

    def test_default_save_object_to_file(self, tmp_path, sample_resolution):
        """Test that the default save writes the resolution artifact."""
        path = DirectoryExtractor().save_object_to_file(tmp_path, sample_resolution)

        data = json.loads(path.read_text())
        assert path.name == "containers-resolution.json"
        assert data[0]["ContainerImage"]["ImageTag"] == "latest"


class TestCollaboratorExceptions:
    """Tests for the exceptions collaborators raise."""

    def test_extraction_message(self):
        """Test extraction exception message and attributes."""
        exc = ExtractionException("/scan", "invalid path")
        assert exc.scan_path == "/scan"
        assert str(exc) == "Failed to extract images from /scan: invalid path"

    def test_analysis_partial_results_default(self):
        """Test that partial results default to an empty list."""
        exc = AnalysisException("timeout")
        assert exc.partial_results == []
        assert "timeout" in str(exc)


class TestLoggingHelpers:
    """Tests for logging helpers."""

    def test_trace_level(self):
        """Test trace level selection."""
        assert trace_level(True) == logging.INFO
        assert trace_level(False) == logging.DEBUG

    def test_warning_section(self, caplog):
        """Test that a warning section frames its messages."""
        test_logger = logging.getLogger("tests.section")

        with caplog.at_level(logging.WARNING, logger="tests.section"):
            log_warning_section("Cleanup incomplete", ["first", ""], logger=test_logger, width=10)

        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["=" * 10, "Cleanup incomplete", "first", "", "=" * 10]
