"""
Pytest fixtures and configuration for resolver tests.

Provides shared fixtures and test utilities across the test suite.
"""

import pytest
from unittest.mock import Mock

from core.models import (
    ContainerImage,
    ContainerPackage,
    ContainerResolution,
    FileImages,
    FilePath,
    HelmChartInfo,
    ImageLocation,
    ImageModel,
    ImageOrigin,
    Layer,
)
from core.resolver_interface import ImagesExtractor, PackagesAnalyzer


@pytest.fixture
def sample_file_images():
    """File-images map with one manifest of every kind."""
    return FileImages(
        dockerfile=[
            FilePath(full_path="absolute/path/to/Dockerfile1", relative_path="relative/path/to/Dockerfile1"),
            FilePath(full_path="absolute/path/to/Dockerfile2", relative_path="relative/path/to/Dockerfile2"),
        ],
        docker_compose=[
            FilePath(full_path="absolute/path/to/docker-compose.yml", relative_path="relative/path/to/docker-compose.yml"),
        ],
        helm=[
            HelmChartInfo(
                directory="absolute/path/to/helm/chart",
                values_file="relative/path/to/values.yaml",
                template_files=[
                    FilePath(full_path="absolute/path/to/template1", relative_path="relative/path/to/template1"),
                ],
            ),
        ],
    )


@pytest.fixture
def sample_settings_files():
    """Settings discovered alongside the manifests."""
    return {"settings.json": {"key": "value"}}


@pytest.fixture
def sample_resolution():
    """Analyzer output for a single image."""
    return [
        ContainerResolution(
            container_image=ContainerImage(
                image_name="image1",
                image_tag="latest",
                distribution="debian",
                image_hash="sha256:123abc",
                image_id="id12345",
                image_locations=[ImageLocation(origin=ImageOrigin.DOCKERFILE, path="/path/to/Dockerfile")],
                history=[Layer(order=1, size=12345, layer_id="layer1", command="ADD /file1 /")],
            ),
            container_packages=[
                ContainerPackage(
                    name="package1",
                    version="1.0.0",
                    distribution="debian",
                    type="binary",
                    source_name="src-package1",
                    source_version="1.0.0",
                    licenses=["MIT"],
                    layer_ids=["layer1"],
                ),
            ],
        ),
    ]


@pytest.fixture
def resolution_folder(tmp_path):
    """Existing resolution folder."""
    folder = tmp_path / "resolution"
    folder.mkdir()
    return folder


@pytest.fixture
def mock_extractor(sample_file_images, sample_settings_files):
    """Images extractor that discovers the sample manifests."""
    extractor = Mock(spec=ImagesExtractor)
    extractor.name.return_value = "mock-extractor"
    extractor.extract_files.return_value = (sample_file_images, sample_settings_files, None)
    extractor.extract_and_merge_images_from_files.return_value = [ImageModel(name="image1")]
    extractor.save_object_to_file.return_value = None
    return extractor


@pytest.fixture
def mock_analyzer(sample_resolution):
    """Packages analyzer that returns the sample resolution."""
    analyzer = Mock(spec=PackagesAnalyzer)
    analyzer.name.return_value = "mock-analyzer"
    analyzer.analyze_images.return_value = sample_resolution
    analyzer.analyze_images_with_platform.return_value = sample_resolution
    return analyzer
