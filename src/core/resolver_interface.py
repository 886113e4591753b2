"""
Collaborator interfaces for the containers resolver.

Defines the contracts for the two components the resolver delegates to:
an images extractor (manifest discovery and image merging) and a packages
analyzer (per-image package and layer resolution). Implementations live
outside this package and are injected into ContainersResolver.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, Union

from core.models import ContainerResolution, FileImages, ImageModel, SettingsFiles
from core.persistence import ResolutionPersistence


class ImagesExtractor(ABC):
    """
    Abstract base class for images extractors.

    An extractor finds manifest files (Dockerfiles, Compose files, Helm
    charts) under a scan path and turns them into a canonical image list.
    """

    def name(self) -> str:
        """
        Return the extractor name.

        Returns:
            Extractor identifier used in logs
        """
        return type(self).__name__

    @abstractmethod
    def extract_files(
        self, scan_path: str
    ) -> tuple[FileImages, SettingsFiles, Optional[str]]:
        """
        Discover manifest files and settings under a scan path.

        Args:
            scan_path: Directory or archive to scan

        Returns:
            Tuple of (file_images, settings_files, output_path) where
            output_path is the extractor's temporary working directory,
            or None/"" when no temporary directory was created

        Raises:
            ExtractionException: If discovery fails
        """
        pass

    @abstractmethod
    def extract_and_merge_images_from_files(
        self,
        file_images: FileImages,
        images: list[ImageModel],
        settings_files: SettingsFiles,
    ) -> list[ImageModel]:
        """
        Extract image references from files and merge them with explicit images.

        Args:
            file_images: Manifests returned by extract_files
            images: Explicitly supplied images (see to_image_models)
            settings_files: Settings returned by extract_files

        Returns:
            Canonical list of images to analyze

        Raises:
            ExtractionException: If extraction or merging fails
        """
        pass

    def save_object_to_file(self, folder_path: Union[str, Path], obj: Any) -> Path:
        """
        Serialize an object to the resolution artifact in a folder.

        Args:
            folder_path: Existing folder to write into
            obj: Object to serialize (typically a resolution list)

        Returns:
            Path of the written artifact

        Raises:
            PersistenceException: If the write fails
        """
        return ResolutionPersistence().save(folder_path, obj)


class PackagesAnalyzer(ABC):
    """
    Abstract base class for packages analyzers.

    An analyzer resolves the packages and layer history of container images.
    """

    def name(self) -> str:
        """
        Return the analyzer name.

        Returns:
            Analyzer identifier used in logs
        """
        return type(self).__name__

    @abstractmethod
    def analyze_images(self, images: list[ImageModel]) -> list[ContainerResolution]:
        """
        Resolve packages for each image.

        Args:
            images: Images to analyze

        Returns:
            One ContainerResolution per analyzed image

        Raises:
            AnalysisException: If analysis fails
        """
        pass

    @abstractmethod
    def analyze_images_with_platform(
        self, images: list[ImageModel], platform: str
    ) -> list[ContainerResolution]:
        """
        Resolve packages for each image, constrained to a platform.

        Args:
            images: Images to analyze
            platform: Target platform (e.g., "linux/amd64")

        Returns:
            One ContainerResolution per analyzed image

        Raises:
            AnalysisException: If analysis fails
        """
        pass


__all__ = [
    "ImagesExtractor",
    "PackagesAnalyzer",
]
