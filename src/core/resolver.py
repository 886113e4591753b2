"""
Containers resolver.

Sequences image discovery, package analysis and persistence of the
resolution for a scan path:

    validate -> extract files -> merge images -> analyze -> save -> cleanup

Each step depends on the previous step's output, so the pipeline is strictly
sequential. Any failure aborts the pipeline and the original exception
reaches the caller unchanged. Cleanup is best effort and only ever logs.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar

from core.config import ResolverConfig
from core.exceptions import ValidationException
from core.models import ContainerResolution, ImageModel, to_image_models
from core.resolver_interface import ImagesExtractor, PackagesAnalyzer
from utils.file_utils import create_results_folder, delete_directory, is_same_or_inside
from utils.logging_helpers import log_warning_section, trace_level
from utils.validation import is_valid_folder_path

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ContainersResolver:
    """
    Resolves the container images referenced under a scan path.

    Collaborators are injected: an images extractor that discovers manifests
    and merges image references, and a packages analyzer that resolves the
    packages and layers of each image.

    Concurrent calls against the same resolution folder are not safe and
    must be serialized by the caller.
    """

    def __init__(
        self,
        images_extractor: ImagesExtractor,
        packages_analyzer: PackagesAnalyzer,
        config: Optional[ResolverConfig] = None,
    ):
        """
        Initialize the resolver.

        Args:
            images_extractor: Manifest discovery and image merging
            packages_analyzer: Per-image package resolution
            config: Resolver configuration (default: linux/amd64 platform,
                    .checkmarx/containers results folder)
        """
        self.images_extractor = images_extractor
        self.packages_analyzer = packages_analyzer
        self.config = config or ResolverConfig()
        self.config.validate()

    def resolve(
        self,
        scan_path: str,
        resolution_folder_path: str,
        images: Optional[list[str]] = None,
        is_debug: bool = False,
    ) -> None:
        """
        Resolve the images of a scan path and persist the resolution.

        Args:
            scan_path: Directory or archive the extractor can traverse
            resolution_folder_path: Existing directory that receives the
                                    results folder
            images: Explicit image names to analyze in addition to the
                    discovered ones
            is_debug: Log this call's pipeline trace at INFO instead of DEBUG

        Raises:
            OSError: If the resolution folder cannot be reached or the
                     results folder cannot be created
            ValidationException: If the resolution folder is not a directory
            Exception: Any error raised by the extractor, the analyzer or
                       persistence, re-raised unchanged
        """
        level = trace_level(is_debug)
        logger.log(
            level,
            f"Resolve parameters: scan_path={scan_path}, "
            f"resolution_folder_path={resolution_folder_path}, "
            f"images={images}, is_debug={is_debug}"
        )

        self._run_step("Resolution path is not valid", self._validate, resolution_folder_path)

        results_path, removal_root = self._run_step(
            "Could not create results folder",
            create_results_folder,
            resolution_folder_path,
            self.config.results_subdir,
        )

        output_path = None
        try:
            logger.log(level, f"Extracting files from {scan_path} with {self.images_extractor.name()}")
            file_images, settings_files, output_path = self._run_step(
                "Could not extract files",
                self.images_extractor.extract_files,
                scan_path,
            )
            if file_images is None or file_images.is_empty():
                logger.log(level, f"No manifest files discovered under {scan_path}")
            else:
                logger.log(
                    level,
                    f"Discovered {file_images.file_count()} manifest files and "
                    f"{len(settings_files or {})} settings files"
                )

            images_to_analyze = self._run_step(
                "Could not extract images from files",
                self.images_extractor.extract_and_merge_images_from_files,
                file_images,
                to_image_models(images),
                settings_files,
            )
            logger.log(level, f"Images to analyze: {[image.name for image in images_to_analyze]}")

            resolution = self._run_step("Could not analyze images", self._analyze, images_to_analyze)

            self._run_step(
                "Could not save resolution result",
                self.images_extractor.save_object_to_file,
                results_path,
                resolution,
            )
            logger.info(
                f"Resolved {len(resolution or [])} images with "
                f"{sum(item.package_count for item in resolution or [])} packages from {scan_path}"
            )

        finally:
            self._cleanup(resolution_folder_path, output_path, removal_root, level)

    def _analyze(self, images: list[ImageModel]) -> list[ContainerResolution]:
        """Run the analyzer, constrained to the configured platform if any."""
        platform = self.config.platform
        if platform:
            logger.debug(f"Analyzing {len(images)} images for {platform} with {self.packages_analyzer.name()}")
            return self.packages_analyzer.analyze_images_with_platform(images, platform)

        logger.debug(f"Analyzing {len(images)} images with {self.packages_analyzer.name()}")
        return self.packages_analyzer.analyze_images(images)

    @staticmethod
    def _run_step(failure_message: str, func: Callable[..., T], *args) -> T:
        """Call one pipeline step, logging and re-raising its failure as is."""
        try:
            return func(*args)
        except Exception as e:
            logger.error(f"{failure_message}: {e}")
            raise

    @staticmethod
    def _validate(resolution_folder_path: str) -> None:
        """
        Ensure the resolution folder is an existing directory.

        Raises:
            OSError: If the path cannot be reached (propagated unchanged)
            ValidationException: If the path exists but is not a directory
        """
        if not is_valid_folder_path(resolution_folder_path):
            raise ValidationException(
                f"{resolution_folder_path} is not a directory",
                "resolution_folder_path"
            )

    @staticmethod
    def _cleanup(
        resolution_folder_path: str,
        output_path: Optional[str],
        results_root: Optional[Path],
        level: int = logging.DEBUG,
    ) -> None:
        """
        Remove the extractor's temporary output and the results folder.

        The extractor output is only removed when it is set and the
        resolution folder is neither that output nor inside it. Failures are
        logged, never raised.
        """
        failures = []

        if output_path and is_same_or_inside(resolution_folder_path, output_path):
            if not is_same_or_inside(output_path, resolution_folder_path):
                logger.warning(
                    f"Keeping extractor output {output_path}: it contains the "
                    f"resolution folder {resolution_folder_path}"
                )
        elif output_path:
            try:
                delete_directory(output_path)
                logger.log(level, f"Removed extractor output {output_path}")
            except OSError as e:
                failures.append(f"Could not delete extractor output {output_path}: {e}")

        if results_root is not None:
            try:
                delete_directory(results_root)
                logger.log(level, f"Removed results folder {results_root}")
            except OSError as e:
                failures.append(f"Could not delete results folder {results_root}: {e}")

        if failures:
            log_warning_section("Cleanup incomplete", failures, logger=logger)


__all__ = ["ContainersResolver"]
