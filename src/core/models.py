"""
Domain models for container image resolution.

This module defines the core data structures exchanged between the resolver,
the images extractor and the packages analyzer. All models are immutable
(frozen dataclasses) to prevent accidental mutation.

The dictionary forms use the PascalCase keys of the resolution artifact
consumed by downstream tooling.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from constants import NO_FILE_PATH


class ImageOrigin(str, Enum):
    """Where an image reference was found."""

    USER_INPUT = "UserInput"
    DOCKERFILE = "Dockerfile"
    DOCKER_COMPOSE = "DockerCompose"
    HELM = "Helm"


@dataclass(frozen=True)
class FilePath:
    """
    A discovered manifest file.

    Attributes:
        full_path: Absolute (or extractor-working) path of the file
        relative_path: Path relative to the scan root
    """

    full_path: str
    relative_path: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"FullPath": self.full_path, "RelativePath": self.relative_path}

    @classmethod
    def from_dict(cls, data: dict) -> "FilePath":
        """Create from dictionary."""
        return cls(
            full_path=data.get("FullPath", ""),
            relative_path=data.get("RelativePath", ""),
        )


@dataclass(frozen=True)
class HelmChartInfo:
    """
    A discovered Helm chart.

    Attributes:
        directory: Chart directory
        values_file: Path of the chart's values file
        template_files: Template files belonging to the chart
    """

    directory: str
    values_file: str
    template_files: list[FilePath] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "Directory": self.directory,
            "ValuesFile": self.values_file,
            "TemplateFiles": [f.to_dict() for f in self.template_files],
        }


@dataclass(frozen=True)
class FileImages:
    """
    Manifest files discovered under a scan path, grouped by kind.

    Produced once by the images extractor and consumed once when images
    are merged.

    Attributes:
        dockerfile: Dockerfiles (and Containerfiles)
        docker_compose: Compose files
        helm: Helm charts
    """

    dockerfile: list[FilePath] = field(default_factory=list)
    docker_compose: list[FilePath] = field(default_factory=list)
    helm: list[HelmChartInfo] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True when no manifest of any kind was discovered."""
        return not (self.dockerfile or self.docker_compose or self.helm)

    def file_count(self) -> int:
        """Total number of discovered manifests (charts count once)."""
        return len(self.dockerfile) + len(self.docker_compose) + len(self.helm)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "Dockerfile": [f.to_dict() for f in self.dockerfile],
            "DockerCompose": [f.to_dict() for f in self.docker_compose],
            "Helm": [h.to_dict() for h in self.helm],
        }


@dataclass(frozen=True)
class ImageLocation:
    """
    Origin of an image reference.

    Attributes:
        origin: Kind of source the reference came from
        path: File the reference was found in, or NONE for user input
    """

    origin: str
    path: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"Origin": str(getattr(self.origin, "value", self.origin)), "Path": self.path}

    @classmethod
    def from_dict(cls, data: dict) -> "ImageLocation":
        """Create from dictionary."""
        return cls(origin=data.get("Origin", ""), path=data.get("Path", ""))


@dataclass(frozen=True)
class ImageModel:
    """
    A canonical image to analyze.

    Attributes:
        name: Image reference (registry/repo:tag)
        image_locations: Every place the reference was found
    """

    name: str
    image_locations: list[ImageLocation] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "Name": self.name,
            "ImageLocations": [loc.to_dict() for loc in self.image_locations],
        }


def to_image_models(images: Optional[list[str]]) -> list[ImageModel]:
    """
    Convert explicitly supplied image names into image models.

    Each model gets a single user-input location with no file path.
    Input order is preserved and no de-duplication happens here; merging
    is the images extractor's job.

    Args:
        images: Image names, may be None or empty

    Returns:
        List of ImageModel, empty when no images were given

    Examples:
        >>> to_image_models(["nginx:1.25"])
        [ImageModel(name='nginx:1.25', image_locations=[ImageLocation(origin=<ImageOrigin.USER_INPUT: 'UserInput'>, path='NONE')])]
    """
    return [
        ImageModel(
            name=image,
            image_locations=[ImageLocation(origin=ImageOrigin.USER_INPUT, path=NO_FILE_PATH)],
        )
        for image in images or []
    ]


@dataclass(frozen=True)
class Layer:
    """
    One entry of an image's layer history.

    Attributes:
        order: Position of the layer in the history
        size: Layer size in bytes
        layer_id: Layer digest
        command: Command that created the layer
    """

    order: int
    size: int
    layer_id: str
    command: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "Order": self.order,
            "Size": self.size,
            "LayerId": self.layer_id,
            "Command": self.command,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Layer":
        """Create from dictionary."""
        return cls(
            order=data.get("Order", 0),
            size=data.get("Size", 0),
            layer_id=data.get("LayerId", ""),
            command=data.get("Command", ""),
        )


@dataclass(frozen=True)
class ContainerImage:
    """
    Identifying metadata of an analyzed image.

    Attributes:
        image_name: Image name without tag
        image_tag: Image tag
        distribution: Detected OS distribution
        image_hash: Image digest (sha256)
        image_id: Local image id
        image_locations: Where the image was referenced
        history: Layer history, base layer first
    """

    image_name: str
    image_tag: str = ""
    distribution: str = ""
    image_hash: str = ""
    image_id: str = ""
    image_locations: list[ImageLocation] = field(default_factory=list)
    history: list[Layer] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "ImageName": self.image_name,
            "ImageTag": self.image_tag,
            "Distribution": self.distribution,
            "ImageHash": self.image_hash,
            "ImageId": self.image_id,
            "ImageLocations": [loc.to_dict() for loc in self.image_locations],
            "History": [layer.to_dict() for layer in self.history],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ContainerImage":
        """Create from dictionary."""
        return cls(
            image_name=data.get("ImageName", ""),
            image_tag=data.get("ImageTag", ""),
            distribution=data.get("Distribution", ""),
            image_hash=data.get("ImageHash", ""),
            image_id=data.get("ImageId", ""),
            image_locations=[
                ImageLocation.from_dict(loc) for loc in data.get("ImageLocations") or []
            ],
            history=[Layer.from_dict(layer) for layer in data.get("History") or []],
        )


@dataclass(frozen=True)
class ContainerPackage:
    """
    A package found inside an analyzed image.

    Attributes:
        name: Package name
        version: Package version
        distribution: Distribution the package belongs to
        type: Package type (deb, apk, binary, ...)
        source_name: Source package name
        source_version: Source package version
        licenses: Declared licenses
        layer_ids: Layers that contain the package
    """

    name: str
    version: str
    distribution: str = ""
    type: str = ""
    source_name: str = ""
    source_version: str = ""
    licenses: list[str] = field(default_factory=list)
    layer_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "Name": self.name,
            "Version": self.version,
            "Distribution": self.distribution,
            "Type": self.type,
            "SourceName": self.source_name,
            "SourceVersion": self.source_version,
            "Licenses": list(self.licenses),
            "LayerIds": list(self.layer_ids),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ContainerPackage":
        """Create from dictionary."""
        return cls(
            name=data.get("Name", ""),
            version=data.get("Version", ""),
            distribution=data.get("Distribution", ""),
            type=data.get("Type", ""),
            source_name=data.get("SourceName", ""),
            source_version=data.get("SourceVersion", ""),
            licenses=list(data.get("Licenses") or []),
            layer_ids=list(data.get("LayerIds") or []),
        )


@dataclass(frozen=True)
class ContainerResolution:
    """
    Analysis output for a single image.

    Attributes:
        container_image: Image metadata
        container_packages: Packages found in the image
    """

    container_image: ContainerImage
    container_packages: list[ContainerPackage] = field(default_factory=list)

    @property
    def package_count(self) -> int:
        """Number of packages in the image."""
        return len(self.container_packages)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "ContainerImage": self.container_image.to_dict(),
            "ContainerPackages": [pkg.to_dict() for pkg in self.container_packages],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ContainerResolution":
        """Create from dictionary."""
        return cls(
            container_image=ContainerImage.from_dict(data.get("ContainerImage") or {}),
            container_packages=[
                ContainerPackage.from_dict(pkg) for pkg in data.get("ContainerPackages") or []
            ],
        )


SettingsFiles = dict[str, dict[str, str]]
"""Auxiliary key/value settings discovered alongside manifests, keyed by file."""


__all__ = [
    "ImageOrigin",
    "FilePath",
    "HelmChartInfo",
    "FileImages",
    "ImageLocation",
    "ImageModel",
    "to_image_models",
    "Layer",
    "ContainerImage",
    "ContainerPackage",
    "ContainerResolution",
    "SettingsFiles",
]
