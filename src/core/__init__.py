"""Core orchestration logic for container image resolution."""

from core.config import ResolverConfig
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
    to_image_models,
)
from core.persistence import ResolutionPersistence
from core.resolver import ContainersResolver
from core.resolver_interface import ImagesExtractor, PackagesAnalyzer

__all__ = [
    "ContainerImage",
    "ContainerPackage",
    "ContainerResolution",
    "ContainersResolver",
    "FileImages",
    "FilePath",
    "HelmChartInfo",
    "ImageLocation",
    "ImageModel",
    "ImageOrigin",
    "ImagesExtractor",
    "Layer",
    "PackagesAnalyzer",
    "ResolutionPersistence",
    "ResolverConfig",
    "to_image_models",
]
