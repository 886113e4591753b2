"""
Containers Resolver - Container Image Resolution Orchestrator

Discovers the container images referenced by a scan path, hands them to a
packages analyzer and persists the resulting resolution.
"""

__version__ = "1.0.0"
__author__ = "Checkmarx"

from core.models import (
    ContainerResolution,
    ImageModel,
    to_image_models,
)
from core.resolver import ContainersResolver

__all__ = [
    "ContainerResolution",
    "ContainersResolver",
    "ImageModel",
    "to_image_models",
]
