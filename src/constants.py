"""
Centralized configuration constants for the containers resolver.

This module provides a single source of truth for configuration values
that are used across multiple modules, making them easier to update
and maintain.
"""

# ============================================================================
# Platform and Architecture
# ============================================================================

DEFAULT_PLATFORM = "linux/amd64"
"""Default container platform used to constrain image analysis."""

# ============================================================================
# Resolution Output
# ============================================================================

RESULTS_SUBDIR_PARTS = (".checkmarx", "containers")
"""Path components of the results folder created under the resolution folder."""

RESOLUTION_FILE_NAME = "containers-resolution.json"
"""File name of the serialized resolution artifact."""

# ============================================================================
# Image Model Conventions
# ============================================================================

NO_FILE_PATH = "NONE"
"""Location path recorded for images that were not discovered in a file."""

# ============================================================================
# Environment Variables
# ============================================================================

PLATFORM_ENV_VAR = "CONTAINERS_RESOLVER_PLATFORM"
"""Overrides the analysis platform. An empty value disables the constraint."""
