"""
Configuration for the containers resolver.

Provides a strongly-typed configuration object, loadable from a YAML file
or from the environment.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import yaml

from constants import DEFAULT_PLATFORM, PLATFORM_ENV_VAR, RESULTS_SUBDIR_PARTS
from core.exceptions import ConfigurationException, ValidationException

logger = logging.getLogger(__name__)


@dataclass
class ResolverConfig:
    """
    Resolver configuration.

    Attributes:
        platform: Platform to constrain analysis to; None analyzes without
                  a platform constraint
        results_subdir: Results folder components, relative to the
                        resolution folder
    """

    platform: Optional[str] = DEFAULT_PLATFORM
    results_subdir: tuple[str, ...] = RESULTS_SUBDIR_PARTS

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValidationException: If configuration is invalid
        """
        from utils.validation import validate_platform

        if self.platform is not None:
            self.platform = validate_platform(self.platform)

        if self.results_subdir is not None and not isinstance(self.results_subdir, (list, tuple)):
            raise ValidationException(
                f"Results folder must be a list of path components, got {type(self.results_subdir).__name__}",
                "results_subdir"
            )
        self.results_subdir = tuple(self.results_subdir or ())
        if not self.results_subdir:
            raise ValidationException("Results folder cannot be empty", "results_subdir")

        for part in self.results_subdir:
            if not isinstance(part, str):
                raise ValidationException(
                    f"Results folder components must be strings, got {part!r}",
                    "results_subdir"
                )
            if not part or part in (".", "..") or "/" in part or "\\" in part or Path(part).is_absolute():
                raise ValidationException(
                    f"Invalid results folder component: {part!r}",
                    "results_subdir"
                )

    @classmethod
    def from_yaml(cls, path: Path) -> "ResolverConfig":
        """
        Load configuration from a YAML file.

        Recognized keys are ``platform`` (string or null) and
        ``results_subdir`` (list of path components, or one slash-separated
        string). Missing keys keep their defaults.

        Args:
            path: YAML configuration file

        Returns:
            Validated ResolverConfig

        Raises:
            ConfigurationException: If the file cannot be read or parsed
            ValidationException: If a value is invalid
        """
        try:
            with open(path, "r") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationException(f"Failed to read configuration {path}: {e}")
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Invalid YAML in configuration {path}: {e}")

        if content is None:
            content = {}
        if not isinstance(content, dict):
            raise ConfigurationException(
                f"Configuration {path} must be a mapping, got {type(content).__name__}"
            )

        unknown = set(content) - {"platform", "results_subdir"}
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys in {path}: {', '.join(sorted(unknown))}")

        config = cls()
        if "platform" in content:
            platform = content["platform"]
            if platform is not None and not isinstance(platform, str):
                raise ValidationException(
                    f"Platform must be a string, got {type(platform).__name__}",
                    "platform"
                )
            config.platform = platform or None
        if "results_subdir" in content:
            subdir = content["results_subdir"]
            if isinstance(subdir, str):
                subdir = [p for p in subdir.split("/") if p]
            config.results_subdir = subdir

        config.validate()
        logger.debug(f"Loaded resolver configuration from {path}: {config}")
        return config

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ResolverConfig":
        """
        Build configuration from environment variables.

        CONTAINERS_RESOLVER_PLATFORM overrides the platform; an empty value
        disables the platform constraint.

        Args:
            environ: Environment mapping (default: os.environ)

        Returns:
            Validated ResolverConfig
        """
        environ = os.environ if environ is None else environ

        config = cls()
        if PLATFORM_ENV_VAR in environ:
            config.platform = environ[PLATFORM_ENV_VAR].strip() or None

        config.validate()
        return config


__all__ = ["ResolverConfig"]
