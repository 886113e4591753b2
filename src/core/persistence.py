"""
Resolution artifact persistence.

Writes the analyzer's resolution to the results folder for collaborator
consumption and reads it back.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from constants import RESOLUTION_FILE_NAME
from core.exceptions import PersistenceException
from core.models import ContainerResolution

logger = logging.getLogger(__name__)


class ResolutionPersistence:
    """
    Handles persistence of resolution results to disk.

    Artifacts are written atomically so a reader never sees a partially
    written file.
    """

    def __init__(self, file_name: str = RESOLUTION_FILE_NAME):
        """
        Initialize persistence manager.

        Args:
            file_name: Artifact file name inside the target folder
                       (default: containers-resolution.json)
        """
        self.file_name = file_name

    def save(self, folder_path: Union[str, Path], obj: Any) -> Path:
        """
        Serialize an object into the artifact file of a folder.

        Args:
            folder_path: Existing folder to write into
            obj: Resolution list, model with to_dict(), or plain JSON data

        Returns:
            Path of the written artifact

        Raises:
            PersistenceException: If the folder is missing or the write fails
        """
        folder = Path(folder_path)
        if not folder.is_dir():
            raise PersistenceException(f"Output folder does not exist: {folder}")

        target_path = folder / self.file_name

        try:
            payload = json.dumps(self._serialize(obj), indent=2, default=str)

            # Write atomically by writing to temp file then renaming
            temp_path = target_path.with_suffix(".tmp")
            temp_path.write_text(payload)
            temp_path.replace(target_path)

        except (OSError, TypeError, ValueError) as e:
            raise PersistenceException(f"Failed to save resolution to {target_path}: {e}")

        logger.debug(f"Saved resolution to {target_path}")
        return target_path

    def load(self, path: Union[str, Path]) -> List[ContainerResolution]:
        """
        Load resolutions from an artifact file or the folder containing it.

        Args:
            path: Artifact file, or folder holding the artifact

        Returns:
            List of ContainerResolution

        Raises:
            PersistenceException: If the artifact is missing or invalid
        """
        artifact_path = Path(path)
        if artifact_path.is_dir():
            artifact_path = artifact_path / self.file_name

        if not artifact_path.exists():
            raise PersistenceException(f"Resolution file not found: {artifact_path}")

        try:
            data = json.loads(artifact_path.read_text())
        except json.JSONDecodeError as e:
            raise PersistenceException(f"Invalid resolution file: {e}")
        except OSError as e:
            raise PersistenceException(f"Failed to load resolution: {e}")

        if data is None:
            return []
        if not isinstance(data, list):
            raise PersistenceException(
                f"Invalid resolution file: expected a list, got {type(data).__name__}"
            )

        resolutions = [ContainerResolution.from_dict(item) for item in data]
        logger.debug(f"Loaded {len(resolutions)} resolutions from {artifact_path}")
        return resolutions

    @staticmethod
    def _serialize(obj: Any) -> Any:
        """Convert models (and lists of models) to JSON-ready data."""
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        if isinstance(obj, (list, tuple)):
            return [ResolutionPersistence._serialize(item) for item in obj]
        if isinstance(obj, dict):
            return {key: ResolutionPersistence._serialize(value) for key, value in obj.items()}
        return obj


__all__ = ["ResolutionPersistence"]
