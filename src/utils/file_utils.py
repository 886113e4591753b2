"""
Filesystem helpers for resolution output folders.

Creation, comparison and removal of the directories the resolver works in.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def create_results_folder(base_path: PathLike, parts: tuple[str, ...]) -> tuple[Path, Path]:
    """
    Create the results folder under a base directory.

    Also reports which directory has to be removed to undo the creation:
    the topmost component that did not exist yet, or the results folder
    itself when it was already there. Pre-existing parents such as a shared
    ".checkmarx" folder are never part of the removal root.

    Args:
        base_path: Existing base directory
        parts: Relative path components of the results folder

    Returns:
        Tuple of (results_path, removal_root)

    Raises:
        OSError: If the folder cannot be created
    """
    base = Path(base_path)
    results_path = base.joinpath(*parts)

    removal_root = results_path
    for depth in range(1, len(parts) + 1):
        candidate = base.joinpath(*parts[:depth])
        if not candidate.exists():
            removal_root = candidate
            break

    try:
        results_path.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Undo any parent created before the failure
        if removal_root != results_path and removal_root.exists():
            try:
                shutil.rmtree(removal_root)
            except OSError as cleanup_error:
                logger.warning(f"Could not remove partially created {removal_root}: {cleanup_error}")
        raise

    logger.debug(f"Results folder: {results_path} (removal root: {removal_root})")
    return results_path, removal_root


def is_same_or_inside(path: PathLike, other: PathLike) -> bool:
    """
    Check whether a path is another path or lies inside it.

    Paths are compared after making them absolute and resolving symlinks,
    so "out", "./out" and "out/" are equal.

    Args:
        path: Path to test
        other: Candidate location or ancestor

    Returns:
        True if path resolves to other or to a descendant of it
    """
    return Path(path).resolve().is_relative_to(Path(other).resolve())


def delete_directory(path: PathLike) -> None:
    """
    Recursively delete a directory.

    A directory that does not exist is treated as already deleted.

    Args:
        path: Directory to delete

    Raises:
        OSError: If the directory exists but cannot be removed
    """
    directory = Path(path)
    if not directory.exists():
        logger.debug(f"Directory already absent: {directory}")
        return

    shutil.rmtree(directory)
    logger.debug(f"Deleted directory: {directory}")


__all__ = [
    "create_results_folder",
    "is_same_or_inside",
    "delete_directory",
]
