"""
Filesystem primitives used to move mod directories in and out of the cache.
"""

import logging
import shutil
from pathlib import Path

log = logging.getLogger(__name__)


def create_dir(directory_path: Path) -> None:
    """Creates a directory if it does not already exist."""
    directory_path.mkdir(parents=True, exist_ok=True)


def dir_exists(directory_path: Path) -> bool:
    return directory_path.is_dir()


def copy_directory(source: Path, destination: Path) -> None:
    """
    Recursively copies `source` to `destination`.

    The destination must not exist yet; a FileExistsError is raised otherwise so
    that an existing install is never merged with cached files.
    """
    log.debug(f"Copying '{source}' to '{destination}'.")
    create_dir(destination.parent)
    shutil.copytree(source, destination)


def delete_directory(directory_path: Path) -> None:
    """Recursively deletes a directory and everything below it."""
    log.debug(f"Deleting '{directory_path}'.")
    shutil.rmtree(directory_path)
