# file_organizer/core/file_operations.py

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def get_unique_path(destination_path: Path) -> Path:
    """
    Returns a path that does not exist yet by appending a counter.

    Example:
        If 'image.jpg' exists, it will return 'image_1.jpg'.
        If 'image_1.jpg' also exists, it will return 'image_2.jpg'.
    """
    if not destination_path.exists():
        return destination_path

    parent = destination_path.parent
    stem = destination_path.stem
    suffix = destination_path.suffix
    counter = 1

    while True:
        new_path = parent.joinpath(f"{stem}_{counter}{suffix}")
        if not new_path.exists():
            logger.debug(f"Found unique path for '{destination_path}': '{new_path}'")
            return new_path
        counter += 1


def safe_move(source_path: Path, destination_dir: Path) -> tuple[str, Path | None]:
    """
    Moves a file into a destination directory without ever overwriting.

    Args:
        source_path: The file to move.
        destination_dir: The directory to move it into. Created if missing.

    Returns:
        A tuple of the status ('MOVED' or 'ERROR') and the final path of the
        file, or None if the move failed.
    """
    if not source_path.is_file():
        logger.error(f"Source path is not a valid file: {source_path}")
        return "ERROR", None

    try:
        destination_dir.mkdir(parents=True, exist_ok=True)
        destination_path = get_unique_path(destination_dir.joinpath(source_path.name))

        logger.info(f"Moving '{source_path}' to '{destination_path}'")
        shutil.move(str(source_path), str(destination_path))
        return "MOVED", destination_path

    except PermissionError:
        logger.error(f"Permission denied for '{source_path}'. Check file/folder permissions.")
        return "ERROR", None
    except OSError as e:
        logger.error(f"Could not move '{source_path}' to '{destination_dir}': {e}", exc_info=True)
        return "ERROR", None


def remove_empty_folders(path: Path) -> int:
    """
    Recursively removes every empty directory below `path`.
    The directory itself is kept. Returns the number of folders removed.
    """
    removed = 0
    for entry in path.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            removed += remove_empty_folders(entry)
            if not any(entry.iterdir()):
                entry.rmdir()
                logger.debug(f"Removed empty folder '{entry}'")
                removed += 1
    return removed
