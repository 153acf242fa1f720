# file_organizer/core/organizer.py

import datetime
import logging
import zipfile
from pathlib import Path
from typing import Dict, List

from .config_manager import FILE_MAP_CONFIG_PATH, load_file_map
from .file_operations import safe_move, remove_empty_folders

logger = logging.getLogger(__name__)

UNCATEGORIZED_FOLDER = "Uncategorized"
BACKUP_FOLDER = "backup"
BACKUP_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
WINDOWS_DIRECTORY = "c:\\windows"


def organize_files(path: str, is_backup: bool, file_map_path: Path = FILE_MAP_CONFIG_PATH) -> str:
    """
    Sorts the files directly under `path` into folders by extension.

    The workflow is:
    1. Refuse the Windows system directory and anything that is not a directory.
    2. Optionally zip every top-level file into `<path>/backup/`.
    3. Create one folder per entry of the file map.
    4. Move each top-level file into its folder ("Uncategorized" if no match).
    5. Remove every empty folder left behind.

    Args:
        path: The folder to organize, exactly as the user typed it.
        is_backup: Whether to create a zip backup before moving anything.
        file_map_path: The folder-to-extensions map to sort by.

    Returns:
        A tagged text result: "Success: ..." with the number of files
        organized, or "Error: ..." describing why nothing (or not everything)
        happened.
    """
    if path.lower() == WINDOWS_DIRECTORY:
        return "Error: Cannot organize files in the Windows directory."

    target = Path(path)
    if not target.is_dir():
        logger.warning(f"Refusing to organize '{path}': not an existing directory.")
        return "Error: Invalid path."

    try:
        file_map = load_file_map(file_map_path)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError.
        logger.error(f"Could not load file map '{file_map_path}': {e}", exc_info=True)
        return f"Error: Could not read {file_map_path.name}."

    try:
        if is_backup:
            create_backup(target)

        create_folders(target, file_map)
        categories = categorize_files(target, file_map)
        moved = move_files_to_folders(target, categories)
        remove_empty_folders(target)
    except (OSError, zipfile.BadZipFile) as e:
        logger.error(f"Organizing '{target}' failed: {e}", exc_info=True)
        return f"Error: {e}"

    num_files_organized = sum(len(files) for files in categories.values())
    logger.info(f"Organized {num_files_organized} files in '{target}' ({moved} moved, backup={is_backup}).")
    return end_message(num_files_organized)


def end_message(num_files_organized: int) -> str:
    return f"Success: Organized {num_files_organized} files successfully!"


def create_backup(path: Path) -> Path:
    """
    Zips every regular file directly under `path` into
    `<path>/backup/backup-<timestamp>.zip`, uncompressed.
    Returns the path of the new archive.
    """
    backup_dir = path / BACKUP_FOLDER
    backup_dir.mkdir(exist_ok=True)

    timestamp = datetime.datetime.now().strftime(BACKUP_TIMESTAMP_FORMAT)
    zip_path = backup_dir / f"backup-{timestamp}.zip"

    with zipfile.ZipFile(zip_path, 'w', compression=zipfile.ZIP_STORED) as archive:
        for entry in sorted(path.iterdir()):
            if entry.is_file():
                archive.write(entry, arcname=entry.relative_to(path).as_posix())

    logger.info(f"Backup created at '{zip_path}'")
    return zip_path


def create_folders(path: Path, file_map: Dict[str, List[str]]):
    """Creates one folder per file map entry. Failures are logged, not raised."""
    for folder_name in file_map:
        try:
            (path / folder_name).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Could not create folder {folder_name}: {e}")


def get_folder_name(extension: str, file_map: Dict[str, List[str]]) -> str:
    """The first folder whose extension list contains `extension`."""
    for folder_name, extensions in file_map.items():
        if extension in extensions:
            return folder_name
    return UNCATEGORIZED_FOLDER


def categorize_files(path: Path, file_map: Dict[str, List[str]]) -> Dict[str, List[Path]]:
    """Groups the regular files directly under `path` by destination folder. Folders are ignored."""
    categories: Dict[str, List[Path]] = {}
    for entry in sorted(path.iterdir()):
        if not entry.is_file():
            continue
        folder_name = get_folder_name(entry.suffix.lower(), file_map)
        categories.setdefault(folder_name, []).append(entry)
    return categories


def move_files_to_folders(path: Path, categories: Dict[str, List[Path]]) -> int:
    """Moves every categorized file into its folder. Returns the number actually moved."""
    moved = 0
    for folder_name, files in categories.items():
        for file_path in files:
            status, _ = safe_move(file_path, path / folder_name)
            if status == "MOVED":
                moved += 1
            else:
                logger.warning(f"Could not move file {file_path.name} to folder {folder_name}")
    return moved

