# file_organizer/core/config_manager.py

import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

import click

logger = logging.getLogger(__name__)

APP_CONFIG_FILE_NAME = 'config.json'
FILE_MAP_FILE_NAME = 'file_map-config.json'
BACKUP_FLAG_KEY = 'enableBackup'


def get_resource_path(relative_path: str) -> Path:
    """
    Gets the absolute path to a resource, working both from source and from a
    PyInstaller bundled executable.
    """
    try:
        # PyInstaller unpacks bundled data into sys._MEIPASS.
        base_path = Path(sys._MEIPASS)
    except AttributeError:
        # From source the project root is two levels above this package.
        base_path = Path(__file__).resolve().parents[2]

    return base_path / relative_path


CONFIG_PATH = get_resource_path('config')
APP_CONFIG_PATH = CONFIG_PATH / APP_CONFIG_FILE_NAME
FILE_MAP_CONFIG_PATH = CONFIG_PATH / FILE_MAP_FILE_NAME


def read_backup_status(config_path: Path = APP_CONFIG_PATH) -> bool:
    """
    Reads the persisted "enableBackup" flag.

    Falls back to False when the file is missing, unreadable, not a JSON
    object, or the key is absent or not a boolean.
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except FileNotFoundError:
        logger.warning(f"No configuration found at '{config_path}'. Backup is disabled by default.")
        return False
    except (IOError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read '{config_path}' ({e}). Backup is disabled by default.")
        return False

    value = config.get(BACKUP_FLAG_KEY) if isinstance(config, dict) else None
    if not isinstance(value, bool):
        logger.warning(f"'{BACKUP_FLAG_KEY}' is missing or not a boolean in '{config_path}'. Using False.")
        return False

    logger.debug(f"Loaded {BACKUP_FLAG_KEY}={value} from '{config_path}'")
    return value


def load_file_map(file_map_path: Path = FILE_MAP_CONFIG_PATH) -> Dict[str, List[str]]:
    """
    Loads the folder-to-extensions map, e.g. {"Images": [".jpg", ".png"]}.

    Extensions are normalized to lowercase with a leading dot.

    Raises:
        OSError: The file cannot be read.
        ValueError: The file is not valid JSON or not shaped as a folder map.
    """
    with open(file_map_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"'{file_map_path.name}' must contain a JSON object of folder names.")

    file_map = {}
    for folder_name, extensions in data.items():
        if not isinstance(extensions, list) or not all(isinstance(ext, str) for ext in extensions):
            raise ValueError(f"Folder '{folder_name}' in '{file_map_path.name}' must map to a list of extensions.")
        file_map[folder_name] = [normalize_extension(ext) for ext in extensions]

    logger.debug(f"Loaded {len(file_map)} folders from '{file_map_path}'")
    return file_map


def normalize_extension(extension: str) -> str:
    """'JPG', '.jpg' and '.JPG' all become '.jpg'."""
    extension = extension.strip().lower()
    if extension and not extension.startswith('.'):
        extension = '.' + extension
    return extension


def open_config_file(file_map_path: Path = FILE_MAP_CONFIG_PATH) -> str:
    """
    Opens the file map configuration in the platform's default application.

    Returns:
        "Success:Opened config file" or "Error: Could not open config file".
    """
    if not file_map_path.is_file():
        logger.error(f"Config file not found at '{file_map_path}'")
        return "Error: Could not open config file"

    try:
        exit_code = click.launch(str(file_map_path))
    except OSError as e:
        logger.error(f"Launching an editor for '{file_map_path}' failed: {e}", exc_info=True)
        return "Error: Could not open config file"

    if exit_code != 0:
        logger.error(f"Default application for '{file_map_path}' exited with code {exit_code}")
        return "Error: Could not open config file"

    logger.info(f"Opened config file '{file_map_path}'")
    return "Success:Opened config file"
