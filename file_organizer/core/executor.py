# file_organizer/core/executor.py

import logging
from pathlib import Path

from . import config_manager, organizer

logger = logging.getLogger(__name__)


class CommandExecutor:
    """
    The boundary between the UI and the code that actually touches the disk.

    Every command returns a single text result tagged with "Error:" or
    "Success:". The GUI never calls the backend modules directly, so tests
    can swap this class for a fake.
    """

    def __init__(self, file_map_path: Path = config_manager.FILE_MAP_CONFIG_PATH):
        self.file_map_path = file_map_path

    def organize_files(self, path: str, is_backup: bool) -> str:
        logger.debug(f"organize_files(path={path!r}, is_backup={is_backup})")
        return organizer.organize_files(path, is_backup, self.file_map_path)

    def open_config_file(self) -> str:
        logger.debug(f"open_config_file({self.file_map_path})")
        return config_manager.open_config_file(self.file_map_path)
