# file_organizer/utils/logger.py

import logging
import logging.handlers
from pathlib import Path

LOG_FILE_NAME = 'file_organizer.log'
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5

CONSOLE_FORMAT = '%(asctime)s - [%(levelname)s] - %(message)s'
CONSOLE_DATE_FORMAT = '%H:%M:%S'
FILE_FORMAT = '%(asctime)s - %(name)s - [%(levelname)s] - %(filename)s:%(lineno)d - %(message)s'


class LoggerManager:
    """
    Wires the root logger for both the window and the command line.

    The console only shows what a user of `file-organizer` cares about
    (organize results, backups, config problems) unless `verbose` is set.
    The rotating file always keeps the full DEBUG trail, including the
    per-file moves and the worker thread lifecycle.
    """

    def __init__(self, log_dir: Path | None = None, verbose: bool = False,
                 log_file_name: str = LOG_FILE_NAME):
        base_dir = log_dir if log_dir is not None else Path(__file__).resolve().parents[2]
        self.log_file_path = base_dir / log_file_name
        self.console_level = logging.DEBUG if verbose else logging.INFO
        self.root_logger = logging.getLogger()

    def setup(self) -> bool:
        """Attaches both handlers. Returns False if the root logger was already configured."""
        if self.root_logger.hasHandlers():
            return False

        self.root_logger.setLevel(logging.DEBUG)
        self.root_logger.addHandler(self.console_handler())
        self.root_logger.addHandler(self.file_handler())

        logging.debug("File Organizer logging to %s", self.log_file_path)
        return True

    def console_handler(self) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setLevel(self.console_level)
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
        return handler

    def file_handler(self) -> logging.handlers.RotatingFileHandler:
        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            self.log_file_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding='utf-8'
        )
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(FILE_FORMAT))
        return handler


def setup_logging(log_dir: Path | None = None, verbose: bool = False) -> bool:
    return LoggerManager(log_dir=log_dir, verbose=verbose).setup()
