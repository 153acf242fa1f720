# file_organizer/gui/resources.py

import logging

from file_organizer.core.config_manager import (
    APP_CONFIG_PATH, FILE_MAP_CONFIG_PATH, get_resource_path
)

logger = logging.getLogger(__name__)

ASSETS_PATH = get_resource_path('assets')
STYLES_PATH = ASSETS_PATH / 'styles'
DEFAULT_THEME = 'dark_theme.qss'

INSTRUCTIONS_URL = "https://github.com/juhamikael/FileOrganizer"

# Everything the window expects to find next to the code.
REQUIRED_FILES = [APP_CONFIG_PATH, FILE_MAP_CONFIG_PATH, STYLES_PATH / DEFAULT_THEME]


def validate_assets() -> list:
    """
    Checks for the files the GUI relies on at startup and logs what is missing.
    Returns the list of missing paths so callers can decide what to do.
    """
    logger.info("Validating application resources...")
    missing = [path for path in REQUIRED_FILES if not path.exists()]
    for path in missing:
        logger.warning(f"Required resource not found: {path}")
    if not missing:
        logger.info("All required resources found.")
    return missing


def load_stylesheet(theme_file: str = DEFAULT_THEME) -> str:
    """Loads a Qt stylesheet from assets/styles. Returns "" if it is missing."""
    theme_path = STYLES_PATH / theme_file
    if theme_path.exists():
        logger.info(f"Loading theme: {theme_file}")
        return theme_path.read_text(encoding='utf-8')
    logger.error(f"Failed to load theme file: {theme_path}")
    return ""
