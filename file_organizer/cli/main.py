# file_organizer/cli/main.py

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from file_organizer.core.config_manager import (
    APP_CONFIG_PATH, FILE_MAP_CONFIG_PATH, BACKUP_FLAG_KEY, read_backup_status, load_file_map
)
from file_organizer.core.executor import CommandExecutor
from file_organizer.core.results import OrganizeResult

console = Console()
logger = logging.getLogger(__name__)


def _print_result(result: OrganizeResult):
    style = "bold red" if result.is_error else "bold green"
    console.print(f"[{style}]{result.message.strip()}[/{style}]")


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.version_option(version="1.0", prog_name="File Organizer")
def fo():
    """
    File Organizer - sorts the files of a folder into sub-folders by type.

    Use `[COMMAND] --help` for more information on a specific command.
    """
    pass


@fo.command()
@click.argument('path', type=str)
@click.option('--backup/--no-backup', default=None,
              help="Zip the folder's files before organizing. Defaults to 'enableBackup' in config.json.")
@click.option('--file-map', type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
              default=FILE_MAP_CONFIG_PATH, show_default=True, help="Folder to extensions map to sort by.")
@click.option('--config', type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
              default=APP_CONFIG_PATH, show_default=True, help="config.json holding the default backup flag.")
def organize(path: str, backup: bool | None, file_map: Path, config: Path):
    """Organizes the files directly inside PATH."""
    is_backup = read_backup_status(config) if backup is None else backup

    console.print(f"[bold cyan]Organizing[/bold cyan] [bright_magenta]{path}[/bright_magenta]")
    if is_backup:
        console.print("[yellow]A backup zip will be created first.[/yellow]")

    result = OrganizeResult.from_text(CommandExecutor(file_map).organize_files(path, is_backup))
    _print_result(result)
    if result.is_error:
        sys.exit(1)


@fo.command(name="open-config")
@click.option('--file-map', type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
              default=FILE_MAP_CONFIG_PATH, show_default=True, help="The file map to open.")
def open_config(file_map: Path):
    """Opens the file map configuration in its default application."""
    result = OrganizeResult.from_text(CommandExecutor(file_map).open_config_file())
    _print_result(result)
    if result.is_error:
        sys.exit(1)


@fo.command(name="show-config")
@click.option('--file-map', type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
              default=FILE_MAP_CONFIG_PATH, show_default=True)
@click.option('--config', type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
              default=APP_CONFIG_PATH, show_default=True)
def show_config(file_map: Path, config: Path):
    """Prints the backup flag and the folder map."""
    console.print(f"{BACKUP_FLAG_KEY}: [bold magenta]{read_backup_status(config)}[/bold magenta]")

    try:
        folders = load_file_map(file_map)
    except (OSError, ValueError) as e:
        console.print(f"[bold red]Could not read {file_map}: {e}[/bold red]")
        logger.error("CLI show-config could not load the file map.", exc_info=True)
        sys.exit(1)

    table = Table(title="Folder Map", style="cyan", title_style="bold magenta")
    table.add_column("Folder", style="green", no_wrap=True)
    table.add_column("Extensions", style="yellow")
    for folder_name, extensions in folders.items():
        table.add_row(folder_name, ", ".join(extensions))
    console.print(table)
