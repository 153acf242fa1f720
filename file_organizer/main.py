# file_organizer/main.py

import click

from file_organizer.cli.main import fo
from file_organizer.gui.main_window import run_gui
from file_organizer.utils.logger import setup_logging


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.option('-v', '--verbose', is_flag=True, help="Also show DEBUG messages on the console.")
def main(verbose):
    """
    File Organizer: sorts the files of a folder into sub-folders by type.

    Run the desktop window with 'gui', or the scriptable tool with 'cli'
    followed by its own sub-commands.
    """
    setup_logging(verbose=verbose)


@click.command()
def gui():
    """Launches the desktop window."""
    run_gui()


main.add_command(gui)
main.add_command(fo, name='cli')

if __name__ == '__main__':
    main()
