"""
Command-line entry point for TimeZone Manager.
"""

import logging
import os
import sys

import click

from tzmanager.config_loader import load_config
from tzmanager.console import ClickConsole
from tzmanager.controller import HELP_TEXT, SessionController
from tzmanager.state import SavedZoneStore
from tzmanager.tzutil_client import TzUtilClient

logger = logging.getLogger(__name__)


EXIT_PROMPT = "\nPress any key to exit..."


def configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(os.getenv('LOG_LEVEL', 'WARNING').strip().upper())
        # getLevelName() hands back a "Level x" string for unknown names
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def build_controller(config_file: str, console: ClickConsole) -> SessionController:
    """Wire configuration, tzutil client and record store into a controller."""
    config = load_config(config_file)
    logger.debug("Saved-zone record: %s", config.state_file)
    return SessionController(
        config=config,
        client=TzUtilClient(console, config.tzutil_path),
        store=SavedZoneStore(config.state_file),
        console=console,
    )


@click.command(
    add_help_option=False,
    context_settings={'ignore_unknown_options': True},
)
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.option('--config', 'config_file', default='config.ini', show_default=True,
              help='Optional INI file with [Settings] and [Zones] sections.')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging.')
def main(args, config_file, verbose):
    """Switch the Windows time zone and restore it later.

    COMMAND is one of start, reset or help.
    """
    console = ClickConsole()

    try:
        configure_logging(verbose)
        command = args[0] if args else ""
        build_controller(config_file, console).dispatch(command)
    except Exception as e:
        logger.debug("Unhandled exception", exc_info=True)
        console.error(f"Unhandled exception: {e!r}")
    finally:
        console.pause(EXIT_PROMPT)


def run(argv=None) -> None:
    """
    Console script entry point.

    Command-line errors (e.g. --config without a value) are raised by click
    before main() runs; they are reported with the usage text and still end
    on the exit prompt.

    Args:
        argv: Arguments to parse instead of sys.argv[1:]
    """
    try:
        main.main(args=argv, prog_name='tzmanager', standalone_mode=False)
    except click.ClickException as e:
        console = ClickConsole()
        console.error(f"Error: {e.format_message()}")
        console.echo()
        console.echo(HELP_TEXT)
        console.pause(EXIT_PROMPT)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)


if __name__ == '__main__':
    run()
