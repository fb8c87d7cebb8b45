"""
Session controller: command dispatch, the interactive selector and restore.
"""

import logging

from tzmanager.console import Key
from tzmanager.models import AppConfig
from tzmanager.state import SavedZoneStore

logger = logging.getLogger(__name__)

RESET_OPTION = "RESET to initial TimeZone"

HELP_TEXT = """\
Commands:
  start   -> Launch interactive TimeZone selector
  reset   -> Restore previous TimeZone
  help    -> Show this help menu

Usage:
  tzmanager start
  tzmanager reset

Interactive mode: Use UP/DOWN arrows to select a TimeZone, press ENTER to apply.
After finishing, you can use 'reset' command to restore previous TimeZone.
"""


class SessionController:
    """Saves the original time zone once, switches zones and restores it."""

    def __init__(self, config: AppConfig, client, store: SavedZoneStore, console):
        """
        Initialize the controller.

        Args:
            config: Application configuration (zone list, record path)
            client: Object providing query_current() and apply(identifier)
            store: Saved-zone record
            console: Console used for input and output
        """
        self.config = config
        self.client = client
        self.store = store
        self.console = console

    def dispatch(self, command: str = "") -> None:
        """
        Run the action for a command keyword.

        Args:
            command: "start", "reset" or "help"; anything else shows help
        """
        keyword = (command or "").strip().lower()
        logger.debug("Dispatching command %r", keyword)

        if keyword == 'start':
            self.run_interactive_selector()
        elif keyword == 'reset':
            self.restore_saved()
        else:
            self.show_help()

    def show_help(self) -> None:
        self.console.info("=== TimeZoneManager - Console Utility ===")
        self.console.echo()
        self.console.echo(HELP_TEXT)

    def ensure_saved(self) -> None:
        """Record the active time zone unless a record already exists."""
        if self.store.exists():
            return

        current = self.client.query_current().strip()
        self.store.write(current)
        self.console.echo(f"Saved current TimeZone: {current}")
        self.console.pause("Press any key to continue...")

    def menu_options(self) -> list:
        return [str(zone) for zone in self.config.zones] + [RESET_OPTION]

    def run_interactive_selector(self) -> None:
        """Arrow-key menu over the configured zones plus the reset entry."""
        self.ensure_saved()

        options = self.menu_options()
        menu_length = self.config.menu_length
        index = 0

        while True:
            self.console.render_menu(options, index)
            key = self.console.read_key()

            if key == Key.UP:
                index = (index - 1) % menu_length
            elif key == Key.DOWN:
                index = (index + 1) % menu_length
            elif key == Key.ENTER:
                self._confirm(index)
            elif key == Key.ESCAPE:
                break

        self.console.clear()
        self.console.echo(
            "Interactive mode exited. Use 'tzmanager reset' to restore previous TimeZone."
        )

    def _confirm(self, index: int) -> None:
        if index < len(self.config.zones):
            selected = self.config.zones[index]
            self.console.echo(f"\nApplying TimeZone: {selected}")
            self.client.apply(selected.identifier)
            self.console.pause("Done. Press any key to continue...")
            return

        initial = self.store.read() if self.store.exists() else ""
        if not initial:
            logger.debug("No saved time zone to reset to")
            return

        self.console.echo(f"\nRestoring TimeZone to initial: {initial}")
        self.client.apply(initial)
        self.console.pause("TimeZone reset successfully. Press any key to continue...")

    def restore_saved(self) -> None:
        """Apply the saved time zone once and discard the record."""
        if not self.store.exists():
            self.console.warn("No saved previous TimeZone found.")
            return

        try:
            previous = self.store.read()
            if previous:
                self.console.echo(f"Restoring TimeZone to: {previous}")
                self.client.apply(previous)
                self.console.echo("TimeZone restored successfully.")
        finally:
            self.store.delete()
