"""
Console input and output for the interactive selector.
"""

from enum import Enum
from typing import Sequence

import click


class Key(Enum):
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


# click.getchar() returns a two-character sequence for special keys on
# Windows (prefix \x00 or \xe0) and an ANSI escape sequence elsewhere.
_KEY_SEQUENCES = {
    '\xe0H': Key.UP,
    '\x00H': Key.UP,
    '\x1b[A': Key.UP,
    '\x1bOA': Key.UP,
    '\xe0P': Key.DOWN,
    '\x00P': Key.DOWN,
    '\x1b[B': Key.DOWN,
    '\x1bOB': Key.DOWN,
    '\r': Key.ENTER,
    '\n': Key.ENTER,
    '\r\n': Key.ENTER,
    '\x1b': Key.ESCAPE,
}

MENU_TITLE = "=== Select a TimeZone ==="
MENU_HINT = "\nUse UP/DOWN arrows to select, ENTER to apply, ESC to exit."


def decode_key(raw: str) -> Key:
    """Map a raw getchar() sequence onto a menu key."""
    return _KEY_SEQUENCES.get(raw, Key.OTHER)


class ClickConsole:
    """Terminal front end built on click's portable terminal helpers."""

    def read_key(self) -> Key:
        return decode_key(click.getchar())

    def clear(self) -> None:
        click.clear()

    def echo(self, message: str = "") -> None:
        click.echo(message)

    def info(self, message: str) -> None:
        click.secho(message, fg='cyan')

    def warn(self, message: str) -> None:
        click.secho(message, fg='yellow')

    def error(self, message: str) -> None:
        click.secho(message, fg='red')

    def pause(self, message: str = "Press any key to continue...") -> None:
        # click.pause is a no-op when stdin or stdout is not a terminal
        click.pause(info=message)

    def render_menu(self, options: Sequence[str], index: int) -> None:
        """
        Draw the selector menu.

        The last option is the reset entry and gets its own colours.

        Args:
            options: Display text for every option, reset entry last
            index: Currently selected option
        """
        self.clear()
        click.echo(MENU_TITLE)

        last = len(options) - 1
        for i, text in enumerate(options):
            selected = i == index
            line = f"{'->' if selected else '  '} {text}"
            if i < last:
                click.secho(line, fg='green' if selected else None)
            else:
                click.secho(line, fg='magenta' if selected else 'yellow')

        click.echo(MENU_HINT)
