"""
Client for the Windows time zone utility (tzutil.exe).
"""

import logging
import subprocess
from typing import List

from tzmanager.models import TzUtilResult

logger = logging.getLogger(__name__)

# Keeps tzutil from flashing a console window; absent outside Windows
CREATE_NO_WINDOW = getattr(subprocess, 'CREATE_NO_WINDOW', 0)


class TzUtilClient:
    """Reads and sets the active system time zone through tzutil."""

    def __init__(self, console, tzutil_path: str = "tzutil.exe"):
        """
        Initialize tzutil client.

        Args:
            console: Console used to surface diagnostics to the user
            tzutil_path: Executable name or path of the time zone utility
        """
        self.console = console
        self.tzutil_path = tzutil_path

    def _run(self, args: List[str]) -> TzUtilResult:
        """
        Run tzutil with the given arguments.

        Diagnostic output is shown to the user but never raised. A failure to
        start the executable is reported and yields an empty result.

        Args:
            args: Arguments passed after the executable name

        Returns:
            TzUtilResult with captured output
        """
        command = [self.tzutil_path, *args]
        logger.debug("Running %s", command)

        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors='replace',
                creationflags=CREATE_NO_WINDOW,
            )
        except (OSError, ValueError) as e:
            logger.debug("Failed to launch %s", self.tzutil_path, exc_info=True)
            self.console.error(f"Error executing tzutil: {e}")
            return TzUtilResult(launched=False, returncode=-1)

        stdout = completed.stdout or ""
        stderr = completed.stderr or ""

        if stderr.strip():
            self.console.echo(f"tzutil stderr: {stderr.strip()}")
        if completed.returncode != 0:
            logger.debug("%s exited with code %s", self.tzutil_path, completed.returncode)

        return TzUtilResult(
            stdout=stdout,
            stderr=stderr,
            returncode=completed.returncode,
        )

    def query_current(self) -> str:
        """
        Get the identifier of the active time zone.

        Returns:
            Raw tzutil output (callers trim it), empty if tzutil could not run
        """
        return self._run(['/g']).stdout

    def apply(self, identifier: str) -> TzUtilResult:
        """
        Set the active time zone.

        Args:
            identifier: Windows time zone identifier, e.g. "GMT Standard Time"

        Returns:
            TzUtilResult of the set call
        """
        return self._run(['/s', identifier])
