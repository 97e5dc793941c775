"""Command Runner - the one seam between graindisplay and the operating system

GSettingsClient never spawns processes itself. It hands an argument vector to
a CommandRunner and gets stdout bytes back, or an exception. Production code
binds SystemRunner; tests bind a scripted runner that checks the exact argv
and returns canned output.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..exceptions import CommandFailedError


class CommandRunner(ABC):
    """Run an external program and return its standard output."""

    @abstractmethod
    def run(self, args: Sequence[str]) -> bytes:
        """Execute `args` and return captured stdout.

        Args:
            args: Executable name followed by its arguments

        Returns:
            Raw stdout bytes

        Raises:
            CommandFailedError: non-zero exit or abnormal termination
        """
        raise NotImplementedError


class SystemRunner(CommandRunner):
    """Runs commands with subprocess, resolving the executable on PATH.

    There is no timeout: a hung settings tool hangs the caller.
    """

    def __init__(self, max_output_bytes: Optional[int] = None):
        if max_output_bytes is None:
            from .settings_config import SettingsConfig
            max_output_bytes = SettingsConfig.get().max_output_bytes
        self.max_output_bytes = max_output_bytes

    def run(self, args: Sequence[str]) -> bytes:
        argv = list(args)
        logging.debug(f"Running: {' '.join(argv)}")

        try:
            result = subprocess.run(argv, capture_output=True, check=False)
        except OSError as e:
            logging.error(f"Failed to start {argv[0]}: {e}")
            raise CommandFailedError(argv, f"Failed to start: {e}") from e

        stderr = result.stderr.decode("utf-8", errors="replace").strip()

        if result.returncode < 0:
            logging.error(f"{argv[0]} terminated by signal {-result.returncode}")
            raise CommandFailedError(
                argv,
                f"Terminated by signal {-result.returncode}",
                returncode=result.returncode,
                stderr=stderr,
            )

        if result.returncode != 0:
            logging.error(f"{argv[0]} exited with {result.returncode}: {stderr}")
            raise CommandFailedError(
                argv,
                f"Exited with status {result.returncode}: {stderr}",
                returncode=result.returncode,
                stderr=stderr,
            )

        if len(result.stdout) > self.max_output_bytes:
            raise CommandFailedError(
                argv,
                f"Output exceeded {self.max_output_bytes} bytes",
                returncode=result.returncode,
            )

        return result.stdout
