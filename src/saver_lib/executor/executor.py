# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import subprocess
from collections.abc import Sequence

from rich.console import Console

from saver_lib.core.error import SaverSpawnError
from saver_lib.core.logger import get_logger

logger = get_logger(__name__)


class Executor:
    """
    Runs commands in the foreground, inheriting the standard streams.
    """

    def __init__(self, console: Console | None = None):
        """
        Initialize the Executor.

        Args:
            console (Console | None): Console used for the separator line.
                If None, a new Console writing to stdout will be created.
        """
        self._console = console if console is not None else Console()

    def run(self, command: str, arguments: Sequence[str]) -> int:
        """
        Run the command and wait for it to finish.

        An empty line is printed before the command is started.

        Args:
            command (str): The program to run.
            arguments (Sequence[str]): Arguments of the program.

        Returns:
            int: Exit code of the command, or 0 if it was terminated by a signal.

        Raises:
            SaverSpawnError: If the command could not be started.
        """
        self._console.print()

        logger.debug(f"Executing '{command}' with arguments {list(arguments)}.")
        try:
            process = subprocess.run([command, *arguments])
        except (OSError, ValueError) as e:
            raise SaverSpawnError(str(e)) from e

        # negative return code: terminated by a signal
        if process.returncode < 0:
            logger.debug(
                f"Command terminated by signal {-process.returncode}. Reporting exit code 0."
            )
            return 0

        return process.returncode
