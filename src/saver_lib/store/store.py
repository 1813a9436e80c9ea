# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from collections.abc import Sequence
from pathlib import Path

from saver_lib.core.error import SaverNotFoundError, SaverStoreError
from saver_lib.core.logger import get_logger

logger = get_logger(__name__)


class RecordStore:
    """
    Manages saved commands stored as files in a database directory.

    Each record is a file named after the command. Its content is a single line:
    the command followed by a space and the space-joined arguments. The
    filesystem is the only source of truth; nothing is cached.
    """

    def __init__(self, directory: str):
        """
        Initialize a RecordStore for a specific database directory.

        Args:
            directory (str): The directory containing the records, exactly as
                specified by the user. It is reported unchanged in error messages.
        """
        self._directory = directory
        self._path = Path(directory)

    @property
    def directory(self) -> str:
        """Database directory of the store."""
        return self._directory

    @staticmethod
    def formatRecord(command: str, arguments: Sequence[str]) -> str:
        """
        Build the record content for a command.

        The separator after the command is always present, even without arguments.
        """
        return f"{command} {' '.join(arguments)}"

    @staticmethod
    def parseRecord(content: str) -> tuple[str, list[str]]:
        """
        Split record content into the command and its arguments.

        The content is split on single spaces and every piece is stripped.
        Consecutive separators are not collapsed.

        Returns:
            tuple[str, list[str]]: The command and its arguments.
        """
        command, *arguments = (piece.strip() for piece in content.split(" "))
        return command, arguments

    def ensureDirectory(self) -> None:
        """
        Create the database directory and all its missing parents.

        Does nothing if the directory already exists.

        Raises:
            SaverStoreError: If the directory path is empty or the directory cannot be created.
        """
        # Path("") would silently resolve to the current working directory
        if not self._directory:
            raise SaverStoreError("Database directory path is empty")

        if self._path.is_dir():
            return

        logger.debug(f"Creating database directory '{self._directory}'.")
        try:
            self._path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SaverStoreError(str(e)) from e

    def save(self, name: str, command: str, arguments: Sequence[str]) -> None:
        """
        Save the command under the specified name, replacing any existing record.

        Args:
            name (str): Name of the record.
            command (str): The program to save.
            arguments (Sequence[str]): Arguments of the program.

        Raises:
            SaverStoreError: If the record cannot be written.
        """
        content = RecordStore.formatRecord(command, arguments)
        path = self._recordPath(name)

        logger.debug(f"Saving '{content}' into '{path}'.")
        try:
            path.write_text(content)
        except OSError as e:
            logger.debug(f"Failed to write '{path}': {e}.")
            raise SaverStoreError("Failed to save cmd") from e

    def read(self, name: str) -> str:
        """
        Read the content of the specified record.

        Args:
            name (str): Name of the record.

        Returns:
            str: The saved command line.

        Raises:
            SaverNotFoundError: If the record does not exist or cannot be read.
        """
        path = self._recordPath(name)

        logger.debug(f"Reading record '{path}'.")
        try:
            return path.read_text()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to read '{path}': {e}.")
            raise SaverNotFoundError(name, self._directory) from e

    def delete(self, name: str) -> None:
        """
        Remove the specified record.

        Args:
            name (str): Name of the record.

        Raises:
            SaverNotFoundError: If the record does not exist or cannot be removed.
        """
        path = self._recordPath(name)

        logger.debug(f"Removing record '{path}'.")
        try:
            path.unlink()
        except OSError as e:
            logger.debug(f"Failed to remove '{path}': {e}.")
            raise SaverNotFoundError(name, self._directory) from e

    # shadows the builtin `list` for the rest of the class body
    def list(self) -> list[str]:
        """
        Get the names of all records in directory-listing order.

        Returns:
            list[str]: Names of the records.

        Raises:
            SaverStoreError: If the database directory cannot be listed.
        """
        try:
            return [entry.name for entry in self._path.iterdir()]
        except OSError as e:
            raise SaverStoreError(
                f"Could not list database '{self._directory}': {e}"
            ) from e

    def _recordPath(self, name: str) -> Path:
        return self._path / name
