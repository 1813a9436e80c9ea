# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout saver.

Errors are raised where an operation fails and handled only by the `saver`
command, which decides what to print and with which exit code to terminate.
`SaverError` and its store-related subclasses are reported on standard output;
`SaverSpawnError` and `SaverConfigError` are reported on standard error.
"""

from .config import CFG


class SaverError(Exception):
    """Common exception type for all recoverable saver errors."""

    exit_code = CFG.exit_codes.default


class SaverStoreError(SaverError):
    """Raised when the database directory or a record cannot be written or listed."""

    pass


class SaverNotFoundError(SaverError):
    """Raised when a record does not exist in the database or cannot be accessed."""

    def __init__(self, name: str, db_dir: str):
        super().__init__(f"Command {name} not found in database {db_dir}")
        self.name = name
        self.db_dir = db_dir


class SaverUsageError(SaverError):
    """Raised when the command-line arguments do not form a valid invocation."""

    pass


class SaverSpawnError(Exception):
    """Raised when a command cannot be started."""

    exit_code = CFG.exit_codes.default


class SaverConfigError(Exception):
    """Raised when the runtime configuration (e.g., the home directory) cannot be resolved."""

    exit_code = CFG.exit_codes.default
