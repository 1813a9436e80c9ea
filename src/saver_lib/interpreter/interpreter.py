# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import os
from collections.abc import Iterable, Iterator, Mapping

from saver_lib.core.config import CFG
from saver_lib.core.error import SaverConfigError, SaverUsageError
from saver_lib.core.logger import get_logger
from saver_lib.properties.action import Action
from saver_lib.properties.intent import Intent

logger = get_logger(__name__)


def resolve_default_db_dir(environ: Mapping[str, str] | None = None) -> str:
    """
    Resolve the default database directory from the home directory.

    Args:
        environ (Mapping[str, str] | None): Environment to read. Defaults to `os.environ`.

    Returns:
        str: `<home>/.saver/db`.

    Raises:
        SaverConfigError: If the home directory variable is not set.
    """
    environ = os.environ if environ is None else environ

    if (home := environ.get(CFG.env_vars.home)) is None:
        raise SaverConfigError("Failed to get home directory")

    return f"{home}/{CFG.database.default_subdir}"


class Interpreter:
    """
    Parses the tokens following the program name into an `Intent`.
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        """
        Initialize the Interpreter.

        Args:
            environ (Mapping[str, str] | None): Environment used to resolve
                the default database directory. Defaults to `os.environ`.
        """
        self._environ = environ

    def interpret(self, tokens: Iterable[str]) -> Intent:
        """
        Build an Intent from the command-line tokens.

        The tokens are consumed in a single forward pass. The first token selects
        the action, the positional tokens required by the action follow, and all
        remaining tokens are either the database override (`--saver-db <dir>`)
        or arguments of the command.

        Args:
            tokens (Iterable[str]): Command-line tokens without the program name.

        Returns:
            Intent: The parsed invocation.

        Raises:
            SaverUsageError: If the action is unknown or a required token is missing or empty.
            SaverConfigError: If the default database directory cannot be resolved.
        """
        cursor = iter(tokens)

        if (token := next(cursor, None)) is None:
            raise SaverUsageError("No action specified.")
        action = Action.fromToken(token)
        logger.debug(f"Selected action: {action}.")

        positional = {
            required: Interpreter._takeRequired(cursor, required)
            for required in action.requiredTokens()
        }

        db_dir = resolve_default_db_dir(self._environ)
        arguments = []
        for token in cursor:
            if token.strip() == CFG.database.override_flag:
                # a trailing flag without a value keeps the current directory
                db_dir = next(cursor, db_dir)
                continue
            arguments.append(token)

        logger.debug(f"Database directory: '{db_dir}'.")
        logger.debug(f"Command arguments: {arguments}.")

        return Intent(
            action=action,
            database_directory=db_dir,
            name=positional.get("name", ""),
            command=positional.get("command", ""),
            arguments=tuple(arguments),
        )

    @staticmethod
    def _takeRequired(cursor: Iterator[str], what: str) -> str:
        """
        Consume the next token, which must be present and non-empty.

        Raises:
            SaverUsageError: If the token is missing or empty.
        """
        if not (token := next(cursor, "")):
            raise SaverUsageError(f"Missing required argument '{what}'.")

        return token
