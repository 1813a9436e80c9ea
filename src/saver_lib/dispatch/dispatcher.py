# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import click
from rich.console import Console

from saver_lib.core.logger import get_logger
from saver_lib.executor.executor import Executor
from saver_lib.listing.presenter import ListPresenter
from saver_lib.properties.action import Action
from saver_lib.properties.intent import Intent
from saver_lib.store.store import RecordStore

logger = get_logger(__name__)


class Dispatcher:
    """
    Performs the action requested by an Intent.

    Every action first makes sure the database directory exists. Errors raised
    by the store or the executor are propagated to the caller.
    """

    def __init__(
        self,
        intent: Intent,
        store: RecordStore | None = None,
        executor: Executor | None = None,
        console: Console | None = None,
    ):
        """
        Initialize the Dispatcher.

        Args:
            intent (Intent): The invocation to perform.
            store (RecordStore | None): Store to use. If None, a store for
                `intent.database_directory` is created.
            executor (Executor | None): Executor to use. If None, a new one is created.
            console (Console | None): Console used for printing to stdout.
                If None, a new Console will be created.
        """
        self._intent = intent
        self._console = console if console is not None else Console()
        self._store = (
            store if store is not None else RecordStore(intent.database_directory)
        )
        self._executor = executor if executor is not None else Executor(self._console)

    def dispatch(self) -> int:
        """
        Perform the action.

        Returns:
            int: Exit code the process should terminate with.
        """
        self._store.ensureDirectory()

        logger.debug(f"Dispatching action '{self._intent.action}'.")
        match self._intent.action:
            case Action.SAVE:
                return self._save()
            case Action.LIST:
                return self._list()
            case Action.SHOW:
                return self._show()
            case Action.RUN:
                return self._run()
            case Action.DELETE:
                return self._delete()

    def _save(self) -> int:
        """Save the command and run it."""
        intent = self._intent
        self._store.save(intent.name, intent.command, intent.arguments)
        return self._executor.run(intent.command, intent.arguments)

    def _list(self) -> int:
        ListPresenter(self._store.list()).printList(self._console)
        return 0

    def _show(self) -> int:
        content = self._store.read(self._intent.name)
        click.echo(content)
        return 0

    def _run(self) -> int:
        """Run a saved command without saving it again."""
        command, arguments = RecordStore.parseRecord(
            self._store.read(self._intent.name)
        )
        return self._executor.run(command, arguments)

    def _delete(self) -> int:
        self._store.delete(self._intent.name)
        return 0
