# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from saver_lib.core.config import CFG


class ListPresenter:
    """
    Presents the names of saved commands as lines `<index>) <name>`.
    """

    def __init__(self, names: Sequence[str]):
        """
        Initialize the presenter.

        Args:
            names (Sequence[str]): Names of the records in the order they should be shown.
        """
        self._names = names

    def createList(self) -> list[Text]:
        """
        Create one line per record, numbered from 1.

        Returns:
            list[Text]: Rich Text objects, one per record.
        """
        lines = []
        for index, name in enumerate(self._names, start=1):
            line = Text()
            line.append(f"{index})", style=CFG.list_presenter.index_style)
            line.append(" ")
            line.append(name, style=CFG.list_presenter.name_style)
            lines.append(line)

        return lines

    def printList(self, console: Console | None = None) -> None:
        """
        Print the list of records. Prints nothing if there are no records.

        Args:
            console (Console | None): Optional Rich Console instance.
                If None, a new Console will be created.
        """
        console = console or Console()
        for line in self.createList():
            console.print(line, soft_wrap=True, highlight=False)
