# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass, field

from .action import Action


@dataclass(frozen=True)
class Intent:
    """
    Validated representation of a single saver invocation.
    """

    # Requested operation.
    action: Action

    # Directory containing the records, as given by the user.
    database_directory: str

    # Name of the record. Empty for `Action.LIST`.
    name: str = ""

    # Program to save. Only used by `Action.SAVE`.
    command: str = ""

    # Extra words passed to the command.
    arguments: tuple[str, ...] = field(default_factory=tuple)
