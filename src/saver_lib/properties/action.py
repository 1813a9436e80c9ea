# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from enum import Enum
from typing import Self

from saver_lib.core.config import CFG
from saver_lib.core.error import SaverUsageError


class Action(Enum):
    """
    Operation requested by the user.

    The value of each variant is the token selecting it on the command line.
    """

    SAVE = "s"
    LIST = "l"
    SHOW = "g"
    RUN = "r"
    DELETE = "d"

    def __str__(self) -> str:
        """
        Return the lowercase string representation of the enum variant.

        Returns:
            str: The name of the action in lowercase.
        """
        return self.name.lower()

    @classmethod
    def fromToken(cls, token: str) -> Self:
        """
        Convert a command-line token to the corresponding Action.

        The match is exact: no trimming, no case folding.

        Args:
            token (str): The action token.

        Returns:
            Action: The matching action.

        Raises:
            SaverUsageError: If the token does not select any action.
        """
        try:
            return cls(token)
        except ValueError:
            raise SaverUsageError(f"Unknown action '{token}'.") from None

    def requiredTokens(self) -> tuple[str, ...]:
        """
        Names of the positional tokens the action requires, in order.
        """
        match self:
            case Action.SAVE:
                return ("name", "command")
            case Action.LIST:
                return ()
            case _:
                return ("name",)

    def usage(self) -> str:
        """Usage line of the action, without the binary name."""
        return " ".join([self.value, *(t.upper() for t in self.requiredTokens())])

    def description(self) -> str:
        """Short description of the action."""
        return _DESCRIPTIONS[self]

    def example(self) -> str:
        """Example invocation of the action."""
        return f"{CFG.binary_name} {_EXAMPLES[self]}"


_DESCRIPTIONS = {
    Action.SAVE: "Save the command under NAME and run it.",
    Action.LIST: "List saved commands.",
    Action.SHOW: "Print the saved command.",
    Action.RUN: "Run the saved command.",
    Action.DELETE: "Remove the saved command.",
}

_EXAMPLES = {
    Action.SAVE: "s curl-example curl https://example.com",
    Action.LIST: "l",
    Action.SHOW: "g curl-example",
    Action.RUN: "r curl-example",
    Action.DELETE: "d curl-example",
}
