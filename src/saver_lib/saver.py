# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from typing import NoReturn

import click

from saver_lib.core.click_format import SaverHelpCommand
from saver_lib.core.config import CFG
from saver_lib.core.error import (
    SaverConfigError,
    SaverError,
    SaverSpawnError,
    SaverUsageError,
)
from saver_lib.core.logger import get_logger
from saver_lib.dispatch.dispatcher import Dispatcher
from saver_lib.interpreter.interpreter import Interpreter

__version__ = "0.1.0"

logger = get_logger(__name__)

_CONTEXT_SETTINGS = {
    # support both --help and -h
    "help_option_names": ["-h", "--help"],
    # everything from the action token on belongs to saver's own parser
    "allow_interspersed_args": False,
    "ignore_unknown_options": True,
}


@click.command(
    cls=SaverHelpCommand,
    help_options_color="bright_blue",
    context_settings=_CONTEXT_SETTINGS,
    help=f"""Save, list, show, run, and delete named commands.

Saved commands are stored as plain text files in the database directory,
`~/{CFG.database.default_subdir}` by default.""",
)
@click.option(
    "--version",
    is_flag=True,
    help=f"Print the current version of {CFG.binary_name} and exit.",
)
@click.argument(
    "tokens",
    nargs=-1,
    type=click.UNPROCESSED,
    metavar="ACTION [NAME] [COMMAND] [ARGS]...",
)
@click.pass_context
def cli(ctx: click.Context, version: bool, tokens: tuple[str, ...]) -> NoReturn:
    """
    Run any saver action.
    """
    if version:
        print(__version__)
        sys.exit(0)

    try:
        intent = Interpreter().interpret(tokens)
        sys.exit(Dispatcher(intent).dispatch())
    except SaverUsageError as e:
        logger.debug(e)
        click.echo(ctx.get_help())
        sys.exit(e.exit_code)
    except SaverError as e:
        click.echo(str(e))
        sys.exit(e.exit_code)
    except (SaverSpawnError, SaverConfigError) as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
